# mpris_presence/cover_art.py
import re
import threading
from typing import Dict, List, Optional

import requests

from .debug import debug_log
from .errors import CoverArtError

MB_USER_AGENT = "MprisPresence/1.0 (https://github.com/)"
MB_SEARCH_URL = "https://musicbrainz.org/ws/2/release/"
CAA_FRONT_URL = "https://coverartarchive.org/release/{mbid}/front"

# MusicBrainz answers "" / "" with its Nagios check release instead of nothing.
SENTINEL_MBID = "1735e086-462e-42c3-b615-eebbd5e9f352"

_LUCENE_SPECIAL = re.compile(r'([+\-!(){}\[\]^"~*?:\\/]|&&|\|\|)')


def lucene_escape(value: str) -> str:
    return _LUCENE_SPECIAL.sub(r"\\\1", value)


def cache_key(release: str, artist: str) -> str:
    return f"{release}_{artist}"


class MusicBrainzClient:
    def __init__(self, session: Optional[requests.Session] = None, timeout: float = 6):
        self._http = session or requests.Session()
        self._timeout = timeout

    def _query(self, release: str, artist: str) -> str:
        return f"release:({lucene_escape(release)}) AND artist:({lucene_escape(artist)})"

    def search_release_ids(self, release: str, artist: str) -> List[str]:
        params = {
            "query": self._query(release, artist),
            "fmt": "json",
        }
        try:
            r = self._http.get(
                MB_SEARCH_URL,
                params=params,
                headers={"User-Agent": MB_USER_AGENT},
                timeout=self._timeout,
            )
            r.raise_for_status()
            data = r.json()
        except (requests.RequestException, ValueError) as e:
            raise CoverArtError(f"MusicBrainz search failed: {e}") from e

        releases = data.get("releases", []) or []
        return [rel["id"] for rel in releases if isinstance(rel, dict) and rel.get("id")]


class CoverArt:
    """Resolves (release, artist) to a Cover Art Archive front image URL.

    Only successful lookups are cached; a miss is searched again on the
    next call.
    """

    def __init__(self, client: Optional[MusicBrainzClient] = None):
        self._client = client or MusicBrainzClient()
        self._cache: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, release: str, artist: str) -> Optional[str]:
        with self._lock:
            return self._cache.get(cache_key(release, artist))

    def resolve(self, release: str, artist: str) -> str:
        cached = self.get(release, artist)
        if cached is not None:
            return cached

        ids = self._client.search_release_ids(release, artist)
        if not ids:
            raise CoverArtError(f"could not find release {release}")

        mbid = ids[0]
        if mbid == SENTINEL_MBID:
            raise CoverArtError("could not find cover art")

        url = CAA_FRONT_URL.format(mbid=mbid)
        with self._lock:
            self._cache[cache_key(release, artist)] = url
        debug_log(f"cover art for '{release}' by '{artist}': {url}")
        return url
