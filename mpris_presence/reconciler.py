# mpris_presence/reconciler.py
"""Turns one sample of the media players into the presence to display.

The last broadcast ``Current`` lives here. ``reconcile()`` re-derives the
state from scratch every tick and raises an ``AppError`` whenever there is
nothing to show; the poll loop decides what to send.
"""
import dataclasses
import threading
from typing import Any, Mapping

from .config import BOOL, LIST, Config
from .cover_art import CoverArt
from .debug import debug_log
from .errors import AppError, FieldNotFoundError, NoActivePlayersError, NoSongPlayingError
from .models import ActivityInfo, Current, PlaybackStatus, value_to_string
from .rows import NAMESPACE, render_rows

STOPPED_TEXT = "Stopped playback"
PAUSED_SUFFIX = "_paused"


def _stopped_activity(player_name: str) -> ActivityInfo:
    return ActivityInfo(details=STOPPED_TEXT, image=player_name)


def _required(metadata: Mapping[str, Any], field: str) -> str:
    key = f"{NAMESPACE}{field}"
    if key not in metadata:
        raise FieldNotFoundError(field)
    return value_to_string(metadata[key])


class Reconciler:
    def __init__(self, config: Config, finder, cover_art: CoverArt):
        self.config = config
        self.finder = finder
        self.cover_art = cover_art
        self._current = Current()
        self._lock = threading.Lock()

    @property
    def current(self) -> Current:
        with self._lock:
            return dataclasses.replace(self._current)

    def commit(self, new: Current) -> bool:
        """Store ``new``; False when it equals what was last broadcast."""
        with self._lock:
            if self._current == new:
                return False
            self._current = dataclasses.replace(new)
            return True

    def reset(self) -> None:
        with self._lock:
            self._current = Current()

    def reconcile(self) -> Current:
        ignored = self.config.get("ignored_players", LIST)
        show_paused = self.config.get("show_paused", BOOL)
        show_stopped = self.config.get("show_stopped", BOOL)

        players = [p for p in self.finder.find_all(ignored) if p.identity not in ignored]
        if not players:
            raise NoActivePlayersError()

        # no priority between players, the first one found wins
        player = players[0]
        player_name = player.identity.lower()

        if show_stopped and player.status == PlaybackStatus.STOPPED:
            return Current(url=player_name, activity=_stopped_activity(player_name))

        if (player.status == PlaybackStatus.PAUSED and not show_paused) or player.status == PlaybackStatus.STOPPED:
            raise NoSongPlayingError()

        release = _required(player.metadata, "album")
        artist = _required(player.metadata, "albumArtist")

        current = self.current
        # a stored stopped message is never reused for a track
        if (
            release == current.release
            and artist == current.artist
            and not current.activity.is_empty()
            and current.activity != _stopped_activity(current.url)
        ):
            return current

        details, state, subtitle = render_rows(self.config.get("rows", LIST), player.metadata)

        if player.status == PlaybackStatus.PAUSED:
            player_name += PAUSED_SUFFIX

        url = player_name
        if self.config.get("fetch_cover_art", BOOL):
            try:
                url = self.cover_art.resolve(release, artist)
            except AppError as e:
                # fall back to the icon for the media player
                debug_log(f"cover art lookup failed for '{release}': {e}")

        return Current(
            release=release,
            artist=artist,
            url=url,
            activity=ActivityInfo(details=details, state=state, subtitle=subtitle, image=url),
        )
