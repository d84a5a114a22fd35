# mpris_presence/config.py
"""Typed, memoized access to the environment-based configuration.

Every key has a fixed kind in ``SCHEMA``; a raw value is parsed the first
time its key is read and the typed result is kept for the rest of the
process lifetime. Keys missing from the schema are opaque strings.
"""
import os
import threading
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv

from .errors import EnvVarError, ParseIntError, TypeMismatchError

STRING = "string"
BOOL = "bool"
LIST = "list"
DURATION = "duration"

SCHEMA: Dict[str, str] = {
    "update_interval": DURATION,
    "application_id": STRING,
    "ignored_players": LIST,
    "rows": LIST,
    "show_paused": BOOL,
    "show_stopped": BOOL,
    "fetch_cover_art": BOOL,
}

_PYTHON_TYPES = {
    STRING: str,
    BOOL: bool,
    LIST: list,
    DURATION: timedelta,
}

USER_ENV_FILE = Path.home() / ".config" / "mpris-presence" / ".env"


def load_env_files(*paths: Path) -> List[Path]:
    """Load ``.env`` files without overriding variables already exported.

    Defaults to ``./.env`` followed by the per-user file. Returns the files
    that existed and were read.
    """
    candidates = paths or (Path.cwd() / ".env", USER_ENV_FILE)
    loaded = []
    for path in candidates:
        if path.is_file():
            load_dotenv(path, override=False)
            loaded.append(path)
    return loaded


def _parse_bool(key: str, raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise TypeMismatchError(key)


def _parse_list(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",")]


def _parse_duration(key: str, raw: str) -> timedelta:
    try:
        millis = int(raw)
    except ValueError:
        raise ParseIntError(key, raw) from None
    if millis < 0:
        raise ParseIntError(key, raw)
    return timedelta(milliseconds=millis)


def parse_value(key: str, raw: str) -> Any:
    kind = SCHEMA.get(key, STRING)
    if kind == BOOL:
        return _parse_bool(key, raw)
    if kind == LIST:
        return _parse_list(raw)
    if kind == DURATION:
        return _parse_duration(key, raw)
    return raw


class Config:
    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ
        self._cache: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str, kind: Optional[str] = None) -> Any:
        with self._lock:
            cached = self._cache.get(key)

        if cached is None:
            raw = self._environ.get(key)
            if raw is None:
                raise EnvVarError(key)
            parsed = parse_value(key, raw)
            with self._lock:
                # first writer wins so every caller sees the same object
                cached = self._cache.setdefault(key, parsed)

        if kind is not None and not isinstance(cached, _PYTHON_TYPES[kind]):
            raise TypeMismatchError(key)
        return cached

    def is_cached(self, key: str) -> bool:
        with self._lock:
            return key in self._cache
