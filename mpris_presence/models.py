# mpris_presence/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

UNSUPPORTED = "<unsupported>"


class PlaybackStatus(str, Enum):
    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"


@dataclass(frozen=True)
class PlayerSnapshot:
    identity: str
    status: PlaybackStatus
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ActivityInfo:
    details: str = ""   # 1st row
    state: str = ""     # 2nd row
    subtitle: str = ""  # 3rd row, shown as the image hover text
    image: str = ""     # Cover Art Archive URL or media player asset name

    def is_empty(self) -> bool:
        return not (self.details or self.state or self.subtitle or self.image)


@dataclass
class Current:
    release: str = ""
    artist: str = ""
    url: str = ""
    activity: ActivityInfo = field(default_factory=ActivityInfo)

    # activity is left out so the same song compares equal however it was rendered
    def __eq__(self, other):
        if not isinstance(other, Current):
            return NotImplemented
        return (self.release, self.artist, self.url) == (other.release, other.artist, other.url)

    __hash__ = None


def value_to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ", ".join(value_to_string(v) for v in value)
    return UNSUPPORTED
