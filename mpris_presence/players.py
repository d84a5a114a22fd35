# mpris_presence/players.py
from typing import Collection, List

from .errors import PlayerError
from .models import PlaybackStatus, PlayerSnapshot

try:
    from pydbus import SessionBus
except Exception:  # pydbus or the GObject bindings are not installed
    SessionBus = None

MPRIS_PREFIX = "org.mpris.MediaPlayer2."
MPRIS_PATH = "/org/mpris/MediaPlayer2"


class PlayerFinder:
    def __init__(self, bus=None):
        self._bus = bus

    def _session_bus(self):
        if self._bus is None:
            if SessionBus is None:
                raise PlayerError("pydbus is not available, cannot query MPRIS players")
            try:
                self._bus = SessionBus()
            except Exception as e:
                raise PlayerError(f"could not connect to the session bus: {e}") from e
        return self._bus

    def find_all(self, ignored: Collection[str] = ()) -> List[PlayerSnapshot]:
        """Snapshot every MPRIS player on the bus, in discovery order.

        Players whose identity is in ``ignored`` are skipped before their
        status or metadata is read.
        """
        bus = self._session_bus()
        try:
            names = bus.get(".DBus").ListNames()
        except Exception as e:
            raise PlayerError(f"could not list D-Bus names: {e}") from e

        players = []
        for name in names:
            if not name.startswith(MPRIS_PREFIX):
                continue
            try:
                proxy = bus.get(name, MPRIS_PATH)
                identity = str(proxy.Identity)
                if identity in ignored:
                    continue
                players.append(PlayerSnapshot(
                    identity=identity,
                    status=PlaybackStatus(proxy.PlaybackStatus),
                    metadata=dict(proxy.Metadata or {}),
                ))
            except Exception as e:
                raise PlayerError(f"could not read player {name}: {e}") from e
        return players
