# mpris_presence/discord_rpc.py
import time
from typing import Optional

from pypresence import Presence, PyPresenceException
from pypresence.types import ActivityType

from .debug import debug_log, log_error
from .errors import TransportError
from .models import ActivityInfo


def _field(value: str) -> Optional[str]:
    # Discord rejects empty strings; pypresence drops None values from the payload
    return value[:128] if value else None


def activity_payload(activity: ActivityInfo) -> dict:
    return {
        "details": _field(activity.details),
        "state": _field(activity.state),
        "large_image": _field(activity.image),
        "large_text": _field(activity.subtitle),
        "activity_type": ActivityType.LISTENING,
    }


class DiscordTransport:
    def __init__(self, application_id: str, rpc: Optional[Presence] = None):
        self.application_id = application_id
        self._rpc = rpc

    def connect(self) -> None:
        try:
            if self._rpc is None:
                self._rpc = Presence(self.application_id)
            self._rpc.connect()
        except (PyPresenceException, OSError) as e:
            raise TransportError(f"could not connect to Discord: {e}") from e

        # Give Discord time to send READY payload
        time.sleep(0.3)

        user = getattr(self._rpc, "user", None) or {}
        name = user.get("username")
        if name:
            disc = user.get("discriminator", "")
            display = f"{name}#{disc}" if disc and disc != "0" else name
            print(f"[RPC] Connected as {display}")
        else:
            print("[RPC] Connected")

    def update(self, activity: ActivityInfo) -> bool:
        try:
            self._rpc.update(**activity_payload(activity))
        except (PyPresenceException, OSError) as e:
            log_error("RPC", f"couldn't set activity: {e}")
            return False
        print(f"[RPC] Updated: {activity.details} | {activity.state}")
        return True

    def clear(self) -> bool:
        try:
            self._rpc.clear()
        except (PyPresenceException, OSError) as e:
            log_error("RPC", f"couldn't clear activity: {e}")
            return False
        debug_log("presence cleared")
        return True

    def close(self) -> None:
        if self._rpc is None:
            return
        try:
            self._rpc.close()
        except (PyPresenceException, OSError) as e:
            debug_log(f"closing Discord connection failed: {e}")
