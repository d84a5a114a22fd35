#main.py
import sys

from mpris_presence.config import DURATION, STRING, Config, load_env_files
from mpris_presence.cover_art import CoverArt
from mpris_presence.discord_rpc import DiscordTransport
from mpris_presence.errors import AppError
from mpris_presence.players import PlayerFinder
from mpris_presence.reconciler import Reconciler
from mpris_presence.worker import PresenceWorker


def main() -> int:
    load_env_files()
    config = Config()

    try:
        interval = config.get("update_interval", DURATION)
        application_id = config.get("application_id", STRING)
    except AppError as e:
        print(f"[Config] {e}", file=sys.stderr)
        return 1

    transport = DiscordTransport(application_id)
    try:
        transport.connect()
    except AppError as e:
        print(f"[RPC] {e}", file=sys.stderr)
        return 1

    reconciler = Reconciler(config, PlayerFinder(), CoverArt())
    worker = PresenceWorker(reconciler, transport, interval)

    print("[Music] Watching MPRIS players… (Ctrl+C to stop)")
    try:
        worker.run()
    except KeyboardInterrupt:
        print("[Music] Stopping")
    finally:
        if worker.listening:
            transport.clear()
        transport.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
