# mpris_presence/debug.py
import os
import sys
import time
from pathlib import Path


_DEBUG = os.getenv("MPRIS_PRESENCE_DEBUG") == "1"
LOG_PATH = Path(os.getenv("XDG_CACHE_HOME", Path.home() / ".cache")) / "mpris-presence" / "debug.log"


def debug_log(message: str) -> None:
    if not _DEBUG:
        return

    ts = time.strftime("%Y-%m-%d %H:%M:%S")
    line = f"[{ts}] {message}\n"
    try:
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        with LOG_PATH.open("a", encoding="utf-8") as f:
            f.write(line)
    except OSError as e:
        print(f"[DEBUG] could not write {LOG_PATH}: {e}", file=sys.stderr)

    print(f"[DEBUG] {message}")


def log_error(tag: str, message: str) -> None:
    print(f"[{tag}] {message}", file=sys.stderr)
    debug_log(f"{tag}: {message}")
