# mpris_presence/worker.py
import time
from datetime import timedelta

from .debug import debug_log, log_error
from .errors import AppError, FieldNotFoundError, NoActivePlayersError, NoSongPlayingError
from .reconciler import Reconciler


class PresenceWorker:
    def __init__(self, reconciler: Reconciler, transport, interval: timedelta, sleep=time.sleep):
        self.reconciler = reconciler
        self.transport = transport
        self.interval = interval
        self._sleep = sleep
        self._running = True
        self.listening = False

    def stop(self):
        self._running = False

    def tick(self) -> None:
        try:
            new = self.reconciler.reconcile()
        except (NoActivePlayersError, NoSongPlayingError) as e:
            debug_log(str(e))
            self._retract()
            return
        except FieldNotFoundError as e:
            log_error("Music", f"{e} (check the rows setting)")
            self._retract()
            return
        except AppError as e:
            log_error("Music", str(e))
            self._retract()
            return

        self.listening = True
        if self.reconciler.commit(new):
            self.transport.update(new.activity)

    def _retract(self) -> None:
        if not self.listening:
            return
        self.listening = False
        self.reconciler.reset()
        # send a blank activity to clear the rich presence
        self.transport.clear()

    def run(self) -> None:
        while self._running:
            self.tick()
            self._sleep(self.interval.total_seconds())
