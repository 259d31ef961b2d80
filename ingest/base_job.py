"""Abstract base for timer-driven jobs that write into the record store."""

import signal
import threading
from abc import ABC, abstractmethod

from config import Settings, configure_logging


class BaseJob(ABC):
    """
    Runs ``run_once`` every ``get_interval()`` seconds until SIGINT/SIGTERM.

    Each tick is a single attempt; a failing tick is logged and counted and the
    loop waits for the next one.
    """

    def __init__(self, settings: Settings, component_name: str = "job"):
        self.settings = settings
        self.log = configure_logging(component_name, settings.log_level, settings.log_json)
        self._stop = threading.Event()
        self._run_count = 0
        self._error_count = 0

    @abstractmethod
    def run_once(self):
        """Perform one unit of work."""

    @abstractmethod
    def get_interval(self) -> float:
        """Return the wait between ticks in seconds."""

    def run(self):
        """Main loop. Signal handlers are installed here, not in __init__."""
        signal.signal(signal.SIGTERM, self._shutdown)
        signal.signal(signal.SIGINT, self._shutdown)
        self.log.info("job_started", interval_sec=self.get_interval())

        try:
            while not self._stop.is_set():
                try:
                    self.run_once()
                    self._run_count += 1
                except Exception as e:
                    self._error_count += 1
                    self.log.error("job_tick_failed", error_type=type(e).__name__, error=str(e))
                self._stop.wait(self.get_interval())
        finally:
            self._cleanup()

    def stop(self):
        self._stop.set()

    def _shutdown(self, signum, frame):
        self.log.info("shutdown_signal_received", signal=signum)
        self.stop()

    def _cleanup(self):
        self.log.info("job_stopped", total_runs=self._run_count, total_errors=self._error_count)
