import time

from docwatch.config.settings import Settings
from docwatch.logging.logger import Log
from docwatch.worker.runner import IngestionRunner


class Worker:
    """Timer loop: run a pass -> sleep -> repeat."""

    def __init__(self, runner: IngestionRunner, settings: Settings) -> None:
        self._runner = runner
        self._settings = settings

    def run(self, max_runs: int | None = None) -> None:
        """Run passes until interrupted.

        If max_runs is set, stop after that many passes (for testing).
        """
        Log.info(
            f"Worker started, running every {self._settings.poll_interval_seconds}s"
        )
        runs_done = 0
        try:
            while max_runs is None or runs_done < max_runs:
                self._runner.run_once()
                runs_done += 1
                if max_runs is not None and runs_done >= max_runs:
                    break
                Log.debug("Pass finished, sleeping")
                time.sleep(self._settings.poll_interval_seconds)
        except KeyboardInterrupt:
            Log.info("Worker shutting down gracefully")
