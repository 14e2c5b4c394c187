from unittest.mock import MagicMock, patch

from docwatch.worker.runner import IngestionRunner
from docwatch.worker.worker import Worker


def _make_worker() -> tuple[Worker, MagicMock]:
    runner = MagicMock(spec=IngestionRunner)
    settings = MagicMock(poll_interval_seconds=7)
    return Worker(runner, settings), runner


class TestWorkerLoop:
    def test_stops_after_max_runs(self) -> None:
        worker, runner = _make_worker()

        with patch("docwatch.worker.worker.time.sleep") as mock_sleep:
            worker.run(max_runs=3)

        assert runner.run_once.call_count == 3
        assert mock_sleep.call_count == 2
        mock_sleep.assert_called_with(7)

    def test_single_run_does_not_sleep(self) -> None:
        worker, runner = _make_worker()

        with patch("docwatch.worker.worker.time.sleep") as mock_sleep:
            worker.run(max_runs=1)

        runner.run_once.assert_called_once_with()
        mock_sleep.assert_not_called()


class TestWorkerShutdown:
    def test_handles_keyboard_interrupt(self) -> None:
        worker, runner = _make_worker()
        runner.run_once.side_effect = [None, KeyboardInterrupt]

        with patch("docwatch.worker.worker.time.sleep"):
            worker.run()  # Should not raise

        assert runner.run_once.call_count == 2
