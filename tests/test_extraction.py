import time

from sciview.data import ChartDetector
from sciview.interface.state import ExtractionWorker


def wait_for_results(worker, count=1, timeout=5.0):
    results = []
    deadline = time.monotonic() + timeout
    while len(results) < count and time.monotonic() < deadline:
        results.extend(worker.results())
        time.sleep(0.01)
    return results


class TestExtractionWorker:
    """Background detection with generation tagging."""

    def test_result_is_tagged_with_generation(self):
        worker = ExtractionWorker(ChartDetector())
        try:
            worker.submit("data.dat", 7, ["1 2", "2 3", "3 4"])
            results = wait_for_results(worker)
        finally:
            worker.stop()
        assert len(results) == 1
        assert results[0].generation == 7
        assert results[0].path == "data.dat"
        assert results[0].result.eligible

    def test_superseded_generation_is_stale(self):
        worker = ExtractionWorker(ChartDetector())
        worker.latest_generation = 3
        assert worker.is_stale(2)
        assert not worker.is_stale(3)

    def test_cancel_marks_current_job_stale(self):
        worker = ExtractionWorker(ChartDetector())
        worker.latest_generation = 3
        worker.cancel()
        assert worker.is_stale(3)

    def test_stop_without_start(self):
        worker = ExtractionWorker(ChartDetector())
        worker.stop()
        assert worker.thread is None
