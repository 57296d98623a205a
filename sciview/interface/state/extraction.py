"""Background chart extraction for large files."""

import logging
import queue
import threading
from typing import NamedTuple, Optional

from ...data.detector import ChartDetector, DetectionResult, ExtractionCancelled

logger = logging.getLogger("sciview.extraction")


class ExtractionJob(NamedTuple):
    path: object
    generation: int
    lines: list


class ExtractionResult(NamedTuple):
    path: object
    generation: int
    result: Optional[DetectionResult] = None
    error: Optional[str] = None


class ExtractionWorker:
    """
    Runs detection on a daemon thread, one job at a time.

    Jobs are tagged with the session's file generation. Submitting a new job
    supersedes every earlier one: an in-flight extraction notices on its
    next cancellation check and stops, and queued ones are skipped.
    """

    def __init__(self, detector: ChartDetector):
        self.detector = detector
        self.jobs = queue.Queue()
        self.finished = queue.Queue()
        self.lock = threading.Lock()
        self.latest_generation = -1
        self.running = False
        self.thread = None

    def start(self):
        if self.running:
            return
        self.running = True
        self.thread = threading.Thread(
            target=self._run, name="sciview-extraction", daemon=True
        )
        self.thread.start()

    def stop(self, timeout=1.0):
        self.running = False
        self.cancel()
        self.jobs.put(None)
        if self.thread is not None:
            self.thread.join(timeout)
            self.thread = None

    def submit(self, path, generation, lines):
        with self.lock:
            self.latest_generation = generation
        if not self.running:
            self.start()
        self.jobs.put(ExtractionJob(path, generation, lines))

    def cancel(self):
        """Abandon whatever is queued or running."""
        with self.lock:
            self.latest_generation += 1

    def is_stale(self, generation):
        with self.lock:
            return generation != self.latest_generation

    def results(self):
        """Drain and return every finished result."""
        drained = []
        while True:
            try:
                drained.append(self.finished.get_nowait())
            except queue.Empty:
                return drained

    def _run(self):
        while self.running:
            job = self.jobs.get()
            if job is None:
                break
            if self.is_stale(job.generation):
                continue
            try:
                result = self.detector.detect(
                    job.lines, cancelled=lambda: self.is_stale(job.generation)
                )
            except ExtractionCancelled:
                logger.debug("Extraction of %s abandoned", job.path)
                continue
            except Exception as e:
                logger.exception("Extraction of %s failed", job.path)
                self.finished.put(ExtractionResult(job.path, job.generation, error=str(e)))
                continue
            self.finished.put(ExtractionResult(job.path, job.generation, result))
