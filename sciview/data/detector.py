"""Two-pass chart eligibility detection: sniff a sample, then extract."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from .parser import DEFAULT_COMMENT_PREFIXES, LineKind, NumericLineParser
from .points import PointSeries

logger = logging.getLogger("sciview.data")

# How many lines extraction processes between cancellation checks.
CANCEL_CHECK_INTERVAL = 1024


class ExtractionCancelled(Exception):
    """Raised when an in-flight extraction is abandoned."""


@dataclass(frozen=True)
class DetectionConfig:
    """Tunable eligibility thresholds."""

    sample_size: int = 50
    min_ratio: float = 0.8
    min_successes: int = 3
    comment_prefixes: Tuple[str, ...] = DEFAULT_COMMENT_PREFIXES

    def __post_init__(self):
        if self.sample_size < 1:
            raise ValueError(f"sample_size must be >= 1, got {self.sample_size}")
        if not 0.0 <= self.min_ratio <= 1.0:
            raise ValueError(f"min_ratio must be in [0, 1], got {self.min_ratio}")
        if self.min_successes < 1:
            raise ValueError(
                f"min_successes must be >= 1, got {self.min_successes}"
            )


@dataclass(frozen=True)
class SniffReport:
    attempted: int
    successes: int

    @property
    def ratio(self) -> float:
        return self.successes / self.attempted if self.attempted else 0.0


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of running the detector over a whole file."""

    eligible: bool
    attempted: int
    successes: int
    parse_failures: int = 0
    series: Optional[PointSeries] = None


class ChartDetector:
    """Decides whether a file is two-column numeric data and extracts it."""

    def __init__(self, config: Optional[DetectionConfig] = None):
        self.config = config or DetectionConfig()
        self.parser = NumericLineParser(self.config.comment_prefixes)

    def sniff(self, lines: Sequence[str]) -> SniffReport:
        """Attempt up to ``sample_size`` data lines from the top of the file."""
        attempted = 0
        successes = 0
        for line in lines:
            parsed = self.parser.parse(line)
            if parsed.kind is LineKind.SKIP:
                continue
            attempted += 1
            if parsed.kind is LineKind.POINT:
                successes += 1
            if attempted >= self.config.sample_size:
                break
        return SniffReport(attempted, successes)

    def is_eligible(self, report: SniffReport) -> bool:
        if report.attempted == 0:
            return False
        return (
            report.ratio >= self.config.min_ratio
            and report.successes >= self.config.min_successes
        )

    def extract(
        self,
        lines: Sequence[str],
        cancelled: Optional[Callable[[], bool]] = None,
    ) -> Tuple[PointSeries, int]:
        """
        Collect every parseable point of the file in line order.

        Returns the series and the number of data lines that failed to
        parse. Failures are dropped from the series, they never abort it.
        """
        points = []
        failures = 0
        for index, line in enumerate(lines):
            if (
                cancelled is not None
                and index % CANCEL_CHECK_INTERVAL == 0
                and cancelled()
            ):
                raise ExtractionCancelled()
            parsed = self.parser.parse(line)
            if parsed.kind is LineKind.POINT:
                points.append(parsed.point)
            elif parsed.kind is LineKind.FAILURE:
                failures += 1
        return tuple(points), failures

    def detect(
        self,
        lines: Sequence[str],
        cancelled: Optional[Callable[[], bool]] = None,
    ) -> DetectionResult:
        """Sniff the file and, only when it qualifies, extract the full series."""
        report = self.sniff(lines)
        if not self.is_eligible(report):
            logger.debug(
                "Not chart-eligible: %d/%d sampled lines parsed",
                report.successes,
                report.attempted,
            )
            return DetectionResult(False, report.attempted, report.successes)

        series, failures = self.extract(lines, cancelled)
        if not series:
            return DetectionResult(
                False, report.attempted, report.successes, failures
            )
        logger.debug(
            "Extracted %d points (%d unparseable data lines)", len(series), failures
        )
        return DetectionResult(
            True, report.attempted, report.successes, failures, series
        )


def detect_and_extract(
    lines: Sequence[str], config: Optional[DetectionConfig] = None
) -> Optional[PointSeries]:
    """Return the file's point series, or None when it is not chart-eligible."""
    return ChartDetector(config).detect(lines).series
