"""Point, series and axis-range types shared by the data and chart layers."""

from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple


class DataPoint(NamedTuple):
    """A single (x, y) sample, positioned by its index in the source file."""

    x: float
    y: float


# Ordered, immutable; line order stands in for x when x is not monotonic.
PointSeries = Tuple[DataPoint, ...]

# Span used to widen an axis on which every value is identical.
DEGENERATE_PADDING = 1.0


@dataclass(frozen=True)
class AxisRange:
    """Bounds of a point series. Every span is guaranteed to be non-zero."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def from_series(cls, series: Sequence[DataPoint]) -> "AxisRange":
        """Derive the bounds of a non-empty series in a single pass."""
        if not series:
            raise ValueError("cannot derive an axis range from an empty series")

        first = series[0]
        min_x = max_x = first.x
        min_y = max_y = first.y
        for x, y in series:
            if x < min_x:
                min_x = x
            elif x > max_x:
                max_x = x
            if y < min_y:
                min_y = y
            elif y > max_y:
                max_y = y

        return cls(min_x, max_x, min_y, max_y).widened()

    def widened(self) -> "AxisRange":
        """Return a copy where single-value axes get a span of 2 * padding."""
        min_x, max_x, min_y, max_y = self.min_x, self.max_x, self.min_y, self.max_y
        if min_x == max_x:
            min_x, max_x = min_x - DEGENERATE_PADDING, max_x + DEGENERATE_PADDING
        if min_y == max_y:
            min_y, max_y = min_y - DEGENERATE_PADDING, max_y + DEGENERATE_PADDING
        return AxisRange(min_x, max_x, min_y, max_y)

    @property
    def x_span(self) -> float:
        return self.max_x - self.min_x

    @property
    def y_span(self) -> float:
        return self.max_y - self.min_y

    def as_tuple(self):
        return (self.min_x, self.max_x, self.min_y, self.max_y)
