"""Scatter rasterization of a point series onto a character grid."""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from ...data.points import AxisRange, DataPoint

# Sub-cell resolution (columns, rows) per marker
MARKER_SCALES = {
    "dot": (1, 1),
    "block": (1, 1),
    "braille": (2, 4),
}

MARKERS = tuple(MARKER_SCALES)

BRAILLE_BASE = 0x2800

# Braille dot bit for a sub-cell at (column, row) within its 2x4 cell
BRAILLE_BITS = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)

# Density glyphs for the "dot" marker, indexed by min(count, 3)
DENSITY_GLYPHS = " ·•●"

BLOCK_GLYPH = "█"


@dataclass(frozen=True)
class ChartRaster:
    """
    A rows x cols grid of plotted cells.

    ``cells`` holds how many points landed in each cell and ``lines`` the
    glyph row strings, each exactly ``cols`` characters wide.
    """

    rows: int
    cols: int
    cells: Tuple[Tuple[int, ...], ...]
    lines: Tuple[str, ...]

    def occupied(self, row, col):
        return self.cells[row][col] > 0

    def occupied_cells(self):
        return [
            (row, col)
            for row in range(self.rows)
            for col in range(self.cols)
            if self.cells[row][col]
        ]

    @property
    def point_count(self):
        return sum(sum(row) for row in self.cells)


def round_half_up(value):
    return int(math.floor(value + 0.5))


def scale_to_index(value, low, high, size, invert=False):
    """
    Linearly map ``value`` in [low, high] onto an index in [0, size - 1].

    With ``invert`` the high end maps to index 0. A degenerate range maps to
    the central index; values outside the range are clamped.
    """
    if size <= 1:
        return 0
    if high == low:
        return (size - 1) // 2
    offset = high - value if invert else value - low
    index = round_half_up(offset / (high - low) * (size - 1))
    return min(max(index, 0), size - 1)


class ChartRasterizer:
    """Maps points onto a fixed grid; a pure function of its arguments."""

    def __init__(self, marker="braille"):
        if marker not in MARKER_SCALES:
            raise ValueError(
                f"unknown marker {marker!r}, expected one of {', '.join(MARKERS)}"
            )
        self.marker = marker
        self.x_scale, self.y_scale = MARKER_SCALES[marker]

    def resolution(self, cols):
        """Horizontal number of plottable positions for ``cols`` cells."""
        return cols * self.x_scale

    def rasterize(
        self,
        series: Sequence[DataPoint],
        axis_range: AxisRange,
        rows: int,
        cols: int,
    ) -> ChartRaster:
        if rows < 1 or cols < 1:
            raise ValueError(f"raster needs at least 1x1 cells, got {rows}x{cols}")

        dot_cols = cols * self.x_scale
        dot_rows = rows * self.y_scale

        counts = [[0] * cols for _ in range(rows)]
        masks = [[0] * cols for _ in range(rows)]

        for x, y in series:
            dot_col = scale_to_index(x, axis_range.min_x, axis_range.max_x, dot_cols)
            # Row 0 is the top, so larger y maps to smaller rows
            dot_row = scale_to_index(
                y, axis_range.min_y, axis_range.max_y, dot_rows, invert=True
            )
            row, col = dot_row // self.y_scale, dot_col // self.x_scale
            counts[row][col] += 1
            if self.marker == "braille":
                masks[row][col] |= BRAILLE_BITS[dot_row % 4][dot_col % 2]

        lines = tuple(
            "".join(
                self._glyph(counts[row][col], masks[row][col]) for col in range(cols)
            )
            for row in range(rows)
        )
        return ChartRaster(
            rows=rows,
            cols=cols,
            cells=tuple(tuple(row) for row in counts),
            lines=lines,
        )

    def _glyph(self, count, mask):
        if not count:
            return " "
        if self.marker == "braille":
            return chr(BRAILLE_BASE + mask)
        if self.marker == "block":
            return BLOCK_GLYPH
        return DENSITY_GLYPHS[min(count, 3)]
