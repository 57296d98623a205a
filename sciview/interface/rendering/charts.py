"""Chart rendering for the viewer's chart pane."""

import asciichartpy

from ...data.points import AxisRange
from .downsample import PeakPreservingDownsampler
from .raster import MARKERS, ChartRasterizer

CHART_STYLES = ("scatter", "line")

PLACEHOLDER_TEXT = [
    "",
    "No numeric data",
    "detected.",
    "",
    "Open a two-column",
    "data file to see",
    "a scatter plot.",
]

# asciichartpy prints an 8-wide label, a tick and its default 3-column offset
LINE_LABEL_WIDTH = 12


def format_tick(value):
    """Compact axis label: fixed point for ordinary magnitudes, else scientific."""
    magnitude = abs(value)
    if magnitude != 0 and (magnitude >= 1e5 or magnitude < 1e-2):
        return f"{value:.2e}"
    return f"{value:.2f}"


def render_chart(series, width, height, marker="braille", axis_range=None):
    """
    Downsample ``series`` to the plot resolution and rasterize it.

    The chart always represents the whole series, sized to ``width`` x
    ``height`` cells. ``axis_range`` defaults to the series' own bounds.
    """
    rasterizer = ChartRasterizer(marker)
    if axis_range is None:
        axis_range = AxisRange.from_series(series)
    # Both extremes of a bucket may share a column, so the pair is kept
    plot_points = PeakPreservingDownsampler(hard_cap=False).downsample(
        series, rasterizer.resolution(width)
    )
    return rasterizer.rasterize(plot_points, axis_range, height, width)


class ChartRenderer:
    """Renders a point series into labelled chart lines."""

    def __init__(self, marker="braille"):
        if marker not in MARKERS:
            raise ValueError(
                f"unknown marker {marker!r}, expected one of {', '.join(MARKERS)}"
            )
        self.marker = marker
        self.downsampler = PeakPreservingDownsampler(hard_cap=True)

    def draw_chart(self, series, axis_range, width, height, style="scatter"):
        """Draw a chart with axis labels, returning ``height`` lines of ``width``."""
        if not series or width < 4 or height < 3:
            return self.draw_placeholder(width, height)

        rows = height - 1
        if style == "line":
            lines = self._draw_line_chart(series, axis_range, width, rows)
        else:
            lines = self._draw_scatter_chart(series, axis_range, width, rows)

        lines += [""] * (rows - len(lines))
        lines.append(self._x_labels(axis_range, width))
        return [line.ljust(width)[:width] for line in lines[:height]]

    def draw_placeholder(self, width, height):
        """Draw the message shown when the file has no chartable data."""
        lines = []
        for i in range(height):
            text = "  " + PLACEHOLDER_TEXT[i] if i < len(PLACEHOLDER_TEXT) else ""
            lines.append(text.ljust(width)[:width])
        return lines

    def _y_labels(self, axis_range, rows):
        labels = [""] * rows
        labels[0] = format_tick(axis_range.max_y)
        labels[-1] = format_tick(axis_range.min_y)
        if rows >= 5:
            labels[rows // 2] = format_tick(
                axis_range.max_y - axis_range.y_span * (rows // 2) / (rows - 1)
            )
        return labels

    def _draw_scatter_chart(self, series, axis_range, width, rows):
        labels = self._y_labels(axis_range, rows)
        gutter = max(len(label) for label in labels) + 1
        plot_width = width - gutter - 1
        if plot_width < 1:
            gutter, plot_width = 0, width - 1

        raster = render_chart(series, plot_width, rows, self.marker, axis_range)

        lines = []
        for label, row in zip(labels, raster.lines):
            tick = "┤" if label else "│"
            lines.append(f"{label.rjust(gutter)[:gutter]}{tick}{row}")
        return lines

    def _draw_line_chart(self, series, axis_range, width, rows):
        num_points = max(2, width - LINE_LABEL_WIDTH)
        plot_data = [
            point.y for point in self.downsampler.downsample(series, num_points)
        ]

        chart = asciichartpy.plot(
            plot_data,
            {
                "height": max(1, rows - 1),
                "format": "{:8.2f}",
                "min": axis_range.min_y,
                "max": axis_range.max_y,
            },
        )
        return chart.split("\n")[:rows]

    def _x_labels(self, axis_range, width):
        left = format_tick(axis_range.min_x)
        right = format_tick(axis_range.max_x)
        gap = width - len(left) - len(right)
        if gap < 1:
            return left[:width]
        return left + " " * gap + right
