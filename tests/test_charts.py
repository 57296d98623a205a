import pytest

from sciview.data import AxisRange, DataPoint
from sciview.interface.rendering import CHART_STYLES, ChartRenderer
from sciview.interface.rendering.charts import format_tick


def sine_like(n=200):
    return tuple(DataPoint(float(i), float((i * 37) % 29 - 14)) for i in range(n))


class TestChartRenderer:
    """Labelled chart output for the chart pane."""

    @pytest.mark.parametrize("style", CHART_STYLES)
    @pytest.mark.parametrize("width, height", [(30, 10), (50, 20), (12, 4)])
    def test_output_fills_the_pane(self, style, width, height):
        series = sine_like()
        lines = ChartRenderer().draw_chart(
            series, AxisRange.from_series(series), width, height, style
        )
        assert len(lines) == height
        assert all(len(line) == width for line in lines), f"{style} lines overflow"

    def test_scatter_has_axis_labels(self):
        series = sine_like()
        axis_range = AxisRange.from_series(series)
        lines = ChartRenderer().draw_chart(series, axis_range, 40, 10)
        assert lines[0].lstrip().startswith(format_tick(axis_range.max_y))
        assert lines[-1].startswith(format_tick(axis_range.min_x))
        assert lines[-1].rstrip().endswith(format_tick(axis_range.max_x))

    def test_placeholder_without_data(self):
        lines = ChartRenderer().draw_chart(None, None, 30, 10)
        assert any("No numeric data" in line for line in lines)
        assert all(len(line) == 30 for line in lines)

    def test_placeholder_when_too_small(self):
        series = sine_like()
        lines = ChartRenderer().draw_chart(series, AxisRange.from_series(series), 3, 2)
        assert len(lines) == 2

    def test_unknown_marker(self):
        with pytest.raises(ValueError):
            ChartRenderer("star")


@pytest.mark.parametrize(
    "value, expected",
    [(0.0, "0.00"), (1.5, "1.50"), (-250.0, "-250.00"), (1e6, "1.00e+06"), (0.001, "1.00e-03")],
)
def test_format_tick(value, expected):
    assert format_tick(value) == expected
