"""Chart panel CLI arguments."""

from ...interface.rendering import CHART_STYLES, MARKERS
from ..core.types import non_negative_int


class ChartGroup:
    """How detected data is charted."""

    name = "chart"

    @classmethod
    def add_arguments(cls, parser):
        """Add chart arguments to the parser."""
        group = parser.add_argument_group(cls.name)

        group.add_argument(
            "--no-chart",
            dest="show_chart",
            action="store_false",
            default=True,
            help="Start with the chart panel hidden",
        )

        group.add_argument(
            "--chart-style",
            type=str,
            choices=CHART_STYLES,
            default="scatter",
            help="Draw the data as a scatter plot or a line chart",
        )

        group.add_argument(
            "--marker",
            type=str,
            choices=MARKERS,
            default="braille",
            help="Glyphs used to plot scatter points",
        )

        group.add_argument(
            "--background-threshold",
            type=non_negative_int,
            default=0,
            help="Extract chart data in a background thread for files of at least this many bytes (0 disables)",
        )
