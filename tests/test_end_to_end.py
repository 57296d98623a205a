"""From raw file lines to an on-screen raster."""

from sciview.data import AxisRange, DataPoint, detect_and_extract
from sciview.interface.rendering import ChartRasterizer, downsample_with_peaks, render_chart


class TestPipeline:
    lines = ["# header", "0.0 1.0", "1.0 5.0", "2.0 1.0"]

    def test_extraction(self):
        series = detect_and_extract(self.lines)
        assert series == (
            DataPoint(0.0, 1.0),
            DataPoint(1.0, 5.0),
            DataPoint(2.0, 1.0),
        )

    def test_axis_range(self):
        series = detect_and_extract(self.lines)
        assert AxisRange.from_series(series).as_tuple() == (0.0, 2.0, 1.0, 5.0)

    def test_downsampling_is_a_no_op(self):
        series = detect_and_extract(self.lines)
        assert downsample_with_peaks(series, 3) == series

    def test_peak_lands_in_middle_column_top_row(self):
        series = detect_and_extract(self.lines)
        axis_range = AxisRange.from_series(series)
        raster = ChartRasterizer("dot").rasterize(series, axis_range, 3, 3)
        assert raster.occupied(0, 1), "peak must be in the middle column of the top row"
        assert raster.occupied(2, 0)
        assert raster.occupied(2, 2)
        assert not raster.occupied(0, 0)

    def test_braille_rendering(self):
        series = detect_and_extract(self.lines)
        raster = render_chart(series, 3, 3)
        assert raster.occupied(0, 1)
        assert raster.point_count == 3

    def test_data_file_round_trip(self, data_file, detection_config):
        from sciview.data import ChartDetector, read_lines

        result = ChartDetector(detection_config).detect(read_lines(data_file))
        assert result.eligible
        assert len(result.series) == 3
