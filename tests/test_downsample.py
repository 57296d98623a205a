import pytest

from sciview.data import DataPoint
from sciview.interface.rendering import PeakPreservingDownsampler, downsample_with_peaks
from sciview.interface.rendering.downsample import bucket_bounds


def make_series(ys):
    return tuple(DataPoint(float(i), float(y)) for i, y in enumerate(ys))


class TestBucketBounds:
    @pytest.mark.parametrize("length, width", [(10, 3), (100, 7), (5, 5), (1000, 80)])
    def test_buckets_partition_the_indices(self, length, width):
        buckets = bucket_bounds(length, width)
        assert len(buckets) == width
        assert buckets[0][0] == 0
        assert buckets[-1][1] == length
        for (_, end), (start, _) in zip(buckets, buckets[1:]):
            assert end == start, "buckets must be contiguous"
        sizes = {end - start for start, end in buckets}
        assert max(sizes) - min(sizes) <= 1, f"uneven buckets: {sizes}"


class TestPeakPreservingDownsampler:
    """Bucketed min/max selection."""

    def test_short_series_is_unchanged(self):
        series = make_series([3, 1, 4, 1, 5])
        assert downsample_with_peaks(series, 5) == series
        assert downsample_with_peaks(series, 80) == series

    @pytest.mark.parametrize("width", [1, 7, 40])
    def test_hard_cap_limits_output(self, width):
        series = make_series([(i * 37) % 11 for i in range(500)])
        result = downsample_with_peaks(series, width)
        assert len(result) == width

    def test_uncapped_output_at_most_twice_width(self):
        series = make_series([(i * 37) % 11 for i in range(500)])
        result = downsample_with_peaks(series, 20, hard_cap=False)
        assert len(result) <= 40

    def test_reapplication_is_identity(self):
        series = make_series([(i * 13) % 17 for i in range(300)])
        once = downsample_with_peaks(series, 30)
        assert downsample_with_peaks(once, 30) == once

    @pytest.mark.parametrize("hard_cap", [True, False])
    def test_spike_survives(self, hard_cap):
        ys = [1.0] * 1000
        ys[437] = 250.0
        ys[812] = -90.0
        result = downsample_with_peaks(make_series(ys), 10, hard_cap=hard_cap)
        values = [point.y for point in result]
        assert 250.0 in values, "positive spike was lost"
        assert -90.0 in values, "negative dip was lost"

    def test_output_preserves_order(self):
        series = make_series([(i * 7) % 23 for i in range(400)])
        result = downsample_with_peaks(series, 25, hard_cap=False)
        xs = [point.x for point in result]
        assert xs == sorted(xs)

    def test_points_come_from_input(self):
        series = make_series([(i * 7) % 23 for i in range(400)])
        assert set(downsample_with_peaks(series, 25)) <= set(series)

    def test_tie_prefers_earlier_index(self):
        # Both extremes sit equally far from the bucket and series means
        series = make_series([2, 0, 1, 1])
        result = PeakPreservingDownsampler().downsample(series, 1)
        assert result == (series[0],)

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            downsample_with_peaks(make_series([1, 2, 3]), 0)
