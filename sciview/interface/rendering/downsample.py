"""Peak-preserving downsampling of point series for fixed-width charts."""

from typing import Sequence

from ...data.points import DataPoint, PointSeries


def bucket_bounds(length, width):
    """
    Split ``range(length)`` into ``width`` contiguous index buckets.

    Bucket sizes differ by at most one and every index lands in exactly one
    bucket. Assumes ``length >= width``.
    """
    return [
        (i * length // width, (i + 1) * length // width) for i in range(width)
    ]


class PeakPreservingDownsampler:
    """
    Reduces a series to at most ``width`` (or ``2 * width``) points.

    Each index bucket contributes its minimum-y and maximum-y points in
    original order, so spikes and dips survive where striding or averaging
    would flatten them. With ``hard_cap`` each bucket contributes a single
    point: whichever extreme deviates most from the bucket mean.
    """

    def __init__(self, hard_cap=True):
        self.hard_cap = hard_cap

    def downsample(self, series: Sequence[DataPoint], width: int) -> PointSeries:
        if width < 1:
            raise ValueError(f"width must be >= 1, got {width}")

        length = len(series)
        if length <= width:
            return series

        series_mean = sum(point.y for point in series) / length

        result = []
        for start, end in bucket_bounds(length, width):
            min_idx = max_idx = start
            min_y = max_y = series[start].y
            total = 0.0
            for j in range(start, end):
                y = series[j].y
                total += y
                if y < min_y:
                    min_y = y
                    min_idx = j
                if y > max_y:
                    max_y = y
                    max_idx = j

            if min_idx == max_idx:
                result.append(series[min_idx])
            elif self.hard_cap:
                bucket_mean = total / (end - start)
                result.append(
                    series[
                        self._pick_extreme(
                            series, min_idx, max_idx, bucket_mean, series_mean
                        )
                    ]
                )
            else:
                first, second = sorted((min_idx, max_idx))
                result.append(series[first])
                result.append(series[second])

        return tuple(result)

    @staticmethod
    def _pick_extreme(series, min_idx, max_idx, bucket_mean, series_mean):
        """Choose the more salient of a bucket's two extremes."""

        def salience(idx):
            y = series[idx].y
            # Larger deviation wins; earlier index wins a full tie
            return (abs(y - bucket_mean), abs(y - series_mean), -idx)

        return max((min_idx, max_idx), key=salience)


def downsample_with_peaks(series, width, hard_cap=True):
    """Functional shortcut for :class:`PeakPreservingDownsampler`."""
    return PeakPreservingDownsampler(hard_cap=hard_cap).downsample(series, width)
