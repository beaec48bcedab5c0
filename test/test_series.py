"""
test_series.py
Tests prediction series, high/low water detection and tidal range

PYTHON DEPENDENCIES:
    numpy: Scientific Computing Tools For Python
        https://numpy.org
    scipy: Scientific Tools for Python
        https://docs.scipy.org/doc/
"""
from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from tidal_harmonics import (
    STATIONS,
    TidePrediction,
    cache_disabled,
    find_extremes,
    get_tidal_range,
    predict_tide,
    predict_tide_series,
)


def _series(heights, start=datetime(2024, 1, 1, tzinfo=timezone.utc), minutes=6):
    return [
        TidePrediction(time=start + timedelta(minutes=minutes * i), height=h)
        for i, h in enumerate(heights)
    ]


class TestPredictTideSeries:
    """Tests for predict_tide_series"""

    def setup_method(self):
        self.start = datetime(2024, 3, 15, 0, 0, tzinfo=timezone.utc)

    def test_endpoints_included(self, boston):
        end = self.start + timedelta(hours=1)
        with cache_disabled():
            series = predict_tide_series(boston, self.start, end, interval_minutes=6)
        assert len(series) == 11
        assert series[0].time == self.start
        assert series[-1].time == end

    def test_default_interval(self, boston):
        end = self.start + timedelta(hours=2)
        series = predict_tide_series(boston, self.start, end)
        assert len(series) == 21
        assert series[1].time - series[0].time == timedelta(minutes=6)

    def test_end_off_grid(self, boston):
        end = self.start + timedelta(minutes=10)
        series = predict_tide_series(boston, self.start, end, interval_minutes=6)
        assert [p.time for p in series] == [self.start, self.start + timedelta(minutes=6)]

    def test_single_point(self, boston):
        series = predict_tide_series(boston, self.start, self.start)
        assert len(series) == 1
        assert series[0].height == predict_tide(boston, self.start)

    def test_matches_single_predictions(self, san_francisco):
        end = self.start + timedelta(hours=3)
        series = predict_tide_series(san_francisco, self.start, end, interval_minutes=30)
        for p in series:
            assert p.time.tzinfo is not None
            assert np.isclose(p.height, predict_tide(san_francisco, p.time), atol=1e-12)

    def test_ascending(self, boston):
        end = self.start + timedelta(days=1)
        series = predict_tide_series(boston, self.start, end, interval_minutes=15)
        times = [p.time for p in series]
        assert times == sorted(times)
        assert len(series) == 97

    def test_fractional_interval(self, boston):
        end = self.start + timedelta(minutes=1)
        series = predict_tide_series(boston, self.start, end, interval_minutes=0.5)
        assert len(series) == 3
        assert series[1].time == self.start + timedelta(seconds=30)

    def test_end_before_start(self, boston):
        with pytest.raises(ValueError, match='before start'):
            predict_tide_series(boston, self.start, self.start - timedelta(minutes=1))

    @pytest.mark.parametrize("interval", [0, -6, float('nan'), float('inf')])
    def test_invalid_interval(self, boston, interval):
        end = self.start + timedelta(hours=1)
        with pytest.raises(ValueError, match='interval'):
            predict_tide_series(boston, self.start, end, interval_minutes=interval)

    def test_custom_catalog(self, boston, solar_catalog):
        end = self.start + timedelta(hours=1)
        series = predict_tide_series(boston, self.start, end, catalog=solar_catalog)
        default = predict_tide_series(boston, self.start, end)
        assert len(series) == len(default)
        # only M2 and S2 enter the synthesis
        assert not np.isclose(series[0].height, default[0].height)


class TestFindExtremes:
    """Tests for find_extremes"""

    @pytest.mark.parametrize("heights", [[], [1.0], [1.0, 2.0]])
    def test_short_series(self, heights):
        assert find_extremes(_series(heights)) == []

    def test_flat_trough(self):
        series = _series([1.0, 2.0, 1.5, 0.5, 0.5, 1.8])
        extremes = find_extremes(series)
        assert len(extremes) == 1
        assert extremes[0].type == 'high'
        assert extremes[0].height == 2.0
        assert extremes[0].time == series[1].time

    def test_plateau_peak(self):
        assert find_extremes(_series([0.0, 1.0, 1.0, 0.0])) == []

    @pytest.mark.parametrize("heights", [
        [0.0, 1.0, 2.0, 3.0],
        [3.0, 2.0, 1.0, 0.0],
        [1.0, 1.0, 1.0],
    ])
    def test_monotonic(self, heights):
        assert find_extremes(_series(heights)) == []

    def test_edges_excluded(self):
        # the maximum sits on the first point
        extremes = find_extremes(_series([5.0, 1.0, 2.0]))
        assert [(e.type, e.height) for e in extremes] == [('low', 1.0)]

    def test_time_order(self):
        heights = np.cos(np.linspace(0.0, 6.0 * np.pi, 61))
        extremes = find_extremes(_series(heights))
        assert [e.type for e in extremes] == ['low', 'high', 'low', 'high', 'low']
        times = [e.time for e in extremes]
        assert times == sorted(times)

    def test_semidiurnal_day(self, boston):
        start = datetime(2024, 3, 15, tzinfo=timezone.utc)
        series = predict_tide_series(boston, start, start + timedelta(hours=25))
        extremes = find_extremes(series)
        highs = [e for e in extremes if e.type == 'high']
        lows = [e for e in extremes if e.type == 'low']
        assert len(highs) in (1, 2, 3)
        assert len(lows) in (1, 2, 3)
        assert 3 <= len(extremes) <= 5
        # highs and lows alternate
        for a, b in zip(extremes, extremes[1:]):
            assert a.type != b.type
        assert min(h.height for h in highs) > max(l.height for l in lows)


class TestTidalRange:
    """Tests for get_tidal_range"""

    @pytest.mark.parametrize("station", STATIONS, ids=lambda s: s.id)
    def test_containment(self, station):
        for day in (1, 8, 15, 22):
            t = datetime(2024, 5, day, 7, 23, tzinfo=timezone.utc)
            tidal_range = get_tidal_range(station, t)
            height = predict_tide(station, t)
            assert tidal_range.min_height <= height <= tidal_range.max_height

    def test_matches_series(self, boston):
        t = datetime(2024, 3, 15, 12, tzinfo=timezone.utc)
        window = timedelta(hours=12.5)
        series = predict_tide_series(boston, t - window, t + window, interval_minutes=10)
        assert len(series) == 151
        heights = [p.height for p in series]
        tidal_range = get_tidal_range(boston, t)
        assert np.isclose(tidal_range.min_height, min(heights))
        assert np.isclose(tidal_range.max_height, max(heights))

    def test_boston_range(self, boston):
        t = datetime(2024, 3, 15, 12, tzinfo=timezone.utc)
        tidal_range = get_tidal_range(boston, t)
        # M2 alone swings ~2.8 m peak to trough
        assert 1.5 < tidal_range.max_height - tidal_range.min_height < 5.0
