"""
tidal_harmonics.compute - Tide prediction API

Validated entry points for single predictions, series, derived analytics
and multi-station batches. Timestamps may be given as ``datetime``
(naive values are UTC), ``numpy.datetime64`` or Unix milliseconds.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import logging
import numbers
from datetime import datetime
from typing import Collection, Iterable, Mapping, NamedTuple, Optional, Sequence, Union

import numpy as np
import xarray as xr

from . import cache as cache_module
from .astro.arguments import astronomical_parameters
from .astro.julian import MS_PER_HOUR, datetime_to_unix_ms, unix_ms_to_datetime
from .constituents import Constituent
from .predict.extremes import find_extremes
from .predict.harmonic import (
    ConstituentContribution,
    TidePrediction,
    constituent_terms,
    synthesize,
)
from .predict.indicators import lunar_phase, spring_neap_indicator
from .stations import Station

__all__ = [
    'TidalRange',
    'predict_tide',
    'predict_tide_from_constituents',
    'get_constituent_contributions',
    'predict_tide_series',
    'find_extremes',
    'get_tidal_range',
    'get_spring_neap_indicator',
    'get_lunar_phase',
    'predict_batch',
]

logger = logging.getLogger(__name__)

TimeLike = Union[datetime, np.datetime64, float, int]
Catalog = Optional[Mapping[str, Constituent]]

MS_PER_MINUTE = 60_000

# tidal range window: +/- 12.5 hours at 10-minute resolution
_RANGE_HALF_WINDOW_HOURS = 12.5
_RANGE_INTERVAL_MINUTES = 10


class TidalRange(NamedTuple):
    """Lowest and highest predicted water over a window"""
    min_height: float
    max_height: float


# =============================================================================
# Input validation
# =============================================================================

def _to_unix_ms(time: TimeLike) -> float:
    """
    Convert a supported timestamp to Unix milliseconds

    Raises
    ------
    ValueError
        For NaT, NaN or infinite values
    TypeError
        For unsupported types
    """
    if isinstance(time, datetime):
        return float(datetime_to_unix_ms(time))
    if isinstance(time, np.datetime64):
        if np.isnat(time):
            raise ValueError("Invalid time: NaT")
        return float(time.astype('datetime64[ms]').astype(np.int64))
    if isinstance(time, numbers.Real) and not isinstance(time, bool):
        ms = float(time)
        if not np.isfinite(ms):
            raise ValueError(f"Invalid time: {time!r} is not finite")
        return ms
    raise TypeError(
        f"Unsupported time type {type(time).__name__}; "
        "expected datetime, numpy.datetime64 or Unix milliseconds"
    )


def _times_to_unix_ms(times: Iterable[TimeLike]) -> np.ndarray:
    if isinstance(times, np.ndarray) and np.issubdtype(times.dtype, np.datetime64):
        if np.any(np.isnat(times)):
            raise ValueError("Invalid time: NaT")
        return times.astype('datetime64[ms]').astype(np.int64).astype(np.float64)
    return np.array([_to_unix_ms(t) for t in times], dtype=np.float64)


def _series_times(start_ms: float, end_ms: float, step_ms: float) -> np.ndarray:
    """Instants start, start + step, ... up to and including end"""
    count = int((end_ms - start_ms) // step_ms) + 1
    return start_ms + np.arange(count, dtype=np.float64) * step_ms


# =============================================================================
# Single-instant predictions
# =============================================================================

def predict_tide(station: Station, time: TimeLike,
                 catalog: Catalog = None) -> float:
    """
    Predict the water height at one instant

    Parameters
    ----------
    station : Station
        Station with harmonic constants
    time : datetime, numpy.datetime64 or float
        Prediction time (UTC)
    catalog : Mapping, optional
        Constituent catalog

    Returns
    -------
    float
        Height above the station datum (metres); 0 for a station with
        no usable constituents
    """
    ms = _to_unix_ms(time)
    return float(synthesize(station, ms, catalog=catalog)[0])


def predict_tide_from_constituents(station: Station, time: TimeLike,
                                   symbols: Collection[str],
                                   catalog: Catalog = None) -> float:
    """
    Predict the water height from a subset of the station's constituents

    Parameters
    ----------
    station : Station
        Station with harmonic constants
    time : datetime, numpy.datetime64 or float
        Prediction time (UTC)
    symbols : collection of str
        Constituents to include; symbols the station lacks contribute 0

    Returns
    -------
    float
        Partial height (metres)
    """
    ms = _to_unix_ms(time)
    return float(synthesize(station, ms, symbols=symbols, catalog=catalog)[0])


def get_constituent_contributions(
    station: Station,
    time: TimeLike,
    catalog: Catalog = None,
) -> list[ConstituentContribution]:
    """
    Per-constituent breakdown of a prediction

    The contributions sum to :func:`predict_tide` at the same instant.

    Returns
    -------
    list of ConstituentContribution
        One entry per station constituent found in the catalog, in
        station order
    """
    ms = _to_unix_ms(time)
    astro = astronomical_parameters(np.atleast_1d(ms))
    return constituent_terms(station, astro, catalog=catalog).at(0)


# =============================================================================
# Series and derived analytics
# =============================================================================

def predict_tide_series(
    station: Station,
    start: TimeLike,
    end: TimeLike,
    interval_minutes: float = 6,
    catalog: Catalog = None,
) -> list[TidePrediction]:
    """
    Predict water heights at regular intervals

    Parameters
    ----------
    station : Station
        Station with harmonic constants
    start, end : datetime, numpy.datetime64 or float
        First and last instant (UTC); ``end`` is included when it falls
        on the interval grid
    interval_minutes : float, default 6
        Sampling interval (minutes)
    catalog : Mapping, optional
        Constituent catalog; series computed with a custom catalog are
        never cached

    Returns
    -------
    list of TidePrediction
        Predictions in ascending time order

    Raises
    ------
    ValueError
        If ``end`` precedes ``start`` or the interval is not a positive
        finite number
    """
    start_ms = _to_unix_ms(start)
    end_ms = _to_unix_ms(end)
    if end_ms < start_ms:
        raise ValueError(
            f"Invalid range: end ({end!r}) is before start ({start!r})"
        )
    interval = float(interval_minutes)
    if not np.isfinite(interval) or interval <= 0.0:
        raise ValueError(
            f"Invalid interval: {interval_minutes!r} minutes, must be positive"
        )
    step_ms = interval * MS_PER_MINUTE

    key = None
    if catalog is None:
        key = (station, start_ms, end_ms, step_ms)
        cached = cache_module.lookup_series(key)
        if cached is not None:
            return cached

    ms = _series_times(start_ms, end_ms, step_ms)
    heights = synthesize(station, ms, catalog=catalog)
    logger.info('Station %s: predicted %d points at %g-minute interval.',
                station.id, len(ms), interval)

    series = [
        TidePrediction(time=unix_ms_to_datetime(t), height=float(h))
        for t, h in zip(ms, heights)
    ]
    if key is not None:
        cache_module.store_series(key, series)
    return series


def get_tidal_range(station: Station, time: TimeLike,
                    catalog: Catalog = None) -> TidalRange:
    """
    Tidal range around an instant

    Samples the prediction every 10 minutes over 12.5 hours either side
    of ``time``, roughly one semidiurnal cycle each way.

    Returns
    -------
    TidalRange
        Minimum and maximum height over the window
    """
    ms = _to_unix_ms(time)
    half = _RANGE_HALF_WINDOW_HOURS * MS_PER_HOUR
    times = _series_times(ms - half, ms + half,
                          _RANGE_INTERVAL_MINUTES * MS_PER_MINUTE)
    heights = synthesize(station, times, catalog=catalog)
    return TidalRange(min_height=float(np.min(heights)),
                      max_height=float(np.max(heights)))


def get_spring_neap_indicator(time: TimeLike, catalog: Catalog = None) -> float:
    """
    Spring/neap indicator at an instant

    Returns
    -------
    float
        In [-1, 1]: +1 at spring tides, -1 at neap tides
    """
    return spring_neap_indicator(astronomical_parameters(_to_unix_ms(time)),
                                 catalog=catalog)


def get_lunar_phase(time: TimeLike) -> float:
    """
    Lunar phase at an instant

    Returns
    -------
    float
        In [0, 1): 0 new moon, 0.25 first quarter, 0.5 full moon
    """
    return lunar_phase(astronomical_parameters(_to_unix_ms(time)))


# =============================================================================
# Batch predictions
# =============================================================================

def predict_batch(
    stations: Sequence[Station],
    times: Iterable[TimeLike],
    catalog: Catalog = None,
) -> xr.DataArray:
    """
    Predict heights for several stations at the same instants

    The astronomical parameters are computed once and shared by all
    stations.

    Parameters
    ----------
    stations : sequence of Station
        Stations with harmonic constants
    times : iterable of datetime, numpy.datetime64 or float
        Prediction times (UTC)
    catalog : Mapping, optional
        Constituent catalog

    Returns
    -------
    xr.DataArray
        Heights (metres) with dims ``("station", "time")``, station ids
        and names as coordinates and ``datetime64[ms]`` times
    """
    stations = list(stations)
    ms = _times_to_unix_ms(times)
    astro = astronomical_parameters(ms)

    heights = np.zeros((len(stations), len(ms)))
    for i, station in enumerate(stations):
        heights[i] = constituent_terms(station, astro, catalog=catalog).heights()

    logger.info('Batch prediction: %d stations x %d times.',
                len(stations), len(ms))

    return xr.DataArray(
        heights,
        dims=('station', 'time'),
        coords={
            'station': [s.id for s in stations],
            'name': ('station', [s.name for s in stations]),
            'time': np.round(ms).astype(np.int64).astype('datetime64[ms]'),
        },
        name='height',
        attrs={'units': 'm'},
    )
