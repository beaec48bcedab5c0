"""
tidal_harmonics - Harmonic tide prediction

Predicts water heights at coastal stations from their harmonic constants:
astronomical arguments, nodal corrections and harmonic synthesis, plus
series generation, high/low waters, tidal range and spring/neap indicators.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.

Usage:
    from datetime import datetime, timedelta, timezone
    import tidal_harmonics

    station = tidal_harmonics.get_station('9414290')  # San Francisco
    now = datetime(2024, 3, 15, 12, tzinfo=timezone.utc)

    # Single prediction (metres above MLLW)
    height = tidal_harmonics.predict_tide(station, now)

    # 24-hour series at 6-minute resolution, then high/low waters
    series = tidal_harmonics.predict_tide_series(
        station, now, now + timedelta(hours=24), interval_minutes=6
    )
    extremes = tidal_harmonics.find_extremes(series)

    # Several stations at once (xarray.DataArray, dims station x time)
    heights = tidal_harmonics.predict_batch(tidal_harmonics.STATIONS, times)
"""

from . import astro
from . import compute
from . import predict
from .compute import (
    TidalRange,
    predict_tide,
    predict_tide_from_constituents,
    get_constituent_contributions,
    predict_tide_series,
    find_extremes,
    get_tidal_range,
    get_spring_neap_indicator,
    get_lunar_phase,
    predict_batch,
)
from .predict import (
    ConstituentContribution,
    TideExtreme,
    TidePrediction,
)
from .astro import (
    AstronomicalParameters,
    astronomical_parameters,
    equilibrium_argument,
    normalize_angle,
)
from .constituents import (
    CONSTITUENTS,
    Constituent,
    get_constituent,
    by_family,
    doodson_table,
    load_catalog,
)
from .nodal import (
    NodalFactors,
    nodal_factors,
)
from .stations import (
    STATIONS,
    Station,
    StationConstituent,
    get_station,
    station_options,
    station_from_dict,
    tidal_type,
    tidal_type_label,
)
from .cache import (
    # Enable/disable
    enable_cache,
    disable_cache,
    is_cache_enabled,
    # Context managers
    cache_disabled,
    # Cache operations
    clear_cache,
    # Status
    show_cache_status,
    get_cache_info,
)

__version__ = '0.1.0'
__all__ = [
    'astro',
    'compute',
    'predict',
    # Predictions
    'predict_tide',
    'predict_tide_from_constituents',
    'get_constituent_contributions',
    'predict_tide_series',
    'predict_batch',
    # Analytics
    'find_extremes',
    'get_tidal_range',
    'get_spring_neap_indicator',
    'get_lunar_phase',
    # Result types
    'TidePrediction',
    'TideExtreme',
    'TidalRange',
    'ConstituentContribution',
    # Astronomy
    'AstronomicalParameters',
    'astronomical_parameters',
    'equilibrium_argument',
    'normalize_angle',
    # Constituents
    'CONSTITUENTS',
    'Constituent',
    'get_constituent',
    'by_family',
    'doodson_table',
    'load_catalog',
    'NodalFactors',
    'nodal_factors',
    # Stations
    'STATIONS',
    'Station',
    'StationConstituent',
    'get_station',
    'station_options',
    'station_from_dict',
    'tidal_type',
    'tidal_type_label',
    # Cache
    'enable_cache',
    'disable_cache',
    'is_cache_enabled',
    'cache_disabled',
    'clear_cache',
    'show_cache_status',
    'get_cache_info',
]
