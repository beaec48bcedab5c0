"""
tidal_harmonics.astro - Astronomical calculation module

Provides functions for:
- Julian date conversion
- Astronomical parameters (hour angle and mean longitudes)
- Equilibrium arguments of tidal constituents

Copyright (c) 2024-2026 tkykszk
A derivative work of PyTMD (https://github.com/tsutterley/pyTMD)
Original author: Tyler Sutterley
Original license: MIT License (source code), CC BY 4.0 (content)

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from .arguments import (
    AstronomicalParameters,
    astronomical_parameters,
    equilibrium_argument,
    normalize_angle,
    polynomial_sum,
)
from .julian import (
    DAYS_PER_CENTURY,
    J2000_EPOCH_JD,
    MS_PER_DAY,
    UNIX_EPOCH_JD,
    datetime_to_julian,
    datetime_to_unix_ms,
    hours_in_day,
    julian_centuries,
    julian_to_datetime,
    julian_to_unix_ms,
    unix_ms_to_datetime,
    unix_ms_to_julian,
)

__all__ = [
    'AstronomicalParameters',
    'astronomical_parameters',
    'equilibrium_argument',
    'normalize_angle',
    'polynomial_sum',
    # Julian dates
    'DAYS_PER_CENTURY',
    'J2000_EPOCH_JD',
    'MS_PER_DAY',
    'UNIX_EPOCH_JD',
    'datetime_to_julian',
    'datetime_to_unix_ms',
    'hours_in_day',
    'julian_centuries',
    'julian_to_datetime',
    'julian_to_unix_ms',
    'unix_ms_to_datetime',
    'unix_ms_to_julian',
]
