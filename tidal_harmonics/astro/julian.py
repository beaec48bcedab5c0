"""
Julian date conversions

Converts between Unix milliseconds, Python datetimes and Julian dates.
Every constituent phase is derived from the Julian century count, so the
epoch constants here must stay exact.

Copyright (c) 2024-2026 tkykszk
A derivative work of PyTMD (https://github.com/tsutterley/pyTMD)
Original author: Tyler Sutterley
Original license: MIT License (source code), CC BY 4.0 (content)

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Union

import numpy as np

__all__ = [
    'UNIX_EPOCH_JD',
    'J2000_EPOCH_JD',
    'MS_PER_DAY',
    'DAYS_PER_CENTURY',
    'unix_ms_to_julian',
    'julian_to_unix_ms',
    'julian_centuries',
    'datetime_to_unix_ms',
    'unix_ms_to_datetime',
    'datetime_to_julian',
    'julian_to_datetime',
    'hours_in_day',
]

# Julian day of the Unix epoch (1970-01-01T00:00:00 UTC)
UNIX_EPOCH_JD = 2440587.5
# Julian day of J2000.0 (2000-01-01T12:00:00)
J2000_EPOCH_JD = 2451545.0
MS_PER_DAY = 86_400_000
MS_PER_HOUR = 3_600_000
DAYS_PER_CENTURY = 36525.0

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

ArrayLike = Union[float, np.ndarray]


def unix_ms_to_julian(ms: ArrayLike) -> ArrayLike:
    """Convert Unix milliseconds to Julian date"""
    return np.asarray(ms, dtype=np.float64) / MS_PER_DAY + UNIX_EPOCH_JD


def julian_to_unix_ms(jd: ArrayLike) -> ArrayLike:
    """Convert Julian date to Unix milliseconds"""
    return (np.asarray(jd, dtype=np.float64) - UNIX_EPOCH_JD) * MS_PER_DAY


def julian_centuries(jd: ArrayLike) -> ArrayLike:
    """
    Julian centuries elapsed since J2000.0

    Parameters
    ----------
    jd : float or np.ndarray
        Julian date

    Returns
    -------
    float or np.ndarray
        Julian centuries relative to 2000-01-01T12:00:00
    """
    return (np.asarray(jd, dtype=np.float64) - J2000_EPOCH_JD) / DAYS_PER_CENTURY


def datetime_to_unix_ms(dt: datetime) -> int:
    """
    Convert a datetime to integer Unix milliseconds

    Naive datetimes are taken to be UTC. Sub-millisecond precision is
    truncated towards the past.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - _UNIX_EPOCH) // _ONE_MS


def unix_ms_to_datetime(ms: float) -> datetime:
    """Convert Unix milliseconds to a timezone-aware UTC datetime"""
    return _UNIX_EPOCH + timedelta(milliseconds=float(ms))


def datetime_to_julian(dt: datetime) -> float:
    """Convert a datetime to Julian date"""
    return float(unix_ms_to_julian(datetime_to_unix_ms(dt)))


def julian_to_datetime(jd: float) -> datetime:
    """
    Convert a Julian date to a UTC datetime

    Rounded to the nearest millisecond, which makes the conversion the
    inverse of :func:`datetime_to_julian` at millisecond resolution.
    """
    return unix_ms_to_datetime(round(float(julian_to_unix_ms(jd))))


def hours_in_day(ms: ArrayLike) -> ArrayLike:
    """
    Fractional hours since UTC midnight

    Parameters
    ----------
    ms : float or np.ndarray
        Unix milliseconds

    Returns
    -------
    float or np.ndarray
        Hours in [0, 24)
    """
    return np.mod(np.asarray(ms, dtype=np.float64), MS_PER_DAY) / MS_PER_HOUR
