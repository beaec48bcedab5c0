"""
Astronomical arguments for harmonic tide prediction

Computes the six angles that drive every tidal constituent (hour angle,
lunar and solar mean longitudes, lunar perigee and node, solar perigee)
and the equilibrium argument V0 of a constituent from its Doodson numbers.
All functions accept scalars or NumPy arrays.

References:
    P. Schureman, "Manual of Harmonic Analysis and Prediction of Tides"
        US Coast and Geodetic Survey, Special Publication, 98, (1958).
    J. Meeus, "Astronomical Algorithms", 2nd edition, (1998).

Copyright (c) 2024-2026 tkykszk
A derivative work of PyTMD (https://github.com/tsutterley/pyTMD)
Original author: Tyler Sutterley
Original license: MIT License (source code), CC BY 4.0 (content)

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from .julian import hours_in_day, julian_centuries, unix_ms_to_julian

__all__ = [
    'AstronomicalParameters',
    'astronomical_parameters',
    'equilibrium_argument',
    'normalize_angle',
    'polynomial_sum',
]

ArrayLike = Union[float, np.ndarray]

# Polynomial coefficients in Julian centuries from J2000.0 (degrees)
# Mean longitude of moon
_LUNAR_LONGITUDE = np.array([
    218.3164477, 481267.88123421, -0.0015786, 1.0 / 538841.0
])
# Mean longitude of sun
_SOLAR_LONGITUDE = np.array([
    280.4664567, 360007.6982779, 0.03032028, 1.0 / 49931.0, -1.0 / 15300.0
])
# Mean longitude of lunar perigee
_LUNAR_PERIGEE = np.array([
    83.3532465, 4069.0137287, -0.0103200, -1.0 / 80053.0
])
# Mean longitude of ascending lunar node (retrograde)
_LUNAR_NODE = np.array([
    125.0445479, -1934.1362891, 0.0020754, 1.0 / 467441.0
])
# Longitude of solar perigee
_SOLAR_PERIGEE = np.array([282.9373, 1.7195])

# Earth rotation relative to the mean sun (degrees per hour)
_HOUR_ANGLE_RATE = 15.0


@dataclass(frozen=True)
class AstronomicalParameters:
    """
    Astronomical angles at one or more instants

    Attributes
    ----------
    T : float or np.ndarray
        Hour angle of the mean sun at Greenwich (degrees)
    s : float or np.ndarray
        Mean longitude of moon (degrees)
    h : float or np.ndarray
        Mean longitude of sun (degrees)
    p : float or np.ndarray
        Mean longitude of lunar perigee (degrees)
    N : float or np.ndarray
        Mean longitude of ascending lunar node (degrees)
    pp : float or np.ndarray
        Longitude of solar perigee (degrees)
    """
    T: ArrayLike
    s: ArrayLike
    h: ArrayLike
    p: ArrayLike
    N: ArrayLike
    pp: ArrayLike

    def as_array(self) -> np.ndarray:
        """Stack the angles into shape (n_times, 6) in Doodson order"""
        return np.column_stack([
            np.atleast_1d(np.asarray(angle, dtype=np.float64))
            for angle in (self.T, self.s, self.h, self.p, self.N, self.pp)
        ])


def polynomial_sum(coefficients: Sequence[float], t: ArrayLike) -> ArrayLike:
    """
    Evaluate a polynomial using Horner's method

    Parameters
    ----------
    coefficients : sequence of float
        Coefficients [c0, c1, c2, ...]
    t : float or np.ndarray
        Independent variable

    Returns
    -------
    float or np.ndarray
        c0 + c1*t + c2*t^2 + ...
    """
    t = np.asarray(t, dtype=np.float64)
    result = np.zeros_like(t)
    for c in reversed(coefficients):
        result = result * t + c
    return result


def normalize_angle(theta: ArrayLike, circle: float = 360.0) -> ArrayLike:
    """
    Normalize an angle to a single rotation

    Parameters
    ----------
    theta : float or np.ndarray
        Angle to normalize
    circle : float, default 360.0
        Circle of the angle (360.0 for degrees, 2*pi for radians)

    Returns
    -------
    float or np.ndarray
        Normalized angle in range [0, circle)
    """
    normalized = np.mod(theta, circle)
    # tiny negative inputs round up to a full circle
    normalized = np.where(normalized >= circle, normalized - circle, normalized)
    if normalized.ndim == 0:
        return float(normalized)
    return normalized


def _as_output(value: np.ndarray, scalar: bool) -> ArrayLike:
    return float(value) if scalar else value


def astronomical_parameters(ms: ArrayLike) -> AstronomicalParameters:
    """
    Compute the astronomical parameters at the given instants

    Parameters
    ----------
    ms : float or np.ndarray
        Unix milliseconds (UTC)

    Returns
    -------
    AstronomicalParameters
        Angles normalized to [0, 360); plain floats for scalar input,
        arrays of the input shape otherwise
    """
    ms = np.asarray(ms, dtype=np.float64)
    scalar = ms.ndim == 0

    T = julian_centuries(unix_ms_to_julian(ms))
    hour_angle = hours_in_day(ms) * _HOUR_ANGLE_RATE

    return AstronomicalParameters(
        T=_as_output(normalize_angle(hour_angle), scalar),
        s=_as_output(normalize_angle(polynomial_sum(_LUNAR_LONGITUDE, T)), scalar),
        h=_as_output(normalize_angle(polynomial_sum(_SOLAR_LONGITUDE, T)), scalar),
        p=_as_output(normalize_angle(polynomial_sum(_LUNAR_PERIGEE, T)), scalar),
        N=_as_output(normalize_angle(polynomial_sum(_LUNAR_NODE, T)), scalar),
        pp=_as_output(normalize_angle(polynomial_sum(_SOLAR_PERIGEE, T)), scalar),
    )


def equilibrium_argument(doodson: Sequence[int] | np.ndarray,
                         astro: AstronomicalParameters) -> ArrayLike:
    """
    Equilibrium argument V0 of one or more constituents

    V0 is the Doodson-weighted sum of the astronomical angles.

    Parameters
    ----------
    doodson : sequence of int or np.ndarray
        Doodson numbers over (T, s, h, p, N, pp), shape (6,) for one
        constituent or (6, n_constituents) for several
    astro : AstronomicalParameters
        Astronomical angles

    Returns
    -------
    float or np.ndarray
        V0 in degrees, [0, 360). A float for one constituent at one
        instant, otherwise an array of shape (n_times,) or
        (n_times, n_constituents)
    """
    coef = np.asarray(doodson, dtype=np.float64)
    v0 = normalize_angle(np.dot(astro.as_array(), coef))
    if coef.ndim == 1 and np.ndim(astro.T) == 0:
        return float(v0[0])
    return v0
