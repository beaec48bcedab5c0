"""
Spring/neap and lunar phase indicators

Station-independent indicators derived from the astronomical parameters:
they describe the Sun-Moon geometry, not the local tide.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

from typing import Mapping, Optional, Union

import numpy as np

from ..astro.arguments import (
    AstronomicalParameters,
    equilibrium_argument,
    normalize_angle,
)
from ..constituents import CONSTITUENTS, Constituent

__all__ = ['spring_neap_indicator', 'lunar_phase']

ArrayLike = Union[float, np.ndarray]


def spring_neap_indicator(
    astro: AstronomicalParameters,
    catalog: Optional[Mapping[str, Constituent]] = None,
) -> ArrayLike:
    """
    Spring/neap indicator from the relative phase of M2 and S2

    Parameters
    ----------
    astro : AstronomicalParameters
        Astronomical parameters at one or more instants
    catalog : Mapping, optional
        Constituent catalog providing M2 and S2

    Returns
    -------
    float or np.ndarray
        cos(2 * (V0_M2 - V0_S2)): +1 when the phase difference is
        0 or 180 degrees (spring), -1 at 90 or 270 degrees (neap)
    """
    catalog = CONSTITUENTS if catalog is None else catalog
    V0_M2 = equilibrium_argument(catalog['M2'].doodson, astro)
    V0_S2 = equilibrium_argument(catalog['S2'].doodson, astro)

    phase_diff = normalize_angle(np.subtract(V0_M2, V0_S2))
    indicator = np.cos(2.0 * np.radians(phase_diff))
    return float(indicator) if np.ndim(indicator) == 0 else indicator


def lunar_phase(astro: AstronomicalParameters) -> ArrayLike:
    """
    Lunar phase from the mean elongation of the Moon

    Returns
    -------
    float or np.ndarray
        Fraction of the synodic month in [0, 1): 0 new moon, 0.5 full moon
    """
    elongation = normalize_angle(np.subtract(astro.s, astro.h))
    return elongation / 360.0
