"""
Harmonic synthesis

Implements the harmonic prediction formula::

    h(t) = sum{ f * A * cos[V0(t) + u - G] }

with V0 from the constituent's Doodson numbers and the astronomical
parameters at t, (f, u) from the nodal corrections and (A, G) the
station's harmonic constants. Uses NumPy vectorisation over the time axis:
the astronomical parameters are computed for every instant and all
constituents are evaluated in one pass.

Copyright (c) 2024-2026 tkykszk
A derivative work of PyTMD (https://github.com/tsutterley/pyTMD)
Original author: Tyler Sutterley
Original license: MIT License (source code), CC BY 4.0 (content)

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Collection, Mapping, NamedTuple, Optional, Tuple

import numpy as np

from ..astro.arguments import (
    AstronomicalParameters,
    astronomical_parameters,
    normalize_angle,
)
from ..constituents import CONSTITUENTS, Constituent, doodson_table
from ..nodal import nodal_modulation
from ..stations import Station

__all__ = [
    'TidePrediction',
    'ConstituentContribution',
    'HarmonicTerms',
    'constituent_terms',
    'synthesize',
]

logger = logging.getLogger(__name__)


class TidePrediction(NamedTuple):
    """Predicted height (metres) at one instant"""
    time: datetime
    height: float


class ConstituentContribution(NamedTuple):
    """
    One constituent's share of a prediction

    ``amplitude`` is the nodally corrected amplitude f * A and ``phase``
    the synthesis phase V0 + u - G in degrees.
    """
    symbol: str
    contribution: float
    phase: float
    amplitude: float


@dataclass(frozen=True)
class HarmonicTerms:
    """
    Per-constituent synthesis terms

    Attributes
    ----------
    symbols : tuple of str
        Constituents that entered the synthesis, in station order
    amplitude : np.ndarray
        Corrected amplitudes f * A, shape (n_times, n_constituents)
    phase : np.ndarray
        Synthesis phases (degrees, [0, 360)), shape (n_times, n_constituents)
    """
    symbols: Tuple[str, ...]
    amplitude: np.ndarray
    phase: np.ndarray

    @property
    def contributions(self) -> np.ndarray:
        """Height contributions, shape (n_times, n_constituents)"""
        return self.amplitude * np.cos(np.radians(self.phase))

    def heights(self) -> np.ndarray:
        """Summed heights, shape (n_times,)"""
        return np.sum(self.contributions, axis=1)

    def at(self, index: int = 0) -> list[ConstituentContribution]:
        """Contributions at a single time index"""
        contributions = self.contributions[index]
        return [
            ConstituentContribution(
                symbol=symbol,
                contribution=float(contributions[i]),
                phase=float(self.phase[index, i]),
                amplitude=float(self.amplitude[index, i]),
            )
            for i, symbol in enumerate(self.symbols)
        ]


def constituent_terms(
    station: Station,
    astro: AstronomicalParameters,
    symbols: Optional[Collection[str]] = None,
    catalog: Optional[Mapping[str, Constituent]] = None,
) -> HarmonicTerms:
    """
    Compute the synthesis terms of a station's constituents

    Station constituents whose symbol is not in the catalog are skipped;
    stations may carry constants for more constituents than the catalog
    implements.

    Parameters
    ----------
    station : Station
        Station with harmonic constants
    astro : AstronomicalParameters
        Astronomical parameters at one or more instants
    symbols : collection of str, optional
        Restrict the synthesis to these constituents
    catalog : Mapping, optional
        Constituent catalog (default: :data:`CONSTITUENTS`)

    Returns
    -------
    HarmonicTerms
        Terms for the matched constituents
    """
    catalog = CONSTITUENTS if catalog is None else catalog
    if isinstance(symbols, str):
        symbols = {symbols}

    selected = []
    for c in station.constituents:
        if c.symbol not in catalog:
            logger.debug('Station %s: constituent %s not in catalog, skipped.',
                         station.id, c.symbol)
            continue
        if symbols is not None and c.symbol not in symbols:
            continue
        selected.append(c)

    args = astro.as_array()  # (n_times, 6)
    nt = args.shape[0]
    names = tuple(c.symbol for c in selected)
    if not selected:
        return HarmonicTerms(names, np.zeros((nt, 0)), np.zeros((nt, 0)))

    # Equilibrium arguments V0, shape (n_times, n_constituents)
    coef = doodson_table(names, catalog=catalog)
    V0 = normalize_angle(np.dot(args, coef))

    # Nodal corrections
    pf, pu = nodal_modulation(names, args[:, 4])

    # Harmonic constants
    A = np.array([c.amplitude for c in selected])
    G = np.array([c.phase for c in selected])

    phase = normalize_angle(V0 + pu - G[np.newaxis, :])
    return HarmonicTerms(names, pf * A[np.newaxis, :], phase)


def synthesize(
    station: Station,
    ms: np.ndarray,
    symbols: Optional[Collection[str]] = None,
    catalog: Optional[Mapping[str, Constituent]] = None,
) -> np.ndarray:
    """
    Predicted heights at many instants

    Parameters
    ----------
    station : Station
        Station with harmonic constants
    ms : np.ndarray
        Unix milliseconds (UTC), shape (n_times,)
    symbols : collection of str, optional
        Restrict the synthesis to these constituents
    catalog : Mapping, optional
        Constituent catalog

    Returns
    -------
    np.ndarray
        Heights (metres), shape (n_times,)
    """
    astro = astronomical_parameters(np.atleast_1d(ms))
    return constituent_terms(station, astro, symbols=symbols, catalog=catalog).heights()
