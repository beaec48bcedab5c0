"""
tidal_harmonics.constituents - Tidal constituent catalog

Static reference data for the named tidal constituents: Doodson numbers,
angular speeds, periods and family classification. The catalog is loaded
once from ``data/constituents.json`` and exposed as a read-only mapping.

Doodson numbers are given over the solar-time arguments (T, s, h, p, N, pp)
so that the angular speed of each constituent is the Doodson-weighted sum
of the argument rates, and V0 is the same sum over the argument values.

References:
    P. Schureman, "Manual of Harmonic Analysis and Prediction of Tides"
        US Coast and Geodetic Survey, Special Publication, 98, (1958).

Copyright (c) 2024-2026 tkykszk
Derived from pyTMD by Tyler Sutterley (MIT License)
"""

from __future__ import annotations

import json
import pathlib
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Union

import numpy as np

__all__ = [
    'FAMILIES',
    'Constituent',
    'CONSTITUENTS',
    'ARGUMENT_RATES',
    'load_catalog',
    'get_constituent',
    'by_family',
    'doodson_table',
]

# Path to data files
_data_path = pathlib.Path(__file__).parent / "data"
_catalog_file = _data_path / "constituents.json"

FAMILIES = ('semidiurnal', 'diurnal', 'long-period', 'shallow-water')

# Rates of the astronomical arguments (degrees per hour)
# T: mean solar time, s: moon, h: sun, p: lunar perigee,
# N: lunar node (retrograde), pp: solar perigee
ARGUMENT_RATES = np.array([
    15.0,
    0.5490165,
    0.0410686,
    0.0046418,
    -0.0022064,
    0.0000020,
])


@dataclass(frozen=True)
class Constituent:
    """
    Catalog entry for a single tidal constituent

    Attributes
    ----------
    symbol : str
        Unique short code, e.g. ``'M2'``
    name : str
        Display name
    doodson : tuple of int
        Doodson numbers over (T, s, h, p, N, pp)
    speed : float
        Angular speed (degrees per hour)
    family : str
        One of :data:`FAMILIES`
    description : str
        Short description
    """
    symbol: str
    name: str
    doodson: Tuple[int, int, int, int, int, int]
    speed: float
    family: str
    description: str = ''

    def __post_init__(self):
        if len(self.doodson) != 6:
            raise ValueError(
                f"Constituent {self.symbol}: expected 6 Doodson numbers, "
                f"got {len(self.doodson)}"
            )
        if not self.speed > 0.0:
            raise ValueError(
                f"Constituent {self.symbol}: speed must be positive, got {self.speed}"
            )
        if self.family not in FAMILIES:
            raise ValueError(
                f"Constituent {self.symbol}: unknown family '{self.family}'"
            )

    @property
    def period(self) -> float:
        """Period in hours"""
        return 360.0 / self.speed

    @property
    def frequency(self) -> float:
        """Angular frequency in radians per second"""
        return np.radians(self.speed) / 3600.0


def _build_catalog(records: Mapping[str, dict]) -> Mapping[str, Constituent]:
    catalog = {}
    for symbol, record in records.items():
        catalog[symbol] = Constituent(
            symbol=symbol,
            name=record['name'],
            doodson=tuple(int(d) for d in record['doodson']),
            speed=float(record['speed']),
            family=record['family'],
            description=record.get('description', ''),
        )
    return MappingProxyType(catalog)


def load_catalog(path: Union[str, pathlib.Path]) -> Mapping[str, Constituent]:
    """
    Load a read-only constituent catalog from a JSON file

    Parameters
    ----------
    path : str or pathlib.Path
        JSON object keyed by symbol, each value holding ``name``,
        ``doodson``, ``speed``, ``family`` and optionally ``description``

    Returns
    -------
    Mapping[str, Constituent]
        Immutable catalog keyed by symbol
    """
    with open(path, 'r', encoding='utf-8') as f:
        records = json.load(f)
    return _build_catalog(records)


CONSTITUENTS: Mapping[str, Constituent] = load_catalog(_catalog_file)
"""Default catalog, keyed by constituent symbol."""


def get_constituent(symbol: str,
                    catalog: Optional[Mapping[str, Constituent]] = None) -> Constituent:
    """
    Look up a constituent by symbol

    Raises
    ------
    KeyError
        If the symbol is not in the catalog
    """
    catalog = CONSTITUENTS if catalog is None else catalog
    try:
        return catalog[symbol]
    except KeyError:
        raise KeyError(f"Unknown constituent: {symbol}") from None


def by_family(family: str,
              catalog: Optional[Mapping[str, Constituent]] = None) -> list[Constituent]:
    """All constituents of one family, in catalog order"""
    if family not in FAMILIES:
        raise ValueError(f"Unknown family '{family}', expected one of {FAMILIES}")
    catalog = CONSTITUENTS if catalog is None else catalog
    return [c for c in catalog.values() if c.family == family]


def doodson_table(
    symbols: Union[str, Iterable[str]],
    catalog: Optional[Mapping[str, Constituent]] = None,
) -> np.ndarray:
    """
    Doodson numbers for a list of constituents

    Parameters
    ----------
    symbols : str or iterable of str
        Constituent symbols
    catalog : Mapping, optional
        Catalog to read from (default: :data:`CONSTITUENTS`)

    Returns
    -------
    coef : numpy.ndarray
        Shape (6, n_constituents), rows are [T, s, h, p, N, pp]

    Raises
    ------
    ValueError
        If a symbol is not in the catalog
    """
    catalog = CONSTITUENTS if catalog is None else catalog

    # Make symbols iterable
    if isinstance(symbols, str):
        symbols = [symbols]
    symbols = list(symbols)

    coef = np.zeros((6, len(symbols)))
    for i, symbol in enumerate(symbols):
        if symbol not in catalog:
            raise ValueError(f"Unsupported constituent: {symbol}")
        coef[:, i] = catalog[symbol].doodson

    return coef
