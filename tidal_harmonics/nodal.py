"""
tidal_harmonics.nodal - Nodal corrections for tidal constituents

Approximates the 18.6-year lunar nodal modulation with an amplitude factor
f and a phase correction u (degrees), both functions of the mean longitude
of the ascending lunar node N.

Constituents are grouped by formula: each symbol maps to a formula tag and
each tag to one small function. Solar constituents are unaffected by the
lunar node; compound and overtide constituents use powers and products of
the M2 and K1 factors. The formulas are single-term approximations of the
Schureman corrections.

Symbols without an explicit formula get the neutral correction
``f = 1, u = 0``.

Copyright (c) 2024-2026 tkykszk
Derived from pyTMD by Tyler Sutterley (MIT License)
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Iterable, NamedTuple, Tuple, Union

import numpy as np

__all__ = [
    'NodalFactors',
    'NODAL_FORMULAS',
    'nodal_factors',
    'nodal_modulation',
    'is_nodally_modelled',
]

logger = logging.getLogger(__name__)

ArrayLike = Union[float, np.ndarray]


class NodalFactors(NamedTuple):
    """Nodal amplitude factor and phase correction (degrees)"""
    f: ArrayLike
    u: ArrayLike


class _NodeTerms(NamedTuple):
    sinn: np.ndarray
    cosn: np.ndarray
    sin2n: np.ndarray
    cos2n: np.ndarray


def _m2_factor(t: _NodeTerms) -> np.ndarray:
    return 1.0 - 0.037 * t.cosn


def _k1_factor(t: _NodeTerms) -> np.ndarray:
    return 1.006 + 0.115 * t.cosn


def _lunar_semidiurnal(t):
    return _m2_factor(t), -2.1 * t.sinn


def _solar(t):
    return np.ones_like(t.cosn), np.zeros_like(t.sinn)


def _k2(t):
    return 1.024 + 0.286 * t.cosn, -17.74 * t.sinn


def _k1(t):
    return _k1_factor(t), -8.86 * t.sinn


def _o1(t):
    return 1.009 + 0.187 * t.cosn, 10.8 * t.sinn


def _m1(t):
    w = np.sqrt((1.0 - 0.2505 * t.cos2n - 0.1102 * t.cosn)**2 +
                (0.2505 * t.sin2n + 0.1102 * t.sinn)**2)
    return w, np.zeros_like(t.sinn)


def _mf(t):
    return 1.043 + 0.414 * t.cosn, -23.7 * t.sinn


def _mm(t):
    return 1.0 - 0.13 * t.cosn, np.zeros_like(t.sinn)


def _m4(t):
    return _m2_factor(t)**2, -4.2 * t.sinn


def _ms4(t):
    return _m2_factor(t), -2.1 * t.sinn


def _m6(t):
    return _m2_factor(t)**3, -6.3 * t.sinn


def _mk3(t):
    return _m2_factor(t) * _k1_factor(t), -2.1 * t.sinn - 8.86 * t.sinn


def _2mk3(t):
    return _m2_factor(t)**2 * _k1_factor(t), -4.2 * t.sinn + 8.86 * t.sinn


def _m8(t):
    return _m2_factor(t)**4, -8.4 * t.sinn


_FORMULAS: dict[str, Callable[[_NodeTerms], Tuple[np.ndarray, np.ndarray]]] = {
    'lunar_semidiurnal': _lunar_semidiurnal,
    'solar': _solar,
    'k2': _k2,
    'k1': _k1,
    'o1': _o1,
    'm1': _m1,
    'mf': _mf,
    'mm': _mm,
    'm4': _m4,
    'ms4': _ms4,
    'm6': _m6,
    'mk3': _mk3,
    '2mk3': _2mk3,
    'm8': _m8,
}

_GROUPS = {
    'lunar_semidiurnal': ('M2', 'N2', '2N2', 'MU2', 'NU2', 'L2', 'LAM2'),
    # sun-referenced, unaffected by the lunar node
    'solar': ('S2', 'T2', 'R2', 'P1', 'S1', 'Sa', 'Ssa', 'MSf', 'S4', 'S6'),
    'k2': ('K2', 'J1', 'OO1'),
    'k1': ('K1',),
    'o1': ('O1', 'Q1', '2Q1', 'RHO1'),
    'm1': ('M1',),
    'mf': ('Mf',),
    'mm': ('Mm',),
    'm4': ('M4', 'MN4'),
    'ms4': ('MS4',),
    'm6': ('M6',),
    'mk3': ('MK3',),
    '2mk3': ('2MK3',),
    'm8': ('M8',),
}

NODAL_FORMULAS = MappingProxyType({
    symbol: tag for tag, symbols in _GROUPS.items() for symbol in symbols
})
"""Constituent symbol -> nodal formula tag."""


def _node_terms(N: ArrayLike) -> _NodeTerms:
    n = np.radians(np.asarray(N, dtype=np.float64))
    return _NodeTerms(
        sinn=np.sin(n),
        cosn=np.cos(n),
        sin2n=np.sin(2.0 * n),
        cos2n=np.cos(2.0 * n),
    )


def _evaluate(symbol: str, terms: _NodeTerms) -> Tuple[np.ndarray, np.ndarray]:
    tag = NODAL_FORMULAS.get(symbol)
    if tag is None:
        logger.debug('No nodal formula for %s, using f=1, u=0.', symbol)
        return _solar(terms)
    return _FORMULAS[tag](terms)


def is_nodally_modelled(symbol: str) -> bool:
    """Whether a symbol has an explicit nodal formula"""
    return symbol in NODAL_FORMULAS


def nodal_factors(symbol: str, N: ArrayLike) -> NodalFactors:
    """
    Nodal corrections for one constituent

    Parameters
    ----------
    symbol : str
        Constituent symbol
    N : float or np.ndarray
        Mean longitude of ascending lunar node (degrees)

    Returns
    -------
    NodalFactors
        ``f`` amplitude factor and ``u`` phase correction (degrees);
        floats for scalar N, arrays otherwise
    """
    f, u = _evaluate(symbol, _node_terms(N))
    if np.ndim(N) == 0:
        return NodalFactors(float(f), float(u))
    return NodalFactors(f, u)


def nodal_modulation(symbols: Iterable[str],
                     N: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Nodal corrections for several constituents at several instants

    Parameters
    ----------
    symbols : iterable of str
        Constituent symbols
    N : float or np.ndarray
        Mean longitude of ascending lunar node (degrees), shape (n_times,)

    Returns
    -------
    f : np.ndarray
        Amplitude factors, shape (n_times, n_constituents)
    u : np.ndarray
        Phase corrections (degrees), shape (n_times, n_constituents)
    """
    symbols = list(symbols)
    terms = _node_terms(np.atleast_1d(N))

    nt = len(terms.cosn)
    nc = len(symbols)
    f = np.ones((nt, nc))
    u = np.zeros((nt, nc))

    for i, symbol in enumerate(symbols):
        f[:, i], u[:, i] = _evaluate(symbol, terms)

    return f, u
