"""
test_nodal.py
Tests nodal corrections

PYTHON DEPENDENCIES:
    numpy: Scientific Computing Tools For Python
        https://numpy.org
"""
import logging

import numpy as np
import pytest

from tidal_harmonics.constituents import CONSTITUENTS
from tidal_harmonics.nodal import (
    NODAL_FORMULAS,
    is_nodally_modelled,
    nodal_factors,
    nodal_modulation,
)


@pytest.mark.parametrize("symbol, f, u", [
    ('M2', 0.963, 0.0),
    ('N2', 0.963, 0.0),
    ('S2', 1.0, 0.0),
    ('K2', 1.310, 0.0),
    ('K1', 1.121, 0.0),
    ('O1', 1.196, 0.0),
    ('Mf', 1.457, 0.0),
    ('Mm', 0.87, 0.0),
    ('M4', 0.963**2, 0.0),
    ('MS4', 0.963, 0.0),
    ('M6', 0.963**3, 0.0),
    ('M8', 0.963**4, 0.0),
    ('MK3', 0.963 * 1.121, 0.0),
    ('2MK3', 0.963**2 * 1.121, 0.0),
])
def test_factors_at_zero_node(symbol, f, u):
    factors = nodal_factors(symbol, 0.0)
    assert np.isclose(factors.f, f)
    assert np.isclose(factors.u, u)


@pytest.mark.parametrize("symbol, u", [
    ('M2', -2.1),
    ('K2', -17.74),
    ('K1', -8.86),
    ('O1', 10.8),
    ('Mf', -23.7),
    ('Mm', 0.0),
    ('M4', -4.2),
    ('MS4', -2.1),
    ('M6', -6.3),
    ('M8', -8.4),
    ('MK3', -10.96),
    ('2MK3', 4.66),
])
def test_phase_at_quarter_node(symbol, u):
    factors = nodal_factors(symbol, 90.0)
    assert np.isclose(factors.u, u)


def test_m1_factor():
    # N = 0: (1 - 0.2505 - 0.1102)^2
    assert np.isclose(nodal_factors('M1', 0.0).f, 0.6393)
    # N = 90: cos2N = -1, sin2N = 0, sinN = 1
    expected = np.sqrt(1.2505**2 + 0.1102**2)
    assert np.isclose(nodal_factors('M1', 90.0).f, expected)
    assert nodal_factors('M1', 90.0).u == 0.0


def test_groups_share_formula():
    for symbol in ('N2', '2N2', 'MU2', 'NU2', 'L2', 'LAM2'):
        assert nodal_factors(symbol, 33.0) == nodal_factors('M2', 33.0)
    for symbol in ('J1', 'OO1'):
        assert nodal_factors(symbol, 33.0) == nodal_factors('K2', 33.0)
    for symbol in ('Q1', '2Q1', 'RHO1'):
        assert nodal_factors(symbol, 33.0) == nodal_factors('O1', 33.0)


@pytest.mark.parametrize("symbol", ['S2', 'T2', 'R2', 'P1', 'S1', 'Sa', 'Ssa', 'MSf', 'S4', 'S6'])
def test_solar_constituents_neutral(symbol):
    for N in (0.0, 90.0, 217.0):
        assert nodal_factors(symbol, N) == (1.0, 0.0)


def test_unknown_symbol_falls_back(caplog):
    assert not is_nodally_modelled('SK3')
    with caplog.at_level(logging.DEBUG, logger='tidal_harmonics.nodal'):
        factors = nodal_factors('SK3', 123.0)
    assert factors == (1.0, 0.0)
    assert 'SK3' in caplog.text


def test_catalog_fully_modelled():
    for symbol in CONSTITUENTS:
        assert is_nodally_modelled(symbol), symbol
    assert set(NODAL_FORMULAS) <= set(CONSTITUENTS)


def test_scalar_returns_floats():
    factors = nodal_factors('M2', 45.0)
    assert isinstance(factors.f, float)
    assert isinstance(factors.u, float)


def test_array_node():
    N = np.linspace(0.0, 360.0, 13)
    f, u = nodal_factors('K1', N)
    assert f.shape == N.shape
    assert np.allclose(f, 1.006 + 0.115 * np.cos(np.radians(N)))
    assert np.allclose(u, -8.86 * np.sin(np.radians(N)))


def test_nodal_modulation_shape():
    symbols = ['M2', 'S2', 'K1', 'UNKNOWN']
    N = np.array([0.0, 90.0, 180.0])
    f, u = nodal_modulation(symbols, N)
    assert f.shape == (3, 4)
    assert u.shape == (3, 4)
    assert np.allclose(f[:, 1], 1.0)
    assert np.allclose(f[:, 3], 1.0)
    assert np.allclose(u[:, 3], 0.0)
    assert np.isclose(f[2, 0], 1.037)
    assert np.isclose(u[1, 2], -8.86)


def test_nodal_modulation_matches_factors():
    N = np.array([12.0, 250.0])
    f, u = nodal_modulation(['Mf', 'M4'], N)
    for j, symbol in enumerate(['Mf', 'M4']):
        expected = nodal_factors(symbol, N)
        assert np.allclose(f[:, j], expected.f)
        assert np.allclose(u[:, j], expected.u)
