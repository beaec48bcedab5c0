"""
Shared fixtures for the tidal_harmonics test suite
"""
from datetime import datetime, timezone
from types import MappingProxyType

import pytest

from tidal_harmonics.astro import AstronomicalParameters
from tidal_harmonics.constituents import CONSTITUENTS, Constituent
from tidal_harmonics.stations import Station, StationConstituent, get_station


@pytest.fixture
def epoch():
    """A fixed prediction instant"""
    return datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def boston():
    return get_station('8443970')


@pytest.fixture
def san_francisco():
    return get_station('9414290')


@pytest.fixture
def zero_astro():
    """All astronomical angles frozen at 0 degrees"""
    return AstronomicalParameters(T=0.0, s=0.0, h=0.0, p=0.0, N=0.0, pp=0.0)


@pytest.fixture
def m2_only():
    """Station carrying a single unit-amplitude M2 constituent"""
    return Station(
        id='TEST-M2', name='M2 only', lat=0.0, lon=0.0,
        timezone='UTC', datum='MSL',
        constituents=(StationConstituent('M2', 1.0, 0.0),),
    )


@pytest.fixture
def solar_catalog():
    """Two-entry catalog with M2 on solar time, as (2, 0, 0, 0, 0, 0)"""
    return MappingProxyType({
        'M2': Constituent(
            symbol='M2', name='Principal lunar semidiurnal',
            doodson=(2, 0, 0, 0, 0, 0), speed=28.9841042,
            family='semidiurnal',
        ),
        'S2': CONSTITUENTS['S2'],
    })
