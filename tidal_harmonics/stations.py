"""
tidal_harmonics.stations - Tide station records

A station carries its harmonic constants: one (symbol, amplitude, phase lag)
triple per constituent. Stations are read-only values; the prediction
functions never modify them.

Sample harmonic constants from NOAA CO-OPS
(https://tidesandcurrents.noaa.gov/harcon.html) ship in
``data/stations.json``.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import json
import pathlib
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence, Tuple

__all__ = [
    'StationConstituent',
    'Station',
    'STATIONS',
    'TIDAL_TYPES',
    'station_from_dict',
    'load_stations',
    'get_station',
    'station_options',
    'form_factor',
    'tidal_type',
    'tidal_type_label',
]

_data_path = pathlib.Path(__file__).parent / "data"
_stations_file = _data_path / "stations.json"


@dataclass(frozen=True)
class StationConstituent:
    """
    Harmonic constant of one constituent at one station

    Attributes
    ----------
    symbol : str
        Constituent symbol
    amplitude : float
        Amplitude (metres)
    phase : float
        Greenwich phase lag (degrees); need not be normalized
    """
    symbol: str
    amplitude: float
    phase: float

    def __post_init__(self):
        if self.amplitude < 0.0:
            raise ValueError(
                f"Constituent {self.symbol}: amplitude must be >= 0, got {self.amplitude}"
            )


@dataclass(frozen=True)
class Station:
    """
    Tide station with its harmonic constants

    Attributes
    ----------
    id : str
        Station identifier
    name : str
        Display name
    lat, lon : float
        Coordinates (degrees)
    timezone : str
        IANA timezone name
    datum : str
        Vertical datum the heights refer to, e.g. ``'MLLW'``
    constituents : tuple of StationConstituent
        Harmonic constants; a symbol is expected at most once
    state, country : str, optional
        Administrative location
    harmonic_epoch : str, optional
        Epoch of the harmonic analysis, e.g. ``'1983-2001'``
    """
    id: str
    name: str
    lat: float
    lon: float
    timezone: str
    datum: str
    constituents: Tuple[StationConstituent, ...] = ()
    state: Optional[str] = None
    country: Optional[str] = None
    harmonic_epoch: Optional[str] = None

    def __post_init__(self):
        # accept lists from callers, keep the record hashable
        object.__setattr__(self, 'constituents', tuple(self.constituents))

    @property
    def label(self) -> str:
        return f"{self.name}, {self.state}" if self.state else self.name

    def amplitude(self, symbol: str) -> float:
        """Amplitude of a constituent, 0 when the station lacks it"""
        for c in self.constituents:
            if c.symbol == symbol:
                return c.amplitude
        return 0.0


def _parse_constituent(item) -> StationConstituent:
    if isinstance(item, Mapping):
        return StationConstituent(
            symbol=str(item['symbol']),
            amplitude=float(item['amplitude']),
            phase=float(item['phase']),
        )
    symbol, amplitude, phase = item
    return StationConstituent(str(symbol), float(amplitude), float(phase))


def station_from_dict(record: Mapping) -> Station:
    """
    Build a station from a plain mapping

    Constituents may be given as ``{'symbol', 'amplitude', 'phase'}``
    mappings or as ``[symbol, amplitude, phase]`` triples.
    """
    return Station(
        id=str(record['id']),
        name=record['name'],
        lat=float(record['lat']),
        lon=float(record['lon']),
        timezone=record['timezone'],
        datum=record['datum'],
        constituents=tuple(_parse_constituent(c) for c in record.get('constituents', ())),
        state=record.get('state'),
        country=record.get('country'),
        harmonic_epoch=record.get('harmonic_epoch'),
    )


def load_stations(path) -> Tuple[Station, ...]:
    """Load stations from a JSON array of station records"""
    with open(path, 'r', encoding='utf-8') as f:
        records = json.load(f)
    return tuple(station_from_dict(r) for r in records)


STATIONS: Tuple[Station, ...] = load_stations(_stations_file)
"""Sample stations."""


def get_station(station_id: str,
                stations: Optional[Iterable[Station]] = None) -> Station:
    """
    Look up a station by identifier

    Raises
    ------
    KeyError
        If no station has this identifier
    """
    for station in (STATIONS if stations is None else stations):
        if station.id == station_id:
            return station
    raise KeyError(f"Unknown station: {station_id}")


def station_options(stations: Optional[Sequence[Station]] = None) -> list[tuple[str, str]]:
    """(id, label) pairs for station pickers"""
    return [(s.id, s.label) for s in (STATIONS if stations is None else stations)]


# =============================================================================
# Tidal type classification
# =============================================================================

TIDAL_TYPES = {
    'semidiurnal': 'Semidiurnal (2 equal highs/day)',
    'mixed-semidiurnal': 'Mixed, mainly semidiurnal',
    'mixed-diurnal': 'Mixed, mainly diurnal',
    'diurnal': 'Diurnal (1 high/day)',
}


def form_factor(station: Station) -> float:
    """Form factor (K1 + O1) / (M2 + S2); denominator 1 when zero"""
    diurnal = station.amplitude('K1') + station.amplitude('O1')
    semidiurnal = station.amplitude('M2') + station.amplitude('S2')
    return diurnal / (semidiurnal or 1.0)


def tidal_type(station: Station) -> str:
    """
    Classify a station's tidal regime by its form factor

    Returns
    -------
    str
        ``'semidiurnal'`` (< 0.25), ``'mixed-semidiurnal'`` (< 1.5),
        ``'mixed-diurnal'`` (< 3.0) or ``'diurnal'``
    """
    ratio = form_factor(station)
    if ratio < 0.25:
        return 'semidiurnal'
    if ratio < 1.5:
        return 'mixed-semidiurnal'
    if ratio < 3.0:
        return 'mixed-diurnal'
    return 'diurnal'


def tidal_type_label(kind: str) -> str:
    return TIDAL_TYPES[kind]
