"""
tidal_harmonics.predict - Tide prediction module

Provides functions for:
- Harmonic synthesis (vectorised over time)
- High/low water detection
- Spring/neap and lunar phase indicators

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from .extremes import (
    TideExtreme,
    find_extremes,
)
from .harmonic import (
    ConstituentContribution,
    HarmonicTerms,
    TidePrediction,
    constituent_terms,
    synthesize,
)
from .indicators import (
    lunar_phase,
    spring_neap_indicator,
)

__all__ = [
    # Synthesis
    'ConstituentContribution',
    'HarmonicTerms',
    'TidePrediction',
    'constituent_terms',
    'synthesize',
    # Extremes
    'TideExtreme',
    'find_extremes',
    # Indicators
    'lunar_phase',
    'spring_neap_indicator',
]
