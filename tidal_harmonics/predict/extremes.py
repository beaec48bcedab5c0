"""
High and low water detection

Identifies local maxima/minima in a predicted series. A point is an
extremum only when it is strictly above (high) or strictly below (low)
both of its immediate neighbours, so plateaus and monotonic runs produce
nothing: a flat-bottomed trough yields no low water.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import NamedTuple, Sequence

import numpy as np
from scipy.signal import argrelextrema

from .harmonic import TidePrediction

__all__ = ['TideExtreme', 'find_extremes']

logger = logging.getLogger(__name__)


class TideExtreme(NamedTuple):
    """High or low water at one instant"""
    time: datetime
    height: float
    type: str


def find_extremes(series: Sequence[TidePrediction]) -> list[TideExtreme]:
    """
    Extract high and low waters from a prediction series

    Compares every interior point with its left and right neighbours
    using :func:`scipy.signal.argrelextrema` with ``order=1``; edge points
    are never extrema.

    Parameters
    ----------
    series : sequence of TidePrediction
        Time-ascending predictions

    Returns
    -------
    list of TideExtreme
        Extremes in time order; empty for fewer than 3 points
    """
    if len(series) < 3:
        return []

    heights = np.array([p.height for p in series], dtype=np.float64)

    hw_idx = argrelextrema(heights, np.greater, order=1)[0]
    lw_idx = argrelextrema(heights, np.less, order=1)[0]

    extremes = [(i, 'high') for i in hw_idx] + [(i, 'low') for i in lw_idx]
    extremes.sort()

    logger.debug('Extrema extraction: %d HW, %d LW over %d points.',
                 len(hw_idx), len(lw_idx), len(heights))

    return [
        TideExtreme(time=series[i].time, height=series[i].height, type=kind)
        for i, kind in extremes
    ]
