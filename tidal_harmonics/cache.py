"""
tidal_harmonics.cache - In-process cache for prediction series

Series generation is the expensive path (one set of astronomical
parameters per timestamp), and interactive callers tend to ask for the
same window repeatedly. Complete series are kept in a bounded LRU keyed on
``(station, start_ms, end_ms, step_ms)``.

Configuration via environment variables (read once at import):

- ``TIDAL_HARMONICS_CACHE_DISABLED``: ``1``, ``true`` or ``yes`` disables
  the cache
- ``TIDAL_HARMONICS_CACHE_SIZE``: maximum number of cached series
  (default 128)

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import logging
import os
import threading
import warnings
from collections import OrderedDict
from contextlib import contextmanager
from typing import Hashable, Optional, Sequence

__all__ = [
    # Context managers
    'cache_disabled',
    # Enable/disable
    'enable_cache',
    'disable_cache',
    'is_cache_enabled',
    # Cache operations
    'clear_cache',
    # Status
    'get_cache_info',
    'show_cache_status',
]

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 128


# =============================================================================
# Global State
# =============================================================================

class _CacheState:
    """Thread-safe cache state manager."""

    def __init__(self):
        self._lock = threading.Lock()
        self._global_enabled = True
        self._max_size = DEFAULT_CACHE_SIZE
        self._entries: OrderedDict[Hashable, tuple] = OrderedDict()
        self._hits = 0
        self._misses = 0

        # Read environment variables
        self._init_from_env()

    def _init_from_env(self):
        """Initialize state from environment variables."""
        # TIDAL_HARMONICS_CACHE_DISABLED
        disabled = os.environ.get('TIDAL_HARMONICS_CACHE_DISABLED', '').lower()
        if disabled in ('1', 'true', 'yes'):
            self._global_enabled = False

        # TIDAL_HARMONICS_CACHE_SIZE
        size = os.environ.get('TIDAL_HARMONICS_CACHE_SIZE', '').strip()
        if size:
            try:
                value = int(size)
                if value < 0:
                    raise ValueError(size)
            except ValueError:
                warnings.warn(
                    f"Invalid TIDAL_HARMONICS_CACHE_SIZE '{size}'; "
                    f"using default of {DEFAULT_CACHE_SIZE}.",
                    RuntimeWarning,
                    stacklevel=2
                )
            else:
                self._max_size = value

    @property
    def global_enabled(self) -> bool:
        with self._lock:
            return self._global_enabled

    @global_enabled.setter
    def global_enabled(self, value: bool):
        with self._lock:
            self._global_enabled = value

    @property
    def max_size(self) -> int:
        with self._lock:
            return self._max_size

    def get(self, key: Hashable) -> Optional[tuple]:
        with self._lock:
            if not self._global_enabled:
                return None
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return value

    def put(self, key: Hashable, value: tuple):
        with self._lock:
            if not self._global_enabled or self._max_size == 0:
                return
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_size:
                self._entries.popitem(last=False)

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            return count

    def info(self) -> dict:
        with self._lock:
            return {
                'enabled': self._global_enabled,
                'size': len(self._entries),
                'max_size': self._max_size,
                'hits': self._hits,
                'misses': self._misses,
            }


# Global state instance
_state = _CacheState()


# =============================================================================
# Enable/Disable Functions
# =============================================================================

def enable_cache() -> None:
    """Enable the series cache."""
    _state.global_enabled = True


def disable_cache() -> None:
    """Disable the series cache; stored entries are kept."""
    _state.global_enabled = False


def is_cache_enabled() -> bool:
    """Check if the series cache is enabled.

    Returns
    -------
    bool
        True if caching is enabled
    """
    return _state.global_enabled


# =============================================================================
# Context Managers
# =============================================================================

@contextmanager
def cache_disabled():
    """Context manager to temporarily disable the series cache.

    Example
    -------
    >>> with cache_disabled():
    ...     series = predict_tide_series(station, start, end)  # No caching
    """
    prev_state = _state.global_enabled
    _state.global_enabled = False
    try:
        yield
    finally:
        _state.global_enabled = prev_state


# =============================================================================
# Cache Operations
# =============================================================================

def lookup_series(key: Hashable) -> Optional[list]:
    """Cached series for ``key`` as a new list, or None."""
    value = _state.get(key)
    if value is None:
        return None
    logger.debug('Series cache hit: %s', key[1:])
    return list(value)


def store_series(key: Hashable, series: Sequence) -> None:
    _state.put(key, tuple(series))


def clear_cache() -> int:
    """Drop all cached series and reset the counters.

    Returns
    -------
    int
        Number of entries removed
    """
    return _state.clear()


# =============================================================================
# Status Functions
# =============================================================================

def get_cache_info() -> dict:
    """Get cache statistics.

    Returns
    -------
    dict
        ``enabled``, ``size``, ``max_size``, ``hits`` and ``misses``
    """
    return _state.info()


def show_cache_status() -> None:
    """Print cache status to stdout."""
    info = get_cache_info()

    print(f"{'Entries':<10} {'Max':>6} {'Hits':>8} {'Misses':>8}")
    print("-" * 36)
    print(f"{info['size']:<10} {info['max_size']:>6} {info['hits']:>8} {info['misses']:>8}")
    print()
    print(f"Cache enabled: {info['enabled']}")
