"""
Random Sources
==============

Distributions borrow a :class:`numpy.random.Generator` supplied at
construction. When none is supplied they fall back to one process-wide
generator, built lazily on first use and cached.

Notes
-----
``numpy.random.Generator`` is not thread-safe. Callers that share a generator
(including the default one) between threads must synchronise draws
themselves.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

import numpy as np


@lru_cache(maxsize=1)
def default_generator() -> np.random.Generator:
    """
    Process-wide fallback generator.

    Returns
    -------
    numpy.random.Generator
        The same instance on every call until :func:`reset_default_generator`.
    """
    return np.random.default_rng()


def reset_default_generator() -> None:
    """
    Drop the cached default generator; the next call builds a fresh one.
    """
    default_generator.cache_clear()


def resolve_generator(rng: np.random.Generator | None) -> np.random.Generator:
    """Return ``rng`` if given, else the process-wide default."""
    return default_generator() if rng is None else rng
