"""
Standard Normal Quantile
========================

Inverse of the standard normal CDF computed with the three-regime rational
approximation of AS 241. Accuracy is about 1e-16 relative over the whole
open interval ``(0, 1)``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, overload

import numpy as np

from pysatl_normal.errors import DistributionError, ErrorKind
from pysatl_normal.special.rational import APPROXIMATIONS, Regime

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pysatl_normal.types import FloatArray, Number

CENTRAL_HALF_WIDTH = 0.425
"""Largest ``|p - 0.5|`` handled by the central regime."""

CENTRAL_OFFSET = 0.180625
"""``CENTRAL_HALF_WIDTH ** 2``; central argument is ``CENTRAL_OFFSET - q**2``."""

INTERMEDIATE_SHIFT = 1.6
TAIL_SPLIT = 5.0
"""Largest ``r = sqrt(-log(min(p, 1 - p)))`` handled by the intermediate regime."""


def check_probability(p: ArrayLike) -> FloatArray:
    """
    Convert ``p`` to a float array and ensure every element lies in ``[0, 1]``.

    Raises
    ------
    DistributionError
        With kind ``INVALID_PROBABILITY`` if any element is outside
        ``[0, 1]`` or NaN.
    """
    arr = np.asarray(p, dtype=np.float64)
    if not np.all((arr >= 0.0) & (arr <= 1.0)):
        raise DistributionError(
            ErrorKind.INVALID_PROBABILITY, f"Probability must be in [0, 1], got {p!r}"
        )
    return arr


def _central(q: FloatArray) -> FloatArray:
    return q * APPROXIMATIONS[Regime.CENTRAL](CENTRAL_OFFSET - q * q)


def _tails(p: FloatArray) -> FloatArray:
    pp = np.where(p < 0.5, p, 1.0 - p)
    r = np.sqrt(-np.log(pp))

    x = np.empty_like(r)
    intermediate = r <= TAIL_SPLIT
    x[intermediate] = APPROXIMATIONS[Regime.INTERMEDIATE](r[intermediate] - INTERMEDIATE_SHIFT)
    tail = ~intermediate
    x[tail] = APPROXIMATIONS[Regime.TAIL](r[tail] - TAIL_SPLIT)

    return np.where(p < 0.5, -x, x)


@overload
def standard_normal_ppf(p: Number) -> float: ...
@overload
def standard_normal_ppf(p: ArrayLike) -> float | FloatArray: ...


def standard_normal_ppf(p: ArrayLike) -> float | FloatArray:
    """
    Quantile function of the standard normal distribution.

    Parameters
    ----------
    p : float or array_like
        Probabilities from ``[0, 1]``.

    Returns
    -------
    float or numpy.ndarray
        ``z`` such that ``Phi(z) = p``; a float for scalar input, otherwise an
        array of the input shape. ``p = 0`` maps to ``-inf`` and ``p = 1`` to
        ``+inf``.

    Raises
    ------
    DistributionError
        With kind ``INVALID_PROBABILITY`` if any element is outside ``[0, 1]``.

    Notes
    -----
    Each element is routed independently:

    1. ``|p - 0.5| <= 0.425`` uses the central table at ``0.180625 - (p - 0.5)**2``;
    2. otherwise ``r = sqrt(-log(min(p, 1 - p)))`` selects the intermediate
       table (``r <= 5``, evaluated at ``r - 1.6``) or the tail table
       (evaluated at ``r - 5``), and the sign follows ``p - 0.5``.
    """
    arr = check_probability(p)
    flat = arr.reshape(-1)
    z = np.empty_like(flat)

    lower = flat == 0.0
    upper = flat == 1.0
    dp = flat - 0.5
    central = np.abs(dp) <= CENTRAL_HALF_WIDTH
    tails = ~(central | lower | upper)

    z[central] = _central(dp[central])
    if np.any(tails):
        z[tails] = _tails(flat[tails])
    z[lower] = -math.inf
    z[upper] = math.inf

    if arr.ndim == 0:
        return float(z[0])
    return z.reshape(arr.shape)


__all__ = [
    "CENTRAL_HALF_WIDTH",
    "CENTRAL_OFFSET",
    "INTERMEDIATE_SHIFT",
    "TAIL_SPLIT",
    "check_probability",
    "standard_normal_ppf",
]
