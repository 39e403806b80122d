"""
Weighted Summary Statistics
===========================

Weighted mean and central moments over one-dimensional samples. Weights are
relative; ``None`` or an empty sequence means every sample has weight one.
Moments are in the population form ``sum(w * (x - mean)**k) / sum(w)``
(no Bessel correction).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_normal.errors import DistributionError, ErrorKind

if TYPE_CHECKING:
    from pysatl_normal.types import FloatArray, NumericSequence


def as_samples(
    x: NumericSequence, weights: NumericSequence | None = None
) -> tuple[FloatArray, FloatArray | None]:
    """
    Convert samples and optional weights to 1D float arrays.

    Empty ``weights`` are treated as missing, giving unweighted samples.

    Raises
    ------
    DistributionError
        With kind ``LENGTH_MISMATCH`` if the inputs are not one-dimensional or
        ``weights`` does not match ``x`` in length.
    """
    xs = np.asarray(x, dtype=np.float64)
    if xs.ndim != 1:
        raise DistributionError(
            ErrorKind.LENGTH_MISMATCH, f"Samples must be one-dimensional, got shape {xs.shape}"
        )
    if weights is None:
        return xs, None

    ws = np.asarray(weights, dtype=np.float64)
    if ws.size == 0:
        return xs, None
    if ws.shape != xs.shape:
        raise DistributionError(
            ErrorKind.LENGTH_MISMATCH,
            f"Weights length {ws.size} does not match samples length {xs.size}",
        )
    return xs, ws


def total_weight(x: NumericSequence, weights: NumericSequence | None = None) -> float:
    """Sum of weights, or the number of samples when unweighted."""
    xs, ws = as_samples(x, weights)
    if ws is None:
        return float(xs.size)
    return float(np.sum(ws))


def weighted_mean(x: NumericSequence, weights: NumericSequence | None = None) -> float:
    """
    Weighted arithmetic mean.

    Parameters
    ----------
    x : Sequence[float] or numpy.ndarray
        Samples.
    weights : Sequence[float] or numpy.ndarray, optional
        Relative weights parallel to ``x``.

    Returns
    -------
    float
        ``sum(w * x) / sum(w)``.
    """
    xs, ws = as_samples(x, weights)
    return float(np.average(xs, weights=ws))


def weighted_moment(
    order: int, x: NumericSequence, mean: float, weights: NumericSequence | None = None
) -> float:
    """
    Weighted central moment of the given order around ``mean``.

    Parameters
    ----------
    order : int
        Moment order ``k``.
    x : Sequence[float] or numpy.ndarray
        Samples.
    mean : float
        Centre of the moment, usually :func:`weighted_mean` of ``x``.
    weights : Sequence[float] or numpy.ndarray, optional
        Relative weights parallel to ``x``.

    Returns
    -------
    float
        ``sum(w * (x - mean)**k) / sum(w)``.
    """
    xs, ws = as_samples(x, weights)
    return float(np.average((xs - mean) ** order, weights=ws))
