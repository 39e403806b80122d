"""
Common fixtures and helpers for distribution tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from collections.abc import Callable
from typing import Any

import numpy as np

PROBABILITY_GRID = np.array(
    [1e-300, 1e-100, 1e-20, 1e-8, 1e-3, 0.02, 0.075, 0.1, 0.3, 0.5, 0.7, 0.925, 0.99, 1 - 1e-10]
)
"""Probabilities covering the central, intermediate and extreme-tail regimes."""


class BaseDistributionTest:
    """Base class for distribution tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))

    @staticmethod
    def central_difference(f: Callable[[float], float], x: float, h: float = 1e-6) -> float:
        """Two-point central difference approximation of ``f'(x)``."""
        return (f(x + h) - f(x - h)) / (2 * h)
