"""
Core Type Definitions
=====================

Numeric aliases and characteristic names shared across PySATL Normal.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Sequence
from enum import StrEnum
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.float64]
"""Type alias for double precision arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

NumericSequence = Sequence[float] | NumericArray
"""Type alias for one-dimensional inputs such as samples and weights."""

GenericCharacteristicName: TypeAlias = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

ParametrizationName: TypeAlias = str
"""Type alias for parametrization names."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""


class CharacteristicName(StrEnum):
    """
    Enumeration of statistical distribution characteristics.

    Names used by :meth:`NormalDistribution.query_method` to look up the
    analytical implementation of a characteristic.
    """

    PDF = "pdf"
    LOG_PDF = "logpdf"
    CDF = "cdf"
    SF = "sf"
    PPF = "ppf"
    MEAN = "mean"
    MEDIAN = "median"
    MODE = "mode"
    VAR = "var"
    STD = "std"
    SKEW = "skewness"
    KURT = "kurtosis"
    ENTROPY = "entropy"


__all__ = [
    "NumPyNumber",
    "Number",
    "NumericArray",
    "FloatArray",
    "BoolArray",
    "NumericSequence",
    "GenericCharacteristicName",
    "ParametrizationName",
    "ScalarFunc",
    "CharacteristicName",
]
