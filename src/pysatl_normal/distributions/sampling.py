"""
Sampling Containers
===================

This module defines the protocol and array-backed implementation for draws
returned by :meth:`NormalDistribution.sample`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_normal.errors import DistributionError, ErrorKind

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    from pysatl_normal.types import FloatArray


class Sample(Protocol):
    """
    Protocol for univariate sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        One-dimensional array of draws.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> FloatArray: ...


class ArraySample:
    """
    Array-backed univariate sample.

    Parameters
    ----------
    data : numpy.ndarray
        One-dimensional floating-point array of shape ``(n,)``.

    Raises
    ------
    DistributionError
        With kind ``LENGTH_MISMATCH`` if data is not one-dimensional.

    Notes
    -----
    Instances convert to arrays through ``numpy.asarray`` and can therefore be
    passed straight to :func:`fit_normal` or
    :meth:`NormalDistribution.log_likelihood`.
    """

    data: FloatArray

    def __init__(self, data: FloatArray) -> None:
        if data.ndim != 1:
            raise DistributionError(
                ErrorKind.LENGTH_MISMATCH,
                f"ArraySample expects a 1D array, got shape {data.shape}",
            )
        self.data = data

    def __len__(self) -> int:
        """Return the number of draws."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[float]:
        """Iterate over draws as Python floats."""
        for value in self.data:
            yield float(value)

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> FloatArray:
        """
        Return the draws as an array.

        ``copy=True`` always yields a new buffer; ``copy=False`` refuses a
        dtype conversion, which cannot be done without copying.
        """
        target = self.data.dtype if dtype is None else np.dtype(dtype)
        if copy:
            return self.data.astype(target, copy=True)
        if target == self.data.dtype:
            return self.data
        if copy is False:
            raise ValueError(
                f"Cannot convert sample of {self.data.dtype} to {target} without a copy"
            )
        return self.data.astype(target)

    @property
    def array(self) -> FloatArray:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int]:
        """Return the shape of the sample array ``(n,)``."""
        return (len(self),)
