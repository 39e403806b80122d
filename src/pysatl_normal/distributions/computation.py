"""
Analytical Computations
=======================

:class:`AnalyticalComputation` binds a characteristic name (``"pdf"``,
``"ppf"``, ...) to the closed-form callable a distribution provides for it.
Distributions expose a mapping of these objects so that generic code can look
characteristics up by name instead of by method.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from mypy_extensions import KwArg

from pysatl_normal.types import GenericCharacteristicName

In = TypeVar("In")
Out = TypeVar("Out")


@dataclass(frozen=True, slots=True)
class AnalyticalComputation(Generic[In, Out]):
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.

    Notes
    -----
    Moment-like characteristics ignore their argument; call them with
    ``None``.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)
