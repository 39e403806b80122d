"""
Distribution Interfaces
=======================

This module defines the public protocols implemented by distributions:

- :class:`Distribution` – characteristic lookup by name.
- :class:`ParametrizedDistribution` – the marshaled-parameter convention used
  by generic fitting and optimisation code, which treats any distribution as a
  fixed-length vector of parameters plus a name-to-index map.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

from pysatl_normal.errors import DistributionError, ErrorKind

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_normal.distributions.computation import AnalyticalComputation
    from pysatl_normal.types import FloatArray, GenericCharacteristicName, NumericSequence


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface: analytical characteristics by name."""

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        computations = self.analytical_computations
        if characteristic_name not in computations:
            raise DistributionError(
                ErrorKind.UNKNOWN_CHARACTERISTIC,
                f"No analytical computation for '{characteristic_name}'",
            )
        return computations[characteristic_name]

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)


@runtime_checkable
class ParametrizedDistribution(Protocol):
    """Distribution whose parameters marshal to a fixed-length vector."""

    @property
    def num_parameters(self) -> int: ...

    def parameter_map(self) -> Mapping[str, int]: ...

    def marshal_parameters(self, out: FloatArray | None = None) -> FloatArray: ...

    def unmarshal_parameters(self, values: NumericSequence) -> Self: ...


def check_buffer_length(buffer: NumericSequence, expected: int, what: str) -> None:
    """
    Ensure a caller-provided buffer has exactly ``expected`` elements.

    Raises
    ------
    DistributionError
        With kind ``LENGTH_MISMATCH`` otherwise.
    """
    if len(buffer) != expected:
        raise DistributionError(
            ErrorKind.LENGTH_MISMATCH,
            f"{what} must have length {expected}, got {len(buffer)}",
        )
