"""
Parameterization classes and constraints.

This module provides the abstractions for defining different parameterizations
of a distribution, including constraint validation and conversion to the base
parametrization.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_normal.errors import DistributionError, ErrorKind

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_normal.types import ParametrizationName


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Subclasses are turned into frozen dataclasses and registered under a name
    by the :func:`parametrization` decorator.
    """

    # These attributes are set by the @parametrization decorator
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        fields = getattr(self, "__dataclass_fields__", {})
        return {f: getattr(self, f) for f in fields}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        DistributionError
            With kind ``INVALID_PARAMETER`` if any constraint is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise DistributionError(
                    ErrorKind.INVALID_PARAMETER,
                    f'Constraint "{constraint.description}" does not hold for {self.parameters}',
                )

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert this parametrization to the base parametrization.

        Notes
        -----
        Base implementation returns self. Subclasses override it when the
        parameters differ from the base ones.
        """
        return self


_REGISTERED: dict[ParametrizationName, type[Parametrization]] = {}


def get_parametrization(name: ParametrizationName) -> type[Parametrization]:
    """
    Look up a registered parametrization class.

    Raises
    ------
    DistributionError
        With kind ``INVALID_PARAMETER`` if no parametrization has this name.
    """
    if name not in _REGISTERED:
        raise DistributionError(
            ErrorKind.INVALID_PARAMETER,
            f"Unknown parametrization '{name}'; available: {sorted(_REGISTERED)}",
        )
    return _REGISTERED[name]


def registered_parametrizations() -> list[ParametrizationName]:
    """Names of all registered parametrizations in registration order."""
    return list(_REGISTERED)


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool. It is marked
    with ``__is_constraint`` and ``__constraint_description`` attributes.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def parametrization(*, name: str) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as a named parametrization.

    Parameters
    ----------
    name : str
        Name of the parametrization.

    Notes
    -----
    Converts the class to a frozen dataclass if it is not one already, and
    collects the methods marked with :func:`constraint`.
    """

    def _collect_constraints(
        cls: type[Parametrization],
    ) -> list[ParametrizationConstraint]:
        constraints: list[ParametrizationConstraint] = []
        for attr_name, attr in cls.__dict__.items():
            if isinstance(attr, (staticmethod, classmethod)):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(f"@constraint '{attr_name}' must be an instance method")
                continue

            func = attr if isfunction(attr) else None
            if func is not None and getattr(func, "__is_constraint", False):
                desc = getattr(func, "__constraint_description", func.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=func))
        return constraints

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if name in _REGISTERED:
            raise ValueError(f"Parametrization '{name}' is already registered")
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        _REGISTERED[name] = cls
        return cls

    return decorator
