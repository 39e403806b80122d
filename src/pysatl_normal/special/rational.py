"""
Rational Polynomial Approximations
==================================

Horner evaluation of ``P(x) / Q(x)`` and the minimax coefficient tables of
Wichura's algorithm AS 241 (PPND16) for the standard normal quantile.

Coefficient index 0 is the constant term, index ``n - 1`` the leading one.
The tables are split by :class:`Regime`:

- ``CENTRAL`` for ``|p - 0.5| <= 0.425``, evaluated at ``0.180625 - q**2``;
- ``INTERMEDIATE`` for ``r = sqrt(-log(min(p, 1 - p))) <= 5``, at ``r - 1.6``;
- ``TAIL`` for ``r > 5``, at ``r - 5``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from pysatl_normal.types import FloatArray


class Regime(StrEnum):
    """Approximation regimes of the standard normal quantile."""

    CENTRAL = "central"
    INTERMEDIATE = "intermediate"
    TAIL = "tail"


@dataclass(frozen=True, slots=True)
class RationalApproximation:
    """
    Numerator and denominator coefficients of a rational approximation.

    Parameters
    ----------
    numerator : tuple[float, ...]
        Coefficients of ``P`` in increasing degree.
    denominator : tuple[float, ...]
        Coefficients of ``Q`` in increasing degree.
    """

    numerator: tuple[float, ...]
    denominator: tuple[float, ...]

    @overload
    def __call__(self, x: float) -> float: ...
    @overload
    def __call__(self, x: FloatArray) -> FloatArray: ...

    def __call__(self, x: float | FloatArray) -> float | FloatArray:
        """Evaluate ``P(x) / Q(x)``."""
        return rateval(self.numerator, self.denominator, x)


@overload
def rateval(numerator: Sequence[float], denominator: Sequence[float], x: float) -> float: ...
@overload
def rateval(
    numerator: Sequence[float], denominator: Sequence[float], x: FloatArray
) -> FloatArray: ...


def rateval(
    numerator: Sequence[float], denominator: Sequence[float], x: float | FloatArray
) -> float | FloatArray:
    """
    Evaluate a ratio of polynomials with Horner's method.

    Parameters
    ----------
    numerator : Sequence[float]
        Coefficients of ``P``; index 0 is the constant term.
    denominator : Sequence[float]
        Coefficients of ``Q``; index 0 is the constant term.
    x : float or numpy.ndarray
        Evaluation point(s). Arrays are evaluated element-wise.

    Returns
    -------
    float or numpy.ndarray
        ``P(x) / Q(x)``.

    Notes
    -----
    Both polynomials are accumulated from the leading coefficient down to the
    constant term. ``Q`` must not vanish at ``x``; the AS 241 tables guarantee
    this over their regime.
    """
    u = numerator[-1]
    for coefficient in reversed(numerator[:-1]):
        u = x * u + coefficient

    v = denominator[-1]
    for coefficient in reversed(denominator[:-1]):
        v = x * v + coefficient

    return u / v


# Wichura, M. J. (1988). Algorithm AS 241: The percentage points of the normal
# distribution. Applied Statistics, 37, 477-484.
CENTRAL_APPROXIMATION = RationalApproximation(
    numerator=(
        3.387132872796366608,
        133.14166789178437745,
        1971.5909503065514427,
        13731.693765509461125,
        45921.953931549871457,
        67265.770927008700853,
        33430.575583588128105,
        2509.0809287301226727,
    ),
    denominator=(
        1.0,
        42.313330701600911252,
        687.1870074920579083,
        5394.1960214247511077,
        21213.794301586595867,
        39307.89580009271061,
        28729.085735721942674,
        5226.495278852854561,
    ),
)

INTERMEDIATE_APPROXIMATION = RationalApproximation(
    numerator=(
        1.42343711074968357734,
        4.6303378461565452959,
        5.7694972214606914055,
        3.64784832476320460504,
        1.27045825245236838258,
        0.24178072517745061177,
        0.0227238449892691845833,
        7.7454501427834140764e-4,
    ),
    denominator=(
        1.0,
        2.05319162663775882187,
        1.6763848301838038494,
        0.68976733498510000455,
        0.14810397642748007459,
        0.0151986665636164571966,
        5.475938084995344946e-4,
        1.05075007164441684324e-9,
    ),
)

TAIL_APPROXIMATION = RationalApproximation(
    numerator=(
        6.6579046435011037772,
        5.4637849111641143699,
        1.7848265399172913358,
        0.29656057182850489123,
        0.026532189526576123093,
        0.0012426609473880784386,
        2.71155556874348757815e-5,
        2.01033439929228813265e-7,
    ),
    denominator=(
        1.0,
        0.59983220655588793769,
        0.13692988092273580531,
        0.0148753612908506148525,
        7.868691311456132591e-4,
        1.8463183175100546818e-5,
        1.4215117583164458887e-7,
        2.04426310338993978564e-15,
    ),
)

APPROXIMATIONS: Mapping[Regime, RationalApproximation] = MappingProxyType(
    {
        Regime.CENTRAL: CENTRAL_APPROXIMATION,
        Regime.INTERMEDIATE: INTERMEDIATE_APPROXIMATION,
        Regime.TAIL: TAIL_APPROXIMATION,
    }
)
"""Read-only lookup of the AS 241 tables by regime."""
