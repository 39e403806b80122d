"""
Tests for the rational polynomial evaluator and the AS 241 tables.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_normal.special.rational import (
    APPROXIMATIONS,
    CENTRAL_APPROXIMATION,
    RationalApproximation,
    Regime,
    rateval,
)


def test_rateval_constant_term_first() -> None:
    # (1 + 2x) / (1 + x) at x = 3
    assert rateval((1.0, 2.0), (1.0, 1.0), 3.0) == pytest.approx(7.0 / 4.0)


def test_rateval_uses_every_coefficient() -> None:
    # (1 + x^2) / 2 at x = 2
    assert rateval((1.0, 0.0, 1.0), (2.0,), 2.0) == pytest.approx(2.5)


def test_rateval_matches_numpy_polyval() -> None:
    a = (0.5, -1.0, 2.0, 0.25)
    b = (1.0, 0.1, 0.01)
    x = 1.7
    expected = np.polyval(a[::-1], x) / np.polyval(b[::-1], x)
    assert rateval(a, b, x) == pytest.approx(expected, rel=1e-14)


def test_rateval_is_elementwise_on_arrays() -> None:
    xs = np.array([-0.5, 0.0, 0.1, 0.18])
    approx = APPROXIMATIONS[Regime.CENTRAL]
    result = rateval(approx.numerator, approx.denominator, xs)

    assert result.shape == xs.shape
    for x, value in zip(xs, result, strict=True):
        assert value == pytest.approx(
            rateval(approx.numerator, approx.denominator, float(x)), rel=1e-15
        )


@pytest.mark.parametrize("regime", list(Regime))
def test_tables_have_eight_terms(regime: Regime) -> None:
    approx = APPROXIMATIONS[regime]
    assert len(approx.numerator) == 8
    assert len(approx.denominator) == 8
    assert approx.denominator[0] == 1.0


def test_approximation_call_delegates_to_rateval() -> None:
    x = 0.05
    assert CENTRAL_APPROXIMATION(x) == rateval(
        CENTRAL_APPROXIMATION.numerator, CENTRAL_APPROXIMATION.denominator, x
    )


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        APPROXIMATIONS[Regime.TAIL] = RationalApproximation((1.0,), (1.0,))  # type: ignore[index]
    with pytest.raises(AttributeError):
        CENTRAL_APPROXIMATION.numerator = (1.0,)  # type: ignore[misc]
