"""
Tests for conjugate-prior fitting of the normal distribution.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_normal.distributions import (
    NormalDistribution,
    NormalFit,
    PriorSufficientStatistics,
    fit_normal,
)
from pysatl_normal.errors import DistributionError, ErrorKind


class TestFitWithoutPrior:
    def test_unweighted_population_variance(self) -> None:
        fit = fit_normal([1.0, 2.0, 3.0])

        assert isinstance(fit, NormalFit)
        assert fit.distribution.mu == pytest.approx(2.0)
        assert fit.distribution.sigma == pytest.approx(math.sqrt(2.0 / 3.0))
        assert fit.distribution.var() == pytest.approx(2.0 / 3.0)

    def test_updated_prior_reports_sample_weight(self) -> None:
        fit = fit_normal([1.0, 2.0, 3.0])

        assert fit.prior.value == pytest.approx((2.0, math.sqrt(2.0 / 3.0)))
        assert fit.prior.weight == (3.0, 3.0)

    def test_weighted(self) -> None:
        fit = fit_normal([1.0, 2.0, 3.0], [1.0, 1.0, 2.0])

        assert fit.distribution.mu == pytest.approx(2.25)
        assert fit.distribution.sigma == pytest.approx(math.sqrt(0.6875))
        assert fit.prior.weight == (4.0, 4.0)

    def test_integer_weights_match_repeated_samples(self) -> None:
        weighted = fit_normal(np.array([1.0, 2.0, 3.0]), np.array([1.0, 1.0, 2.0]))
        repeated = fit_normal([1.0, 2.0, 3.0, 3.0])

        assert weighted.distribution.mu == pytest.approx(repeated.distribution.mu)
        assert weighted.distribution.sigma == pytest.approx(repeated.distribution.sigma)

    def test_recovers_parameters_of_large_sample(self) -> None:
        source = NormalDistribution(mu=-3.0, sigma=0.5, rng=np.random.default_rng(7))
        fit = fit_normal(source.sample(200_000))

        assert fit.distribution.mu == pytest.approx(-3.0, abs=0.01)
        assert fit.distribution.sigma == pytest.approx(0.5, abs=0.01)

    def test_random_source_is_passed_to_fitted_distribution(self) -> None:
        rng = np.random.default_rng(3)
        fit = fit_normal([0.0, 1.0], rng=rng)
        assert fit.distribution.rng is rng

    def test_classmethod_delegates(self) -> None:
        assert NormalDistribution.fit([1.0, 2.0, 3.0]) == fit_normal([1.0, 2.0, 3.0])

    @pytest.mark.parametrize("weights", [[], np.array([])])
    def test_empty_weights_mean_unweighted(self, weights: object) -> None:
        fit = fit_normal([1.0, 2.0, 3.0], weights)  # type: ignore[arg-type]

        assert fit.distribution.mu == pytest.approx(2.0)
        assert fit.distribution.sigma == pytest.approx(math.sqrt(2.0 / 3.0))
        assert fit.prior.weight == (3.0, 3.0)

    def test_weights_length_mismatch(self) -> None:
        with pytest.raises(DistributionError) as exc_info:
            fit_normal([1.0, 2.0, 3.0], [1.0, 1.0])
        assert exc_info.value.kind is ErrorKind.LENGTH_MISMATCH

    @pytest.mark.parametrize(
        "samples, weights",
        [
            ([], None),
            ([1.0, 2.0], [0.0, 0.0]),
            ([4.0], None),
            ([4.0, 4.0, 4.0], None),
        ],
    )
    def test_degenerate_inputs(self, samples: list[float], weights: list[float] | None) -> None:
        with pytest.raises(DistributionError) as exc_info:
            fit_normal(samples, weights)
        assert exc_info.value.kind is ErrorKind.DEGENERATE_FIT


class TestFitWithPrior:
    def test_golden_single_sample(self) -> None:
        prior = PriorSufficientStatistics(value=(0.0, 1.0), weight=(1.0, 1.0))
        fit = fit_normal([5.0], [1.0], prior)

        # total variance: 0 * 1 + 1 * 1**2 + 1 * 1 * (5 - 0)**2 / 2 = 13.5
        assert fit.distribution.mu == pytest.approx(2.5, rel=1e-15)
        assert fit.distribution.sigma == pytest.approx(math.sqrt(13.5 / 2.0), rel=1e-15)
        assert fit.prior.value == pytest.approx((2.5, math.sqrt(6.75)), rel=1e-15)
        assert fit.prior.weight == (2.0, 2.0)

    def test_sequential_fit_matches_pooled_fit(self) -> None:
        first = fit_normal([1.0, 2.0, 3.0])
        second = fit_normal([4.0, 5.0, 6.0], prior=first.prior)
        pooled = fit_normal([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])

        assert second.distribution.mu == pytest.approx(pooled.distribution.mu)
        assert second.distribution.sigma == pytest.approx(pooled.distribution.sigma)
        assert second.prior.weight == (6.0, 6.0)

    def test_mean_only_prior(self) -> None:
        prior = PriorSufficientStatistics(value=(0.0,), weight=(1.0,))
        fit = fit_normal([5.0, 7.0], prior=prior)

        # mean: (6 * 2 + 0 * 1) / 3; variance: (1 * 2 + 1 * 2 * 36 / 3) / 3
        assert fit.distribution.mu == pytest.approx(4.0)
        assert fit.distribution.sigma == pytest.approx(math.sqrt(26.0 / 3.0))
        assert fit.prior.weight == (3.0, 2.0)

    def test_prior_weights_shift_the_mean(self) -> None:
        weak = PriorSufficientStatistics(value=(10.0, 1.0), weight=(0.1, 0.1))
        strong = PriorSufficientStatistics(value=(10.0, 1.0), weight=(100.0, 100.0))
        samples = [0.0, 1.0, 2.0]

        assert fit_normal(samples, prior=weak).distribution.mu < 2.0
        assert fit_normal(samples, prior=strong).distribution.mu > 9.0

    def test_empty_samples_fall_back_to_prior(self) -> None:
        prior = PriorSufficientStatistics(value=(3.0, 2.0), weight=(4.0, 4.0))
        with pytest.warns(UserWarning, match="prior alone"):
            fit = fit_normal([], prior=prior)

        assert fit.distribution.mu == pytest.approx(3.0)
        assert fit.distribution.sigma == pytest.approx(2.0)
        assert fit.prior.weight == (4.0, 4.0)

    def test_mean_only_prior_without_samples_is_degenerate(self) -> None:
        prior = PriorSufficientStatistics(value=(3.0,), weight=(4.0,))
        with pytest.warns(UserWarning), pytest.raises(DistributionError) as exc_info:
            fit_normal([], prior=prior)
        assert exc_info.value.kind is ErrorKind.DEGENERATE_FIT


class TestPriorSufficientStatistics:
    def test_values_are_stored_as_float_tuples(self) -> None:
        prior = PriorSufficientStatistics(value=[1, 2], weight=np.array([3, 4]))  # type: ignore[arg-type]

        assert prior.value == (1.0, 2.0)
        assert prior.weight == (3.0, 4.0)
        assert prior.mean == 1.0
        assert prior.mean_weight == 3.0
        assert prior.has_scale

    @pytest.mark.parametrize(
        "value, weight",
        [
            ((0.0, 1.0), (1.0,)),
            ((), ()),
            ((0.0, 1.0, 2.0), (1.0, 1.0, 1.0)),
        ],
    )
    def test_rejects_malformed(self, value: tuple[float, ...], weight: tuple[float, ...]) -> None:
        with pytest.raises(DistributionError) as exc_info:
            PriorSufficientStatistics(value=value, weight=weight)
        assert exc_info.value.kind is ErrorKind.MALFORMED_PRIOR

    @pytest.mark.parametrize("value, weight", [(None, None), ([], []), (None, []), ([], None)])
    def test_from_sequences_without_prior(self, value: object, weight: object) -> None:
        assert PriorSufficientStatistics.from_sequences(value, weight) is None  # type: ignore[arg-type]

    def test_from_sequences_with_prior(self) -> None:
        prior = PriorSufficientStatistics.from_sequences([0.0, 1.0], [1.0, 1.0])
        assert prior == PriorSufficientStatistics(value=(0.0, 1.0), weight=(1.0, 1.0))

    @pytest.mark.parametrize(
        "value, weight, match",
        [
            ([0.0, 1.0], None, "value provided but not the weight"),
            (None, [1.0, 1.0], "weight provided but not the value"),
            ([0.0, 1.0], [], "value provided but not the weight"),
            ([0.0, 1.0], [1.0], "does not match"),
            ([0.0, 1.0, 2.0], [1.0, 1.0, 1.0], "between 1 and 2"),
        ],
    )
    def test_from_sequences_rejects_malformed(
        self, value: list[float] | None, weight: list[float] | None, match: str
    ) -> None:
        with pytest.raises(DistributionError, match=match) as exc_info:
            PriorSufficientStatistics.from_sequences(value, weight)
        assert exc_info.value.kind is ErrorKind.MALFORMED_PRIOR
