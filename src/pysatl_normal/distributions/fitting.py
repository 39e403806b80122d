"""
Conjugate-prior fitting of the normal distribution.

The prior is expressed through sufficient statistics: a prior mean worth
``weight[0]`` effective samples and a prior standard deviation worth
``weight[1]`` effective samples (normal-inverse-gamma style). Fitting pools
those pseudo-samples with the weighted data and reports the updated
statistics, so a later batch can be folded in by passing them back as the
prior.

Notes
-----
The pooled variance is accumulated as

    v * W + weight[1] * value[1]**2 + weight[0] * W * (m - value[0])**2 / W_total

where ``m`` and ``v`` are the weighted sample mean and population variance,
``W`` the sample weight and ``W_total = W + weight[0]``. This is a
pooled-statistics update, not the exact posterior of the normal-inverse-gamma
model, and is kept as is for compatibility with previously fitted values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_normal.distributions.normal import NormalDistribution
from pysatl_normal.errors import DistributionError, ErrorKind
from pysatl_normal.stats.moments import as_samples, total_weight, weighted_mean, weighted_moment

if TYPE_CHECKING:
    import numpy as np

    from pysatl_normal.types import NumericSequence

MAX_PRIOR_LENGTH = 2


@dataclass(frozen=True, slots=True)
class PriorSufficientStatistics:
    """
    Sufficient statistics of a conjugate prior.

    Parameters
    ----------
    value : Sequence[float]
        ``[prior_mean]`` or ``[prior_mean, prior_std]``.
    weight : Sequence[float]
        Effective sample counts parallel to ``value``.

    Raises
    ------
    DistributionError
        With kind ``MALFORMED_PRIOR`` if the lengths differ or are not 1 or 2.

    Notes
    -----
    A single-element prior constrains only the mean; it contributes neither
    variance nor scale weight.
    """

    value: tuple[float, ...]
    weight: tuple[float, ...]

    def __post_init__(self) -> None:
        value = tuple(float(v) for v in self.value)
        weight = tuple(float(w) for w in self.weight)
        if len(value) != len(weight):
            raise DistributionError(
                ErrorKind.MALFORMED_PRIOR,
                f"Prior value length {len(value)} does not match weight length {len(weight)}",
            )
        if not 1 <= len(value) <= MAX_PRIOR_LENGTH:
            raise DistributionError(
                ErrorKind.MALFORMED_PRIOR,
                f"Prior must have between 1 and {MAX_PRIOR_LENGTH} entries, got {len(value)}",
            )
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "weight", weight)

    @classmethod
    def from_sequences(
        cls,
        value: NumericSequence | None,
        weight: NumericSequence | None,
    ) -> PriorSufficientStatistics | None:
        """
        Build a prior from raw sequences.

        Returns
        -------
        PriorSufficientStatistics or None
            ``None`` when both sequences are missing or empty.

        Raises
        ------
        DistributionError
            With kind ``MALFORMED_PRIOR`` if only one of them is given, or the
            lengths are inconsistent.
        """
        n_value = 0 if value is None else len(value)
        n_weight = 0 if weight is None else len(weight)
        if n_value == 0 and n_weight == 0:
            return None
        if n_value == 0:
            raise DistributionError(
                ErrorKind.MALFORMED_PRIOR, "Prior weight provided but not the value"
            )
        if n_weight == 0:
            raise DistributionError(
                ErrorKind.MALFORMED_PRIOR, "Prior value provided but not the weight"
            )
        return cls(value=tuple(value), weight=tuple(weight))  # type: ignore[arg-type]

    @property
    def mean(self) -> float:
        return self.value[0]

    @property
    def mean_weight(self) -> float:
        return self.weight[0]

    @property
    def has_scale(self) -> bool:
        return len(self.value) == MAX_PRIOR_LENGTH


@dataclass(frozen=True, slots=True)
class NormalFit:
    """
    Result of :func:`fit_normal`.

    Parameters
    ----------
    distribution : NormalDistribution
        Fitted distribution.
    prior : PriorSufficientStatistics
        Updated sufficient statistics ``[mu, sigma]`` with accumulated
        weights, ready to be used as the prior of the next fit.
    """

    distribution: NormalDistribution
    prior: PriorSufficientStatistics


def fit_normal(
    samples: NumericSequence,
    weights: NumericSequence | None = None,
    prior: PriorSufficientStatistics | None = None,
    *,
    rng: np.random.Generator | None = None,
) -> NormalFit:
    """
    Fit a normal distribution to weighted samples with an optional prior.

    Parameters
    ----------
    samples : Sequence[float] or numpy.ndarray
        Observations.
    weights : Sequence[float] or numpy.ndarray, optional
        Relative weights parallel to ``samples``; all ones if omitted or
        empty.
    prior : PriorSufficientStatistics, optional
        Conjugate prior sufficient statistics.
    rng : numpy.random.Generator, optional
        Random source handed to the fitted distribution.

    Returns
    -------
    NormalFit
        Fitted distribution and updated prior statistics.

    Raises
    ------
    DistributionError
        ``LENGTH_MISMATCH`` if ``weights`` and ``samples`` differ in length;
        ``DEGENERATE_FIT`` if there is no weight at all or the pooled
        standard deviation is not positive.
    """
    xs, ws = as_samples(samples, weights)
    sum_weights = total_weight(xs, ws)

    if sum_weights > 0:
        sample_mean = weighted_mean(xs, ws)
        sample_variance = weighted_moment(2, xs, sample_mean, ws)
    elif prior is not None:
        warnings.warn(
            "Samples carry no weight; the fit is determined by the prior alone.",
            UserWarning,
            stacklevel=2,
        )
        sample_mean = sample_variance = 0.0
    else:
        raise DistributionError(
            ErrorKind.DEGENERATE_FIT, "Cannot fit a normal distribution to samples with no weight"
        )

    total = sum_weights
    total_sum = sample_mean * sum_weights
    if prior is not None:
        total += prior.mean_weight
        total_sum += prior.mean * prior.mean_weight

    if total <= 0:
        raise DistributionError(
            ErrorKind.DEGENERATE_FIT, f"Total weight must be positive, got {total}"
        )

    mu = total_sum / total

    total_variance = sample_variance * sum_weights
    if prior is not None:
        if prior.has_scale:
            total_variance += prior.weight[1] * prior.value[1] * prior.value[1]

        # Extra dispersion from the disagreement of the sample and prior means
        mean_diff = sample_mean - prior.mean
        total_variance += prior.mean_weight * sum_weights * mean_diff * mean_diff / total

    variance = total_variance / total
    if not (math.isfinite(mu) and math.isfinite(variance) and variance > 0):
        raise DistributionError(
            ErrorKind.DEGENERATE_FIT,
            f"Fitted parameters mu={mu}, variance={variance} do not define a normal distribution",
        )
    sigma = math.sqrt(variance)

    new_weight = [sum_weights, sum_weights]
    if prior is not None:
        new_weight[0] += prior.weight[0]
        if prior.has_scale:
            new_weight[1] += prior.weight[1]

    return NormalFit(
        distribution=NormalDistribution(mu=mu, sigma=sigma, rng=rng),
        prior=PriorSufficientStatistics(value=(mu, sigma), weight=tuple(new_weight)),
    )
