"""
Normal distribution implementation.

Contains :class:`NormalDistribution` and the parameterizations it can be built
from.

Probability density function:
    f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, cast, overload

import numpy as np
from scipy.special import erf, erfc

from pysatl_normal.distributions.computation import AnalyticalComputation
from pysatl_normal.distributions.distribution import Distribution, check_buffer_length
from pysatl_normal.distributions.parametrizations import (
    Parametrization,
    constraint,
    get_parametrization,
    parametrization,
)
from pysatl_normal.distributions.random import resolve_generator
from pysatl_normal.distributions.sampling import ArraySample
from pysatl_normal.errors import DistributionError, ErrorKind
from pysatl_normal.special.quantile import standard_normal_ppf
from pysatl_normal.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from numpy.typing import ArrayLike

    from pysatl_normal.distributions.fitting import NormalFit, PriorSufficientStatistics
    from pysatl_normal.types import (
        FloatArray,
        GenericCharacteristicName,
        Number,
        NumericSequence,
    )

LOG_ROOT_2PI = 0.9189385332046727
"""log(sqrt(2π))"""

LOG_2PI = 1.8378770664093453
"""log(2π)"""

BASE_PARAMETRIZATION = "meanStd"

PARAMETER_MAP: Mapping[str, int] = MappingProxyType({"Mu": 0, "Sigma": 1})
"""Position of each parameter in the marshaled vector ``[mu, sigma]``."""


@parametrization(name=BASE_PARAMETRIZATION)
class MeanStd(Parametrization):
    """
    Standard parametrization of normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    sigma : float
        Standard deviation of the distribution
    """

    mu: float
    sigma: float

    @constraint(description="mu is finite")
    def check_mu_finite(self) -> bool:
        """Check that the mean is a finite number."""
        return math.isfinite(self.mu)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive and finite."""
        return math.isfinite(self.sigma) and self.sigma > 0


@parametrization(name="meanPrec")
class MeanPrec(Parametrization):
    """
    Mean-precision parametrization of normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    tau : float
        Precision parameter (inverse variance)
    """

    mu: float
    tau: float

    @constraint(description="tau > 0")
    def check_tau_positive(self) -> bool:
        """Check that precision parameter is positive."""
        return math.isfinite(self.tau) and self.tau > 0

    def transform_to_base_parametrization(self) -> Parametrization:
        return MeanStd(mu=self.mu, sigma=math.sqrt(1 / self.tau))  # type: ignore[call-arg]


@parametrization(name="exponential")
class Exponential(Parametrization):
    """
    Exponential family parametrization of normal distribution.
        Uses the form: y = exp(a*x² + b*x + c)

    Parameters
    ----------
    a : float
        Quadratic term coefficient in exponential form
    b : float
        Linear term coefficient in exponential form
    """

    a: float
    b: float

    @property
    def c(self) -> float:
        """Normalization constant."""
        return (self.b**2) / (4 * self.a) - (1 / 2) * math.log(math.pi / (-self.a))

    @constraint(description="a < 0")
    def check_a_negative(self) -> bool:
        """Check that quadratic term coefficient is negative."""
        return self.a < 0

    def transform_to_base_parametrization(self) -> Parametrization:
        mu = -self.b / (2 * self.a)
        sigma = math.sqrt(-1 / (2 * self.a))
        return MeanStd(mu=mu, sigma=sigma)  # type: ignore[call-arg]


def _to_output(values: FloatArray) -> float | FloatArray:
    if values.ndim == 0:
        return float(values)
    return values


@dataclass(frozen=True, slots=True)
class NormalDistribution(Distribution):
    """
    Normal (Gaussian) distribution.

    Immutable; refitting returns a new instance.

    Parameters
    ----------
    mu : float, default 0.0
        Mean of the distribution, any finite value.
    sigma : float, default 1.0
        Standard deviation, finite and positive.
    rng : numpy.random.Generator, optional
        Random source for :meth:`rand` and :meth:`sample`. The distribution
        borrows it; if omitted the process-wide default generator is used.

    Raises
    ------
    DistributionError
        With kind ``INVALID_PARAMETER`` if ``mu`` is not finite or ``sigma`` is
        not positive.

    Notes
    -----
    Characteristics accepting ``x`` or ``p`` work on scalars (returning
    ``float``) and on array-likes (returning arrays of the same shape).
    """

    mu: float = 0.0
    sigma: float = 1.0
    rng: np.random.Generator | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mu", float(self.mu))
        object.__setattr__(self, "sigma", float(self.sigma))
        self.base_parametrization.validate()

    @classmethod
    def from_parametrization(
        cls,
        parametrization_name: str = BASE_PARAMETRIZATION,
        *,
        rng: np.random.Generator | None = None,
        **parameters: float,
    ) -> NormalDistribution:
        """
        Build a distribution from any registered parametrization.

        Parameters
        ----------
        parametrization_name : str, default "meanStd"
            One of ``"meanStd"``, ``"meanPrec"``, ``"exponential"``.
        rng : numpy.random.Generator, optional
            Random source to borrow.
        **parameters : float
            Parameters of the chosen parametrization.

        Raises
        ------
        DistributionError
            With kind ``INVALID_PARAMETER`` for an unknown name, unexpected
            parameters or violated constraints.
        """
        param_cls = get_parametrization(parametrization_name)
        try:
            params = param_cls(**parameters)
        except TypeError as e:
            raise DistributionError(
                ErrorKind.INVALID_PARAMETER,
                f"Invalid parameters {sorted(parameters)} for '{parametrization_name}'",
            ) from e
        params.validate()

        base = cast(MeanStd, params.transform_to_base_parametrization())
        return cls(mu=base.mu, sigma=base.sigma, rng=rng)

    @classmethod
    def fit(
        cls,
        samples: NumericSequence,
        weights: NumericSequence | None = None,
        prior: PriorSufficientStatistics | None = None,
        *,
        rng: np.random.Generator | None = None,
    ) -> NormalFit:
        """Fit a distribution to weighted samples; see :func:`fit_normal`."""
        from pysatl_normal.distributions.fitting import fit_normal

        return fit_normal(samples, weights, prior, rng=rng)

    @property
    def base_parametrization(self) -> MeanStd:
        """Parameters in the base ``meanStd`` parametrization."""
        return MeanStd(mu=self.mu, sigma=self.sigma)  # type: ignore[call-arg]

    @property
    def parameters(self) -> dict[str, float]:
        """Parameters as a dictionary."""
        return {"mu": self.mu, "sigma": self.sigma}

    # Densities and distribution functions

    @overload
    def logpdf(self, x: Number) -> float: ...
    @overload
    def logpdf(self, x: ArrayLike) -> float | FloatArray: ...

    def logpdf(self, x: ArrayLike) -> float | FloatArray:
        """Natural logarithm of the probability density at ``x``."""
        diff = np.asarray(x, dtype=np.float64) - self.mu
        values = -LOG_ROOT_2PI - math.log(self.sigma) - diff * diff / (2 * self.sigma * self.sigma)
        return _to_output(values)

    @overload
    def pdf(self, x: Number) -> float: ...
    @overload
    def pdf(self, x: ArrayLike) -> float | FloatArray: ...

    def pdf(self, x: ArrayLike) -> float | FloatArray:
        """Probability density at ``x``."""
        return _to_output(np.exp(self.logpdf(x)))

    def _standardize(self, x: ArrayLike) -> FloatArray:
        return (np.asarray(x, dtype=np.float64) - self.mu) / (self.sigma * math.sqrt(2))

    @overload
    def cdf(self, x: Number) -> float: ...
    @overload
    def cdf(self, x: ArrayLike) -> float | FloatArray: ...

    def cdf(self, x: ArrayLike) -> float | FloatArray:
        """
        Cumulative distribution function ``P(X <= x)``.

        Computed as ``0.5 * (1 + erf((x - mu) / (sigma * sqrt(2))))``.
        """
        return _to_output(0.5 * (1 + erf(self._standardize(x))))

    @overload
    def sf(self, x: Number) -> float: ...
    @overload
    def sf(self, x: ArrayLike) -> float | FloatArray: ...

    def sf(self, x: ArrayLike) -> float | FloatArray:
        """
        Survival function ``P(X > x)``.

        Evaluated with ``erfc`` rather than as ``1 - cdf(x)`` so the upper tail
        keeps full relative precision.
        """
        return _to_output(0.5 * erfc(self._standardize(x)))

    @overload
    def ppf(self, p: Number) -> float: ...
    @overload
    def ppf(self, p: ArrayLike) -> float | FloatArray: ...

    def ppf(self, p: ArrayLike) -> float | FloatArray:
        """
        Percent point function (inverse CDF).

        Parameters
        ----------
        p : float or array_like
            Probabilities from ``[0, 1]``.

        Returns
        -------
        float or numpy.ndarray
            ``mu + sigma * z(p)``; ``p = 0`` and ``p = 1`` give ``-inf`` and
            ``inf``.

        Raises
        ------
        DistributionError
            With kind ``INVALID_PROBABILITY`` if any ``p`` is outside ``[0, 1]``.
        """
        z = standard_normal_ppf(p)
        return _to_output(np.asarray(self.mu + self.sigma * z))

    # Derivatives

    @overload
    def dlogpdf_dx(self, x: Number) -> float: ...
    @overload
    def dlogpdf_dx(self, x: ArrayLike) -> float | FloatArray: ...

    def dlogpdf_dx(self, x: ArrayLike) -> float | FloatArray:
        """Derivative of :meth:`logpdf` with respect to ``x``."""
        diff = np.asarray(x, dtype=np.float64) - self.mu
        return _to_output(-diff / (self.sigma * self.sigma))

    def dlogpdf_dparams(self, x: float, out: ArrayLike | None = None) -> FloatArray:
        """
        Gradient of :meth:`logpdf` at ``x`` with respect to ``[mu, sigma]``.

        Parameters
        ----------
        x : float
            Evaluation point.
        out : numpy.ndarray, optional
            Buffer of length :attr:`num_parameters` to write into. A float64
            array is filled in place; other array-likes are converted first.

        Returns
        -------
        numpy.ndarray
            ``[d/dmu, d/dsigma]``; ``out`` itself when it is a float64 array.

        Raises
        ------
        DistributionError
            With kind ``LENGTH_MISMATCH`` if ``out`` has the wrong length.
        """
        buffer = (
            np.empty(self.num_parameters, dtype=np.float64)
            if out is None
            else np.asarray(out, dtype=np.float64)
        )
        check_buffer_length(buffer, self.num_parameters, "Derivative buffer")

        diff = float(x) - self.mu
        variance = self.sigma * self.sigma
        buffer[0] = diff / variance
        buffer[1] = -1 / self.sigma + diff * diff / (variance * self.sigma)
        return buffer

    # Moments

    def mean(self) -> float:
        return self.mu

    def median(self) -> float:
        return self.mu

    def mode(self) -> float:
        return self.mu

    def var(self) -> float:
        return self.sigma * self.sigma

    def std(self) -> float:
        return self.sigma

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self, excess: bool = False) -> float:
        """
        Raw or excess kurtosis.

        Parameters
        ----------
        excess : bool, default False
            Return the excess kurtosis (0) instead of the raw one (3).
        """
        return 0.0 if excess else 3.0

    def entropy(self) -> float:
        """Differential entropy in nats."""
        return 0.5 * (LOG_2PI + 1 + 2 * math.log(self.sigma))

    # Sampling

    def rand(self) -> float:
        """Draw a single value using the configured or default random source."""
        variate = resolve_generator(self.rng).standard_normal()
        return float(variate * self.sigma + self.mu)

    def sample(self, n: int) -> ArraySample:
        """
        Draw ``n`` independent values.

        Returns
        -------
        ArraySample
            Sample of shape ``(n,)``.
        """
        variates = resolve_generator(self.rng).standard_normal(n)
        return ArraySample(variates * self.sigma + self.mu)

    def log_likelihood(self, samples: NumericSequence | ArraySample) -> float:
        """Sum of :meth:`logpdf` over ``samples``."""
        values = np.asarray(samples, dtype=np.float64)
        return float(np.sum(self.logpdf(values)))

    # Parameter marshaling

    @property
    def num_parameters(self) -> int:
        return len(PARAMETER_MAP)

    def parameter_map(self) -> Mapping[str, int]:
        """Read-only mapping from parameter names to marshaled positions."""
        return PARAMETER_MAP

    def marshal_parameters(self, out: ArrayLike | None = None) -> FloatArray:
        """
        Pack ``[mu, sigma]``.

        Parameters
        ----------
        out : numpy.ndarray, optional
            Buffer of length 2 to write into, converted like the buffer of
            :meth:`dlogpdf_dparams`.

        Raises
        ------
        DistributionError
            With kind ``LENGTH_MISMATCH`` if ``out`` has the wrong length.
        """
        buffer = (
            np.empty(self.num_parameters, dtype=np.float64)
            if out is None
            else np.asarray(out, dtype=np.float64)
        )
        check_buffer_length(buffer, self.num_parameters, "Parameter buffer")

        buffer[PARAMETER_MAP["Mu"]] = self.mu
        buffer[PARAMETER_MAP["Sigma"]] = self.sigma
        return buffer

    def unmarshal_parameters(self, values: NumericSequence) -> NormalDistribution:
        """
        Build a distribution from ``[mu, sigma]``, keeping this random source.

        Raises
        ------
        DistributionError
            With kind ``LENGTH_MISMATCH`` unless ``values`` has length 2, or
            ``INVALID_PARAMETER`` if the values violate the constraints.
        """
        check_buffer_length(values, self.num_parameters, "Parameter vector")
        return NormalDistribution(
            mu=float(values[PARAMETER_MAP["Mu"]]),
            sigma=float(values[PARAMETER_MAP["Sigma"]]),
            rng=self.rng,
        )

    # Characteristic lookup

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Closed-form characteristics keyed by :class:`CharacteristicName`."""
        funcs: dict[CharacteristicName, Any] = {
            CharacteristicName.PDF: lambda x, **_: self.pdf(x),
            CharacteristicName.LOG_PDF: lambda x, **_: self.logpdf(x),
            CharacteristicName.CDF: lambda x, **_: self.cdf(x),
            CharacteristicName.SF: lambda x, **_: self.sf(x),
            CharacteristicName.PPF: lambda p, **_: self.ppf(p),
            CharacteristicName.MEAN: lambda _, **__: self.mean(),
            CharacteristicName.MEDIAN: lambda _, **__: self.median(),
            CharacteristicName.MODE: lambda _, **__: self.mode(),
            CharacteristicName.VAR: lambda _, **__: self.var(),
            CharacteristicName.STD: lambda _, **__: self.std(),
            CharacteristicName.SKEW: lambda _, **__: self.skewness(),
            CharacteristicName.KURT: lambda _, excess=False, **__: self.kurtosis(excess),
            CharacteristicName.ENTROPY: lambda _, **__: self.entropy(),
        }
        return MappingProxyType(
            {name: AnalyticalComputation(target=name, func=func) for name, func in funcs.items()}
        )


STANDARD_NORMAL = NormalDistribution(mu=0.0, sigma=1.0)
"""The standard normal distribution N(0, 1)."""
