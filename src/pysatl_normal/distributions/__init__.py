"""
Distributions subpackage

The normal distribution and the pieces it is built from:

- distribution protocols (:mod:`.distribution`);
- analytical characteristic holders (:mod:`.computation`);
- parametrizations and constraints (:mod:`.parametrizations`);
- random sources (:mod:`.random`) and sample containers (:mod:`.sampling`);
- :class:`NormalDistribution` (:mod:`.normal`);
- conjugate-prior fitting (:mod:`.fitting`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation
from .distribution import Distribution, ParametrizedDistribution
from .fitting import NormalFit, PriorSufficientStatistics, fit_normal
from .normal import (
    PARAMETER_MAP,
    STANDARD_NORMAL,
    Exponential,
    MeanPrec,
    MeanStd,
    NormalDistribution,
)
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    get_parametrization,
    parametrization,
    registered_parametrizations,
)
from .random import default_generator, reset_default_generator, resolve_generator
from .sampling import ArraySample, Sample

__all__ = [
    # protocols and computations
    "AnalyticalComputation",
    "Distribution",
    "ParametrizedDistribution",
    # parametrizations
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "get_parametrization",
    "parametrization",
    "registered_parametrizations",
    # normal
    "PARAMETER_MAP",
    "STANDARD_NORMAL",
    "Exponential",
    "MeanPrec",
    "MeanStd",
    "NormalDistribution",
    # fitting
    "NormalFit",
    "PriorSufficientStatistics",
    "fit_normal",
    # sampling
    "ArraySample",
    "Sample",
    "default_generator",
    "reset_default_generator",
    "resolve_generator",
]
