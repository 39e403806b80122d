"""
Special functions subpackage

Numerical kernels that have no closed form in the standard library:

- rational minimax approximations (:mod:`.rational`);
- the standard normal quantile (:mod:`.quantile`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .quantile import check_probability, standard_normal_ppf
from .rational import APPROXIMATIONS, RationalApproximation, Regime, rateval

__all__ = [
    "APPROXIMATIONS",
    "RationalApproximation",
    "Regime",
    "rateval",
    "check_probability",
    "standard_normal_ppf",
]
