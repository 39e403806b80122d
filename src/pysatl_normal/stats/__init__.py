"""
Statistics subpackage

Weighted summary statistics consumed by the fitting procedures
(:mod:`.moments`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .moments import as_samples, total_weight, weighted_mean, weighted_moment

__all__ = [
    "as_samples",
    "total_weight",
    "weighted_mean",
    "weighted_moment",
]
