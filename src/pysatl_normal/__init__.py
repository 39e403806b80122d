"""
PySATL Normal
=============

Normal (Gaussian) distribution engine: density and distribution functions,
an AS 241 quantile function, moments, sampling, parameter marshaling and
conjugate-prior fitting.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .special import *
from .special import __all__ as _special_all
from .stats import *
from .stats import __all__ as _stats_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-normal")
__all__ = [
    "__version__",
    *_distr_all,
    *_errors_all,
    *_special_all,
    *_stats_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _special_all
del _stats_all
del _types_all
