"""
PySATL Variates
===============

Random variate generation and density evaluation for common probability
distributions: discrete uniform, exponential, normal, Poisson, gamma and
multivariate normal, plus elementary array reductions.

Built-in families are reachable by name, e.g. ``pysatl_variates.Normal``
or :func:`get_family`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version
from typing import Any

from .config import *
from .config import __all__ as _config_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .reductions import *
from .reductions import __all__ as _reductions_all
from .rng import *
from .rng import __all__ as _rng_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-variates")
__all__ = [
    "__version__",
    *_config_all,
    *_errors_all,
    *_family_all,
    *_reductions_all,
    *_rng_all,
    *_types_all,
]

del _config_all
del _errors_all
del _family_all
del _reductions_all
del _rng_all
del _types_all


def __getattr__(name: str) -> Any:
    """Resolve built-in family names (``Normal``, ``Gamma``, ...) lazily."""
    if name in FamilyName._value2member_map_:
        return get_family(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
