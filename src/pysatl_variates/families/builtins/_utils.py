"""
Helpers shared by the built-in families.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any


def as_output(values: Any) -> Any:
    """Unwrap 0-d arrays to Python floats; leave real arrays untouched."""
    arr = np.asarray(values)
    if arr.ndim == 0:
        return float(arr)
    return arr


def single_or_batch(draws: Any, n: int | None, scalar: Callable[[Any], Any] = float) -> Any:
    """
    Shape the output of a numpy draw made with ``size=n``.

    A single draw (``n is None``) is converted with ``scalar``; a batch is
    returned as a 1-D array of exactly ``n`` entries.
    """
    if n is None:
        return scalar(draws)
    return np.asarray(draws).reshape(n)
