"""
Array Reductions
================

Elementary reductions over finite sequences of reals. All functions are pure:
inputs are converted to fresh float64 arrays and never modified.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_variates.errors import DegenerateNormalisationError

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_variates.types import FloatArray


def _as_vector(data: npt.ArrayLike) -> FloatArray:
    arr = np.array(data, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"Expected a one-dimensional sequence, got shape {arr.shape}")
    return arr


def mean(data: npt.ArrayLike) -> float:
    """
    Arithmetic mean of ``data``.

    Raises
    ------
    DegenerateNormalisationError
        If ``data`` is empty.
    """
    arr = _as_vector(data)
    if arr.size == 0:
        raise DegenerateNormalisationError("Mean of an empty sequence is undefined")
    return float(arr.sum() / arr.size)


def cumulative_sum(data: npt.ArrayLike) -> FloatArray:
    """
    Running totals of ``data``.

    ``out[0] == data[0]`` and ``out[i] == out[i - 1] + data[i]``; an empty input
    yields an empty array.
    """
    arr = _as_vector(data)
    return np.cumsum(arr, out=arr)


def normalise(data: npt.ArrayLike) -> FloatArray:
    """
    Divide every element of ``data`` by the sum of all elements.

    Raises
    ------
    DegenerateNormalisationError
        If the elements sum to zero (this includes the empty sequence).
    """
    arr = _as_vector(data)
    total = arr.sum()
    if total == 0.0:
        raise DegenerateNormalisationError("Cannot normalise a sequence that sums to zero")
    arr /= total
    return arr


__all__ = [
    "mean",
    "cumulative_sum",
    "normalise",
]
