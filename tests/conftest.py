from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_variates.config import reset_config
from pysatl_variates.families.configuration import reset_families_register
from pysatl_variates.rng import RandomSource, reset_default_random_source

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_state() -> Generator[None, Any, None]:
    reset_families_register()
    reset_config()
    reset_default_random_source()
    yield


@pytest.fixture
def rng() -> RandomSource:
    """Seeded random source for reproducible Monte Carlo checks."""
    return RandomSource(20251018)
