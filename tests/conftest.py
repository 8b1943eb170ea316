from __future__ import annotations
import random
from typing import List, Tuple

import pytest

from genarith.algebra import INT32, INT64, BIGINT, FLOAT32, FLOAT64, BIGDECIMAL, RATIONAL


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


def shuffled_ints(n: int, lo: int = 0, hi: int = 50, seed: int = 1234) -> List[int]:
    """Deterministic pseudo-random ints with plenty of duplicates."""
    rng = random.Random(seed)
    return [rng.randint(lo, hi) for _ in range(n)]


def tagged_records(keys: List[int]) -> List[Tuple[int, int]]:
    """(key, original position) pairs for stability checks."""
    return [(k, i) for i, k in enumerate(keys)]


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture(params=[INT32, INT64, BIGINT], ids=["int32", "int64", "bigint"])
def integer_algebra(request):
    return request.param


@pytest.fixture(params=[FLOAT32, FLOAT64, BIGDECIMAL, RATIONAL], ids=["float32", "float64", "decimal", "rational"])
def unit_floor_algebra(request):
    return request.param


@pytest.fixture()
def sample_buffer() -> List[int]:
    return [5, 3, 3, 1, 4]


@pytest.fixture()
def select_buffer() -> List[int]:
    return [9, 1, 7, 3, 5]


@pytest.fixture()
def random_buffer() -> List[int]:
    return shuffled_ints(500)
