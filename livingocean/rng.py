"""Shared random number source for the simulation."""

from __future__ import annotations

import random
import time
from typing import MutableSequence, TypeVar

T = TypeVar("T")

_generator = random.Random(time.time_ns())


def seed(value) -> None:
    """Reseed the shared generator, making later draws reproducible."""
    _generator.seed(value)


def get_int(low: int, high: int) -> int:
    """Return a uniform integer in the closed range; bounds may come in either order."""
    if low > high:
        low, high = high, low
    return _generator.randint(low, high)


def get_double(low: float, high: float) -> float:
    """Return a uniform float between the bounds; bounds may come in either order."""
    if low > high:
        low, high = high, low
    return _generator.uniform(low, high)


def shuffle(items: MutableSequence[T]) -> None:
    """Shuffle ``items`` in place."""
    _generator.shuffle(items)