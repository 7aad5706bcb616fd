# src/dominionsim/engine/rng.py
from __future__ import annotations
import random
from typing import Callable, Optional

# Uniform floats in [0, 1), one per call
RandomSource = Callable[[], float]


def make_random_source(seed: Optional[str] = None) -> RandomSource:
    """
    A non-empty seed gives a reproducible stream (random.Random string seeding);
    no seed gives a fresh, unseeded generator.
    """
    if seed:
        return random.Random(seed).random
    return random.Random().random
