from __future__ import annotations

"""Randomness helpers for question ordering and seeding."""

import os
import random
from typing import List, Optional, Sequence


def seed_if_needed() -> None:
    """Seed the RNG if SEED env var is set."""
    seed = os.environ.get("SEED")
    if seed is not None:
        try:
            s = int(seed)
        except ValueError:
            return
        random.seed(s)


def shuffled(items: Sequence[int], rng: Optional[random.Random] = None) -> List[int]:
    """Return a Fisher-Yates shuffled copy of ``items``.

    Every permutation is equally likely. Uses the module RNG unless ``rng``
    is given.
    """
    rand = rng or random
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = rand.randint(0, i)
        if i != j:
            out[i], out[j] = out[j], out[i]
    return out
