"""Deterministic per-iteration seed derivation.

Each Monte Carlo iteration draws from its own generator whose seed is derived
from the master seed, the arm and the iteration index. Draws therefore never
depend on execution order or on how many draws happened before.
"""

from __future__ import annotations

import hashlib
from typing import Any

import numpy as np
from numpy.random import PCG64, Generator


class SeedManager:
    """Derive reproducible seeds for isolated components from a master seed.

    Usage:
        seeds = SeedManager(0)
        comparator_seed = seeds.derive_seed("resample", "comparator", 1)
    """

    def __init__(self, master_seed: int = 0) -> None:
        if master_seed is None or int(master_seed) < 0:
            raise ValueError("master_seed must be a non-negative integer")
        self.master_seed = int(master_seed)

    def derive_seed(self, *components: Any) -> int:
        """Return a positive 32-bit seed unique to ``components`` under the master seed."""
        seed_input = f"{self.master_seed}:" + ":".join(str(c) for c in components)
        digest = hashlib.sha256(seed_input.encode()).digest()
        return int.from_bytes(digest[:4], byteorder="big") & 0x7FFFFFFF

    def generator(self, *components: Any) -> Generator:
        return make_generator(self.derive_seed(*components))

    def iteration_seeds(self, arms: tuple[str, ...], n_iterations: int) -> np.ndarray:
        """Seed table of shape (n_iterations, len(arms)), row ``i - 1`` for iteration ``i``."""
        table = np.empty((n_iterations, len(arms)), dtype=np.int64)
        for i in range(1, n_iterations + 1):
            for j, arm in enumerate(arms):
                table[i - 1, j] = self.derive_seed("resample", arm, i)
        return table


def make_generator(seed: int) -> Generator:
    return Generator(PCG64(int(seed)))


__all__ = ["SeedManager", "make_generator"]
