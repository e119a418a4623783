"""Statistical balance report: observed height of random treaps."""

from __future__ import annotations

import math

import numpy as np

from treapset.core.treap import Treap


def measure_height(
    n_keys: int,
    trials: int = 10,
    seed: int = 0,
    balancer: str = "rotation",
) -> dict[str, float]:
    """Build *trials* treaps of *n_keys* shuffled keys and report heights.

    Every trial gets a fresh non-zero priority seed drawn from a numpy
    generator seeded with *seed*.

    Returns:
        Dict with ``height_mean``, ``height_std``, ``height_max`` and
        ``height_ratio`` (mean height divided by ``log2(n_keys)``).
    """
    if n_keys < 2:
        raise ValueError(f"n_keys must be at least 2, got {n_keys}")
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")

    rng = np.random.default_rng(seed)
    heights: list[int] = []
    for _ in range(trials):
        tree = Treap(int(rng.integers(1, 2**32)), balancer=balancer)
        for key in rng.permutation(n_keys).tolist():
            tree.insert(key)
        heights.append(tree.height())

    mean = float(np.mean(heights))
    return {
        "height_mean": mean,
        "height_std": float(np.std(heights)),
        "height_max": float(np.max(heights)),
        "height_ratio": mean / math.log2(n_keys),
    }
