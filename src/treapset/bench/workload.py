"""Seeded operation streams for benchmarking treaps."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

_U64_MAX = np.iinfo(np.uint64).max


@dataclass
class Workload:
    """A replayable sequence of insert/erase operations.

    ``erase[i]`` is True when operation *i* erases ``keys[i]``, and an
    insert otherwise.
    """

    keys: list[int]
    erase: np.ndarray

    def __len__(self) -> int:
        return len(self.keys)


def make_workload(
    n_ops: int,
    erase_every: int = 10,
    key_space: int | None = None,
    kind: str = "random",
    seed: int = 0,
) -> Workload:
    """Generate *n_ops* operations.

    ``kind="random"`` draws keys uniformly from ``[0, key_space)``, or
    from the full unsigned 64-bit range when *key_space* is None, and
    turns an operation into an erase when an independent 64-bit draw is
    divisible by *erase_every* (``erase_every <= 0`` disables erases).
    ``kind="ascending"`` inserts ``0, 2, 4, ...``.
    """
    if n_ops < 0:
        raise ValueError(f"n_ops must be non-negative, got {n_ops}")

    if kind == "ascending":
        return Workload(keys=list(range(0, 2 * n_ops, 2)), erase=np.zeros(n_ops, dtype=np.bool_))
    if kind != "random":
        raise ValueError(f"Unknown workload kind '{kind}'. Available: ascending, random")

    rng = np.random.default_rng(seed)
    if key_space is None:
        keys = rng.integers(0, _U64_MAX, size=n_ops, dtype=np.uint64, endpoint=True)
    else:
        if key_space <= 0:
            raise ValueError(f"key_space must be positive, got {key_space}")
        keys = rng.integers(0, key_space, size=n_ops, dtype=np.int64)

    draws = rng.integers(0, _U64_MAX, size=n_ops, dtype=np.uint64, endpoint=True)
    if erase_every > 0:
        erase = draws % np.uint64(erase_every) == 0
    else:
        erase = np.zeros(n_ops, dtype=np.bool_)

    # Tree keys are plain Python ints, never numpy scalars.
    return Workload(keys=keys.tolist(), erase=erase)


def make_workload_from_config(config: dict) -> Workload:
    """Build the workload described by the ``workload`` config section."""
    cfg = config["workload"]
    return make_workload(
        n_ops=cfg["n_ops"],
        erase_every=cfg.get("erase_every", 10),
        key_space=cfg.get("key_space"),
        kind=cfg.get("kind", "random"),
        seed=cfg.get("seed", config.get("seed", 0)),
    )
