"""Deterministic xorshift32 priority stream."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


class XorShift32:
    """Marsaglia xorshift generator over 32-bit state.

    Each call to :meth:`next` advances the state with the
    ``13 / 17 / 5`` shift triple and returns the new state.  A seed of
    ``0`` is a fixed point: the stream is ``0`` forever.
    """

    def __init__(self, seed: int) -> None:
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"Seed must be an int, got {type(seed).__name__}")
        if not 0 <= seed <= _MASK:
            raise ValueError(f"Seed must be in [0, 2**32), got {seed}")
        self.state = seed

    def next(self) -> int:
        x = self.state
        x ^= (x << 13) & _MASK
        x ^= x >> 17
        x ^= (x << 5) & _MASK
        self.state = x
        return x
