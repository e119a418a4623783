"""Global seeding for benchmark workloads."""

from __future__ import annotations

import random

import numpy as np


def seed_everything(seed: int) -> None:
    """Seed Python's and numpy's global generators.

    Treaps never read these; each instance draws priorities from its
    own seeded stream.
    """
    random.seed(seed)
    np.random.seed(seed)
