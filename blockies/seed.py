"""Random default seeds.

Kept apart from the deterministic core: nothing in :mod:`blockies` calls this
module. Callers without a natural seed (e.g. the preview page) pick one here
and pass it in explicitly.
"""

import random
from typing import Optional


SEED_UPPER_BOUND = 10**16


def random_seed(rng: Optional[random.Random] = None) -> str:
    """Return a random lowercase hex seed below ``10**16``.

    Args:
        rng: Source of randomness; a fresh ``random.Random()`` when omitted.
            Pass a seeded instance for reproducible seeds in tests.
    """
    rng = rng or random.Random()
    return format(rng.randrange(SEED_UPPER_BOUND), "x")
