"""Random source helpers.

Every random draw in driftcha goes through a ``random.Random`` instance so
callers (and tests) can pass a seeded generator for reproducible challenges.
"""

from __future__ import annotations

import random

_shared_rng = random.Random()


def resolve_rng(rng: random.Random | None = None) -> random.Random:
    """Return rng, or the shared process-wide generator when rng is None."""
    return rng if rng is not None else _shared_rng
