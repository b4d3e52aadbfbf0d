"""Solution and noise character generation.

Characters come from a clean alphabet without visually ambiguous glyphs
(no 0/O, 1/I/L). The solution and the noise set never share a character.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
import random
from typing import TypeVar

from driftcha.core.errors import ChallengeConfigError
from driftcha.core.utils.rng import resolve_rng

logger = logging.getLogger(__name__)

T = TypeVar("T")

CLEAN_ALPHABET = "ABCDEFGHJKMNPQRSTUVWXYZ23456789"


def get_clean_alphabet() -> str:
    """Return the alphabet used for solution and noise characters."""
    return CLEAN_ALPHABET


def pick_random(items: Sequence[T], n: int, rng: random.Random | None = None) -> list[T]:
    """Draw up to n items uniformly without replacement, in draw order.

    Stops early when the pool runs out, so the result may be shorter than n.

    Args:
        items: Pool to draw from (not modified).
        n: Number of items wanted.
        rng: Random source. Defaults to the shared generator.

    Returns:
        Drawn items in the order they were drawn.
    """
    rng = resolve_rng(rng)
    pool = list(items)
    result: list[T] = []
    for _ in range(max(0, n)):
        if not pool:
            break
        idx = int(rng.random() * len(pool))
        result.append(pool.pop(idx))
    return result


def generate_solution(
    length: int,
    alphabet: str = CLEAN_ALPHABET,
    rng: random.Random | None = None,
) -> str:
    """Generate a solution of distinct characters.

    Args:
        length: Number of characters.
        alphabet: Characters to draw from.
        rng: Random source.

    Returns:
        Solution string in draw order (not sorted).

    Raises:
        ChallengeConfigError: If length is negative or exceeds the alphabet size.
    """
    if length < 0:
        raise ChallengeConfigError(f"Solution length must be >= 0, got {length}")
    if length > len(alphabet):
        raise ChallengeConfigError(
            f"Solution length {length} exceeds alphabet size {len(alphabet)}"
        )
    return "".join(pick_random(alphabet, length, rng))


def generate_noise(
    count: int,
    alphabet: str = CLEAN_ALPHABET,
    exclude_chars: str | Sequence[str] = "",
    rng: random.Random | None = None,
) -> list[str]:
    """Generate decoy characters that never appear in exclude_chars.

    When count exceeds the residual alphabet, returns every residual
    character (shuffled) instead of failing.

    Args:
        count: Number of noise characters wanted.
        alphabet: Characters to draw from.
        exclude_chars: Characters to leave out (usually the solution).
        rng: Random source.

    Returns:
        Noise characters in draw order.

    Raises:
        ChallengeConfigError: If count is negative.
    """
    if count < 0:
        raise ChallengeConfigError(f"Noise count must be >= 0, got {count}")

    excluded = set(exclude_chars)
    available = [c for c in alphabet if c not in excluded]
    if count > len(available):
        logger.warning(
            f"Requested {count} noise characters but only {len(available)} are available; "
            "saturating"
        )
    return pick_random(available, count, rng)
