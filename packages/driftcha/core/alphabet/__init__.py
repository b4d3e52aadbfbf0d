"""Alphabet and secret generation."""

from driftcha.core.alphabet.generator import (
    CLEAN_ALPHABET,
    generate_noise,
    generate_solution,
    get_clean_alphabet,
    pick_random,
)

__all__ = [
    "CLEAN_ALPHABET",
    "generate_noise",
    "generate_solution",
    "get_clean_alphabet",
    "pick_random",
]
