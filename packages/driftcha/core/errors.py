"""Error types raised by the driftcha core."""

from __future__ import annotations


class DriftchaError(Exception):
    """Base class for driftcha errors."""


class ChallengeConfigError(DriftchaError, ValueError):
    """Raised when challenge parameters cannot produce a valid challenge.

    Examples: a solution longer than the alphabet, a negative noise count,
    or global-style motion requested without a global center.
    """


class UnknownPathShapeError(DriftchaError, ValueError):
    """Raised when a path shape tag is not one of the known shapes."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Unknown path shape: {tag!r}")
