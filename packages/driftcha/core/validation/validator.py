"""Answer validation.

A submission is correct when it contains exactly the solution's
characters in any order (multiset match). For feedback, slots are marked
wrong by greedy left-to-right consumption of the solution's characters:
once every copy of a character has been claimed, later copies are wrong.
"""

from __future__ import annotations

from collections import Counter
import logging
import re

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


class ValidationResult(BaseModel):
    """Outcome of checking one submission.

    Attributes:
        valid: True when the submission matches the solution as a multiset.
        invalid_slots: One flag per submitted character; True marks a slot
            that does not correspond to an available solution character.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    valid: bool
    invalid_slots: list[bool] = Field(default_factory=list)

    @property
    def invalid_count(self) -> int:
        """Number of slots flagged invalid."""
        return sum(self.invalid_slots)


def normalize_input(value: str) -> str:
    """Trim, uppercase and strip all whitespace.

    Example:
        >>> normalize_input(" a b c ")
        'ABC'
    """
    return _WHITESPACE.sub("", str(value).strip().upper())


def validate_solution(user_input: str, solution: str) -> bool:
    """True iff normalized user_input has the same character counts as solution.

    Example:
        >>> validate_solution("BCA", "ABC")
        True
    """
    return Counter(normalize_input(user_input)) == Counter(solution)


def get_invalid_indices(user_input: str, solution: str) -> list[bool]:
    """Per-slot wrongness of user_input against solution.

    Scans user_input left to right, consuming one remaining copy of each
    matching solution character. A slot is wrong (True) when no copy of
    its character is left. user_input is used as given (not normalized).

    Example:
        >>> get_invalid_indices("ABB", "AAB")
        [False, False, True]
    """
    remaining = Counter(solution)
    invalid: list[bool] = []
    for c in user_input:
        if remaining[c] > 0:
            remaining[c] -= 1
            invalid.append(False)
        else:
            invalid.append(True)
    return invalid


def check_answer(user_input: str, solution: str) -> ValidationResult:
    """Validate a submission and compute its per-slot feedback."""
    normalized = normalize_input(user_input)
    result = ValidationResult(
        valid=validate_solution(normalized, solution),
        invalid_slots=get_invalid_indices(normalized, solution),
    )
    logger.debug(
        f"Checked answer of {len(normalized)} chars: valid={result.valid}, "
        f"invalid_slots={result.invalid_count}"
    )
    return result
