"""Answer validation and answer-box state."""

from driftcha.core.validation.slots import AnswerSlots, filter_to_alphabet, sanitize_char
from driftcha.core.validation.validator import (
    ValidationResult,
    check_answer,
    get_invalid_indices,
    normalize_input,
    validate_solution,
)

__all__ = [
    "AnswerSlots",
    "ValidationResult",
    "check_answer",
    "filter_to_alphabet",
    "get_invalid_indices",
    "normalize_input",
    "sanitize_char",
    "validate_solution",
]
