"""Segmented answer boxes (one character per box).

Models the state of the input row independently of any UI toolkit: typed
and pasted text is uppercased and filtered to the alphabet, pasted text
spreads across boxes from the focused one, and the answer is complete
once every box holds a character.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from driftcha.core.alphabet.generator import CLEAN_ALPHABET


def filter_to_alphabet(text: str, alphabet: str = CLEAN_ALPHABET) -> str:
    """Uppercase text and keep only characters in the alphabet.

    Example:
        >>> filter_to_alphabet("a0b-1c")
        'ABC'
    """
    allowed = set(alphabet)
    return "".join(c for c in text.upper() if c in allowed)


def sanitize_char(value: str, alphabet: str = CLEAN_ALPHABET) -> str:
    """Reduce one box's raw input to at most one valid character (last wins)."""
    filtered = filter_to_alphabet(value, alphabet)
    return filtered[-1] if filtered else ""


class AnswerSlots(BaseModel):
    """Immutable state of a row of single-character answer boxes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    length: int = Field(..., ge=1)
    values: tuple[str, ...] = ()
    alphabet: str = CLEAN_ALPHABET

    @model_validator(mode="before")
    @classmethod
    def _pad_values(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("length"), int):
            values = tuple(data.get("values", ()))
            if len(values) < data["length"]:
                data = {**data, "values": values + ("",) * (data["length"] - len(values))}
        return data

    @model_validator(mode="after")
    def _check_values(self) -> AnswerSlots:
        if len(self.values) != self.length:
            raise ValueError(f"{len(self.values)} values for {self.length} slots")
        if any(len(v) > 1 for v in self.values):
            raise ValueError("each slot holds at most one character")
        return self

    @classmethod
    def from_text(cls, length: int, text: str, alphabet: str = CLEAN_ALPHABET) -> AnswerSlots:
        """Fill slots from the start with the filtered characters of text."""
        return cls(length=length, alphabet=alphabet).paste(text, 0)[0]

    @property
    def value(self) -> str:
        """Concatenated slot contents (empty slots contribute nothing)."""
        return "".join(self.values)

    @property
    def is_complete(self) -> bool:
        return all(self.values)

    def set_char(self, index: int, raw: str) -> tuple[AnswerSlots, int]:
        """Type into one slot.

        Returns:
            New slots and the index to focus next (advances after a valid char).
        """
        self._check_index(index)
        char = sanitize_char(raw, self.alphabet)
        slots = self._replace({index: char})
        if char and index < self.length - 1:
            return slots, index + 1
        return slots, index

    def clear(self, index: int) -> AnswerSlots:
        """Empty one slot."""
        self._check_index(index)
        return self._replace({index: ""})

    def backspace(self, index: int) -> tuple[AnswerSlots, int]:
        """Backspace in a slot: clears it, or the previous slot if already empty.

        Returns:
            New slots and the index to focus next.
        """
        self._check_index(index)
        if self.values[index] or index == 0:
            return self.clear(index), index
        return self.clear(index - 1), index - 1

    def paste(self, text: str, start: int = 0) -> tuple[AnswerSlots, int]:
        """Spread pasted text over the slots starting at start.

        Characters outside the alphabet are dropped; overflow is discarded.

        Returns:
            New slots and the index to focus next (the slot after the last
            filled one, capped at the final slot). Unchanged when nothing
            valid was pasted.
        """
        self._check_index(start)
        pasted = filter_to_alphabet(text, self.alphabet)
        if not pasted:
            return self, start
        updates = {start + i: c for i, c in enumerate(pasted) if start + i < self.length}
        next_index = min(start + len(pasted), self.length - 1)
        return self._replace(updates), next_index

    def _replace(self, updates: dict[int, str]) -> AnswerSlots:
        values = list(self.values)
        for i, c in updates.items():
            values[i] = c
        return self.model_copy(update={"values": tuple(values)})

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.length:
            raise IndexError(f"slot index {index} out of range for {self.length} slots")
