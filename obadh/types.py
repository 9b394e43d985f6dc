"""Value types used by the transliteration processor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CharKind(Enum):
    """The role a Bengali character plays in a word."""

    VOWEL = "vowel"
    CONSONANT = "consonant"
    VOWEL_SIGN = "vowel_sign"
    SPECIAL = "special"
    SYMBOL = "symbol"
    COMPOUND = "compound"


@dataclass(frozen=True)
class BengaliChar:
    """A Bengali character together with its kind.

    For compound characters ``value`` holds several code points.
    """

    kind: CharKind
    value: str

    def to_char(self) -> str:
        """Return the single character, or NUL for compound values."""
        if self.kind is CharKind.COMPOUND:
            return "\0"
        return self.value


@dataclass
class ProcessingContext:
    """State carried between processing steps."""

    previous: BengaliChar | None = None
    previous_output: str | None = None
    prevent_conjunct: bool = False