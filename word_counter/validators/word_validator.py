"""Word validation and normalization.

Accepted words are a single run of ASCII letters once surrounding
whitespace is removed. check_word() reports problems as a value;
validate_word() raises them as InvalidWordError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from word_counter.core.exceptions import InvalidWordError

# === Rejection Reason Constants ===

REASON_EMPTY: Final[str] = "Word cannot be null or empty"
REASON_NON_ALPHABETIC: Final[str] = "Word contains non-alphabetic characters"

ALPHABETIC_PATTERN: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z]+")


@dataclass(frozen=True, slots=True)
class InvalidWord:
    """A rejected word.

    Attributes:
        reason: Human-readable rejection message
        raw_input: The input exactly as received (None only for None input)
    """

    reason: str
    raw_input: str | None

    def to_error(self) -> InvalidWordError:
        """Build the exception form of this rejection."""
        return InvalidWordError(self.reason, self.raw_input)


def check_word(raw: str | None) -> InvalidWord | None:
    """Check whether raw can be counted.

    Args:
        raw: Caller-supplied word

    Returns:
        InvalidWord describing the problem, or None if the word is valid
    """
    if raw is None:
        return InvalidWord(reason=REASON_EMPTY, raw_input=None)

    trimmed = raw.strip()
    if not trimmed:
        return InvalidWord(reason=REASON_EMPTY, raw_input=raw)

    if ALPHABETIC_PATTERN.fullmatch(trimmed) is None:
        return InvalidWord(
            reason=f"{REASON_NON_ALPHABETIC}: {trimmed}",
            raw_input=raw,
        )

    return None


def validate_word(raw: str | None) -> None:
    """Raise InvalidWordError if raw cannot be counted.

    Raises:
        InvalidWordError: carrying the untrimmed input
    """
    invalid = check_word(raw)
    if invalid is not None:
        raise invalid.to_error()


def is_valid_word(raw: str | None) -> bool:
    return check_word(raw) is None


def normalize_word(raw: str | None) -> str | None:
    """Trim and lowercase raw. None passes through unchanged."""
    if raw is None:
        return None
    return raw.strip().lower()
