"""
Surface Filter for remote translation candidates.

The remote translation service is noisy: it echoes input back, returns
phrases, or answers in the wrong language. This module applies cheap
surface checks before a candidate is accepted as a canonical form.

Checks, in order:
1. length - between 2 and 20 characters inclusive
2. diacritic - none of the blacklisted non-English letters
3. non_alphabetic - ASCII letters only
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

# =============================================================================
# Constants
# =============================================================================

MIN_LENGTH: Final[int] = 2
MAX_LENGTH: Final[int] = 20

BLACKLISTED_DIACRITICS: Final[frozenset[str]] = frozenset("ñçüäöéèàì")

REASON_LENGTH: Final[str] = "length"
REASON_DIACRITIC: Final[str] = "diacritic"
REASON_NON_ALPHABETIC: Final[str] = "non_alphabetic"

REGEX_ASCII_WORD = re.compile(r"[a-z]+")


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True, slots=True)
class SurfaceFilterResult:
    """Result from a rejected surface check.

    Attributes:
        rejection_reason: Which check failed (length, diacritic, non_alphabetic)
        candidate: The candidate text that was rejected
    """

    rejection_reason: str
    candidate: str


# =============================================================================
# Checks
# =============================================================================


def check_candidate(candidate: str) -> SurfaceFilterResult | None:
    """Check whether a translation candidate looks like an English word.

    Args:
        candidate: Translated text returned by the provider

    Returns:
        SurfaceFilterResult if rejected, None if the candidate passes
    """
    word = candidate.lower()

    if not MIN_LENGTH <= len(word) <= MAX_LENGTH:
        return SurfaceFilterResult(rejection_reason=REASON_LENGTH, candidate=candidate)

    if any(char in BLACKLISTED_DIACRITICS for char in word):
        return SurfaceFilterResult(
            rejection_reason=REASON_DIACRITIC, candidate=candidate
        )

    if REGEX_ASCII_WORD.fullmatch(word) is None:
        return SurfaceFilterResult(
            rejection_reason=REASON_NON_ALPHABETIC, candidate=candidate
        )

    return None


def is_plausible_english(candidate: str) -> bool:
    """Return True if the candidate passes every surface check."""
    return check_candidate(candidate) is None
