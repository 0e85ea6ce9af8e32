"""
Tests for word validation and normalization.

Tests organized by behaviour:
- TestNormalizeWord: trimming, lowercasing, None passthrough
- TestCheckWord: rejection values and their payloads
- TestValidateWord: raised InvalidWordError
- TestIsValidWord: predicate form
"""

from __future__ import annotations

import pytest

from word_counter.core.exceptions import InvalidWordError
from word_counter.validators import (
    REASON_EMPTY,
    REASON_NON_ALPHABETIC,
    InvalidWord,
    check_word,
    is_valid_word,
    normalize_word,
    validate_word,
)

# =============================================================================
# Constants
# =============================================================================

VALID_WORDS = ["hello", "HELLO", "a", "  padded  ", "MiXeD"]
INVALID_WORDS = ["", "   ", "hello123", "hello world", "hello-world", "hello!", "flör"]


# =============================================================================
# TestNormalizeWord
# =============================================================================


class TestNormalizeWord:
    """Test normalize_word()."""

    def test_trims_and_lowercases(self) -> None:
        """Surrounding whitespace is removed and letters are lowercased."""
        assert normalize_word(" HeLLo ") == "hello"

    def test_none_passes_through(self) -> None:
        """None is returned unchanged."""
        assert normalize_word(None) is None

    def test_never_fails_on_invalid_content(self) -> None:
        """Normalization is total, even for words validation would reject."""
        assert normalize_word(" Hello World1 ") == "hello world1"

    def test_whitespace_only_becomes_empty(self) -> None:
        """Whitespace-only input normalizes to the empty string."""
        assert normalize_word("\t  \n") == ""


# =============================================================================
# TestCheckWord
# =============================================================================


class TestCheckWord:
    """Test check_word() tagged results."""

    @pytest.mark.parametrize("word", VALID_WORDS)
    def test_valid_words_return_none(self, word: str) -> None:
        """Valid words produce no rejection."""
        assert check_word(word) is None

    def test_none_rejected_with_none_payload(self) -> None:
        """None input is rejected and carries a None payload."""
        result = check_word(None)

        assert result == InvalidWord(reason=REASON_EMPTY, raw_input=None)

    def test_empty_rejected(self) -> None:
        """Empty string is rejected as empty."""
        result = check_word("")

        assert result is not None
        assert result.reason == REASON_EMPTY
        assert result.raw_input == ""

    def test_whitespace_only_keeps_untrimmed_payload(self) -> None:
        """Whitespace-only input is echoed back exactly as sent."""
        result = check_word("   ")

        assert result is not None
        assert result.reason == REASON_EMPTY
        assert result.raw_input == "   "

    def test_non_alphabetic_reason_names_trimmed_word(self) -> None:
        """The reason quotes the trimmed word; the payload is untrimmed."""
        result = check_word(" hello123 ")

        assert result is not None
        assert result.reason == f"{REASON_NON_ALPHABETIC}: hello123"
        assert result.raw_input == " hello123 "

    @pytest.mark.parametrize("word", ["hello world", "hello-world", "café", "abc_def"])
    def test_full_match_required(self, word: str) -> None:
        """Any character outside [a-zA-Z] rejects the word."""
        result = check_word(word)

        assert result is not None
        assert result.reason.startswith(REASON_NON_ALPHABETIC)

    def test_result_is_frozen(self) -> None:
        """InvalidWord should be immutable."""
        result = InvalidWord(reason=REASON_EMPTY, raw_input="")
        with pytest.raises(AttributeError):
            result.reason = "other"  # type: ignore[misc]


# =============================================================================
# TestValidateWord
# =============================================================================


class TestValidateWord:
    """Test validate_word() raising."""

    @pytest.mark.parametrize("word", VALID_WORDS)
    def test_valid_words_pass(self, word: str) -> None:
        """Valid words do not raise."""
        validate_word(word)

    @pytest.mark.parametrize("word", INVALID_WORDS)
    def test_invalid_words_raise_with_raw_input(self, word: str) -> None:
        """Invalid words raise and carry the exact input."""
        with pytest.raises(InvalidWordError) as exc_info:
            validate_word(word)

        assert exc_info.value.invalid_word == word

    def test_none_raises_with_null_message(self) -> None:
        """None raises with a message mentioning null and a None payload."""
        with pytest.raises(InvalidWordError) as exc_info:
            validate_word(None)

        assert exc_info.value.invalid_word is None
        assert "null" in str(exc_info.value)


# =============================================================================
# TestIsValidWord
# =============================================================================


class TestIsValidWord:
    """Test is_valid_word()."""

    def test_true_for_valid(self) -> None:
        assert is_valid_word("Flower") is True

    def test_false_for_invalid(self) -> None:
        assert is_valid_word("flower42") is False
        assert is_valid_word(None) is False
