"""
MyMemory translator - live remote translation provider.

Pattern: Tool Proxy
- Uses httpx.Client for blocking HTTP requests with a per-call timeout
- Wraps every transport and parsing failure in TranslationError

Endpoint: GET {base_url}/get?q=<text>&langpair=<source>|<target>
Response: {"responseData": {"translatedText": str, "match": float}, ...}
"""

from __future__ import annotations

from typing import Any, Final

import httpx

from word_counter.core.exceptions import TranslationError
from word_counter.translation.translator import TranslationResult

# =============================================================================
# Constants
# =============================================================================

DEFAULT_BASE_URL: Final[str] = "https://api.mymemory.translated.net"
ENDPOINT_PATH: Final[str] = "/get"
DEFAULT_TIMEOUT: Final[float] = 5.0

# Response field names
FIELD_RESPONSE_DATA: Final[str] = "responseData"
FIELD_TRANSLATED_TEXT: Final[str] = "translatedText"
FIELD_MATCH: Final[str] = "match"


class MyMemoryTranslator:
    """Translator backed by the MyMemory public translation API.

    Usage:
        translator = MyMemoryTranslator(timeout=5.0)
        result = translator.translate("perro", "es", "en")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize MyMemoryTranslator.

        Args:
            base_url: Base URL of the MyMemory API
            timeout: Request timeout in seconds, applied per call
        """
        self._base_url = base_url.rstrip("/")
        self.timeout = timeout

    def translate(
        self, text: str, source_language: str, target_language: str
    ) -> TranslationResult | None:
        """Translate text via the MyMemory API.

        Args:
            text: Text to translate
            source_language: Language code of text
            target_language: Language code to translate into

        Returns:
            TranslationResult, or None if the response carries no responseData

        Raises:
            TranslationError: On timeout, connection error, non-200 status,
                or malformed response
        """
        url = f"{self._base_url}{ENDPOINT_PATH}"
        params = {"q": text, "langpair": f"{source_language}|{target_language}"}

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(url, params=params)
        except httpx.TimeoutException as e:
            msg = f"Timeout translating '{text}' from {source_language}: {e}"
            raise TranslationError(msg) from e
        except httpx.ConnectError as e:
            msg = f"Connection error translating '{text}' from {source_language}: {e}"
            raise TranslationError(msg) from e
        except httpx.HTTPError as e:
            msg = f"HTTP error translating '{text}' from {source_language}: {e}"
            raise TranslationError(msg) from e

        if response.status_code != 200:
            msg = (
                f"Translation service returned status {response.status_code} "
                f"for '{text}' from {source_language}"
            )
            raise TranslationError(msg)

        try:
            data = response.json()
        except ValueError as e:
            msg = f"Translation service returned invalid JSON for '{text}': {e}"
            raise TranslationError(msg) from e

        return self._parse_response(data, source_language, target_language)

    def _parse_response(
        self, data: Any, source_language: str, target_language: str
    ) -> TranslationResult | None:
        """Parse a MyMemory JSON body.

        Raises:
            TranslationError: If responseData is present but incomplete
        """
        if not isinstance(data, dict):
            msg = f"Invalid response from translation service: {data!r}"
            raise TranslationError(msg)

        response_data = data.get(FIELD_RESPONSE_DATA)
        if response_data is None:
            return None

        if (
            not isinstance(response_data, dict)
            or FIELD_TRANSLATED_TEXT not in response_data
            or FIELD_MATCH not in response_data
        ):
            msg = f"Invalid response from translation service: missing fields in {data}"
            raise TranslationError(msg)

        try:
            confidence = float(response_data[FIELD_MATCH])
        except (TypeError, ValueError) as e:
            msg = f"Invalid match score from translation service: {response_data[FIELD_MATCH]!r}"
            raise TranslationError(msg) from e

        return TranslationResult(
            translated_text=str(response_data[FIELD_TRANSLATED_TEXT]).strip(),
            confidence=confidence,
            source_language=source_language,
            target_language=target_language,
        )
