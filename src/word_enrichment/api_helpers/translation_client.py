"""Machine translation via the MyMemory API.

One GET per text for a fixed language pair. A translation is only returned when
the service reports `responseStatus == 200` with non-empty text; every other
outcome is returned as `TranslationUnavailable` so callers can skip it.
"""

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from word_enrichment.api_helpers.base import TranslationLookup
from word_enrichment.models import TranslationResult, TranslationUnavailable

logger = logging.getLogger(__name__)

DEFAULT_TRANSLATION_API_URL = "https://api.mymemory.translated.net/get"


def _preview(text: str, limit: int = 50) -> str:
    return text if len(text) <= limit else f"{text[:limit]}..."


class TranslationClient(TranslationLookup):
    """HTTP client for the MyMemory translation API.

    Args:
        base_url: Translation endpoint.
        source_language: Source language code (e.g. "en").
        target_language: Target language code (e.g. "tr").
        session: Optional aiohttp session to reuse. When omitted, the client
            creates one lazily and closes it in `close()`.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_TRANSLATION_API_URL,
        source_language: str = "en",
        target_language: str = "tr",
        session: aiohttp.ClientSession | Any | None = None,
    ) -> None:
        self._base_url = base_url
        self.langpair = f"{source_language}|{target_language}"
        self._owns_session = session is None
        self.session = session

    def _get_session(self) -> Any:
        if self.session is None:
            self.session = aiohttp.ClientSession(
                headers={"Accept": "application/json"}
            )
        return self.session

    async def fetch(self, text: str) -> str | TranslationUnavailable:
        """Translate a word or sentence.

        Args:
            text: Text in the source language.

        Returns:
            The translated text, or TranslationUnavailable carrying `text` and
            the reason the translation was rejected.
        """
        logger.info("Translating (%s): %s", self.langpair, _preview(text))
        params = {"q": text, "langpair": self.langpair}

        try:
            async with self._get_session().get(
                self._base_url, params=params
            ) as response:
                if not 200 <= response.status < 300:
                    logger.warning(
                        "Translation API request failed (%s)", response.status
                    )
                    return TranslationUnavailable(text, f"http {response.status}")
                payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning("Error translating text %r: %s", _preview(text), e)
            return TranslationUnavailable(text, "transport error")

        try:
            result = TranslationResult.from_payload(payload)
        except ValidationError as e:
            logger.warning("Malformed translation payload for %r: %s", _preview(text), e)
            return TranslationUnavailable(text, "malformed payload")

        if result.quota_finished:
            logger.warning("Translation quota finished for %s", self.langpair)

        if not result.is_usable:
            reason = (
                f"status {result.status_code}"
                if result.status_code != 200
                else "empty translation"
            )
            logger.warning("Translation failed for %r (%s)", _preview(text), reason)
            return TranslationUnavailable(text, reason)

        return result.translated_text

    async def close(self) -> None:
        """Close the underlying HTTP session if this client created it."""
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None
