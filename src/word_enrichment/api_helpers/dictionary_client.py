"""Dictionary lookups against dictionaryapi.dev.

This module provides a small client responsible for:
- Performing one HTTP GET per word.
- Picking the first dictionary entry from the response.
- Mapping it to `DictionaryLookupResult`.

Every failure (transport error, non-2xx status, empty or malformed body) is
logged and reported as a miss (`None`); nothing is raised to the caller.
"""

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import aiohttp
from pydantic import ValidationError

from word_enrichment.api_helpers.base import DictionaryLookup
from word_enrichment.models import DictionaryLookupResult

logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"


def _first_entry(payload: Any) -> dict[str, Any] | None:
    """Return the first dictionary entry of a response body.

    The service answers with a JSON array of entries; a bare object is
    accepted as a single entry.
    """
    if isinstance(payload, list):
        return payload[0] if payload and isinstance(payload[0], dict) else None
    if isinstance(payload, dict) and payload:
        return payload
    return None


class DictionaryClient(DictionaryLookup):
    """HTTP client for the free dictionary API.

    Args:
        base_url: Entries endpoint; the URL-encoded word is appended to it.
        session: Optional aiohttp session to reuse. When omitted, the client
            creates one lazily on first use and closes it in `close()`.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_DICTIONARY_API_URL,
        session: aiohttp.ClientSession | Any | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_session = session is None
        self.session = session

    def _get_session(self) -> Any:
        if self.session is None:
            self.session = aiohttp.ClientSession(
                headers={"Accept": "application/json"}
            )
        return self.session

    async def fetch(self, word: str) -> DictionaryLookupResult | None:
        """Look up a word.

        Args:
            word: Headword to look up.

        Returns:
            The first dictionary entry, or None on a miss or failure.
        """
        url = f"{self._base_url}/{quote(word, safe='')}"
        logger.info("Fetching definition for: %s", word)

        try:
            async with self._get_session().get(url) as response:
                if not 200 <= response.status < 300:
                    logger.warning(
                        "Dictionary API request failed for word: %s (%s)",
                        word,
                        response.status,
                    )
                    return None
                payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning("Error fetching definition for %s: %s", word, e)
            return None

        entry = _first_entry(payload)
        if entry is None:
            logger.warning("Dictionary API returned no entry for word: %s", word)
            return None

        try:
            return DictionaryLookupResult.model_validate(entry)
        except ValidationError as e:
            logger.warning("Malformed dictionary entry for %s: %s", word, e)
            return None

    async def close(self) -> None:
        """Close the underlying HTTP session if this client created it."""
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None
