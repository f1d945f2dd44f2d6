"""Abstract base classes for the external lookup services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from word_enrichment.models import DictionaryLookupResult, TranslationUnavailable


class LookupService(ABC):
    """Common lifecycle for lookup adapters.

    Adapters that hold network resources override `close()`; the async context
    manager protocol delegates to it and never suppresses exceptions.
    """

    async def close(self) -> None:
        """Release resources held by the adapter."""
        return None

    async def __aenter__(self) -> LookupService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


class DictionaryLookup(LookupService):
    """Dictionary definition lookup.

    All dictionary adapters must implement this interface so the field improver
    can run against the real service or an in-memory fake.
    """

    @abstractmethod
    async def fetch(self, word: str) -> DictionaryLookupResult | None:
        """Look up `word`; return None on a miss or any transport failure."""
        pass


class TranslationLookup(LookupService):
    """Machine translation for a fixed language pair."""

    @abstractmethod
    async def fetch(self, text: str) -> str | TranslationUnavailable:
        """Translate `text`; return TranslationUnavailable when no usable result."""
        pass
