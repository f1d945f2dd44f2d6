"""
Per-entry field improvement.

Decides, for one vocabulary entry, which dictionary and translation values to
accept. Network access is isolated behind the lookup adapters; every adapter
call is preceded by a pacer wait, and the dictionary call always comes before
any translation call.
"""

import logging
from typing import Any

from word_enrichment.api_helpers.base import DictionaryLookup, TranslationLookup
from word_enrichment.api_helpers.request_pacer import RequestPacer
from word_enrichment.models import (
    DictionaryLookupResult,
    EnrichmentOutcome,
    TranslationUnavailable,
    VocabularyEntry,
)
from word_enrichment.utils.placeholders import (
    is_substantive_definition,
    is_substantive_example,
    needs_turkish_translation,
)

logger = logging.getLogger(__name__)

EXAMPLE_SEPARATOR = " | "


def _preview(text: str, limit: int = 50) -> str:
    return text if len(text) <= limit else f"{text[:limit]}..."


class FieldImprover:
    """
    Improve the fields of vocabulary entries from external lookups.

    Holds only the adapter handles and the pacer; it keeps no state between
    entries.

    Args:
        dictionary: Dictionary adapter.
        translator: Translation adapter for the dataset's language pair.
        pacer: Pacer awaited before every adapter call.
    """

    def __init__(
        self,
        dictionary: DictionaryLookup,
        translator: TranslationLookup,
        pacer: RequestPacer,
    ) -> None:
        self.dictionary = dictionary
        self.translator = translator
        self.pacer = pacer

    async def improve(self, entry: VocabularyEntry) -> VocabularyEntry:
        """Return an improved copy of `entry`; the input is left untouched."""
        outcome = await self.improve_with_outcome(entry)
        return outcome.entry

    async def improve_with_outcome(self, entry: VocabularyEntry) -> EnrichmentOutcome:
        """
        Improve one entry and report which fields changed.

        Steps:
            1. Dictionary lookup: part of speech, English definition, example.
            2. Turkish definition, only when the current one is a placeholder.
            3. Turkish example, appended to the English example sentence.

        Parameters:
            entry (VocabularyEntry): Entry to improve.

        Returns:
            EnrichmentOutcome: The original entry, the improved copy and the
            names of the fields whose value changed.
        """
        logger.info(f"Improving data for word: {entry.word}")
        updates: dict[str, Any] = {}

        lookup = await self._lookup_definition(entry.word)
        if lookup is not None:
            updates.update(self._dictionary_updates(lookup))

        if needs_turkish_translation(entry.definition_tr, entry.word):
            translation = await self._translate(entry.word)
            if translation is not None:
                updates["definition_tr"] = translation

        example = updates.get("example_sentence", entry.example_sentence)
        if is_substantive_example(example):
            translated_example = await self._translate(example)
            if translated_example is not None:
                updates["example_sentence"] = (
                    f"{example}{EXAMPLE_SEPARATOR}{translated_example}"
                )

        changed_fields = tuple(
            name for name, value in updates.items() if getattr(entry, name) != value
        )
        improved = entry.model_copy(update=updates) if changed_fields else entry

        self._log_summary(improved, changed_fields)
        return EnrichmentOutcome(
            original=entry, entry=improved, changed_fields=changed_fields
        )

    def _dictionary_updates(self, lookup: DictionaryLookupResult) -> dict[str, str]:
        """Map the first meaning of a dictionary entry to field updates."""
        updates: dict[str, str] = {}
        if not lookup.meanings:
            return updates

        meaning = lookup.meanings[0]
        # Dictionary is authoritative for part of speech once fetched
        if meaning.part_of_speech:
            updates["part_of_speech"] = meaning.part_of_speech

        if meaning.definitions:
            definition = meaning.definitions[0]
            if is_substantive_definition(definition.definition):
                updates["definition_en"] = definition.definition
            if is_substantive_example(definition.example):
                updates["example_sentence"] = definition.example

        return updates

    async def _lookup_definition(self, word: str) -> DictionaryLookupResult | None:
        await self.pacer.wait()
        return await self.dictionary.fetch(word)

    async def _translate(self, text: str) -> str | None:
        """Translate `text`; return None if the adapter reports it unavailable."""
        await self.pacer.wait()
        result = await self.translator.fetch(text)
        if isinstance(result, TranslationUnavailable) or not result:
            return None
        return result

    def _log_summary(
        self, entry: VocabularyEntry, changed_fields: tuple[str, ...]
    ) -> None:
        if not changed_fields:
            logger.info(f"No improvements for {entry.word}")
            return
        logger.info(f"Improved data for {entry.word} ({', '.join(changed_fields)}):")
        logger.info(f"- Definition: {_preview(entry.definition_en)}")
        logger.info(f"- Turkish: {entry.definition_tr}")
        logger.info(f"- Example: {_preview(entry.example_sentence)}")
