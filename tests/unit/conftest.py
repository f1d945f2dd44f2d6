"""Shared test fixtures for word enrichment unit tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from word_enrichment.api_helpers.base import DictionaryLookup, TranslationLookup
from word_enrichment.api_helpers.request_pacer import RequestPacer
from word_enrichment.models import (
    DictionaryLookupResult,
    TranslationUnavailable,
    VocabularyEntry,
)


class FakeDictionary(DictionaryLookup):
    """In-memory dictionary adapter returning canned results."""

    def __init__(
        self,
        results: dict[str, DictionaryLookupResult] | None = None,
        errors: dict[str, Exception] | None = None,
    ) -> None:
        self.results = results or {}
        self.errors = errors or {}
        self.calls: list[str] = []
        self.closed = False

    async def fetch(self, word: str) -> DictionaryLookupResult | None:
        self.calls.append(word)
        if word in self.errors:
            raise self.errors[word]
        return self.results.get(word)

    async def close(self) -> None:
        self.closed = True


class FakeTranslator(TranslationLookup):
    """In-memory translation adapter; unknown texts are unavailable."""

    def __init__(self, translations: dict[str, str] | None = None) -> None:
        self.translations = translations or {}
        self.calls: list[str] = []

    async def fetch(self, text: str) -> str | TranslationUnavailable:
        self.calls.append(text)
        if text in self.translations:
            return self.translations[text]
        return TranslationUnavailable(text, "no canned translation")


def dictionary_result(
    word: str,
    part_of_speech: str = "adjective",
    definition: str = "",
    example: str | None = None,
) -> DictionaryLookupResult:
    """Build a one-meaning dictionary result in the upstream JSON shape."""
    definitions = [{"definition": definition, "example": example}] if definition else []
    return DictionaryLookupResult.model_validate(
        {
            "word": word,
            "meanings": [{"partOfSpeech": part_of_speech, "definitions": definitions}],
        }
    )


@pytest.fixture
def fake_dictionary() -> type[FakeDictionary]:
    return FakeDictionary


@pytest.fixture
def fake_translator() -> type[FakeTranslator]:
    return FakeTranslator


@pytest.fixture
def make_dictionary_result() -> Callable[..., DictionaryLookupResult]:
    return dictionary_result


@pytest.fixture
def no_wait_pacer() -> RequestPacer:
    return RequestPacer(interval_seconds=0)


@pytest.fixture
def make_entry() -> Callable[..., VocabularyEntry]:
    """Factory for entries with real (non-placeholder) content by default."""

    def _make(**overrides: Any) -> VocabularyEntry:
        data: dict[str, Any] = {
            "word": "ephemeral",
            "cefr_level": "C1",
            "part_of_speech": "adjective",
            "definition_en": "Lasting for a very short time.",
            "definition_tr": "kısa süreli",
            "example_sentence": "Fame in the world of pop is ephemeral.",
            "frequency_rank": 5012,
        }
        data.update(overrides)
        return VocabularyEntry.model_validate(data)

    return _make


@pytest.fixture
def seed_words() -> list[dict[str, Any]]:
    """Entries as produced by the word generator, placeholders included."""
    return [
        {
            "word": "ephemeral",
            "cefr_level": "C1",
            "part_of_speech": "noun",
            "definition_en": "Definition for ephemeral",
            "definition_tr": "ephemeral",
            "example_sentence": "Example sentence with ephemeral.",
            "frequency_rank": 5012,
        },
        {
            "word": "apple",
            "cefr_level": "A1",
            "part_of_speech": "noun",
            "definition_en": "A round fruit with red or green skin.",
            "definition_tr": "elma",
            "example_sentence": "She ate an apple for lunch.",
            "frequency_rank": 1003,
            "pronunciation": "/ˈæp.əl/",
        },
        {
            "word": "run",
            "cefr_level": "A1",
            "part_of_speech": "verb",
            "definition_en": "Definition for run",
            "definition_tr": "run (çeviri bulunamadı)",
            "example_sentence": "Example sentence with run.",
            "frequency_rank": 1010,
        },
    ]


@pytest.fixture
def source_file(tmp_path: Path, seed_words: list[dict[str, Any]]) -> Path:
    """Write a seed dataset to a temporary `data/words.json`."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    path = data_dir / "words.json"
    path.write_text(
        json.dumps(
            {"words": seed_words, "total_count": len(seed_words)},
            ensure_ascii=False,
            indent=2,
        ),
        encoding="utf-8",
    )
    return path
