"""
Type models for the vocabulary dataset and the external lookup services.

Dataset records mirror the JSON written by the word generator (snake_case keys).
Lookup models are permissive: upstream payloads carry more keys than we use,
so only the consumed fields are modelled and extra keys are allowed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

UNAVAILABLE_MARKER = "(çeviri alınamadı)"


# =============================================================================
# Dataset records
# =============================================================================


class CEFRLevel(str, Enum):
    """Common European Framework proficiency tiers."""

    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"


class VocabularyEntry(BaseModel):
    """One word of the vocabulary dataset.

    Entries are frozen: improvements always produce a copy via
    `model_copy(update=...)`. Keys not modelled here (e.g. `pronunciation`,
    `example_tr`) are kept as extras and written back unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    word: str
    cefr_level: CEFRLevel
    part_of_speech: str = ""
    definition_en: str = ""
    definition_tr: str = ""
    example_sentence: str = ""
    frequency_rank: int

    def missing_fields(self) -> list[str]:
        """Return the names of text fields that are still empty."""
        text_fields = (
            "part_of_speech",
            "definition_en",
            "definition_tr",
            "example_sentence",
        )
        return [name for name in text_fields if not getattr(self, name).strip()]


class WordsDataset(BaseModel):
    """Top-level `{"words": [...]}` document."""

    model_config = ConfigDict(extra="allow")

    words: list[VocabularyEntry]

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


# =============================================================================
# Dictionary service (dictionaryapi.dev)
# =============================================================================


class Definition(BaseModel):
    model_config = ConfigDict(extra="allow")

    definition: str = ""
    example: str | None = None
    synonyms: list[str] = []
    antonyms: list[str] = []


class Meaning(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    part_of_speech: str = Field(default="", alias="partOfSpeech")
    definitions: list[Definition] = []


class DictionaryLookupResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    word: str
    phonetic: str | None = None
    meanings: list[Meaning] = []


# =============================================================================
# Translation service (MyMemory)
# =============================================================================


class TranslationResult(BaseModel):
    """Normalized MyMemory `/get` response."""

    model_config = ConfigDict(extra="ignore")

    translated_text: str = ""
    match_score: float = 0.0
    status_code: int
    quota_finished: bool = False

    @classmethod
    def from_payload(cls, payload: Any) -> TranslationResult:
        """Build a result from the raw MyMemory JSON body.

        Raises:
            pydantic.ValidationError: If the payload lacks a usable status code.
        """
        if not isinstance(payload, dict):
            return cls.model_validate({})
        response_data = payload.get("responseData")
        if not isinstance(response_data, dict):
            response_data = {}
        return cls.model_validate(
            {
                "translated_text": response_data.get("translatedText") or "",
                "match_score": response_data.get("match") or 0.0,
                "status_code": payload.get("responseStatus"),
                "quota_finished": bool(payload.get("quotaFinished")),
            }
        )

    @property
    def is_usable(self) -> bool:
        return self.status_code == 200 and bool(self.translated_text.strip())


@dataclass(frozen=True)
class TranslationUnavailable:
    """Tag for a translation that could not be obtained.

    Carries the text that was sent so callers can log it. The plain string
    form is only produced when the value has to be serialized.
    """

    original_text: str
    reason: str = "unavailable"

    def __str__(self) -> str:
        return f"{self.original_text} {UNAVAILABLE_MARKER}"


# =============================================================================
# Pipeline bookkeeping
# =============================================================================


@dataclass(frozen=True)
class EnrichmentOutcome:
    """Improved entry plus the names of the fields that changed."""

    original: VocabularyEntry
    entry: VocabularyEntry
    changed_fields: tuple[str, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.changed_fields)


@dataclass
class BatchResult:
    """Result of one pass over the dataset.

    `entries` always has the same length and order as the input.
    """

    entries: list[VocabularyEntry] = field(default_factory=list)
    outcomes: list[EnrichmentOutcome] = field(default_factory=list)
    failed_words: list[str] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def total(self) -> int:
        return len(self.entries)

    @property
    def changed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.changed)

    @property
    def incomplete_words(self) -> list[str]:
        return [entry.word for entry in self.entries if entry.missing_fields()]

    def summary(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "changed": self.changed_count,
            "failed": len(self.failed_words),
            "incomplete": len(self.incomplete_words),
            "elapsed_seconds": round(self.elapsed_seconds, 2),
        }
