"""Adapters for the external dictionary and translation services."""

from word_enrichment.api_helpers.base import (
    DictionaryLookup,
    LookupService,
    TranslationLookup,
)
from word_enrichment.api_helpers.dictionary_client import DictionaryClient
from word_enrichment.api_helpers.request_pacer import RequestPacer
from word_enrichment.api_helpers.translation_client import TranslationClient

__all__ = [
    "DictionaryClient",
    "DictionaryLookup",
    "LookupService",
    "RequestPacer",
    "TranslationClient",
    "TranslationLookup",
]
