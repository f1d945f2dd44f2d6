"""Enrichment utility functions.

This package provides the placeholder heuristics used to decide whether a
dataset field holds generated stub text or real content.
"""

from word_enrichment.utils.placeholders import (
    DEFINITION_PLACEHOLDER,
    EXAMPLE_PLACEHOLDER,
    MIN_CONTENT_LENGTH,
    TURKISH_PLACEHOLDERS,
    is_substantive,
    is_substantive_definition,
    is_substantive_example,
    needs_turkish_translation,
)

__all__ = [
    "DEFINITION_PLACEHOLDER",
    "EXAMPLE_PLACEHOLDER",
    "MIN_CONTENT_LENGTH",
    "TURKISH_PLACEHOLDERS",
    "is_substantive",
    "is_substantive_definition",
    "is_substantive_example",
    "needs_turkish_translation",
]
