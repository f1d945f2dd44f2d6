"""Placeholder detection for generated seed data.

The word generator fills gaps with stub strings ("Definition for <word>",
"Example sentence with <word>.", "<word> (çeviri bulunamadı)"). These helpers
tell stubs apart from real content. The markers and the length threshold are
kept as-is so that existing datasets are classified the same way.
"""

DEFINITION_PLACEHOLDER = "Definition for"
EXAMPLE_PLACEHOLDER = "Example sentence with"
TURKISH_PLACEHOLDERS = ("(Türkçe çeviri)", "(çeviri bulunamadı)")
MIN_CONTENT_LENGTH = 10

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


def is_substantive(text: str | None, placeholder: str) -> bool:
    """Return True if `text` is real content rather than a generated stub.

    Args:
        text: Candidate value.
        placeholder: Marker substring identifying generated stubs.

    Returns:
        True when the text is longer than MIN_CONTENT_LENGTH characters and does
        not contain the placeholder marker.
    """
    if not text:
        return False
    return placeholder not in text and len(text) > MIN_CONTENT_LENGTH


def is_substantive_definition(text: str | None) -> bool:
    return is_substantive(text, DEFINITION_PLACEHOLDER)


def is_substantive_example(text: str | None) -> bool:
    return is_substantive(text, EXAMPLE_PLACEHOLDER)


def needs_turkish_translation(definition_tr: str, word: str) -> bool:
    """Return True if the Turkish definition was never really translated.

    Args:
        definition_tr: Current Turkish definition.
        word: The English headword.

    Returns:
        True when the value carries one of the generator's placeholder markers
        or is just the English word copied over.
    """
    if definition_tr == word:
        return True
    return any(marker in definition_tr for marker in TURKISH_PLACEHOLDERS)
