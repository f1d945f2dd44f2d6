import pytest

from word_enrichment.utils.placeholders import (
    is_substantive_definition,
    is_substantive_example,
    needs_turkish_translation,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Lasting for a very short time.", True),
        ("Short-lived", True),  # 11 characters
        ("Very brief", False),  # 10 characters
        ("Definition for ephemeral", False),
        ("", False),
        (None, False),
    ],
)
def test_is_substantive_definition(text, expected):
    assert is_substantive_definition(text) is expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("The flowers are ephemeral.", True),
        ("Example sentence with ephemeral.", False),
        ("Short one.", False),
        (None, False),
    ],
)
def test_is_substantive_example(text, expected):
    assert is_substantive_example(text) is expected


def test_definition_marker_does_not_reject_examples():
    assert is_substantive_example("Definition for the win, she said.")


@pytest.mark.parametrize(
    "definition_tr,expected",
    [
        ("ephemeral", True),
        ("(Türkçe çeviri)", True),
        ("ephemeral (çeviri bulunamadı)", True),
        ("geçici", False),
        ("Ephemeral", False),
        ("ephemeral (çeviri alınamadı)", False),
    ],
)
def test_needs_turkish_translation(definition_tr, expected):
    assert needs_turkish_translation(definition_tr, "ephemeral") is expected
