import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from sfx_engine.mapper.validation import is_valid_emoji, utf16_length


@pytest.mark.parametrize("text", ["🔔", "😂", "⚡", "✨", "✈️", "🦄", "🤖", "🫠", "🇺🇸"[:1]])
def test_valid_emoji(text):
    assert is_valid_emoji(text)


@pytest.mark.parametrize("text", ["", "a", "ab", "🔔🔔", "🔔a", "🇺🇸", "🌧️"])
def test_invalid_emoji(text):
    assert not is_valid_emoji(text)


def test_utf16_length_counts_surrogate_pairs():
    assert utf16_length("a") == 1
    assert utf16_length("🔔") == 2
    assert utf16_length("✈️") == 2
    assert utf16_length("🌧️") == 3


def test_symbol_text_has_no_length_limit():
    assert is_valid_emoji("☀☀☀")
    assert is_valid_emoji("go ⚡")
    assert not is_valid_emoji("go 🔔")
