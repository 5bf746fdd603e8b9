import re

# Anything outside the Basic Multilingual Plane (a surrogate pair in UTF-16).
ASTRAL_PATTERN = re.compile("[\U00010000-\U0010FFFF]")
# Misc symbols and dingbats.
SYMBOL_PATTERN = re.compile("[☀-➿]")

MAX_UTF16_UNITS = 2


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units (what a browser reports as string length)."""
    return len(text.encode("utf-16-le")) // 2


def is_valid_emoji(text: str) -> bool:
    """
    True for a single astral code point (1-2 UTF-16 units), or for any text
    containing a misc symbol or dingbat. The symbol branch has no length limit.
    """
    if not text:
        return False
    if ASTRAL_PATTERN.search(text) and utf16_length(text) <= MAX_UTF16_UNITS:
        return True
    return SYMBOL_PATTERN.search(text) is not None
