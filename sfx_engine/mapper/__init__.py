"""
Emoji lookup: recipe mapping, sound cache and input validation.
"""
from sfx_engine.mapper.emoji_mapper import EmojiSoundMapper, POPULAR_EMOJIS
from sfx_engine.mapper.validation import is_valid_emoji

__all__ = ["EmojiSoundMapper", "POPULAR_EMOJIS", "is_valid_emoji"]
