"""
Emoji -> recipe lookup with a per-session sound cache.

The cache is never evicted, and the per-emoji render locks live as long as the
mapper. A recipe that returns None is cached as "no sound" and is not retried
until clear_cache(); this also applies to transient failures such as an engine
created without a backend.
"""
import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Tuple

import torch

from sfx_engine.core.engine import AudioEngine
from sfx_engine.core.types import Recipe, SoundInfo
from sfx_engine.recipes import RECIPE_TABLE, generic_playful

logger = logging.getLogger(__name__)

# Display order for the emoji grid.
POPULAR_EMOJIS = (
    "🔔", "😂", "🚗", "🦎", "🐱", "✨", "💥", "🎉",
    "🐶", "🎵", "⚡", "🌊", "👏", "🍎", "📱", "⚽",
    "🚂", "🎸", "💨", "🔥", "🎯", "🦆", "📞", "🥁",
)


class EmojiSoundMapper:
    def __init__(
        self,
        engine: AudioEngine,
        recipe_table: Iterable[Tuple[str, Recipe]] = RECIPE_TABLE,
        fallback: Recipe = generic_playful,
    ):
        self.engine = engine
        self.fallback = fallback

        mappings: Dict[str, Recipe] = {}
        for emoji, recipe in recipe_table:
            previous = mappings.get(emoji)
            if previous is not None:
                logger.debug("Emoji %s registered twice: %s replaces %s", emoji, recipe.__name__, previous.__name__)
            mappings[emoji] = recipe
        self.emoji_mappings = MappingProxyType(mappings)

        self._cache: Dict[str, Optional[torch.Tensor]] = {}
        self._cache_lock = threading.Lock()
        self._key_locks: Dict[str, threading.Lock] = {}

    def get_sound_for_emoji(self, emoji: str) -> Optional[torch.Tensor]:
        """
        Cached buffer for emoji, rendering it on first request.
        Concurrent first requests for the same emoji render it once.
        """
        with self._cache_lock:
            if emoji in self._cache:
                return self._cache[emoji]
            key_lock = self._key_locks.setdefault(emoji, threading.Lock())

        with key_lock:
            with self._cache_lock:
                if emoji in self._cache:
                    return self._cache[emoji]

            recipe = self.emoji_mappings.get(emoji)
            if recipe is None:
                logger.debug("No recipe for %s, using %s", emoji, self.fallback.__name__)
                recipe = self.fallback
            sound = recipe(self.engine)
            if sound is None:
                logger.warning("Recipe %s produced no sound for %s; caching the miss", recipe.__name__, emoji)

            with self._cache_lock:
                self._cache[emoji] = sound
            return sound

    def is_cached(self, emoji: str) -> bool:
        with self._cache_lock:
            return emoji in self._cache

    def get_popular_emojis(self) -> List[str]:
        return list(POPULAR_EMOJIS)

    def mapped_emojis(self) -> List[str]:
        return list(self.emoji_mappings.keys())

    def has_mapping(self, emoji: str) -> bool:
        return emoji in self.emoji_mappings

    def get_sound_info(self, emoji: str) -> SoundInfo:
        custom = self.has_mapping(emoji)
        return SoundInfo(emoji=emoji, has_custom_mapping=custom, sound_type="custom" if custom else "generic")

    def clear_cache(self) -> None:
        """
        Drop every cached sound. Per-emoji locks are kept for the mapper's lifetime
        (one per distinct emoji requested), so a render already waiting on a lock
        still shares it with requests that arrive after the clear.
        """
        with self._cache_lock:
            dropped = len(self._cache)
            self._cache.clear()
        logger.info("Sound cache cleared (%d entries)", dropped)
