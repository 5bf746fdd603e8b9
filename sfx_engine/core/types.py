from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

import torch


class WaveKind(str, Enum):
    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"

    @classmethod
    def parse(cls, value: Union["WaveKind", str]) -> Optional["WaveKind"]:
        """Return the matching WaveKind, or None for an unknown name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class EnvelopeParams:
    attack: float = 0.01   # seconds
    decay: float = 0.1     # seconds
    sustain: float = 0.7   # level, 0..1
    release: float = 0.2   # seconds


@dataclass(frozen=True)
class SoundInfo:
    emoji: str
    has_custom_mapping: bool
    sound_type: str  # "custom" or "generic"

    def to_dict(self) -> dict:
        return {
            "emoji": self.emoji,
            "hasCustomMapping": self.has_custom_mapping,
            "soundType": self.sound_type,
        }


# A recipe takes the engine it should render with and returns a mono buffer
# (or None when the engine could not produce one).
Recipe = Callable[["AudioEngine"], Optional[torch.Tensor]]  # noqa: F821
