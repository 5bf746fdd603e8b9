"""
Audio engine context: sample rate, tensor placement and the noise generator,
plus the primitive operations every recipe is built from.

All primitives return None instead of raising when the backend is unavailable or
the request cannot produce a single sample, so a recipe degrades to "no sound".
"""
import logging
from typing import Optional, Sequence, Union

import torch

from sfx_engine.core.io import AudioIO
from sfx_engine.core.settings import DEFAULT_SAMPLE_RATE, EngineSettings
from sfx_engine.core.types import EnvelopeParams, WaveKind
from sfx_engine.dsp.envelopes import ADSR
from sfx_engine.dsp.mixer import LayerMixer, combine, overlay
from sfx_engine.dsp.noise import Noise
from sfx_engine.dsp.oscillators import Oscillator

logger = logging.getLogger(__name__)

WaveKindLike = Union[WaveKind, str]

_TONE_OSCILLATORS = {
    WaveKind.SINE: Oscillator.sine,
    WaveKind.SQUARE: Oscillator.square,
    WaveKind.SAWTOOTH: Oscillator.saw,
    WaveKind.TRIANGLE: Oscillator.triangle,
}

# No triangle branch: a triangle sweep renders silence.
_SWEEP_OSCILLATORS = {
    WaveKind.SINE: Oscillator.sine,
    WaveKind.SQUARE: Oscillator.square,
    WaveKind.SAWTOOTH: Oscillator.saw,
}


class AudioEngine:
    def __init__(
        self,
        sample_rate: int = DEFAULT_SAMPLE_RATE,
        device: Union[str, torch.device] = "cpu",
        seed: Optional[int] = None,
        available: bool = True,
    ):
        self.sample_rate = sample_rate
        self.dtype = torch.float32
        self.device = torch.device("cpu")
        self.generator: Optional[torch.Generator] = None
        if seed is not None:
            self.generator = torch.Generator().manual_seed(seed)
        self.available = available and self._init_backend(device)

    @classmethod
    def from_settings(cls, settings: EngineSettings) -> "AudioEngine":
        return cls(sample_rate=settings.sample_rate, device=settings.device, seed=settings.seed)

    def _init_backend(self, device: Union[str, torch.device]) -> bool:
        try:
            self.device = torch.device(device)
            torch.zeros(1, dtype=self.dtype, device=self.device)
        except (RuntimeError, AssertionError) as exc:
            logger.error("Audio backend not available on %s: %s", device, exc)
            return False
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def num_samples(self, duration: float) -> int:
        return int(duration * self.sample_rate)

    def _finish(self, samples: torch.Tensor) -> torch.Tensor:
        return samples.to(dtype=self.dtype, device=self.device)

    def silence(self, duration: float) -> Optional[torch.Tensor]:
        """Zeroed destination buffer of floor(duration * sample_rate) samples."""
        if not self.available:
            return None
        return torch.zeros(max(0, self.num_samples(duration)), dtype=self.dtype, device=self.device)

    def layer_mixer(self) -> LayerMixer:
        return LayerMixer(self.sample_rate)

    # ------------------------------------------------------------------
    # Generators
    # ------------------------------------------------------------------

    def generate_tone(self, frequency: float, duration: float, wave_kind: WaveKindLike = WaveKind.SINE) -> Optional[torch.Tensor]:
        """Fixed-frequency tone. Unknown wave kinds render as sine."""
        if not self.available or self.num_samples(duration) <= 0:
            return None
        kind = WaveKind.parse(wave_kind)
        if kind is None:
            logger.warning("Unknown wave kind %r for tone, using sine", wave_kind)
            kind = WaveKind.SINE
        return self._finish(_TONE_OSCILLATORS[kind](frequency, duration, self.sample_rate))

    def generate_sweep(
        self,
        start_freq: float,
        end_freq: float,
        duration: float,
        wave_kind: WaveKindLike = WaveKind.SINE,
    ) -> Optional[torch.Tensor]:
        """
        Tone whose frequency moves linearly from start_freq to end_freq.
        Triangle (and unknown kinds) are not supported and give an all-zero buffer.
        """
        n = self.num_samples(duration)
        if not self.available or n <= 0:
            return None
        kind = WaveKind.parse(wave_kind)
        oscillator = _SWEEP_OSCILLATORS.get(kind)
        if oscillator is None:
            logger.warning("Sweep has no %r waveform; rendering silence", wave_kind)
            return torch.zeros(n, dtype=self.dtype, device=self.device)
        frequency = Oscillator.linear_sweep(start_freq, end_freq, duration, self.sample_rate)
        return self._finish(oscillator(frequency, duration, self.sample_rate))

    def generate_noise(self, duration: float, intensity: float = 0.1) -> Optional[torch.Tensor]:
        if not self.available or self.num_samples(duration) <= 0:
            return None
        return self._finish(Noise.white(duration, self.sample_rate, intensity, generator=self.generator))

    # ------------------------------------------------------------------
    # Shaping and mixing
    # ------------------------------------------------------------------

    def apply_envelope(
        self,
        buffer: Optional[torch.Tensor],
        attack: float = 0.01,
        decay: float = 0.1,
        sustain: float = 0.7,
        release: float = 0.2,
    ) -> Optional[torch.Tensor]:
        """In-place linear ADSR; returns the same tensor (None passes through)."""
        if not self.available or buffer is None:
            return None
        return ADSR(self.sample_rate, attack, decay, sustain, release).apply(buffer)

    def shape(self, buffer: Optional[torch.Tensor], envelope: EnvelopeParams) -> Optional[torch.Tensor]:
        return self.apply_envelope(buffer, envelope.attack, envelope.decay, envelope.sustain, envelope.release)

    def combine_buffers(
        self,
        buffers: Sequence[Optional[torch.Tensor]],
        gains: Optional[Sequence[float]] = None,
    ) -> Optional[torch.Tensor]:
        if not self.available or not buffers:
            return None
        return combine(buffers, gains)

    def overlay(self, dest: Optional[torch.Tensor], src: Optional[torch.Tensor], offset: int, gain: float = 1.0) -> Optional[torch.Tensor]:
        """Add src into dest at a sample offset; truncates, never resizes."""
        if not self.available or dest is None:
            return None
        if src is None:
            return dest
        return overlay(dest, src, offset, gain)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def buffer_to_wav(self, buffer: torch.Tensor) -> bytes:
        return AudioIO.to_wav_bytes(buffer, self.sample_rate)
