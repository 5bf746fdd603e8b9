"""
Buffer mixing: gain-weighted sums, offset overlays and staggered layer mixes.
Nothing here clips; summed levels may leave [-1, 1] until WAV export.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import torch


def combine(
    buffers: Sequence[Optional[torch.Tensor]],
    gains: Optional[Sequence[float]] = None,
) -> Optional[torch.Tensor]:
    """
    Sum buffers into a new tensor as long as the longest input.
    gains[i] scales buffers[i] (default 1.0, also for entries past the end of gains).
    None entries are skipped. Returns None when nothing is left to mix.
    """
    layers = []
    for index, buffer in enumerate(buffers):
        if buffer is None:
            continue
        gain = 1.0
        if gains is not None and index < len(gains):
            gain = float(gains[index])
        layers.append((buffer, gain))

    if not layers:
        return None

    ref_len = max(b.shape[-1] for b, _ in layers)
    first = layers[0][0]
    master = torch.zeros(ref_len, dtype=first.dtype, device=first.device)
    for buffer, gain in layers:
        master[: buffer.shape[-1]] += buffer * gain
    return master


def overlay(dest: torch.Tensor, src: torch.Tensor, offset: int, gain: float = 1.0) -> torch.Tensor:
    """
    Add src * gain into dest starting at sample offset, in place.
    The tail of src that would run past dest is dropped; dest is never resized.
    """
    if offset >= dest.shape[-1] or src.shape[-1] == 0:
        return dest
    start = max(0, offset)
    skip = start - offset
    count = min(src.shape[-1] - skip, dest.shape[-1] - start)
    if count <= 0:
        return dest
    dest[start:start + count] += src[skip:skip + count] * gain
    return dest


# -----------------------------------------------------------------------------
# Layer spec (gain and start time of a layer)
# -----------------------------------------------------------------------------

@dataclass
class LayerSpec:
    """Gain and start offset (seconds) for a layer."""
    name: str
    gain: float = 1.0
    offset_s: float = 0.0


# -----------------------------------------------------------------------------
# Layer mixer
# -----------------------------------------------------------------------------

class LayerMixer:
    """
    Lay named layers onto a fixed-length timeline.
    Used for staggered patterns (arpeggios, laughs, chirps) where each layer
    starts later than the previous one.
    """

    def __init__(self, sample_rate: int):
        self.sample_rate = sample_rate
        self._layers: Dict[str, Tuple[torch.Tensor, LayerSpec]] = {}

    def __len__(self) -> int:
        return len(self._layers)

    def add(self, name: str, audio: Optional[torch.Tensor], gain: float = 1.0, offset_s: float = 0.0) -> None:
        """Register a layer. Same name overwrites. A None layer is ignored."""
        if audio is None:
            return
        self._layers[name] = (audio, LayerSpec(name, gain=gain, offset_s=offset_s))

    def mix(self, master: Optional[torch.Tensor]) -> Optional[torch.Tensor]:
        """
        Render all layers into master (usually a silent buffer) in place.
        Layers running past the end are truncated. None passes through.
        """
        if master is None:
            return None
        for audio, spec in self._layers.values():
            offset = int(spec.offset_s * self.sample_rate)
            overlay(master, audio, offset, spec.gain)
        return master
