import logging
from typing import Optional

import torch

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def seconds_to_samples(seconds: float, sample_rate: int) -> int:
    """floor(seconds * sample_rate) for non-negative durations."""
    return int(seconds * sample_rate)


# -----------------------------------------------------------------------------
# Linear ADSR applied over a whole buffer
# -----------------------------------------------------------------------------

class ADSR:
    """
    Linear four-stage envelope stretched over a fixed-length buffer.
    Timeline: Attack(0 -> 1) -> Decay(1 -> sustain) -> Sustain -> Release(sustain -> 0).
    The sustain region is whatever is left after attack, decay and release; release
    always ends at the last sample.

    When attack + decay + release exceed the buffer, the sustain region is negative:
    attack and decay keep their lengths, and the release ramp stays anchored to the
    buffer end, so it starts part-way down (a step at the decay/release boundary).
    Regions that fall past the end are simply cut off.
    """

    def __init__(
        self,
        sample_rate: int,
        attack_s: float,
        decay_s: float,
        sustain_level: float,
        release_s: float,
    ):
        self.sample_rate = sample_rate
        self.attack_s = float(attack_s)
        self.decay_s = float(decay_s)
        self.sustain_level = float(sustain_level)
        self.release_s = float(release_s)

    def render(self, num_samples: int) -> torch.Tensor:
        """Gain curve of length num_samples (float64)."""
        n = num_samples
        a = seconds_to_samples(self.attack_s, self.sample_rate)
        d = seconds_to_samples(self.decay_s, self.sample_rate)
        r = seconds_to_samples(self.release_s, self.sample_rate)
        s = n - a - d - r
        sustain = self.sustain_level

        if s < 0:
            logger.debug(
                "ADSR regions (a=%d d=%d r=%d) exceed buffer of %d samples; release starts early",
                a, d, r, n,
            )

        i = torch.arange(n, dtype=torch.float64)
        env = torch.full((n,), sustain, dtype=torch.float64)

        in_attack = i < a
        in_decay = ~in_attack & (i < a + d)
        in_release = ~in_attack & ~in_decay & (i >= a + d + s)

        # ---- Attack: 0 -> 1 ----
        if a > 0:
            env[in_attack] = i[in_attack] / a

        # ---- Decay: 1 -> sustain ----
        if d > 0:
            env[in_decay] = 1 - ((i[in_decay] - a) / d) * (1 - sustain)

        # ---- Release: sustain -> 0, ends at the last sample ----
        if r > 0:
            env[in_release] = sustain * (1 - (i[in_release] - a - d - s) / r)

        return env

    def apply(self, buffer: Optional[torch.Tensor]) -> Optional[torch.Tensor]:
        """
        Multiply buffer by the envelope in place and return the same tensor.
        Applying twice compounds the shape; nothing is re-normalized.
        """
        if buffer is None:
            return None
        env = self.render(buffer.shape[-1])
        buffer.mul_(env.to(dtype=buffer.dtype, device=buffer.device))
        return buffer
