from typing import Optional

import torch


class Noise:
    @staticmethod
    def white(
        duration: float,
        sample_rate: int,
        intensity: float = 0.1,
        generator: Optional[torch.Generator] = None,
    ) -> torch.Tensor:
        """Generates uniform white noise in [-intensity, intensity)."""
        num_samples = max(0, int(duration * sample_rate))
        return (torch.rand(num_samples, generator=generator, dtype=torch.float64) * 2 - 1) * intensity
