"""
Oscillator generators sampled on a fixed grid t = i / sample_rate.
Phase always starts at 0, so layered tones line up sample for sample.
"""
from typing import Union

import torch
import numpy as np

Frequency = Union[float, torch.Tensor]


def time_axis(duration: float, sample_rate: int) -> torch.Tensor:
    """Sample times for floor(duration * sample_rate) samples (float64)."""
    num_samples = max(0, int(duration * sample_rate))
    return torch.arange(num_samples, dtype=torch.float64) / sample_rate


def _cycles(frequency: Frequency, t: torch.Tensor) -> torch.Tensor:
    # theta / 2pi
    return frequency * t


class Oscillator:
    @staticmethod
    def sine(frequency: Frequency, duration: float, sample_rate: int) -> torch.Tensor:
        """
        Generates a sine wave.

        Args:
            frequency: Frequency (Hz) - scalar, or a per-sample tensor for sweeps
            duration: Duration in seconds
            sample_rate: Sample rate

        Returns:
            sin(2*pi*f*t), float64
        """
        t = time_axis(duration, sample_rate)
        return torch.sin(2 * np.pi * _cycles(frequency, t))

    @staticmethod
    def square(frequency: Frequency, duration: float, sample_rate: int) -> torch.Tensor:
        """Generates a square wave in {-1, +1}. sin == 0 maps to +1."""
        t = time_axis(duration, sample_rate)
        s = torch.sin(2 * np.pi * _cycles(frequency, t))
        return torch.where(s >= 0, torch.ones_like(s), -torch.ones_like(s))

    @staticmethod
    def saw(frequency: Frequency, duration: float, sample_rate: int) -> torch.Tensor:
        """Generates a sawtooth wave."""
        t = time_axis(duration, sample_rate)
        x = _cycles(frequency, t)
        return 2 * (x - torch.floor(x + 0.5))

    @staticmethod
    def triangle(frequency: Frequency, duration: float, sample_rate: int) -> torch.Tensor:
        """Generates a triangle wave."""
        t = time_axis(duration, sample_rate)
        # 2 * abs(2 * (t * freq - floor(t * freq + 0.5))) - 1
        x = _cycles(frequency, t)
        return 2 * torch.abs(2 * (x - torch.floor(x + 0.5))) - 1

    @staticmethod
    def linear_sweep(start_freq: float, end_freq: float, duration: float, sample_rate: int) -> torch.Tensor:
        """
        Per-sample frequency that moves linearly from start_freq to end_freq.
        Fed straight into the oscillators as f(t), so the phase is f(t) * t
        (instantaneous approximation, not an integrated chirp).
        """
        t = time_axis(duration, sample_rate)
        progress = t / duration
        return start_freq + (end_freq - start_freq) * progress
