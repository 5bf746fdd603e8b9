"""
Tests for sfx_engine/core/engine: generator contracts and the no-backend policy.
"""
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
import torch
from sfx_engine.core.engine import AudioEngine
from sfx_engine.core.types import EnvelopeParams, WaveKind

SR = 44100


@pytest.fixture
def engine():
    return AudioEngine(sample_rate=SR, seed=7)


# -----------------------------------------------------------------------------
# Tones
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("kind", list(WaveKind))
@pytest.mark.parametrize("duration", [0.05, 0.15, 0.3, 1.2, 1.5])
def test_tone_length(engine, kind, duration):
    buf = engine.generate_tone(440, duration, kind)
    assert buf.dim() == 1
    assert abs(buf.shape[0] - round(duration * SR)) <= 1
    assert buf.shape[0] == int(duration * SR)
    assert buf.dtype == torch.float32


def test_sine_bounded(engine):
    buf = engine.generate_tone(800, 0.5, WaveKind.SINE)
    assert float(buf.abs().max()) <= 1.0


def test_square_exact_values(engine):
    buf = engine.generate_tone(220, 0.5, "square")
    assert set(torch.unique(buf).tolist()) == {-1.0, 1.0}


def test_wave_kind_accepts_strings(engine):
    torch.testing.assert_close(
        engine.generate_tone(330, 0.1, "sawtooth"),
        engine.generate_tone(330, 0.1, WaveKind.SAWTOOTH),
    )
    assert WaveKind.parse("TRIANGLE") is WaveKind.TRIANGLE
    assert WaveKind.parse("pulse") is None


def test_unknown_tone_kind_renders_sine(engine):
    torch.testing.assert_close(engine.generate_tone(500, 0.1, "pulse"), engine.generate_tone(500, 0.1, "sine"))


def test_non_positive_duration_is_none(engine):
    assert engine.generate_tone(440, 0.0) is None
    assert engine.generate_tone(440, -1.0) is None
    assert engine.generate_sweep(100, 200, 0.0) is None
    assert engine.generate_noise(0.0, 0.5) is None


# -----------------------------------------------------------------------------
# Sweeps
# -----------------------------------------------------------------------------

def test_sweep_length_and_range(engine):
    buf = engine.generate_sweep(300, 600, 0.4, WaveKind.SINE)
    assert buf.shape[0] == int(0.4 * SR)
    assert float(buf.abs().max()) <= 1.0


def test_sweep_with_equal_endpoints_matches_tone(engine):
    torch.testing.assert_close(
        engine.generate_sweep(440, 440, 0.2, "square"),
        engine.generate_tone(440, 0.2, "square"),
    )


def test_triangle_sweep_is_silent(engine):
    buf = engine.generate_sweep(200, 400, 0.3, WaveKind.TRIANGLE)
    assert buf.shape[0] == int(0.3 * SR)
    assert float(buf.abs().sum()) == 0.0


# -----------------------------------------------------------------------------
# Noise
# -----------------------------------------------------------------------------

def test_noise_bounded_by_intensity(engine):
    buf = engine.generate_noise(0.5, 0.4)
    assert buf.shape[0] == int(0.5 * SR)
    assert float(buf.abs().max()) <= 0.4
    assert float(buf.abs().max()) > 0.3
    assert abs(float(buf.mean())) < 0.02


def test_noise_seeded_engines_match():
    a = AudioEngine(seed=123).generate_noise(0.1, 0.8)
    b = AudioEngine(seed=123).generate_noise(0.1, 0.8)
    assert torch.equal(a, b)


def test_noise_default_intensity():
    buf = AudioEngine().generate_noise(0.2)
    assert float(buf.abs().max()) <= 0.1


# -----------------------------------------------------------------------------
# Shaping, mixing, offsets
# -----------------------------------------------------------------------------

def test_apply_envelope_returns_same_buffer(engine):
    buf = engine.generate_tone(440, 0.3)
    assert engine.apply_envelope(buf, 0.01, 0.05, 0.8, 0.09) is buf


def test_shape_with_envelope_params(engine):
    a = engine.generate_tone(440, 0.3)
    b = a.clone()
    engine.apply_envelope(a, 0.05, 0.1, 0.6, 0.1)
    engine.shape(b, EnvelopeParams(0.05, 0.1, 0.6, 0.1))
    assert torch.equal(a, b)


def test_combine_buffers_empty_is_none(engine):
    assert engine.combine_buffers([]) is None


def test_overlay_into_silence(engine):
    dest = engine.silence(1.0)
    src = engine.generate_tone(600, 0.5)
    offset = int(0.8 * SR)
    engine.overlay(dest, src, offset, 0.5)
    assert dest.shape[0] == SR
    assert float(dest[:offset].abs().sum()) == 0.0
    torch.testing.assert_close(dest[offset:], src[: SR - offset] * 0.5)


# -----------------------------------------------------------------------------
# No backend
# -----------------------------------------------------------------------------

def test_unavailable_backend_short_circuits():
    engine = AudioEngine(available=False)
    assert engine.generate_tone(440, 1.0) is None
    assert engine.generate_sweep(100, 200, 1.0) is None
    assert engine.generate_noise(1.0, 0.5) is None
    assert engine.silence(1.0) is None
    assert engine.apply_envelope(torch.ones(4)) is None
    assert engine.combine_buffers([torch.ones(4)]) is None
    assert engine.overlay(torch.ones(4), torch.ones(2), 0) is None


def test_bad_device_disables_backend():
    engine = AudioEngine(device="not-a-device")
    assert engine.available is False
    assert engine.generate_tone(440, 0.1) is None
