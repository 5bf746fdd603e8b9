"""
WAV encoder tests: canonical 44-byte header, int16 conversion and the clamp at export.
"""
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import numpy as np
import torch
from sfx_engine.core.engine import AudioEngine
from sfx_engine.core.io import AudioIO, WAV_HEADER_SIZE, read_wav_header

SR = 44100


def test_header_is_44_bytes():
    assert WAV_HEADER_SIZE == 44


def test_header_fields():
    buf = AudioEngine().generate_tone(800, 0.5)
    payload = AudioIO.to_wav_bytes(buf, SR)
    header = read_wav_header(payload)
    n = buf.shape[0]

    assert header["riff"] == "RIFF"
    assert header["riff_size"] == 36 + 2 * n
    assert header["wave"] == "WAVE"
    assert header["fmt"] == "fmt "
    assert header["fmt_size"] == 16
    assert header["format_tag"] == 1
    assert header["channels"] == 1
    assert header["sample_rate"] == SR
    assert header["byte_rate"] == SR * 2
    assert header["block_align"] == 2
    assert header["bits_per_sample"] == 16
    assert header["data"] == "data"
    assert header["data_size"] == 2 * n
    assert len(payload) == 44 + 2 * n


def test_samples_clamped_scaled_and_truncated():
    buf = torch.tensor([0.0, 0.5, -0.5, 1.0, -1.0, 2.0, -3.0, 0.99999])
    payload = AudioIO.to_wav_bytes(buf, SR)
    pcm = np.frombuffer(payload[44:], dtype="<i2")
    assert pcm.tolist() == [0, 16383, -16383, 32767, -32767, 32767, -32767, int(0.99999 * 32767)]


def test_empty_buffer_is_header_only():
    payload = AudioIO.to_wav_bytes(torch.zeros(0), SR)
    assert len(payload) == 44
    assert read_wav_header(payload)["data_size"] == 0


def test_engine_buffer_to_wav_uses_engine_rate():
    engine = AudioEngine(sample_rate=22050)
    payload = engine.buffer_to_wav(engine.generate_tone(440, 0.1))
    header = read_wav_header(payload)
    assert header["sample_rate"] == 22050
    assert header["byte_rate"] == 44100


def test_soundfile_decodes_export():
    buf = AudioEngine().generate_tone(440, 0.25)
    data, sr = AudioIO.load_wav(AudioIO.to_wav_bytes(buf, SR))
    assert sr == SR
    assert data.shape == (buf.shape[0],)
    np.testing.assert_allclose(data, buf.numpy(), atol=3.0 / 32768)


def test_save_wav_writes_file(tmp_path):
    buf = AudioEngine().generate_tone(440, 0.25)
    path = AudioIO.save_wav(buf, SR, tmp_path / "out" / "tone.wav")
    assert path.exists()
    info = AudioIO.info(path)
    assert info["frames"] == buf.shape[0]
    assert info["sample_rate"] == SR
    assert info["channels"] == 1
    assert info["subtype"] == "PCM_16"
