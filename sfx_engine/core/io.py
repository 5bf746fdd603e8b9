import io
from pathlib import Path
from typing import Tuple, Union

import numpy as np
import soundfile as sf
import torch

# Canonical 44-byte PCM WAV header, little-endian, no padding.
WAV_HEADER_DTYPE = np.dtype([
    ("riff", "S4"),
    ("riff_size", "<u4"),
    ("wave", "S4"),
    ("fmt", "S4"),
    ("fmt_size", "<u4"),
    ("format_tag", "<u2"),
    ("channels", "<u2"),
    ("sample_rate", "<u4"),
    ("byte_rate", "<u4"),
    ("block_align", "<u2"),
    ("bits_per_sample", "<u2"),
    ("data", "S4"),
    ("data_size", "<u4"),
])
WAV_HEADER_SIZE = WAV_HEADER_DTYPE.itemsize  # 44

PCM_FORMAT = 1
INT16_SCALE = 0x7FFF


def _to_numpy(waveform: Union[torch.Tensor, np.ndarray]) -> np.ndarray:
    if isinstance(waveform, torch.Tensor):
        data = waveform.detach().cpu().numpy()
    else:
        data = np.asarray(waveform)
    return data.reshape(-1).astype(np.float64)


def wav_header(num_samples: int, sample_rate: int) -> np.ndarray:
    """Header record for num_samples mono 16-bit samples."""
    data_size = num_samples * 2
    header = np.zeros(1, dtype=WAV_HEADER_DTYPE)
    header["riff"] = b"RIFF"
    header["riff_size"] = 36 + data_size
    header["wave"] = b"WAVE"
    header["fmt"] = b"fmt "
    header["fmt_size"] = 16
    header["format_tag"] = PCM_FORMAT
    header["channels"] = 1
    header["sample_rate"] = sample_rate
    header["byte_rate"] = sample_rate * 2
    header["block_align"] = 2
    header["bits_per_sample"] = 16
    header["data"] = b"data"
    header["data_size"] = data_size
    return header


def read_wav_header(payload: bytes) -> dict:
    """Decode the first 44 bytes of a canonical WAV stream into a dict."""
    if len(payload) < WAV_HEADER_SIZE:
        raise ValueError(f"WAV stream too short for header: {len(payload)} bytes")
    record = np.frombuffer(payload[:WAV_HEADER_SIZE], dtype=WAV_HEADER_DTYPE)[0]
    return {name: (record[name].decode("ascii") if WAV_HEADER_DTYPE[name].kind == "S" else int(record[name]))
            for name in WAV_HEADER_DTYPE.names}


class AudioIO:
    @staticmethod
    def to_wav_bytes(waveform: Union[torch.Tensor, np.ndarray], sample_rate: int) -> bytes:
        """
        Encode a mono buffer as 16-bit PCM WAV.
        Samples are clamped to [-1, 1] (the only clipping point), scaled by 32767
        and truncated toward zero.
        """
        data = _to_numpy(waveform)
        data = np.clip(data, -1.0, 1.0)
        pcm = (data * INT16_SCALE).astype("<i2")
        return wav_header(pcm.shape[0], sample_rate).tobytes() + pcm.tobytes()

    @staticmethod
    def save_wav(waveform: Union[torch.Tensor, np.ndarray], sample_rate: int, path: Union[str, Path]) -> Path:
        """Writes the canonical WAV encoding to path."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(AudioIO.to_wav_bytes(waveform, sample_rate))
        return path

    @staticmethod
    def load_wav(source: Union[str, Path, bytes]) -> Tuple[np.ndarray, int]:
        """Reads a WAV file or byte string back as float32 samples in [-1, 1)."""
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)
        data, sample_rate = sf.read(source, dtype="float32")
        return data, sample_rate

    @staticmethod
    def info(path: Union[str, Path]) -> dict:
        """Format summary of a WAV file as seen by libsndfile."""
        meta = sf.info(str(path))
        return {
            "frames": meta.frames,
            "sample_rate": meta.samplerate,
            "channels": meta.channels,
            "subtype": meta.subtype,
            "duration_s": meta.duration,
        }
