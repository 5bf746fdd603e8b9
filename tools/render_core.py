"""
Core rendering utilities: render an emoji sound to WAV with a fingerprint.
Used by render.py.
"""
import sys
import os
import json
import hashlib
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Tuple

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import torch

from sfx_engine.core.engine import AudioEngine
from sfx_engine.core.io import AudioIO
from sfx_engine.mapper.emoji_mapper import EmojiSoundMapper


def wav_filename(emoji: str) -> str:
    """Download name used by the web UI: emoji-<glyph>-sound.wav"""
    return f"emoji-{emoji}-sound.wav"


def compute_audio_fingerprint(audio: torch.Tensor) -> Dict:
    """Compute fingerprint: SHA256, peak, RMS, clipped sample count."""
    audio_1d = audio.view(-1).float()

    audio_bytes = audio_1d.cpu().numpy().tobytes()
    sha256 = hashlib.sha256(audio_bytes).hexdigest()

    if audio_1d.numel() == 0:
        return {"sha256": sha256, "peak": 0.0, "rms": 0.0, "clipped": 0}

    peak = float(torch.max(torch.abs(audio_1d)))
    rms = float(torch.sqrt(torch.mean(audio_1d ** 2) + 1e-12))
    # samples the WAV export will clamp
    clipped = int(torch.sum(torch.abs(audio_1d) > 1.0))

    return {
        "sha256": sha256,
        "peak": peak,
        "rms": rms,
        "clipped": clipped,
    }


def render_emoji(
    mapper: EmojiSoundMapper,
    emoji: str,
    output_dir: Path,
    debug: bool = False,
) -> Tuple[Optional[torch.Tensor], Dict]:
    """
    Render one emoji and save it as WAV.

    Args:
        mapper: Mapper (and engine) to render with
        emoji: Emoji glyph
        output_dir: Directory to save the WAV (and debug JSON)
        debug: Save <name>.json next to the WAV

    Returns:
        Tuple of (audio_tensor or None, info_dict). No file is written when
        the recipe produced no sound.
    """
    engine = mapper.engine
    audio = mapper.get_sound_for_emoji(emoji)
    info = {
        "emoji": emoji,
        "timestamp": datetime.now().isoformat(),
        "sound_type": mapper.get_sound_info(emoji).sound_type,
        "sample_rate": engine.sample_rate,
        "wav_path": None,
        "fingerprint": None,
    }
    if audio is None:
        return None, info

    info["fingerprint"] = compute_audio_fingerprint(audio)
    info["duration_s"] = audio.shape[-1] / engine.sample_rate

    output_dir.mkdir(parents=True, exist_ok=True)
    wav_path = AudioIO.save_wav(audio, engine.sample_rate, output_dir / wav_filename(emoji))
    info["wav_path"] = str(wav_path)
    info["file"] = AudioIO.info(wav_path)

    if debug:
        json_path = wav_path.with_suffix(".json")
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(info, f, indent=2, ensure_ascii=False, default=str)

    return audio, info


def make_mapper(sample_rate: int = 44100, seed: Optional[int] = None) -> EmojiSoundMapper:
    return EmojiSoundMapper(AudioEngine(sample_rate=sample_rate, seed=seed))


def get_unique_output_dir(base_name: str) -> Path:
    """
    Generate unique output directory: renders/{base_name}/YYYYMMDD_HHMMSS/
    """
    now = datetime.now()
    return Path("renders") / base_name / now.strftime("%Y%m%d_%H%M%S")
