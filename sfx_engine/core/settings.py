"""
Engine and service settings.
Defaults live here; every field can be overridden with an SFX_* environment variable.
"""
from dataclasses import dataclass
from typing import Optional
import os
import logging

logger = logging.getLogger("emoji-sound-engine")

DEFAULT_SAMPLE_RATE = 44100

DEV = os.environ.get("ENV", "development").lower() in ("development", "dev", "test")


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer), using %r", name, raw, default)
        return default


@dataclass
class EngineSettings:
    """
    Attributes:
        sample_rate: Synthesis and WAV export rate (Hz)
        device: torch device buffers are allocated on
        seed: Optional seed for the noise generator (None = real randomness)
        clicks_file: JSON file backing the global click counter
        host: Bind address for the HTTP service
        port: Bind port for the HTTP service
        log_level: Root logging level name
        cors_origins: Comma separated list of allowed CORS origins
    """
    sample_rate: int = DEFAULT_SAMPLE_RATE
    device: str = "cpu"
    seed: Optional[int] = None
    clicks_file: str = os.path.join("data", "clicks.json")
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: str = "*"

    def __post_init__(self):
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        self.log_level = self.log_level.upper()

    @property
    def allowed_origins(self) -> list:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @classmethod
    def from_env(cls) -> "EngineSettings":
        return cls(
            sample_rate=_env_int("SFX_SAMPLE_RATE", DEFAULT_SAMPLE_RATE),
            device=os.environ.get("SFX_DEVICE", "cpu"),
            seed=_env_int("SFX_SEED", None),
            clicks_file=os.environ.get("SFX_CLICKS_FILE", os.path.join("data", "clicks.json")),
            host=os.environ.get("SFX_HOST", "0.0.0.0"),
            port=_env_int("SFX_PORT", 8000),
            log_level=os.environ.get("SFX_LOG_LEVEL", "INFO"),
            cors_origins=os.environ.get("SFX_CORS_ORIGINS", "*"),
        )
