from typing import Optional
from urllib.parse import quote
import base64
import logging

from fastapi import Body, FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from sfx_engine.core.engine import AudioEngine
from sfx_engine.core.settings import DEV, EngineSettings
from sfx_engine.counter.clicks import ClickStore, InvalidIncrement, parse_increment
from sfx_engine.mapper.emoji_mapper import EmojiSoundMapper
from sfx_engine.mapper.validation import is_valid_emoji

logger = logging.getLogger("emoji-sound-engine")


def _accepts(mapper: EmojiSoundMapper, emoji: str) -> bool:
    # Mapped glyphs with a variation selector (e.g. rain) are longer than the input check allows.
    return mapper.has_mapping(emoji) or is_valid_emoji(emoji)


def _render(mapper: EmojiSoundMapper, emoji: str):
    if not _accepts(mapper, emoji):
        raise HTTPException(status_code=400, detail="Please enter a valid emoji!")
    sound = mapper.get_sound_for_emoji(emoji)
    if sound is None:
        raise HTTPException(status_code=503, detail=f"No sound could be generated for {emoji}")
    return sound


def create_app(settings: Optional[EngineSettings] = None) -> FastAPI:
    settings = settings or EngineSettings.from_env()

    app = FastAPI(
        title="Emoji Sound Engine",
        version="1.0.0",
        description="Procedural cartoon sound effects for emoji",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    engine = AudioEngine.from_settings(settings)
    mapper = EmojiSoundMapper(engine)
    clicks = ClickStore(settings.clicks_file)
    app.state.settings = settings
    app.state.engine = engine
    app.state.mapper = mapper
    app.state.clicks = clicks

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "service": "emoji-sound-engine", "backend": engine.available}

    # --- Sounds ---

    @app.get("/emojis/popular")
    async def popular_emojis():
        return {"emojis": mapper.get_popular_emojis()}

    @app.get("/emojis")
    async def all_emojis():
        return {"emojis": [mapper.get_sound_info(e).to_dict() for e in mapper.mapped_emojis()]}

    @app.get("/sound-info/{emoji}")
    async def sound_info(emoji: str):
        return mapper.get_sound_info(emoji).to_dict()

    # Sync handlers run in the threadpool; the mapper renders each emoji once.
    @app.get("/sound/{emoji}")
    def sound_wav(emoji: str):
        """Returns the emoji's sound as a 16-bit PCM WAV download."""
        sound = _render(mapper, emoji)
        wav_bytes = engine.buffer_to_wav(sound)
        return Response(
            content=wav_bytes,
            media_type="audio/wav",
            headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(f'emoji-{emoji}-sound.wav')}"},
        )

    @app.post("/generate")
    def generate(data: dict = Body(...)):
        """
        Renders {"emoji": "..."}.
        Returns JSON with base64-encoded WAV, duration and mapping info.
        """
        emoji = str(data.get("emoji", "")).strip()
        sound = _render(mapper, emoji)
        wav_bytes = engine.buffer_to_wav(sound)
        logger.info("Sound generated for %s (%d samples)", emoji, sound.shape[-1])
        return {
            "audio": base64.b64encode(wav_bytes).decode("utf-8"),
            "duration_s": sound.shape[-1] / engine.sample_rate,
            "sample_rate": engine.sample_rate,
            "info": mapper.get_sound_info(emoji).to_dict(),
        }

    @app.post("/cache/clear")
    async def clear_cache():
        mapper.clear_cache()
        return {"status": "ok"}

    # --- Global click counter ---

    @app.get("/api/clicks")
    def get_clicks():
        try:
            data = clicks.read()
        except Exception:
            logger.exception("Error in GET /api/clicks")
            return JSONResponse({"success": False, "error": "Failed to fetch click count"}, status_code=500)
        return {"success": True, "data": {"totalClicks": data["total"], "lastUpdated": data["lastUpdated"]}}

    @app.post("/api/clicks")
    def increment_clicks(body: Optional[dict] = Body(default=None)):
        increment = (body or {}).get("increment", 1)
        try:
            increment = parse_increment(increment)
            data = clicks.increment(increment)
        except InvalidIncrement:
            return JSONResponse({"success": False, "error": "Invalid increment value"}, status_code=400)
        except Exception:
            logger.exception("Error in POST /api/clicks")
            return JSONResponse({"success": False, "error": "Failed to increment click count"}, status_code=500)
        return {
            "success": True,
            "data": {"totalClicks": data["total"], "increment": increment, "lastUpdated": data["lastUpdated"]},
        }

    @app.put("/api/clicks")
    def reset_clicks():
        try:
            data = clicks.reset()
        except Exception:
            logger.exception("Error in PUT /api/clicks")
            return JSONResponse({"success": False, "error": "Failed to reset click count"}, status_code=500)
        return {
            "success": True,
            "data": {
                "totalClicks": 0,
                "lastUpdated": data["lastUpdated"],
                "message": "Click count reset successfully",
            },
        }

    return app


settings = EngineSettings.from_env()
logging.basicConfig(level=settings.log_level)
app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run("sfx_engine.main:app", host=settings.host, port=settings.port, reload=DEV)
