"""
HTTP service tests via FastAPI's TestClient.
"""
import sys
import os
import base64
from urllib.parse import quote

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from fastapi.testclient import TestClient

from sfx_engine.core.io import read_wav_header
from sfx_engine.core.settings import EngineSettings
from sfx_engine.main import create_app


@pytest.fixture
def app(tmp_path):
    settings = EngineSettings(clicks_file=str(tmp_path / "clicks.json"), seed=3)
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


def _sound_url(emoji: str) -> str:
    return "/sound/" + quote(emoji)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["backend"] is True


def test_popular(client):
    emojis = client.get("/emojis/popular").json()["emojis"]
    assert len(emojis) == 24
    assert emojis[0] == "🔔"


def test_all_emojis(client):
    emojis = client.get("/emojis").json()["emojis"]
    assert len(emojis) == 65
    assert all(e["hasCustomMapping"] for e in emojis)


def test_sound_info(client):
    assert client.get("/sound-info/" + quote("🔔")).json()["soundType"] == "custom"
    assert client.get("/sound-info/" + quote("🦄")).json()["soundType"] == "generic"


def test_sound_wav(client):
    r = client.get(_sound_url("🔔"))
    assert r.status_code == 200
    assert r.headers["content-type"] == "audio/wav"
    assert quote("emoji-🔔-sound.wav") in r.headers["content-disposition"]
    header = read_wav_header(r.content)
    assert header["sample_rate"] == 44100
    assert header["channels"] == 1
    assert header["bits_per_sample"] == 16
    assert header["data_size"] == 2 * int(1.5 * 44100)


def test_sound_for_mapped_glyph_with_variation_selector(client):
    # rain is three UTF-16 units and fails the input check, but is a mapped key
    r = client.get(_sound_url("🌧️"))
    assert r.status_code == 200


def test_unmapped_emoji_plays_generic_sound(app, client):
    r = client.get(_sound_url("🤖"))
    assert r.status_code == 200
    assert r.headers["content-type"] == "audio/wav"
    assert read_wav_header(r.content)["data_size"] == 2 * 44100
    assert app.state.mapper.get_sound_info("🤖").sound_type == "generic"


def test_invalid_emoji_rejected(client):
    assert client.get(_sound_url("abc")).status_code == 400
    assert client.post("/generate", json={"emoji": "hello"}).status_code == 400


def test_generate_returns_base64_wav(client):
    r = client.post("/generate", json={"emoji": "😂"})
    assert r.status_code == 200
    body = r.json()
    wav = base64.b64decode(body["audio"])
    assert wav[:4] == b"RIFF"
    assert body["duration_s"] == pytest.approx(1.2)
    assert body["info"]["soundType"] == "custom"


def test_no_backend_is_503(app, client):
    app.state.engine.available = False
    assert client.get(_sound_url("🎹")).status_code == 503


def test_cache_clear(app, client):
    client.get(_sound_url("🔔"))
    assert app.state.mapper.is_cached("🔔")
    assert client.post("/cache/clear").json() == {"status": "ok"}
    assert not app.state.mapper.is_cached("🔔")


# -----------------------------------------------------------------------------
# Click counter
# -----------------------------------------------------------------------------

def test_clicks_flow(client):
    r = client.get("/api/clicks")
    assert r.json()["success"] is True
    assert r.json()["data"]["totalClicks"] == 0

    r = client.post("/api/clicks", json={"increment": 1})
    assert r.json()["data"]["totalClicks"] == 1
    assert r.json()["data"]["increment"] == 1

    r = client.post("/api/clicks", json={"increment": 5})
    assert r.json()["data"]["totalClicks"] == 6

    r = client.post("/api/clicks")
    assert r.json()["data"]["totalClicks"] == 7

    r = client.put("/api/clicks")
    assert r.json()["success"] is True
    assert r.json()["data"]["totalClicks"] == 0
    assert r.json()["data"]["message"] == "Click count reset successfully"


def test_clicks_integral_float_increment(client):
    r = client.post("/api/clicks", json={"increment": 5.0})
    assert r.status_code == 200
    assert r.json()["data"]["totalClicks"] == 5
    assert r.json()["data"]["increment"] == 5


@pytest.mark.parametrize("bad", [-1, 101, 2.5, "3"])
def test_clicks_invalid_increment(client, bad):
    r = client.post("/api/clicks", json={"increment": bad})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Invalid increment value"}
