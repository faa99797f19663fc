"""共享 fixtures — 测试配置、mock 视觉/语音客户端、测试图片等。"""

from __future__ import annotations

import base64
import io
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from wonderlens.config import Settings, load_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"

VISION_TEXT = "That is a maple leaf! Why do you think it turns red in autumn?"
AUDIO_BYTES = b"ID3\x04\x00fake-mp3-payload"


# ────────────────────── Fixtures ──────────────────────


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """隔离宿主环境中的 API key 与测试模式开关。"""
    for name in ("OPENAI_API_KEY", "ELEVENLABS_API_KEY", "SKIP_AUDIO"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_config() -> Settings:
    """加载测试专用配置。"""
    return load_settings(FIXTURES_DIR / "test_config.toml")


@pytest.fixture
def mock_vision() -> MagicMock:
    """Mock 视觉客户端 — 返回固定描述文本。"""
    vision = MagicMock()
    vision.is_configured = True
    vision.describe = AsyncMock(return_value=VISION_TEXT)
    vision.close = AsyncMock()
    return vision


@pytest.fixture
def mock_speech() -> MagicMock:
    """Mock 语音客户端 — 返回固定 MP3 字节。"""
    speech = MagicMock()
    speech.is_configured = True
    speech.synthesize = AsyncMock(return_value=AUDIO_BYTES)
    speech.close = AsyncMock()
    return speech


@pytest.fixture
def jpeg_bytes() -> bytes:
    """64x48 纯色 JPEG。"""
    buf = io.BytesIO()
    Image.new("RGB", (64, 48), (30, 120, 60)).save(buf, format="JPEG")
    return buf.getvalue()


@pytest.fixture
def jpeg_base64(jpeg_bytes) -> str:
    return base64.b64encode(jpeg_bytes).decode("ascii")


@pytest.fixture
def png_frame() -> bytes:
    """320x240 白色 PNG，模拟一帧摄像头画面。"""
    buf = io.BytesIO()
    Image.new("RGB", (320, 240), (255, 255, 255)).save(buf, format="PNG")
    return buf.getvalue()
