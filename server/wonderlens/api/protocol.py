"""HTTP 请求/响应模型 — Pydantic。"""

from __future__ import annotations

from pydantic import BaseModel


# ────────────────────── Client → Server ──────────────────────

class AnalyzeRequest(BaseModel):
    base64Image: str | None = None
    mode: str | None = None


# ────────────────────── Server → Client ──────────────────────

class AnalyzeResponse(BaseModel):
    content: str
    audio: str | None = None
    audioError: str | None = None
    skipAudio: bool | None = None


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
    openaiConfigured: bool
    elevenlabsConfigured: bool


# ────────────────────── 解析 ──────────────────────

_TRUE_FLAGS = {"true", "1"}
_FALSE_FLAGS = {"false", "0"}


def parse_skip_audio(value: str | None, default: bool) -> bool:
    """解析 ?skipAudio= 查询参数。缺省或无法识别时使用全局默认值。"""
    if value is None:
        return default
    flag = value.strip().lower()
    if flag in _TRUE_FLAGS:
        return True
    if flag in _FALSE_FLAGS:
        return False
    return default
