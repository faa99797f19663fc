"""语音合成 — ElevenLabs 流式 TTS，服务端整段缓冲。"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import TYPE_CHECKING

import httpx
from elevenlabs.client import AsyncElevenLabs

from wonderlens.errors import AudioSynthesisFailure, MissingCredential

if TYPE_CHECKING:
    from wonderlens.config import SpeechConfig

logger = logging.getLogger(__name__)

API_KEY_ENV = "ELEVENLABS_API_KEY"

AUDIO_UNAVAILABLE = "Audio generation unavailable"

# 常见上游状态码 → 用户可读提示
_STATUS_HINTS: dict[int, str] = {
    401: "Audio unavailable: the ElevenLabs API key is invalid or missing",
    402: "Audio unavailable: the ElevenLabs account needs a paid plan or more credits",
    429: "Audio unavailable: ElevenLabs rate limit reached, try again shortly",
}
_NOT_CONFIGURED_HINT = "Audio unavailable: ELEVENLABS_API_KEY is not configured"


def _status_code(exc: BaseException) -> int | None:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    code = getattr(exc, "status_code", None)
    return code if isinstance(code, int) else None


def classify_speech_error(exc: BaseException, debug: bool = False) -> str:
    """把合成异常归类为提示文本。debug 模式下附带上游原始信息。"""
    if isinstance(exc, MissingCredential):
        hint = _NOT_CONFIGURED_HINT
    else:
        hint = _STATUS_HINTS.get(_status_code(exc), AUDIO_UNAVAILABLE)  # type: ignore[arg-type]

    if debug:
        detail = str(exc) or type(exc).__name__
        return f"{hint} ({detail})"
    return hint


class SpeechClient:
    """ElevenLabs 客户端，首次使用时才创建 SDK 句柄。"""

    def __init__(self, config: SpeechConfig) -> None:
        self.config = config
        self._client: AsyncElevenLabs | None = None
        self._http: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    def _api_key(self) -> str:
        return self.config.api_key or os.environ.get(API_KEY_ENV, "")

    @property
    def is_configured(self) -> bool:
        return bool(self._client or self._api_key())

    async def _get_client(self) -> AsyncElevenLabs:
        """懒加载 SDK 句柄。缺少 key 时不缓存失败，下次调用重新查找。"""
        if self._client is not None:
            return self._client
        async with self._lock:
            if self._client is None:
                api_key = self._api_key()
                if not api_key:
                    raise MissingCredential("ElevenLabs", API_KEY_ENV)
                self._http = httpx.AsyncClient(timeout=httpx.Timeout(self.config.timeout))
                self._client = AsyncElevenLabs(
                    api_key=api_key, timeout=self.config.timeout, httpx_client=self._http
                )
                logger.info("ElevenLabs client initialized (model=%s)", self.config.model_id)
        return self._client

    async def close(self) -> None:
        if self._http:
            await self._http.aclose()
        self._http = None
        self._client = None

    async def synthesize(self, text: str, voice_id: str) -> bytes:
        """合成整段音频：按到达顺序拼接上游流式分块。"""
        client = await self._get_client()

        chunks: list[bytes] = []
        async for chunk in client.text_to_speech.stream(
            voice_id=voice_id,
            text=text,
            model_id=self.config.model_id,
            output_format=self.config.output_format,
        ):
            if chunk:
                chunks.append(chunk)

        if not chunks:
            raise AudioSynthesisFailure("Speech provider returned no audio")

        audio = b"".join(chunks)
        logger.debug("Synthesized %d bytes of audio in %d chunks", len(audio), len(chunks))
        return audio
