"""流水线编排 — 视觉分析（必选）→ 语音合成（可选，失败降级）。"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from wonderlens.errors import MissingInput, UpstreamAnalysisFailure
from wonderlens.modes import resolve
from wonderlens.pipeline.speech import classify_speech_error

if TYPE_CHECKING:
    from wonderlens.modes import ModeProfile
    from wonderlens.pipeline.speech import SpeechClient
    from wonderlens.pipeline.vision import VisionClient

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    content: str
    audio: str | None = None
    audio_error: str | None = None
    skip_audio: bool = False

    def to_response(self) -> dict[str, Any]:
        """序列化为 HTTP 响应体。audio 恒定存在，其余可选字段未设置时省略。"""
        body: dict[str, Any] = {"content": self.content, "audio": self.audio}
        if self.audio_error is not None:
            body["audioError"] = self.audio_error
        if self.skip_audio:
            body["skipAudio"] = True
        return body


class Orchestrator:
    """视觉 → 语音 两段式编排器。

    第一段失败整个请求失败；第二段的任何异常都被就地吸收，
    转成带 audio_error 的纯文本结果。
    """

    def __init__(
        self,
        vision: VisionClient,
        speech: SpeechClient,
        *,
        debug: bool = False,
    ) -> None:
        self.vision = vision
        self.speech = speech
        self.debug = debug

    async def analyze(
        self, image: str | None, mode: str | None, skip_audio: bool = False
    ) -> AnalysisResult:
        if not image:
            raise MissingInput()

        profile = resolve(mode)
        content = await self._describe(image, profile)

        if skip_audio:
            logger.info("Test mode: skipping audio generation")
            return AnalysisResult(content=content, skip_audio=True)

        return await self._voice(content, profile)

    async def _describe(self, image: str, profile: ModeProfile) -> str:
        """必选阶段：视觉模型。"""
        try:
            return await self.vision.describe(image, profile.prompt)
        except Exception as e:
            logger.exception("Vision analysis failed (mode=%s)", profile.mode.value)
            raise UpstreamAnalysisFailure(str(e) or type(e).__name__) from e

    async def _voice(self, content: str, profile: ModeProfile) -> AnalysisResult:
        """可选阶段：语音合成，失败降级为纯文本。"""
        try:
            audio = await self.speech.synthesize(content, profile.voice_id)
        except Exception as e:
            logger.warning("Audio generation failed, returning text only: %s", e)
            return AnalysisResult(content=content, audio_error=classify_speech_error(e, self.debug))

        return AnalysisResult(content=content, audio=base64.b64encode(audio).decode("ascii"))
