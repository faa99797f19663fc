"""视觉模型客户端 — OpenAI Chat Completions 多模态调用。"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import TYPE_CHECKING

import httpx
from openai import AsyncOpenAI

from wonderlens.errors import MissingCredential

if TYPE_CHECKING:
    from wonderlens.config import VisionConfig

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENAI_API_KEY"


class VisionClient:
    """OpenAI 视觉客户端，首次使用时才创建 SDK 句柄。"""

    def __init__(self, config: VisionConfig) -> None:
        self.config = config
        self._client: AsyncOpenAI | None = None
        self._lock = asyncio.Lock()

    def _api_key(self) -> str:
        return self.config.api_key or os.environ.get(API_KEY_ENV, "")

    @property
    def is_configured(self) -> bool:
        return bool(self._client or self._api_key())

    async def _get_client(self) -> AsyncOpenAI:
        """懒加载 SDK 句柄。缺少 key 时不缓存失败，下次调用重新查找。"""
        if self._client is not None:
            return self._client
        async with self._lock:
            if self._client is None:
                api_key = self._api_key()
                if not api_key:
                    raise MissingCredential("OpenAI", API_KEY_ENV)
                self._client = AsyncOpenAI(
                    api_key=api_key,
                    base_url=self.config.base_url,
                    timeout=httpx.Timeout(self.config.timeout),
                )
                logger.info("OpenAI client initialized (model=%s)", self.config.model)
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.close()
            self._client = None

    async def describe(self, image_base64: str, prompt: str) -> str:
        """发送 prompt + 图片，返回模型的文本回答。"""
        client = await self._get_client()
        response = await client.chat.completions.create(
            model=self.config.model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:image/jpeg;base64,{image_base64}"},
                        },
                    ],
                }
            ],
            max_tokens=self.config.max_tokens,
        )

        if not response.choices:
            raise ValueError("Vision response contained no choices")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise ValueError("Vision response contained no text")
        return content
