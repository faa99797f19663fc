"""分析历史 — 客户端 localStorage 布局的参考实现（最多 3 条，新的在前）。

对外公开的参考 API：服务端本身不读写历史，供浏览器端实现和集成测试
核对存储格式使用。
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wonderlens.pipeline.orchestrator import AnalysisResult

logger = logging.getLogger(__name__)

HISTORY_KEY = "analysisResults"
CATEGORY_KEY = "selectedCategory"
SKIP_AUDIO_KEY = "skipAudio"

DEFAULT_CAPACITY = 3
_NO_ANALYSIS = "No analysis available"


@dataclass
class StoredAnalysis:
    timestamp: str
    image: str
    analysis: str
    audio: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "image": self.image,
            "analysis": self.analysis,
            "audioUrl": self.audio,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StoredAnalysis:
        return cls(
            timestamp=data["timestamp"],
            image=data.get("image", ""),
            analysis=data.get("analysis", ""),
            audio=data.get("audioUrl"),
        )

    @classmethod
    def from_result(cls, timestamp: str, image: str, result: AnalysisResult) -> StoredAnalysis:
        return cls(
            timestamp=timestamp,
            image=image,
            analysis=result.content or _NO_ANALYSIS,
            audio=result.audio,
        )


class AnalysisHistory:
    """定长历史环，按抓拍时间戳去重。"""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")
        self.capacity = capacity
        self._entries: list[StoredAnalysis] = []

    @property
    def entries(self) -> list[StoredAnalysis]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, entry: StoredAnalysis) -> None:
        """插到最前；同时间戳的旧条目被替换；超出容量丢弃最旧的。"""
        kept = [e for e in self._entries if e.timestamp != entry.timestamp]
        self._entries = [entry, *kept][: self.capacity]

    def to_json(self) -> str:
        return json.dumps([e.to_dict() for e in self._entries], ensure_ascii=False)

    @classmethod
    def from_json(cls, raw: str | None, capacity: int = DEFAULT_CAPACITY) -> AnalysisHistory:
        """从存储值恢复。缺失或损坏则返回空历史。"""
        history = cls(capacity)
        if not raw:
            return history
        try:
            items = json.loads(raw)
            entries = [StoredAnalysis.from_dict(item) for item in items]
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Failed to load analysis history: %s, starting empty", e)
            return history
        history._entries = entries[:capacity]
        return history


@dataclass
class ClientPreferences:
    selected_category: str = "educate"
    skip_audio: bool = False

    def to_storage(self) -> dict[str, str]:
        return {
            CATEGORY_KEY: self.selected_category,
            SKIP_AUDIO_KEY: "true" if self.skip_audio else "false",
        }

    @classmethod
    def from_storage(cls, data: dict[str, str]) -> ClientPreferences:
        return cls(
            selected_category=data.get(CATEGORY_KEY) or "educate",
            skip_audio=data.get(SKIP_AUDIO_KEY) == "true",
        )

    def analyze_url(self) -> str:
        return "/api/analyze?skipAudio=true" if self.skip_audio else "/api/analyze"
