"""配置管理 — Pydantic Settings 从 TOML 加载。"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings

_DEFAULT_TOML = Path(__file__).resolve().parent.parent / "config" / "default.toml"
_DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent.parent / "public"

_TRUTHY = {"true", "1"}


def env_flag(name: str) -> bool:
    """读取 `true` / `1` 形式的布尔环境变量。"""
    return os.environ.get(name, "").strip().lower() in _TRUTHY


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 6001
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    static_dir: Path = _DEFAULT_STATIC_DIR
    cors_origins: list[str] = ["*"]


class VisionConfig(BaseModel):
    api_key: str = ""
    base_url: str | None = None
    model: str = "gpt-4o-mini"
    max_tokens: int = 100
    timeout: float = 60.0


class SpeechConfig(BaseModel):
    api_key: str = ""
    model_id: str = "eleven_multilingual_v2"
    output_format: str = "mp3_44100_128"
    timeout: float = 60.0
    skip_audio: bool = False


class Settings(BaseSettings):
    server: ServerConfig = ServerConfig()
    vision: VisionConfig = VisionConfig()
    speech: SpeechConfig = SpeechConfig()

    model_config = {"env_prefix": "WONDERLENS_", "env_nested_delimiter": "__"}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # 环境变量优先于 TOML（TOML 内容以构造参数传入）
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @property
    def skip_audio(self) -> bool:
        """全局测试模式：配置项或 SKIP_AUDIO 环境变量任一开启即可。"""
        return self.speech.skip_audio or env_flag("SKIP_AUDIO")


def load_settings(toml_path: Path = _DEFAULT_TOML) -> Settings:
    """从 TOML 文件加载配置，环境变量可覆盖。"""
    if toml_path.exists():
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
        return Settings(**data)
    return Settings()
