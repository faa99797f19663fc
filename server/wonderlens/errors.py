"""分析流水线异常类型。"""

from __future__ import annotations


class WonderlensError(Exception):
    """所有流水线异常的基类。"""


class MissingInput(WonderlensError):
    """请求缺少图片数据 (HTTP 400)。"""

    def __init__(self, message: str = "No image data provided") -> None:
        super().__init__(message)


class MissingCredential(WonderlensError):
    """外部服务未配置 API Key。"""

    def __init__(self, service: str, env_var: str) -> None:
        super().__init__(f"{service} API key is not set ({env_var})")
        self.service = service
        self.env_var = env_var


class UpstreamAnalysisFailure(WonderlensError):
    """视觉模型调用失败 (HTTP 500)，可安全重试。"""


class AudioSynthesisFailure(WonderlensError):
    """语音合成失败，不会作为请求失败上抛。"""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
