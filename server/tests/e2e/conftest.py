"""E2E 测试专用 fixtures — mock 外部服务，使用 TestClient。"""

from __future__ import annotations

from typing import Callable
from unittest.mock import patch

import pytest
from starlette.testclient import TestClient

from wonderlens.config import Settings


@pytest.fixture
def e2e_settings(test_config) -> Settings:
    """E2E 配置：默认非 debug，与生产行为一致。"""
    test_config.server.debug = False
    return test_config


@pytest.fixture
def make_client(mock_vision, mock_speech) -> Callable:
    """创建带 mock 外部服务的 TestClient 工厂。

    将 patch、app 创建和 TestClient 合并在一起，
    确保 patches 在整个测试期间保持有效。
    """
    from wonderlens.app import create_app

    clients: list[TestClient] = []

    with patch("wonderlens.app.VisionClient") as MockVision, \
         patch("wonderlens.app.SpeechClient") as MockSpeech:

        MockVision.return_value = mock_vision
        MockSpeech.return_value = mock_speech

        def _make(settings: Settings) -> TestClient:
            client = TestClient(create_app(settings))
            client.__enter__()
            clients.append(client)
            return client

        yield _make

        for client in clients:
            client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, e2e_settings) -> TestClient:
    return make_client(e2e_settings)
