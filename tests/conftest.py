"""测试共用 fixture"""

from __future__ import annotations

import json

import httpx
import pytest

WEBHOOK_URL = "https://hooks.slack.test/services/T000/B000/XXXX"


class RecordingTransport(httpx.MockTransport):
    """记录所有请求并返回固定状态码的 MockTransport"""

    def __init__(self, status_code: int = 200, body: str = "ok"):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = body
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def webhook_url() -> str:
    return WEBHOOK_URL


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def message() -> dict:
    """最小的合法消息"""
    return {"blocks": [{"type": "divider"}]}


@pytest.fixture
def make_transport():
    """按指定状态码/响应体创建 transport"""
    return RecordingTransport
