"""Shared fixtures - fake chat completions API via httpx.MockTransport."""

import json
from typing import Callable

import httpx
import pytest

from chat_completion.config import Settings, get_settings
from chat_completion.llm import ConversationClient


def completion_body(content: str) -> dict:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


class FakeAPI:
    """Records requests and answers with a configurable handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda r: httpx.Response(
            200, json=completion_body("hello")
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def reply_with(self, status_code: int = 200, **kwargs) -> None:
        self.handler = lambda r: httpx.Response(status_code, **kwargs)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def http_client(fake_api) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_api))


@pytest.fixture
def conversation(http_client) -> ConversationClient:
    return ConversationClient("sk-test", http_client)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from the developer's environment and .env."""
    for var in ("LLM_API_KEY", "LLM_MODEL", "HISTORY_LIMIT", "REQUEST_TIMEOUT", "PROMPTS_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setitem(Settings.model_config, "env_file", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
