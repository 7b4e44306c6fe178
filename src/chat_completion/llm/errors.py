"""Errors raised by the conversation client."""

from typing import Any

import httpx


class ChatCompletionError(Exception):
    """Base class for completion failures."""


class TransportError(ChatCompletionError):
    """No response was obtained (connection, DNS, timeout)."""


class HttpStatusError(ChatCompletionError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, cause: httpx.HTTPStatusError) -> None:
        super().__init__(f"HTTP {status_code}: {cause}")
        self.status_code = status_code
        self.cause = cause


class MalformedResponseError(ChatCompletionError):
    """The response body lacked choices[0].message.content."""

    def __init__(self, message: str, body: Any = None) -> None:
        super().__init__(message)
        self.body = body
