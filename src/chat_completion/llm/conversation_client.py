"""Conversation client - bounded history plus one HTTP call per completion."""

import logging
from typing import Any

import httpx

from chat_completion.llm.errors import (
    HttpStatusError,
    MalformedResponseError,
    TransportError,
)
from chat_completion.models import Message, Role

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_HISTORY_LIMIT = 30


class ConversationClient:
    """
    Keeps system prompts and a sliding window of user/assistant turns, and sends
    them to the chat completions endpoint.

    The httpx client is borrowed, never closed here; several conversations may
    share one. Not safe for concurrent use of the same instance.
    """

    def __init__(
        self,
        credential: str,
        http_client: httpx.AsyncClient,
        *,
        model: str = DEFAULT_MODEL,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self._credential = credential
        self._http_client = http_client
        self._model = model
        self._history_limit = _check_limit(history_limit)
        self._system_messages: list[Message] = []
        self._chat_messages: list[Message] = []

    @property
    def credential(self) -> str:
        return self._credential

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    @property
    def model(self) -> str:
        return self._model

    @property
    def history_limit(self) -> int:
        return self._history_limit

    @property
    def system_messages(self) -> list[Message]:
        return list(self._system_messages)

    @property
    def chat_messages(self) -> list[Message]:
        return list(self._chat_messages)

    def set_credential(self, value: str) -> "ConversationClient":
        self._credential = value
        return self

    def set_model(self, name: str) -> "ConversationClient":
        self._model = name
        return self

    def set_http_client(self, client: httpx.AsyncClient) -> "ConversationClient":
        self._http_client = client
        return self

    def set_history_limit(self, n: int) -> "ConversationClient":
        self._history_limit = _check_limit(n)
        return self

    def push_system_message(self, text: str) -> None:
        """Add a persistent instruction. System messages are never evicted."""
        self._system_messages.append(Message(role=Role.SYSTEM.value, content=text))

    def push_user_message(self, text: str) -> None:
        self._push_chat_message(Role.USER.value, text)

    def push_assistant_message(self, text: str) -> None:
        self._push_chat_message(Role.ASSISTANT.value, text)

    def _push_chat_message(self, role: str, text: str) -> None:
        # Trim runs before the append, so the window peaks at history_limit + 1.
        if len(self._chat_messages) > self._history_limit:
            self._chat_messages.pop(0)
        self._chat_messages.append(Message(role=role, content=text))

    def clear_history(self) -> None:
        """Drop the chat window. System messages stay."""
        self._chat_messages.clear()

    def messages(self) -> list[Message]:
        """System messages first, then the chat window, each in insertion order."""
        return [*self._system_messages, *self._chat_messages]

    def _request_body(self) -> dict[str, Any]:
        return {
            "model": self._model,
            "messages": [m.to_payload() for m in self.messages()],
        }

    async def completion(self) -> str:
        """
        Send the current messages and return choices[0].message.content.
        The reply is not added to history; use push_assistant_message or ask().
        Raises TransportError, HttpStatusError or MalformedResponseError.
        """
        body = self._request_body()
        headers = {"Authorization": f"Bearer {self._credential}"}
        logger.debug(
            "Chat completion request: model=%s messages=%d",
            body["model"],
            len(body["messages"]),
        )
        try:
            resp = await self._http_client.post(
                CHAT_COMPLETIONS_URL,
                json=body,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.error("Error sending request: %s", e)
            raise TransportError(str(e)) from e

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Error in response status: %s", e)
            raise HttpStatusError(e.response.status_code, e) from e

        return _extract_content(resp)

    async def ask(self, text: str) -> str:
        """Push a user message, complete, and record the reply in history."""
        self.push_user_message(text)
        reply = await self.completion()
        self.push_assistant_message(reply)
        return reply


def _check_limit(n: int) -> int:
    if n < 0:
        raise ValueError(f"history_limit must be >= 0, got {n}")
    return n


def _extract_content(resp: httpx.Response) -> str:
    """Pull choices[0].message.content out of a 2xx response."""
    try:
        data = resp.json()
    except ValueError as e:
        logger.error("Response body is not JSON: %s", e)
        raise MalformedResponseError("response body is not valid JSON") from e

    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices:
        logger.error("Response has no choices array: %s", str(data)[:200])
        raise MalformedResponseError("choices is not a non-empty array", body=data)

    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        logger.error("Response content is not a string: %s", str(first)[:200])
        raise MalformedResponseError("content is not a string", body=data)
    return content
