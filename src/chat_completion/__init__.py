"""Minimal chat-completion client with a bounded conversation history."""

from chat_completion.llm import (
    ChatCompletionError,
    ConversationClient,
    HttpStatusError,
    MalformedResponseError,
    TransportError,
)
from chat_completion.models import Message, Role

__all__ = [
    "ChatCompletionError",
    "ConversationClient",
    "HttpStatusError",
    "MalformedResponseError",
    "Message",
    "Role",
    "TransportError",
]
