"""Chat completion client."""

from chat_completion.llm.conversation_client import ConversationClient
from chat_completion.llm.errors import (
    ChatCompletionError,
    HttpStatusError,
    MalformedResponseError,
    TransportError,
)
from chat_completion.llm.factory import create_conversation_client, create_http_client

__all__ = [
    "ChatCompletionError",
    "ConversationClient",
    "HttpStatusError",
    "MalformedResponseError",
    "TransportError",
    "create_conversation_client",
    "create_http_client",
]
