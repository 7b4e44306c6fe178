"""Client factory - builds the shared HTTP client and conversations from settings."""

import httpx

from chat_completion.config import get_settings, load_system_prompts
from chat_completion.llm.conversation_client import ConversationClient


def create_http_client(timeout: float | None = None) -> httpx.AsyncClient:
    """
    Pooled HTTP client meant to be shared by many conversations.
    The caller owns it and must close it.
    """
    settings = get_settings()
    return httpx.AsyncClient(timeout=timeout or settings.request_timeout)


def create_conversation_client(
    http_client: httpx.AsyncClient,
    *,
    api_key: str | None = None,
    model: str | None = None,
    history_limit: int | None = None,
    system_prompts: list[str] | None = None,
) -> ConversationClient:
    """
    Conversation with gaps filled from settings.
    System prompts come from the argument, else from PROMPTS_FILE when set.
    """
    settings = get_settings()
    client = ConversationClient(
        api_key or settings.llm_api_key,
        http_client,
        model=model or settings.llm_model,
        history_limit=settings.history_limit if history_limit is None else history_limit,
    )
    if system_prompts is None:
        system_prompts = load_system_prompts(settings.prompts_file) if settings.prompts_file else []
    for prompt in system_prompts:
        client.push_system_message(prompt)
    return client
