"""Data models."""

from chat_completion.models.message import Message, Role

__all__ = ["Message", "Role"]
