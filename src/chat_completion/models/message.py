"""Conversation message model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker of a message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single turn. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    # Not validated against Role.
    role: str = Field(..., description="system | user | assistant")
    content: str = Field(..., description="Message text")

    def to_payload(self) -> dict[str, str]:
        """Wire form for the chat completions body."""
        return {"role": self.role, "content": self.content}
