from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sender(str, Enum):
    """Who authored a message."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """A single turn in the conversation.

    Messages are immutable once created and carry no identity beyond
    their position in the conversation.

    Attributes:
        text: The message text, shown as-is.
        sender: The message author.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    sender: Sender


class ChatRequest(BaseModel):
    """Request payload for the chat completion endpoint.

    Attributes:
        message: User's prompt, forwarded without trimming.
    """

    message: str = Field(..., min_length=1, description="The user's message")

    @field_validator("message")
    @classmethod
    def reject_blank_message(cls, v: str) -> str:
        """Reject whitespace-only messages while keeping the text untouched."""
        if not v.strip():
            raise ValueError("Message must not be blank")
        return v


class ChatResponse(BaseModel):
    """Response from the chat completion endpoint.

    Attributes:
        reply: The model's completion text.
    """

    reply: str = Field(..., description="The model's reply")
