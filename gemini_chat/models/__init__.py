"""Pydantic models for conversation records and API payloads.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Sender: Message author (user or bot)
    - Message: Immutable conversation turn
    - ChatRequest: Incoming chat request payload
    - ChatResponse: Outgoing completion text
"""

from gemini_chat.models.schemas import ChatRequest, ChatResponse, Message, Sender

__all__ = ["ChatRequest", "ChatResponse", "Message", "Sender"]
