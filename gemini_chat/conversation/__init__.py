"""Conversation state and the controller that drives it.

Responsibilities:
    - Append-only message thread seeded with a greeting
    - Awaiting-reply flag for the single outstanding dispatch
    - Idle/AwaitingReply state machine binding submissions to a dispatcher

Framework-agnostic. The UI owns a Conversation and injects it into the controller.
"""

from gemini_chat.conversation.controller import APOLOGY_TEXT, ConversationController
from gemini_chat.conversation.store import GREETING_TEXT, Conversation

__all__ = ["APOLOGY_TEXT", "GREETING_TEXT", "Conversation", "ConversationController"]
