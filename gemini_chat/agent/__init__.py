"""Completion dispatch for the chat interface.

Turns one user utterance into one remote completion request.

Responsibilities:
    - Model configuration loaded from the environment
    - Single-turn requests to Gemini or an OpenAI-compatible model via Agno
    - HTTP client for the application's own /chat endpoint
    - Collapsing every failure into a single DispatchError

Holds no conversation state. The controller decides what to show the user.
"""

from gemini_chat.agent.config import AgentConfig, get_agent_config
from gemini_chat.agent.dispatcher import (
    AgentDispatcher,
    ApiDispatcher,
    CompletionDispatcher,
    DispatchError,
    get_dispatcher,
)

__all__ = [
    "AgentConfig",
    "AgentDispatcher",
    "ApiDispatcher",
    "CompletionDispatcher",
    "DispatchError",
    "get_agent_config",
    "get_dispatcher",
]
