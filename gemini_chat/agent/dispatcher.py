"""Completion dispatchers: one user utterance in, one completion out.

Every dispatcher exposes ``request_completion(user_text) -> str`` and raises
``DispatchError`` on any failure. Callers never see which failure it was;
the original exception is chained for logging.

Two implementations:

1. **AgentDispatcher** - talks to the model through an Agno Agent. Each call
   is a single-turn run: no storage, no history, no knowledge base, so the
   session_id Agno would otherwise use for continuity is never passed.

2. **ApiDispatcher** - posts to this application's ``/chat`` endpoint with
   httpx. Used by the chat page so the UI stays a thin client of the API,
   whether the two run in one process or in two.

Neither retries, sets a timeout, or supports cancellation. One attempt per call.
"""

import logging
from typing import Protocol

import httpx
from agno.agent import Agent
from agno.models.google import Gemini
from agno.models.openai import OpenAIChat
from pydantic import ValidationError

from gemini_chat.agent.config import AgentConfig, get_agent_config
from gemini_chat.models.schemas import ChatResponse

logger = logging.getLogger(__name__)


class DispatchError(Exception):
    """Raised when a completion could not be obtained."""

    pass


class CompletionDispatcher(Protocol):
    async def request_completion(self, user_text: str) -> str:
        """Return the completion for user_text or raise DispatchError."""
        ...


class AgentDispatcher:
    """Dispatcher backed by an Agno agent.

    Wraps Agno's Agent with:
    - Provider selection (Gemini or OpenAI-compatible)
    - Single-turn requests with verbatim output
    - Collapsing of provider errors into DispatchError
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the dispatcher.

        Args:
            config: Optional model configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        self._agent = self._create_agent()

    def _create_model(self) -> Gemini | OpenAIChat:
        if self._config.provider == "openai":
            return OpenAIChat(
                id=self._config.model_name,
                api_key=self._config.api_key,
                base_url=self._config.base_url,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
            )
        return Gemini(
            id=self._config.model_name,
            api_key=self._config.api_key,
            temperature=self._config.temperature,
            max_output_tokens=self._config.max_tokens,
        )

    def _create_agent(self) -> Agent:
        """Create the Agno agent instance.

        Returns:
            Agent with the configured model and no history or storage.
        """
        return Agent(
            model=self._create_model(),
            description="A helpful chat assistant.",
            add_history_to_context=False,
            # Reply text is shown as plain text in the chat window
            markdown=False,
        )

    async def request_completion(self, user_text: str) -> str:
        """Send one prompt to the model and return its reply verbatim.

        Args:
            user_text: The text the user submitted.

        Returns:
            The model's reply text, untouched.

        Raises:
            DispatchError: On any provider failure or a reply without text.
        """
        logger.debug(
            f"Dispatching completion ({len(user_text)} chars) to {self._config.provider}"
        )
        try:
            response = await self._agent.arun(user_text)
        except Exception as e:
            raise DispatchError("Completion request failed") from e

        content = getattr(response, "content", None)
        if not isinstance(content, str):
            raise DispatchError(f"Malformed completion response: {content!r}")
        return content


class ApiDispatcher:
    """Dispatcher that calls the ``POST /chat`` endpoint over HTTP."""

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    async def request_completion(self, user_text: str) -> str:
        async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
            try:
                response = await client.post(
                    f"{self._base_url}/chat", json={"message": user_text}
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise DispatchError(f"HTTP {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise DispatchError(f"Connection failed: {e}") from e

        try:
            return ChatResponse.model_validate_json(response.content).reply
        except ValidationError as e:
            raise DispatchError("Malformed response body") from e


# Module-level singleton instance
_dispatcher: AgentDispatcher | None = None


def get_dispatcher() -> AgentDispatcher:
    """Get or create the global agent dispatcher.

    Uses singleton pattern so the model client is built once.

    Returns:
        The AgentDispatcher instance.
    """
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = AgentDispatcher()
    return _dispatcher
