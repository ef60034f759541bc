"""Pytest fixtures and shared test configuration.

Fixtures:
    - stub_dispatcher: Dispatcher returning a canned reply
    - failing_dispatcher: Dispatcher that always raises DispatchError
    - conversation: Fresh conversation store
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from gemini_chat.agent.dispatcher import DispatchError
from gemini_chat.api.app import app
from gemini_chat.conversation import Conversation


class StubDispatcher:
    """Records prompts and returns a fixed reply."""

    def __init__(self, reply: str = "Hello there!") -> None:
        self.reply = reply
        self.prompts: list[str] = []

    async def request_completion(self, user_text: str) -> str:
        self.prompts.append(user_text)
        return self.reply


class FailingDispatcher:
    """Records prompts and always fails."""

    def __init__(self) -> None:
        self.prompts: list[str] = []

    async def request_completion(self, user_text: str) -> str:
        self.prompts.append(user_text)
        raise DispatchError("upstream returned 500")


@pytest.fixture
def stub_dispatcher() -> StubDispatcher:
    return StubDispatcher()


@pytest.fixture
def failing_dispatcher() -> FailingDispatcher:
    return FailingDispatcher()


@pytest.fixture
def conversation() -> Conversation:
    return Conversation()


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Dependency overrides set by a test are cleared afterwards.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
