"""Controller binding a completion dispatcher to a conversation.

Two states, cycling for the life of the session::

    Idle --submit(text)--> AwaitingReply --resolve(ok | err)--> Idle

The controller is the authority on the guard: a blank submission, or any
submission while a reply is outstanding, is ignored. Dispatch errors are
recovered here and never reach the caller; the user sees a fixed apology
and the cause goes to the log.
"""

import logging
from collections.abc import Callable

from gemini_chat.agent.dispatcher import CompletionDispatcher, DispatchError
from gemini_chat.conversation.store import Conversation
from gemini_chat.models.schemas import Sender

logger = logging.getLogger(__name__)

APOLOGY_TEXT = "Sorry, I ran into an error. Please try again."


class ConversationController:
    """Drives one conversation through submit/resolve cycles.

    Args:
        conversation: Externally owned store to mutate.
        dispatcher: Source of completions.
        on_change: Called after every change to the conversation.
    """

    def __init__(
        self,
        conversation: Conversation,
        dispatcher: CompletionDispatcher,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.conversation = conversation
        self._dispatcher = dispatcher
        self._on_change = on_change

    @property
    def awaiting_reply(self) -> bool:
        return self.conversation.awaiting_reply

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def submit(self, text: str) -> bool:
        """Send text as a user message and wait for the bot reply.

        Args:
            text: Raw input text. Appended and dispatched untrimmed.

        Returns:
            True if the submission was accepted, False if it was ignored.
        """
        if not text.strip() or self.conversation.awaiting_reply:
            return False

        self.conversation.append(text, Sender.USER)
        self.conversation.awaiting_reply = True
        self._notify()

        try:
            reply = await self._dispatcher.request_completion(text)
        except DispatchError as e:
            logger.error(f"Failed to send message: {e}", exc_info=e)
            self.resolve(None)
        except Exception as e:
            # A dispatcher outside the DispatchError contract must not wedge the session
            logger.exception(f"Unexpected dispatcher failure: {e}")
            self.resolve(None)
        else:
            self.resolve(reply)
        return True

    def resolve(self, reply: str | None) -> None:
        """Settle the outstanding dispatch.

        Args:
            reply: Completion text, or None when the dispatch failed.
        """
        if not self.conversation.awaiting_reply:
            return
        text = APOLOGY_TEXT if reply is None else reply
        self.conversation.append(text, Sender.BOT)
        self.conversation.awaiting_reply = False
        self._notify()

    def reset(self) -> bool:
        """Start a new thread, unless a reply is outstanding."""
        if self.conversation.awaiting_reply:
            return False
        self.conversation.clear()
        self._notify()
        return True
