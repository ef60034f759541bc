"""Unit tests for the chat page's presentation helpers."""

import pytest

from gemini_chat.models.schemas import Sender
from gemini_chat.ui.chat_page import (
    SIDEBAR_CONVERSATIONS,
    message_classes,
    send_button_label,
)


@pytest.mark.parametrize(("is_loading", "label"), [(True, "..."), (False, "Send")])
def test_send_button_label(is_loading: bool, label: str) -> None:
    assert send_button_label(is_loading) == label


def test_user_messages_align_right() -> None:
    assert message_classes(Sender.USER) == ("justify-end", "user-message")


def test_bot_messages_align_left() -> None:
    assert message_classes(Sender.BOT) == ("justify-start", "bot-message")


def test_sidebar_lists_sample_conversations() -> None:
    assert [c["title"] for c in SIDEBAR_CONVERSATIONS] == [
        "Getting Started with AI",
        "React Project Ideas",
        "History of Programming",
    ]
