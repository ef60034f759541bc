"""Per-session conversation store."""

from gemini_chat.models.schemas import Message, Sender

GREETING_TEXT = "Hello! How can I assist you today?"


class Conversation:
    """Ordered message thread plus the awaiting-reply flag.

    Sequence order is creation order. Only the controller mutates it.
    """

    def __init__(self) -> None:
        self.messages: list[Message] = [Message(text=GREETING_TEXT, sender=Sender.BOT)]
        self.awaiting_reply: bool = False

    def append(self, text: str, sender: Sender) -> Message:
        message = Message(text=text, sender=sender)
        self.messages.append(message)
        return message

    def clear(self) -> None:
        """Drop everything but a fresh greeting."""
        self.messages[:] = [Message(text=GREETING_TEXT, sender=Sender.BOT)]
        self.awaiting_reply = False

    def __len__(self) -> int:
        return len(self.messages)
