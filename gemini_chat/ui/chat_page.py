"""NiceGUI chat interface."""

import os

from nicegui import ui

from gemini_chat.agent.dispatcher import ApiDispatcher
from gemini_chat.conversation import Conversation, ConversationController
from gemini_chat.models.schemas import Message, Sender

# Sample entries shown in the sidebar
SIDEBAR_CONVERSATIONS = [
    {"id": 1, "title": "Getting Started with AI"},
    {"id": 2, "title": "React Project Ideas"},
    {"id": 3, "title": "History of Programming"},
]


def send_button_label(is_loading: bool) -> str:
    return "..." if is_loading else "Send"


def message_classes(sender: Sender) -> tuple[str, str]:
    """Return (row alignment, bubble class) for a message author."""
    if sender == Sender.USER:
        return "justify-end", "user-message"
    return "justify-start", "bot-message"


CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-header { background: linear-gradient(135deg, #4285f4 0%, #9b72cb 100%); }

    .sidebar {
        background: #f9fafb;
        border-right: 1px solid #e5e7eb;
    }

    .conversation-item {
        border-radius: 8px;
        cursor: pointer;
        transition: background 0.2s;
    }
    .conversation-item:hover { background: #e5e7eb; }

    .user-message {
        background: linear-gradient(135deg, #4285f4 0%, #9b72cb 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
        white-space: pre-wrap;
    }

    .bot-message {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
        white-space: pre-wrap;
    }

    .chat-input-area { background: white; border-top: 1px solid #e5e7eb; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    conversation = Conversation()

    chat_window: ui.scroll_area
    messages_container: ui.column
    input_field: ui.input
    send_btn: ui.button

    def render_message(msg: Message) -> None:
        align, bubble = message_classes(msg.sender)
        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"max-w-[70%] px-4 py-3 {bubble}"):
                ui.label(msg.text).classes("text-sm leading-relaxed")

    def refresh() -> None:
        messages_container.clear()
        with messages_container:
            for msg in conversation.messages:
                render_message(msg)

        is_loading = conversation.awaiting_reply
        input_field.set_enabled(not is_loading)
        send_btn.set_enabled(not is_loading)
        send_btn.set_text(send_button_label(is_loading))
        chat_window.scroll_to(percent=1.0)

    controller = ConversationController(
        conversation,
        ApiDispatcher(os.getenv("API_BASE_URL", "http://localhost:8000")),
        on_change=refresh,
    )

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or controller.awaiting_reply:
            return
        input_field.value = ""
        await controller.submit(text)

    # === UI Layout ===
    with ui.column().classes("w-full h-screen gap-0"):
        # Header
        with ui.row().classes("w-full app-header px-5 py-4 items-center justify-between"):
            ui.label("Gemini Chat").classes("text-lg font-semibold text-white")
            ui.label("Welcome, User!").classes("text-sm text-white/80")

        with ui.row().classes("w-full flex-grow gap-0 no-wrap"):
            # Sidebar
            with ui.column().classes("sidebar w-64 h-full p-4 gap-2"):
                ui.label("Conversations").classes("text-base font-semibold text-gray-700")
                for convo in SIDEBAR_CONVERSATIONS:
                    ui.label(convo["title"]).classes(
                        "conversation-item w-full px-3 py-2 text-sm text-gray-600"
                    )
                ui.button("+ New Chat", on_click=controller.reset).props(
                    "outline no-caps"
                ).classes("w-full mt-2")

            # Chat window and input
            with ui.column().classes("flex-grow h-full gap-0"):
                with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as chat_window:
                    messages_container = ui.column().classes("w-full p-5 gap-4")

                with ui.row().classes("w-full chat-input-area p-4 gap-3 items-center no-wrap"):
                    input_field = (
                        ui.input(placeholder="Type your message here...")
                        .props("outlined dense")
                        .classes("flex-grow")
                        .on("keydown.enter", send_message)
                    )
                    send_btn = ui.button(send_button_label(False), on_click=send_message).props(
                        "unelevated no-caps"
                    )

    refresh()


def main() -> None:
    ui.run(title="Gemini Chat", port=int(os.getenv("UI_PORT", "8080")), reload=False)


if __name__ == "__main__":
    main()
