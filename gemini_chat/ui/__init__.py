"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Header and sidebar scaffolding
    - Chat window rendering of the conversation thread
    - Text input disabled while a reply is outstanding

Contains no business logic. Submissions go through the ConversationController,
which reaches the model through the API.
"""
