"""Gemini Chat - a single-page chat interface for a remote language model.

Combines FastAPI for the HTTP API, Agno for model access,
NiceGUI for the chat page, and Pydantic for data validation.

Components:
    - agent: completion dispatchers and model configuration
    - conversation: conversation store and controller state machine
    - api: HTTP endpoints
    - ui: web interface for chat interactions
    - models: message and request/response schemas
"""

__version__ = "0.1.0"
