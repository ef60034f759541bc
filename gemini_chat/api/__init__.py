"""FastAPI endpoints for the chat interface.

Endpoints:
    - GET /health: Service health status
    - POST /chat: Single-turn chat completion
"""
