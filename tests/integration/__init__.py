"""Integration tests exercising the FastAPI app through ASGITransport."""
