"""Unit tests for configuration, dispatchers, the conversation controller, and UI helpers."""
