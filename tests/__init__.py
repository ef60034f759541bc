"""Test suite for the Gemini Chat application.

Contains unit tests for individual components and integration tests
for the HTTP API and end-to-end conversation flow.
"""
