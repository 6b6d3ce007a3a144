"""Errors surfaced to API callers as ``{"error": ..., "details": ...}``."""

from __future__ import annotations


class ChatAPIError(Exception):
    """Base class for caller-visible errors."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, details: str = "") -> None:
        super().__init__(details or self.message)
        self.details = details or self.message


class UnauthenticatedError(ChatAPIError):
    status_code = 401
    message = "Authentication failed"


class ConversationNotFoundError(ChatAPIError):
    status_code = 404
    message = "Conversation not found"


class UpstreamError(ChatAPIError):
    """Completion service failed or returned an unusable response."""

    status_code = 502
    message = "Completion service error"
