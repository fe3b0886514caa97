"""Middleware module for the skydive logbook API."""

from .auth import AuthenticationError, get_bearer_token, get_current_jumper
from .logging import RequestResponseLoggingMiddleware

__all__ = [
    "AuthenticationError",
    "get_bearer_token",
    "get_current_jumper",
    "RequestResponseLoggingMiddleware"
]
