"""API routes package.

This package contains all API route handlers for the application.
"""
from . import board
from . import sessions
from . import simulate

__all__ = [
    "board",
    "sessions",
    "simulate",
]
