"""
Mock integration clients.

Used during development and in tests. Nothing here makes network calls.
"""

from .giftery_mock import MockGifteryService

__all__ = ["MockGifteryService"]
