"""
Giftery API clients.

- real_http: the signed HTTP client used against the live service
- mocks: an in-memory Giftery service for development and tests

The selection of mock vs real transport happens in ONE place (giftery/cli.py),
driven by GIFTERY_MODE or --mock.
"""

from .real_http import GifteryClient

__all__ = ["GifteryClient"]
