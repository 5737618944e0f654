"""
Exception taxonomy for the Giftery client.

Two kinds surface from a dispatch:
- InvalidArgumentError: caller misuse (bad command, missing order payload)
- HttpError: no 200 response was obtained (transport failure or bad status)

Response parsing raises ResponseFormatError for malformed bodies and
GifteryApiError when the service answers with an error envelope.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class GifteryError(Exception):
    pass


class InvalidArgumentError(GifteryError, ValueError):
    pass


class CommandTypeError(InvalidArgumentError, TypeError):
    def __init__(self, command: Any) -> None:
        super().__init__(f"cmd must be a string, got {type(command).__name__}")
        self.command = command


class UnknownCommandError(InvalidArgumentError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown cmd value '{command}'")
        self.command = command


class ConfigError(GifteryError, ValueError):
    pass


class HttpError(GifteryError):
    pass


class TransportError(HttpError):
    """The request never produced a response (connect, DNS, timeout...)."""

    def __init__(self, reason: str, code: int) -> None:
        super().__init__(f"{reason} ({code})")
        self.reason = reason
        self.code = code


class UnexpectedStatusError(HttpError):
    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Unexpected HTTP status code from server ({status_code})")
        self.status_code = status_code
        self.body = body


class ResponseFormatError(GifteryError, ValueError):
    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.payload = payload if payload is not None else {}


class GifteryApiError(GifteryError):
    """The service accepted the request but answered with an error envelope."""

    def __init__(self, code: int, text: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"Giftery API error {code}: {text}")
        self.code = code
        self.text = text
        self.payload = payload or {}
