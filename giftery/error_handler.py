"""Error handling helpers for Giftery command-line calls."""
from typing import Any, Dict
import logging

from pydantic import ValidationError

from giftery.errors import (
    ConfigError,
    GifteryApiError,
    HttpError,
    InvalidArgumentError,
    ResponseFormatError,
    TransportError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)


def classify(exc: Exception) -> str:
    if isinstance(exc, InvalidArgumentError):
        return "invalid_argument"
    if isinstance(exc, TransportError):
        return "transport"
    if isinstance(exc, UnexpectedStatusError):
        return "http_status"
    if isinstance(exc, HttpError):
        return "http"
    if isinstance(exc, GifteryApiError):
        return "api"
    if isinstance(exc, ResponseFormatError):
        return "response_format"
    if isinstance(exc, (ConfigError, ValidationError, FileNotFoundError)):
        return "config"
    return "internal"


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        kind = classify(exc)
        metadata: Dict[str, Any] = {"error": str(exc), "context": context or {}}
        if isinstance(exc, TransportError):
            metadata["code"] = exc.code
        elif isinstance(exc, UnexpectedStatusError):
            metadata["status_code"] = exc.status_code
        elif isinstance(exc, GifteryApiError):
            metadata["code"] = exc.code

        if kind == "internal":
            logger.error("Unhandled exception in Giftery call: %s", exc, exc_info=True)
        else:
            logger.error("Giftery call failed (%s): %s", kind, exc)
        return {
            "message": str(exc) if kind != "internal" else "An internal error occurred while calling Giftery.",
            "kind": kind,
            "metadata": metadata,
        }
