"""
Request payload contracts.

Anything sent as the ``data`` parameter must serialize to JSON
deterministically: the same payload always yields the same string, because
the request signature is computed over that exact string.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


def dump_json(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=True)


class RequestData(ABC):
    """Every request payload must implement this interface."""

    @abstractmethod
    def to_json(self) -> str:
        """Return the JSON string sent as ``data`` and signed."""


class OrderData(BaseModel, RequestData):
    """Payload for the makeOrder command."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    product_id: int = Field(gt=0)
    face: int = Field(gt=0)                       # nominal value of the card
    email_to: Optional[str] = None
    email_from: Optional[str] = None
    from_name: Optional[str] = Field(default=None, alias="from")
    to_name: Optional[str] = Field(default=None, alias="to")
    text: Optional[str] = None
    comment: Optional[str] = None
    external_id: Optional[str] = None
    testmode: bool = False

    def to_wire(self) -> dict:
        payload = self.model_dump(by_alias=True, exclude_none=True)
        # the service expects testmode=1 or no key at all
        if payload.pop("testmode", False):
            payload["testmode"] = 1
        return payload

    def to_json(self) -> str:
        return dump_json(self.to_wire())


Payload = Union[RequestData, Mapping[str, Any]]


def serialize_payload(payload: Optional[Payload]) -> str:
    if payload is None:
        return "{}"
    if isinstance(payload, RequestData):
        return payload.to_json()
    return dump_json(dict(payload))
