"""
Response contracts.

Every Giftery answer is wrapped in the same JSON envelope:

    {"status": "ok", "data": ...}
    {"status": "error", "error": {"code": 1, "text": "..."}}

The parse_* functions below are the result builders handed to
GifteryClient.dispatch(). Each one takes the raw 200 response body and
returns a typed model, or raises:
- ResponseFormatError when the body is not the expected shape
- GifteryApiError when the service answered with an error envelope
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from giftery.errors import GifteryApiError, ResponseFormatError


class BalanceResponse(BaseModel):
    balance: Decimal
    raw: Dict[str, Any] = Field(default_factory=dict)


class Product(BaseModel):
    id: int
    title: str
    url: Optional[str] = None
    brief: Optional[str] = None
    faces: List[int] = Field(default_factory=list)
    face_min: Optional[int] = None
    face_max: Optional[int] = None
    face_step: Optional[int] = None
    image_url: Optional[str] = None
    disclaimer: Optional[str] = None

    def accepts_face(self, face: int) -> bool:
        """True if a card with this nominal value can be ordered."""
        if face in self.faces:
            return True
        if self.face_min is None or self.face_max is None:
            return False
        if not self.face_min <= face <= self.face_max:
            return False
        step = self.face_step or 1
        return (face - self.face_min) % step == 0


class ProductsResponse(BaseModel):
    products: List[Product] = Field(default_factory=list)
    raw: Dict[str, Any] = Field(default_factory=dict)

    def get_product(self, product_id: int) -> Optional[Product]:
        for product in self.products:
            if product.id == product_id:
                return product
        return None


class MakeOrderResponse(BaseModel):
    order_id: int
    raw: Dict[str, Any] = Field(default_factory=dict)


def parse_balance_response(body: str) -> BalanceResponse:
    raw, data = _unwrap(body)
    if not isinstance(data, dict):
        raise ResponseFormatError("Balance data must be an object.", payload=raw)
    return _build_model(BalanceResponse, {"balance": data.get("balance"), "raw": raw}, raw)


def parse_products_response(body: str) -> ProductsResponse:
    raw, data = _unwrap(body)
    if not isinstance(data, list):
        raise ResponseFormatError("Products data must be a list.", payload=raw)
    return _build_model(ProductsResponse, {"products": data, "raw": raw}, raw)


def parse_make_order_response(body: str) -> MakeOrderResponse:
    raw, data = _unwrap(body)
    if not isinstance(data, dict):
        raise ResponseFormatError("Order data must be an object.", payload=raw)
    return _build_model(MakeOrderResponse, {"order_id": data.get("id"), "raw": raw}, raw)


def _unwrap(body: str):
    try:
        raw = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise ResponseFormatError(f"Response body is not valid JSON: {exc}", payload=body) from exc
    if not isinstance(raw, dict):
        raise ResponseFormatError("Response body must be a JSON object.", payload=raw)

    status = str(raw.get("status") or "").lower()
    if status == "ok":
        return raw, raw.get("data")
    if status == "error":
        error = raw.get("error") if isinstance(raw.get("error"), dict) else {}
        try:
            code = int(error.get("code", 0))
        except (TypeError, ValueError, OverflowError):
            code = 0
        raise GifteryApiError(code, str(error.get("text") or "Unknown error"), payload=raw)
    raise ResponseFormatError(f"Unsupported response status '{status}'.", payload=raw)


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any]):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise ResponseFormatError(f"Response validation failed: {exc}", payload=raw) from exc
