"""
Giftery service: MOCK.

⚠️  This is an in-memory stand-in for the Giftery API for development and
    testing. It makes no network calls.

It speaks the real wire protocol: requests built by GifteryClient are
authenticated (client id + signature) and answered with the same JSON
envelopes the live service uses. Plug it in through an httpx transport:

    service = MockGifteryService(client_id=42, secret="s")
    client = GifteryClient(42, "s", transport=service.transport())
"""

import json
import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

import httpx

from giftery.clients.real_http.giftery_client import create_signature
from giftery.contracts.commands import Command
from giftery.contracts.responses import Product

logger = logging.getLogger(__name__)

# Error codes answered in the "error" envelope
ERR_UNKNOWN_COMMAND = 1
ERR_UNKNOWN_CLIENT = 2
ERR_BAD_SIGNATURE = 3
ERR_BAD_DATA = 4
ERR_INSUFFICIENT_FUNDS = 11
ERR_UNKNOWN_PRODUCT = 12
ERR_INVALID_FACE = 13


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_MOCK_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": 101,
        "title": "Ozon.ru",
        "url": "https://www.ozon.ru",
        "brief": "Electronic gift card for the Ozon marketplace.",
        "faces": [500, 1000, 3000, 5000],
        "image_url": "https://static.giftery.ru/mock/ozon.png",
        "disclaimer": "Valid for 12 months from the date of issue.",
    },
    {
        "id": 102,
        "title": "Lamoda",
        "url": "https://www.lamoda.ru",
        "brief": "Clothes, shoes and accessories.",
        "faces": [],
        "face_min": 500,
        "face_max": 15000,
        "face_step": 500,
        "image_url": "https://static.giftery.ru/mock/lamoda.png",
    },
    {
        "id": 103,
        "title": "Litres",
        "url": "https://www.litres.ru",
        "brief": "E-books and audiobooks.",
        "faces": [300, 500, 1000],
    },
]


class MockGifteryService:
    def __init__(
        self,
        client_id: int,
        secret: str,
        balance: Decimal = Decimal("10000.00"),
        products: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.client_id = client_id
        self.secret = secret
        self.balance = Decimal(balance)
        self.products = [dict(p) for p in (products if products is not None else _MOCK_PRODUCTS)]
        self.orders: List[Dict[str, Any]] = []
        self.requests: List[httpx.Request] = []
        self._next_order_id = 1

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    # -- Request handling --

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        params = dict(request.url.params)
        if request.method == "POST" and request.content:
            params.update(dict(httpx.QueryParams(request.content.decode("utf-8"))))

        cmd = params.get("cmd", "")
        data = params.get("data", "")
        logger.debug("Mock Giftery received %s via %s", cmd, request.method)

        if params.get("id") != str(self.client_id):
            return self._error(ERR_UNKNOWN_CLIENT, "Unknown client id")
        if params.get("sig") != create_signature(cmd, data, self.secret):
            return self._error(ERR_BAD_SIGNATURE, "Signature mismatch")

        try:
            payload = json.loads(data)
        except ValueError:
            return self._error(ERR_BAD_DATA, "data is not valid JSON")
        if not isinstance(payload, dict):
            return self._error(ERR_BAD_DATA, "data must be a JSON object")

        if cmd == Command.GET_BALANCE.value:
            return self._ok({"balance": f"{self.balance:.2f}"})
        if cmd == Command.GET_PRODUCTS.value:
            return self._ok(self.products)
        if cmd == Command.MAKE_ORDER.value:
            return self._make_order(payload)
        return self._error(ERR_UNKNOWN_COMMAND, f"Unknown command '{cmd}'")

    def _make_order(self, payload: Dict[str, Any]) -> httpx.Response:
        product = next((p for p in self.products if p["id"] == payload.get("product_id")), None)
        if product is None:
            return self._error(ERR_UNKNOWN_PRODUCT, f"Unknown product {payload.get('product_id')}")

        face = payload.get("face")
        if not isinstance(face, int) or not Product(**product).accepts_face(face):
            return self._error(ERR_INVALID_FACE, f"Face {face!r} is not available for product {product['id']}")
        if Decimal(face) > self.balance:
            return self._error(ERR_INSUFFICIENT_FUNDS, "Insufficient funds")

        order_id = self._next_order_id
        self._next_order_id += 1
        if not payload.get("testmode"):
            self.balance -= Decimal(face)
        self.orders.append({"id": order_id, **payload})
        logger.info("Mock Giftery created order %s for product %s (face=%s)", order_id, product["id"], face)
        return self._ok({"id": order_id})

    @staticmethod
    def _ok(data: Any) -> httpx.Response:
        return httpx.Response(200, json={"status": "ok", "data": data})

    @staticmethod
    def _error(code: int, text: str) -> httpx.Response:
        return httpx.Response(200, json={"status": "error", "error": {"code": code, "text": text}})

