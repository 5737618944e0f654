"""
Contracts (data models).

This folder defines the request/response shapes for the Giftery API:
- the command and transport-mode enumerations
- request payloads (OrderData) and their JSON serialization
- typed response models and the builders that parse raw bodies into them

Both the real HTTP client and the mock service use these contracts.
"""

from .commands import ALLOWED_COMMANDS, Command, HttpMethod
from .products import ProductFilter, filter_products
from .requests import OrderData, Payload, RequestData, serialize_payload
from .responses import (
    BalanceResponse,
    MakeOrderResponse,
    Product,
    ProductsResponse,
    parse_balance_response,
    parse_make_order_response,
    parse_products_response,
)

__all__ = [
    "ALLOWED_COMMANDS", "Command", "HttpMethod",
    "OrderData", "Payload", "RequestData", "serialize_payload",
    "BalanceResponse", "MakeOrderResponse", "Product", "ProductsResponse",
    "parse_balance_response", "parse_make_order_response", "parse_products_response",
    "ProductFilter", "filter_products",
]
