"""
Giftery API client.

Signed requests for the Giftery gift-card vending API:
- getBalance: current account balance
- getProducts: gift cards available for ordering
- makeOrder: order a gift card

Key rule:
- All network calls go through GifteryClient (giftery/clients/real_http).
- Responses are parsed into the models in giftery/contracts.
"""

__version__ = "0.1.0"

from .clients.real_http import GifteryClient, create_signature
from .contracts import (
    BalanceResponse,
    Command,
    HttpMethod,
    MakeOrderResponse,
    OrderData,
    Product,
    ProductsResponse,
    RequestData,
    parse_balance_response,
    parse_make_order_response,
    parse_products_response,
)
from .errors import (
    CommandTypeError,
    ConfigError,
    GifteryApiError,
    GifteryError,
    HttpError,
    InvalidArgumentError,
    ResponseFormatError,
    TransportError,
    UnexpectedStatusError,
    UnknownCommandError,
)
from .utils.config_loader import ClientSettings, load_client_settings

__all__ = [
    "__version__",
    # client
    "GifteryClient", "create_signature", "ClientSettings", "load_client_settings",
    # contracts
    "Command", "HttpMethod", "OrderData", "RequestData",
    "BalanceResponse", "MakeOrderResponse", "Product", "ProductsResponse",
    "parse_balance_response", "parse_make_order_response", "parse_products_response",
    # errors
    "GifteryError", "ConfigError", "InvalidArgumentError", "CommandTypeError", "UnknownCommandError",
    "HttpError", "TransportError", "UnexpectedStatusError",
    "ResponseFormatError", "GifteryApiError",
]
