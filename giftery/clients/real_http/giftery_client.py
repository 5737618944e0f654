"""
Giftery API HTTP Client.

Purpose:
- Turns one logical operation (getBalance, getProducts, makeOrder) into
  exactly one signed HTTP request
- Hands the raw 200 body to a caller-selected result builder

Request layout:
- cmd, id, in=json, out=json always travel in the query string
- data (the JSON payload) and sig travel in the query string for GET and in
  a form-encoded body for POST
- sig = sha256(cmd + data + secret), hex encoded

Usage:
    client = GifteryClient(client_id=42, secret="...")
    balance = client.get_balance()
    order = client.use_post().make_order(OrderData(product_id=1, face=500))

Important:
- Settings are immutable. use_get(), use_post() and set_endpoint() return a
  new client, so one instance can be shared between threads.
- No retries: one attempt, errors are raised to the caller.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Callable, Dict, NamedTuple, Optional, TypeVar, Union
from urllib.parse import urlencode

import httpx

from giftery.contracts.commands import ALLOWED_COMMANDS, Command, HttpMethod
from giftery.contracts.requests import Payload, serialize_payload
from giftery.contracts.responses import (
    BalanceResponse,
    MakeOrderResponse,
    ProductsResponse,
    parse_balance_response,
    parse_make_order_response,
    parse_products_response,
)
from giftery.errors import (
    CommandTypeError,
    InvalidArgumentError,
    TransportError,
    UnexpectedStatusError,
    UnknownCommandError,
)
from giftery.utils.config_loader import ClientSettings, load_client_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

# curl-compatible codes so transport failures stay comparable across clients
_TRANSPORT_ERROR_CODES = (
    (httpx.UnsupportedProtocol, 1),
    (httpx.ProxyError, 5),
    (httpx.ConnectTimeout, 28),
    (httpx.ConnectError, 7),
    (httpx.TimeoutException, 28),
    (httpx.WriteError, 55),
    (httpx.ReadError, 56),
    (httpx.RemoteProtocolError, 56),
    (httpx.DecodingError, 56),
)


class PreparedCall(NamedTuple):
    command: str
    method: HttpMethod
    url: str
    headers: Dict[str, str]
    content: Optional[bytes]


def create_signature(command: str, data: str, secret: str) -> str:
    return hashlib.sha256((command + data + secret).encode("utf-8")).hexdigest()


def transport_error_code(exc: httpx.RequestError) -> int:
    for exc_type, code in _TRANSPORT_ERROR_CODES:
        if isinstance(exc, exc_type):
            return code
    return 0


class GifteryClient:
    def __init__(
        self,
        client_id: Optional[int] = None,
        secret: Optional[str] = None,
        *,
        settings: Optional[ClientSettings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if settings is None:
            settings = ClientSettings(client_id=client_id, secret=secret)
        self.settings = settings
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, transport: Optional[httpx.BaseTransport] = None
    ) -> "GifteryClient":
        return cls(settings=settings, transport=transport)

    @classmethod
    def from_env(cls, transport: Optional[httpx.BaseTransport] = None) -> "GifteryClient":
        return cls(settings=load_client_settings(), transport=transport)

    @property
    def endpoint(self) -> str:
        return self.settings.endpoint

    @property
    def http_method(self) -> HttpMethod:
        return self.settings.http_method

    def _replace(self, **changes) -> "GifteryClient":
        data = self.settings.model_dump()
        data.update(changes)
        return GifteryClient(settings=ClientSettings(**data), transport=self._transport)

    def use_get(self) -> "GifteryClient":
        return self._replace(http_method=HttpMethod.GET)

    def use_post(self) -> "GifteryClient":
        return self._replace(http_method=HttpMethod.POST)

    def set_endpoint(self, endpoint: str) -> "GifteryClient":
        return self._replace(endpoint=endpoint)

    # -- API operations --

    def get_balance(self) -> BalanceResponse:
        """Current account balance."""
        return self.dispatch(Command.GET_BALANCE, parse_balance_response)

    def get_products(self) -> ProductsResponse:
        """Gift cards available for ordering."""
        return self.dispatch(Command.GET_PRODUCTS, parse_products_response)

    def make_order(self, order: Payload) -> MakeOrderResponse:
        """Place a new order."""
        if order is None:
            raise InvalidArgumentError("makeOrder requires an order payload")
        return self.dispatch(Command.MAKE_ORDER, parse_make_order_response, order)

    # -- Core --

    def prepare_call(self, command: Union[Command, str], payload: Optional[Payload] = None) -> PreparedCall:
        """Validate the command and assemble the signed request without sending it."""
        cmd = self._validate_command(command)
        data = serialize_payload(payload)

        query: Dict[str, str] = {
            "cmd": cmd,
            "id": str(self.settings.client_id),
            "in": "json",
            "out": "json",
        }
        body: Dict[str, str] = {
            "data": data,
            "sig": create_signature(cmd, data, self.settings.secret),
        }
        headers = {"User-Agent": self.settings.user_agent}

        if self.settings.http_method is HttpMethod.GET:
            query.update(body)
            url = f"{self.settings.endpoint}/?{urlencode(query)}"
            return PreparedCall(cmd, HttpMethod.GET, url, headers, None)

        url = f"{self.settings.endpoint}/?{urlencode(query)}"
        headers["Content-Type"] = "application/x-www-form-urlencoded"
        return PreparedCall(cmd, HttpMethod.POST, url, headers, urlencode(body).encode("utf-8"))

    def dispatch(
        self,
        command: Union[Command, str],
        builder: Callable[[str], T],
        payload: Optional[Payload] = None,
    ) -> T:
        """
        Send one signed request and build the result from the response body.

        Raises:
            CommandTypeError / UnknownCommandError: bad command, nothing is sent
            TransportError: no response was received, or its body could not be decoded
            UnexpectedStatusError: the response status was not 200
        """
        call = self.prepare_call(command, payload)
        logger.debug("Giftery %s via %s", call.command, call.method.value)

        client_kwargs = {"transport": self._transport}
        if self.settings.timeout is not None:
            client_kwargs["timeout"] = self.settings.timeout

        with httpx.Client(**client_kwargs) as http:
            try:
                response = http.request(call.method.value, call.url, headers=call.headers, content=call.content)
            except httpx.RequestError as exc:
                raise TransportError(str(exc) or type(exc).__name__, transport_error_code(exc)) from exc

        logger.debug("Giftery response status=%s", response.status_code)
        if response.status_code != 200:
            raise UnexpectedStatusError(response.status_code, response.text)
        # body is decoded with the response charset (utf-8 when none is declared)
        return builder(response.text)

    @staticmethod
    def _validate_command(command) -> str:
        if not isinstance(command, str):
            raise CommandTypeError(command)
        value = command.value if isinstance(command, Command) else command
        if value not in ALLOWED_COMMANDS:
            raise UnknownCommandError(value)
        return value
