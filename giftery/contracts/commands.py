from enum import Enum


class Command(str, Enum):
    GET_BALANCE = "getBalance"
    GET_PRODUCTS = "getProducts"
    MAKE_ORDER = "makeOrder"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


ALLOWED_COMMANDS = frozenset(c.value for c in Command)
