from decimal import Decimal

import pytest

from giftery.clients.mocks import MockGifteryService
from giftery.clients.real_http import GifteryClient
from giftery.contracts import OrderData
from giftery.errors import GifteryApiError


def test_balance_and_products(mock_client):
    assert mock_client.get_balance().balance == Decimal("10000.00")

    products = mock_client.get_products()
    assert {p.id for p in products.products} == {101, 102, 103}
    assert products.get_product(102).accepts_face(1500)


@pytest.mark.parametrize("use_post", [False, True])
def test_order_debits_balance(mock_service, mock_client, use_post):
    client = mock_client.use_post() if use_post else mock_client

    order = client.make_order(OrderData(product_id=101, face=1000, email_to="anna@example.com"))

    assert order.order_id == 1
    assert mock_service.balance == Decimal("9000.00")
    assert mock_service.orders[0]["email_to"] == "anna@example.com"
    assert mock_service.requests[-1].method == ("POST" if use_post else "GET")


def test_testmode_order_keeps_balance(mock_service, mock_client):
    mock_client.make_order(OrderData(product_id=103, face=300, testmode=True))

    assert mock_service.balance == Decimal("10000.00")
    assert len(mock_service.orders) == 1


def test_insufficient_funds(mock_client):
    mock_client.make_order(OrderData(product_id=102, face=10000))

    with pytest.raises(GifteryApiError) as excinfo:
        mock_client.make_order(OrderData(product_id=102, face=500))

    assert excinfo.value.code == 11


@pytest.mark.parametrize(
    "order, code",
    [
        (OrderData(product_id=999, face=500), 12),
        (OrderData(product_id=101, face=700), 13),
    ],
)
def test_rejected_orders(mock_client, order, code):
    with pytest.raises(GifteryApiError) as excinfo:
        mock_client.make_order(order)

    assert excinfo.value.code == code


def test_wrong_secret_is_rejected(mock_service):
    client = GifteryClient(7, "wrong", transport=mock_service.transport())

    with pytest.raises(GifteryApiError) as excinfo:
        client.get_balance()

    assert excinfo.value.code == 3


def test_wrong_client_id_is_rejected(mock_service):
    client = GifteryClient(8, "top-secret", transport=mock_service.transport())

    with pytest.raises(GifteryApiError) as excinfo:
        client.get_products()

    assert excinfo.value.code == 2


def test_custom_seed_data():
    service = MockGifteryService(1, "k", balance=Decimal("50"), products=[{"id": 5, "title": "Solo", "faces": [50]}])
    client = GifteryClient(1, "k", transport=service.transport())

    assert client.get_balance().balance == Decimal("50.00")
    assert client.make_order(OrderData(product_id=5, face=50)).order_id == 1
    assert service.balance == Decimal("0")
