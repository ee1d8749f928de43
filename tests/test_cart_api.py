"""
Cart API tests.
"""
from decimal import Decimal

import pytest

CART_URL = '/api/v1/cart/'
CART_ITEMS_URL = '/api/v1/cart/items/'
UNKNOWN_ID = '6f1c1b52-4a59-4f0a-9d3e-2b7b1f0a9c11'

pytestmark = pytest.mark.django_db


def _add(client, product, quantity=1):
    return client.post(CART_ITEMS_URL, {'productId': str(product.id), 'quantity': quantity}, format='json')


def test_get_creates_empty_cart(authenticated_client):
    response = authenticated_client.get(CART_URL)

    assert response.status_code == 200
    assert response.data['items'] == []
    assert response.data['totalItems'] == 0
    assert response.data['totalAmount'] == Decimal('0')


def test_add_items_and_totals(authenticated_client, product_factory):
    shirt = product_factory(price='10000')
    cap = product_factory(price='5000')

    _add(authenticated_client, shirt, 2)
    response = _add(authenticated_client, cap)

    assert response.status_code == 201
    assert response.data['totalItems'] == 3
    assert response.data['totalAmount'] == Decimal('25000')


def test_adding_same_product_increments_quantity(authenticated_client, product_factory):
    shirt = product_factory(price='10000')

    _add(authenticated_client, shirt, 1)
    response = _add(authenticated_client, shirt, 2)

    assert len(response.data['items']) == 1
    assert response.data['items'][0]['quantity'] == 3


def test_add_unknown_product(authenticated_client):
    response = authenticated_client.post(CART_ITEMS_URL, {'productId': UNKNOWN_ID}, format='json')

    assert response.status_code == 404


def test_add_invalid_quantity(authenticated_client, product_factory):
    response = _add(authenticated_client, product_factory(), 0)

    assert response.status_code == 400


def test_update_and_remove_item(authenticated_client, product_factory):
    shirt = product_factory(price='10000')
    item_id = _add(authenticated_client, shirt).data['items'][0]['id']

    response = authenticated_client.put(f'{CART_ITEMS_URL}{item_id}/', {'quantity': 4}, format='json')
    assert response.status_code == 200
    assert response.data['quantity'] == 4
    assert response.data['subtotal'] == Decimal('40000')

    response = authenticated_client.delete(f'{CART_ITEMS_URL}{item_id}/')
    assert response.status_code == 200
    assert response.data['items'] == []


def test_cannot_touch_other_users_items(authenticated_client, other_client, product_factory):
    item_id = _add(authenticated_client, product_factory()).data['items'][0]['id']

    response = other_client.put(f'{CART_ITEMS_URL}{item_id}/', {'quantity': 2}, format='json')

    assert response.status_code == 404
    assert response.data['code'] == 'CART_ITEM_NOT_FOUND'


def test_clear_cart_keeps_cart(authenticated_client, product_factory):
    _add(authenticated_client, product_factory())
    cart_id = authenticated_client.get(CART_URL).data['id']

    response = authenticated_client.delete(CART_URL)

    assert response.status_code == 200
    assert response.data['id'] == cart_id
    assert response.data['items'] == []


def test_deleted_product_counts_as_zero(authenticated_client, product_factory):
    shirt = product_factory(price='10000')
    cap = product_factory(price='5000')
    _add(authenticated_client, shirt)
    _add(authenticated_client, cap)
    cap.delete()

    response = authenticated_client.get(CART_URL)

    assert response.data['totalAmount'] == Decimal('10000')
    assert [item['product'] for item in response.data['items']].count(None) == 1


def test_cart_requires_authentication(api_client):
    assert api_client.get(CART_URL).status_code == 401
