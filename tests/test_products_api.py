"""
Product API tests.
"""
from decimal import Decimal

import pytest

PRODUCTS_URL = '/api/v1/products/'

pytestmark = pytest.mark.django_db


def _payload(**overrides):
    payload = {
        'sku': ' tee-001 ',
        'name': '기본 티셔츠',
        'price': '19000',
        'category': '상의',
        'images': ['https://cdn.example.com/tee.jpg'],
    }
    payload.update(overrides)
    return payload


def test_list_is_public(api_client, product_factory):
    product_factory(name='청바지', category='하의')
    product_factory(name='모자', category='악세서리')

    response = api_client.get(PRODUCTS_URL)
    assert response.status_code == 200
    assert len(response.data) == 2

    response = api_client.get(PRODUCTS_URL, {'category': '하의'})
    assert [product['name'] for product in response.data] == ['청바지']


def test_admin_creates_product_with_normalized_sku(admin_client):
    response = admin_client.post(PRODUCTS_URL, _payload(), format='json')

    assert response.status_code == 201
    assert response.data['sku'] == 'TEE-001'
    assert response.data['price'] == Decimal('19000')


def test_duplicate_sku_rejected(admin_client):
    admin_client.post(PRODUCTS_URL, _payload(), format='json')

    response = admin_client.post(PRODUCTS_URL, _payload(sku='TEE-001'), format='json')

    assert response.status_code == 400
    assert response.data['code'] == 'PRODUCT_ALREADY_EXISTS'


def test_customer_cannot_create_product(authenticated_client):
    response = authenticated_client.post(PRODUCTS_URL, _payload(), format='json')

    assert response.status_code == 403


def test_update_and_delete(admin_client, product_factory):
    product = product_factory(price='10000')
    url = f'{PRODUCTS_URL}{product.id}/'

    response = admin_client.put(url, {'price': '12000'}, format='json')
    assert response.status_code == 200
    assert response.data['price'] == Decimal('12000')

    assert admin_client.delete(url).status_code == 200
    assert admin_client.get(url).status_code == 404
