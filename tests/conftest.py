"""
Pytest configuration and fixtures.
"""
from decimal import Decimal
from itertools import count

import pytest

from shared.domain import Caller

SHIPPING_ADDRESS = {
    'name': '홍길동',
    'phone': '010-1234-5678',
    'address': '서울시 강남구 테헤란로 1',
    'detailAddress': '101호',
    'postalCode': '06234',
}

_sku_counter = count(1)


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def customer(django_user_model):
    return django_user_model.objects.create_user(
        email='customer@example.com',
        name='고객',
        password='testpass123',
    )


@pytest.fixture
def other_customer(django_user_model):
    return django_user_model.objects.create_user(
        email='other@example.com',
        name='다른고객',
        password='testpass123',
    )


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_user(
        email='admin@example.com',
        name='관리자',
        password='testpass123',
        user_type='admin',
    )


@pytest.fixture
def customer_caller(customer):
    return Caller.from_user(customer)


@pytest.fixture
def admin_caller(admin_user):
    return Caller.from_user(admin_user)


@pytest.fixture
def authenticated_client(api_client, customer):
    """Create an API client authenticated as a customer."""
    api_client.force_authenticate(user=customer)
    return api_client


@pytest.fixture
def other_client(other_customer):
    from rest_framework.test import APIClient
    client = APIClient()
    client.force_authenticate(user=other_customer)
    return client


@pytest.fixture
def admin_client(admin_user):
    from rest_framework.test import APIClient
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def shipping_address():
    return dict(SHIPPING_ADDRESS)


@pytest.fixture
def product_factory(db):
    """Create catalog products with unique SKUs."""
    from modules.products.models import ProductModel

    def create(price='10000', name=None, category=ProductModel.Category.TOP, images=None):
        number = next(_sku_counter)
        return ProductModel.objects.create(
            sku=f'sku-{number:04d}',
            name=name or f'상품 {number}',
            price=Decimal(str(price)),
            category=category,
            images=images if images is not None else [f'https://cdn.example.com/{number}.jpg'],
        )

    return create
