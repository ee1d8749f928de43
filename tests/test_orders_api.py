"""
Order API tests.
"""
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from modules.orders.models import OrderModel

ORDERS_URL = '/api/v1/orders/'
FROM_CART_URL = '/api/v1/orders/from-cart/'
STATISTICS_URL = '/api/v1/orders/statistics/'
CART_ITEMS_URL = '/api/v1/cart/items/'
UNKNOWN_ID = '6f1c1b52-4a59-4f0a-9d3e-2b7b1f0a9c11'

pytestmark = pytest.mark.django_db


def _detail_url(order_id, suffix=''):
    return f'{ORDERS_URL}{order_id}/{suffix}'


def _order_body(shipping_address, *lines, **extra):
    body = {
        'items': [{'product': str(product.id), 'quantity': quantity} for product, quantity in lines],
        'shippingAddress': shipping_address,
        'paymentMethod': 'bank',
    }
    body.update(extra)
    return body


@pytest.fixture
def product_a(product_factory):
    return product_factory(price='10000')


@pytest.fixture
def product_b(product_factory):
    return product_factory(price='5000')


class TestCreateOrder:

    def test_create_order(self, authenticated_client, shipping_address, product_a, product_b):
        response = authenticated_client.post(
            ORDERS_URL,
            _order_body(shipping_address, (product_a, 2), (product_b, 1), shippingFee=3000, discountAmount='1000'),
            format='json',
        )

        assert response.status_code == 201
        assert response.data['message'] == '주문이 생성되었습니다.'
        assert response.data['payment'] is None
        order = response.data['order']
        assert order['status'] == 'pending'
        assert order['paymentStatus'] == 'pending'
        assert order['paymentMethod'] == 'bank'
        assert order['totalAmount'] == Decimal('27000')
        assert order['shippingAddress']['name'] == shipping_address['name']
        assert order['shippingAddress']['detailAddress'] == shipping_address['detailAddress']
        assert order['shippingAddress']['fullAddress'] == '(06234) 서울시 강남구 테헤란로 1 101호'
        assert [item['sku'] for item in order['items']] == [product_a.sku, product_b.sku]

    def test_total_is_consistent_with_items(self, authenticated_client, shipping_address, product_a, product_b):
        response = authenticated_client.post(
            ORDERS_URL,
            _order_body(shipping_address, (product_a, 3), (product_b, 2), shippingFee='2500원', discountAmount=700),
            format='json',
        )

        order = response.data['order']
        items_total = sum(item['price'] * item['quantity'] for item in order['items'])
        assert order['totalAmount'] == items_total + order['shippingFee'] - order['discountAmount']
        assert order['totalAmount'] == Decimal('41800')

    def test_price_override(self, authenticated_client, shipping_address, product_a):
        body = _order_body(shipping_address, (product_a, 1))
        body['items'][0]['price'] = 8000

        response = authenticated_client.post(ORDERS_URL, body, format='json')

        assert response.status_code == 201
        assert response.data['order']['items'][0]['price'] == Decimal('8000')
        assert response.data['order']['totalAmount'] == Decimal('8000')

    def test_negative_total_rejected(self, authenticated_client, shipping_address, product_a):
        response = authenticated_client.post(
            ORDERS_URL,
            _order_body(shipping_address, (product_a, 1), discountAmount=10001),
            format='json',
        )

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_ORDER_TOTAL'
        assert response.data['message'] == '최종 결제 금액은 0 이상이어야 합니다.'
        assert OrderModel.objects.count() == 0

    def test_sub_cent_override_keeps_total_consistent(self, authenticated_client, shipping_address, product_a):
        body = _order_body(shipping_address, (product_a, 3))
        body['items'][0]['price'] = '100.555'

        response = authenticated_client.post(ORDERS_URL, body, format='json')

        assert response.status_code == 201
        order = response.data['order']
        assert order['items'][0]['price'] == Decimal('100.56')
        items_total = sum(item['price'] * item['quantity'] for item in order['items'])
        assert order['totalAmount'] == items_total == Decimal('301.68')

    def test_oversized_shipping_fee_rejected_before_saving(self, authenticated_client, shipping_address, product_a):
        response = authenticated_client.post(
            ORDERS_URL,
            _order_body(shipping_address, (product_a, 1), shippingFee='99999999999999'),
            format='json',
        )

        assert response.status_code == 400
        assert response.data['code'] == 'VALIDATION_ERROR'
        assert response.data['field'] == 'shippingFee'
        assert OrderModel.objects.count() == 0
        assert authenticated_client.get(ORDERS_URL).status_code == 200

    def test_oversized_price_override_rejected(self, authenticated_client, shipping_address, product_a):
        body = _order_body(shipping_address, (product_a, 2))
        body['items'][0]['price'] = '6000000000'

        response = authenticated_client.post(ORDERS_URL, body, format='json')

        assert response.status_code == 400
        assert response.data['field'] == 'subtotal'
        assert OrderModel.objects.count() == 0

    def test_empty_items(self, authenticated_client, shipping_address):
        response = authenticated_client.post(
            ORDERS_URL,
            {'items': [], 'shippingAddress': shipping_address},
            format='json',
        )

        assert response.status_code == 400
        assert response.data['message'] == '주문할 상품이 필요합니다.'

    def test_invalid_item(self, authenticated_client, shipping_address, product_a):
        response = authenticated_client.post(
            ORDERS_URL,
            {'items': [{'product': str(product_a.id), 'quantity': 0}], 'shippingAddress': shipping_address},
            format='json',
        )

        assert response.status_code == 400
        assert response.data['message'] == '각 상품에는 product ID와 quantity(1 이상)가 필요합니다.'

    def test_missing_shipping_address(self, authenticated_client, product_a):
        response = authenticated_client.post(
            ORDERS_URL,
            {'items': [{'product': str(product_a.id), 'quantity': 1}], 'shippingAddress': {'name': '홍길동'}},
            format='json',
        )

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_SHIPPING_ADDRESS'
        assert response.data['message'] == '배송지 정보가 필요합니다. (이름, 전화번호, 주소)'

    def test_unknown_product(self, authenticated_client, shipping_address):
        response = authenticated_client.post(
            ORDERS_URL,
            {'items': [{'product': UNKNOWN_ID, 'quantity': 1}], 'shippingAddress': shipping_address},
            format='json',
        )

        assert response.status_code == 404
        assert response.data['code'] == 'PRODUCT_NOT_FOUND'

    def test_requires_authentication(self, api_client, shipping_address, product_a):
        response = api_client.post(ORDERS_URL, _order_body(shipping_address, (product_a, 1)), format='json')

        assert response.status_code == 401
        assert response.data['status'] == 401


class TestDuplicateOrders:

    def test_identical_resubmission_conflicts(self, authenticated_client, shipping_address, product_a, product_b):
        body = _order_body(shipping_address, (product_a, 2), (product_b, 1))

        first = authenticated_client.post(ORDERS_URL, body, format='json')
        second = authenticated_client.post(ORDERS_URL, body, format='json')

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.data['code'] == 'DUPLICATE_ORDER'
        assert second.data['duplicateOrderId'] == str(first.data['order']['id'])
        assert second.data['duplicateOrderNumber'] == first.data['order']['orderNumber']

    def test_changed_quantity_is_not_duplicate(self, authenticated_client, shipping_address, product_a, product_b):
        first = authenticated_client.post(
            ORDERS_URL, _order_body(shipping_address, (product_a, 2), (product_b, 1)), format='json'
        )
        second = authenticated_client.post(
            ORDERS_URL, _order_body(shipping_address, (product_a, 2), (product_b, 2)), format='json'
        )

        assert first.status_code == 201
        assert second.status_code == 201

    def test_resubmission_after_window(self, authenticated_client, shipping_address, product_a):
        body = _order_body(shipping_address, (product_a, 1))
        first = authenticated_client.post(ORDERS_URL, body, format='json')
        OrderModel.objects.filter(id=first.data['order']['id']).update(
            created_at=timezone.now() - timedelta(minutes=6)
        )

        second = authenticated_client.post(ORDERS_URL, body, format='json')

        assert second.status_code == 201

    def test_from_cart_double_submit(self, authenticated_client, shipping_address, product_a, product_b):
        def fill_cart():
            authenticated_client.post(CART_ITEMS_URL, {'productId': str(product_a.id), 'quantity': 2}, format='json')
            authenticated_client.post(CART_ITEMS_URL, {'productId': str(product_b.id), 'quantity': 1}, format='json')

        body = {'shippingAddress': shipping_address, 'paymentMethod': 'bank'}
        fill_cart()
        first = authenticated_client.post(FROM_CART_URL, body, format='json')
        fill_cart()
        second = authenticated_client.post(FROM_CART_URL, body, format='json')

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.data['duplicateOrderId'] == str(first.data['order']['id'])


class TestCardPayment:

    def test_approved_card(self, authenticated_client, shipping_address, product_a):
        response = authenticated_client.post(
            ORDERS_URL,
            _order_body(shipping_address, (product_a, 1), paymentMethod='card',
                        paymentInfo={'cardNumber': '4111 1111 1111 1111'}),
            format='json',
        )

        assert response.status_code == 201
        assert response.data['payment']['success'] is True
        assert response.data['order']['paymentStatus'] == 'completed'
        assert response.data['order']['status'] == 'processing'

    def test_declined_card_still_creates_order(self, authenticated_client, shipping_address, product_a):
        response = authenticated_client.post(
            ORDERS_URL,
            _order_body(shipping_address, (product_a, 1), paymentMethod='card',
                        paymentInfo={'cardNumber': '4000000000000002'}),
            format='json',
        )

        assert response.status_code == 201
        assert response.data['payment'] == {
            'success': False,
            'message': '카드 승인이 거부되었습니다. 카드 정보를 확인해주세요.',
            'code': 'PAYMENT_FAILED',
        }
        assert response.data['order']['paymentStatus'] == 'pending'
        assert response.data['order']['status'] == 'pending'


class TestCreateOrderFromCart:

    def test_cart_scenario(self, authenticated_client, shipping_address, product_a, product_b):
        authenticated_client.post(CART_ITEMS_URL, {'productId': str(product_a.id), 'quantity': 2}, format='json')
        authenticated_client.post(CART_ITEMS_URL, {'productId': str(product_b.id), 'quantity': 1}, format='json')

        response = authenticated_client.post(
            FROM_CART_URL,
            {'shippingAddress': shipping_address, 'paymentMethod': 'bank', 'shippingFee': 3000, 'discountAmount': 0},
            format='json',
        )

        assert response.status_code == 201
        assert response.data['order']['totalAmount'] == Decimal('25000')
        cart = authenticated_client.get('/api/v1/cart/')
        assert cart.data['totalItems'] == 0
        assert cart.data['items'] == []

    def test_empty_cart(self, authenticated_client, shipping_address):
        response = authenticated_client.post(FROM_CART_URL, {'shippingAddress': shipping_address}, format='json')

        assert response.status_code == 400
        assert response.data['message'] == '장바구니가 비어있습니다.'


class TestReadOrders:

    def test_snapshot_survives_price_change(self, authenticated_client, shipping_address, product_a):
        created = authenticated_client.post(
            ORDERS_URL, _order_body(shipping_address, (product_a, 2)), format='json'
        )
        product_a.price = Decimal('99000')
        product_a.save()

        response = authenticated_client.get(_detail_url(created.data['order']['id']))

        assert response.data['items'][0]['price'] == Decimal('10000')
        assert response.data['totalAmount'] == Decimal('20000')

    def test_other_customer_forbidden(self, authenticated_client, other_client, shipping_address, product_a):
        created = authenticated_client.post(ORDERS_URL, _order_body(shipping_address, (product_a, 1)), format='json')

        response = other_client.get(_detail_url(created.data['order']['id']))

        assert response.status_code == 403
        assert response.data['code'] == 'ORDER_ACCESS_DENIED'

    def test_unknown_order(self, authenticated_client):
        response = authenticated_client.get(_detail_url(UNKNOWN_ID))

        assert response.status_code == 404
        assert response.data['code'] == 'ORDER_NOT_FOUND'

    def test_list_is_scoped_by_role(self, authenticated_client, other_client, admin_client, shipping_address,
                                    product_a):
        authenticated_client.post(ORDERS_URL, _order_body(shipping_address, (product_a, 1)), format='json')
        other_client.post(ORDERS_URL, _order_body(shipping_address, (product_a, 1)), format='json')

        assert len(authenticated_client.get(ORDERS_URL).data) == 1
        assert len(admin_client.get(ORDERS_URL).data) == 2

    def test_list_filters(self, authenticated_client, shipping_address, product_a, product_b):
        authenticated_client.post(ORDERS_URL, _order_body(shipping_address, (product_a, 1)), format='json')
        authenticated_client.post(
            ORDERS_URL, _order_body(dict(shipping_address, name='김철수'), (product_b, 1)), format='json'
        )

        assert len(authenticated_client.get(ORDERS_URL, {'search': '철수'}).data) == 1
        assert len(authenticated_client.get(ORDERS_URL, {'status': 'cancelled'}).data) == 0
        assert len(authenticated_client.get(ORDERS_URL, {'status': 'unknown'}).data) == 2

    def test_invalid_date_filter(self, authenticated_client):
        response = authenticated_client.get(ORDERS_URL, {'startDate': 'not-a-date'})

        assert response.status_code == 400


class TestUpdateOrders:

    def test_status_endpoint_is_admin_only(self, authenticated_client, admin_client, shipping_address, product_a):
        created = authenticated_client.post(ORDERS_URL, _order_body(shipping_address, (product_a, 1)), format='json')
        url = _detail_url(created.data['order']['id'], 'status/')

        assert authenticated_client.put(url, {'status': 'shipped'}, format='json').status_code == 403

        response = admin_client.put(url, {'status': 'shipped'}, format='json')
        assert response.status_code == 200
        assert response.data['order']['status'] == 'shipped'

    def test_invalid_status(self, authenticated_client, admin_client, shipping_address, product_a):
        created = authenticated_client.post(ORDERS_URL, _order_body(shipping_address, (product_a, 1)), format='json')

        response = admin_client.put(_detail_url(created.data['order']['id'], 'status/'), {'status': 'lost'},
                                    format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_ORDER_STATUS'

    def test_payment_endpoint(self, authenticated_client, other_client, shipping_address, product_a):
        created = authenticated_client.post(ORDERS_URL, _order_body(shipping_address, (product_a, 1)), format='json')
        url = _detail_url(created.data['order']['id'], 'payment/')

        assert other_client.put(url, {'paymentStatus': 'completed'}, format='json').status_code == 403

        response = authenticated_client.put(url, {'paymentStatus': 'completed'}, format='json')
        assert response.status_code == 200
        assert response.data['order']['paymentStatus'] == 'completed'
        assert response.data['order']['status'] == 'processing'

    def test_customer_cancels(self, authenticated_client, shipping_address, product_a):
        created = authenticated_client.post(ORDERS_URL, _order_body(shipping_address, (product_a, 1)), format='json')

        response = authenticated_client.put(
            _detail_url(created.data['order']['id']),
            {'status': 'cancelled', 'cancellationReason': '단순 변심'},
            format='json',
        )

        assert response.status_code == 200
        assert response.data['order']['status'] == 'cancelled'
        assert response.data['order']['cancellationReason'] == '단순 변심'

    def test_customer_cannot_set_tracking_number(self, authenticated_client, shipping_address, product_a):
        created = authenticated_client.post(ORDERS_URL, _order_body(shipping_address, (product_a, 1)), format='json')

        response = authenticated_client.put(
            _detail_url(created.data['order']['id']),
            {'trackingNumber': 'CJ123'},
            format='json',
        )

        assert response.status_code == 403
        assert response.data['message'] == '배송 추적 번호는 관리자만 수정할 수 있습니다.'

    def test_admin_sets_refund(self, authenticated_client, admin_client, shipping_address, product_a):
        created = authenticated_client.post(ORDERS_URL, _order_body(shipping_address, (product_a, 1)), format='json')
        url = _detail_url(created.data['order']['id'])

        response = admin_client.put(url, {'refundAmount': 5000, 'trackingNumber': 'CJ123'}, format='json')
        assert response.status_code == 200
        assert response.data['order']['refundAmount'] == Decimal('5000')
        assert response.data['order']['trackingNumber'] == 'CJ123'

        assert admin_client.put(url, {'refundAmount': -1}, format='json').status_code == 400


class TestAdminOperations:

    def test_delete(self, authenticated_client, admin_client, shipping_address, product_a):
        created = authenticated_client.post(ORDERS_URL, _order_body(shipping_address, (product_a, 1)), format='json')
        url = _detail_url(created.data['order']['id'])

        assert authenticated_client.delete(url).status_code == 403
        assert admin_client.delete(url).status_code == 200
        assert admin_client.delete(url).status_code == 404

    def test_statistics(self, authenticated_client, admin_client, shipping_address, product_a):
        authenticated_client.post(
            ORDERS_URL,
            _order_body(shipping_address, (product_a, 1), paymentMethod='card',
                        paymentInfo={'cardNumber': '4111111111111111'}),
            format='json',
        )

        assert authenticated_client.get(STATISTICS_URL).status_code == 403

        response = admin_client.get(STATISTICS_URL)
        assert response.status_code == 200
        assert response.data['totalOrders'] == 1
        assert response.data['processingOrders'] == 1
        assert response.data['totalRevenue'] == Decimal('10000')
