"""
Orders module service layer.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Union
from uuid import UUID

from dateutil.parser import isoparse
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.db.models import Count, Q, Sum
from django.utils import timezone

from shared.domain import Caller, PermissionDeniedError, ValidationError
from modules.products.services import ProductService

from .duplicate_detection import OrderDuplicateDetector
from .exceptions import (
    AdminOnlyFieldError,
    CartItemNotFoundError,
    DuplicateOrderError,
    EmptyCartError,
    EmptyOrderError,
    InvalidOrderStateError,
    InvalidOrderStatusError,
    InvalidPaymentStatusError,
    OrderAccessDeniedError,
    OrderNotFoundError,
    PaymentValidationError,
    StatusChangeNotAllowedError,
)
from .models import (
    CartItemModel,
    CartModel,
    OrderItemModel,
    OrderModel,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
)
from .payments import PaymentResult, PaymentSimulator
from .pricing import OrderPricingEngine, OrderQuote, RequestedItem, coerce_amount, ensure_amount_fits
from .value_objects import OrderNumber, ShippingAddress

logger = logging.getLogger(__name__)

INVALID_ITEM_MESSAGE = "각 상품에는 product ID와 quantity(1 이상)가 필요합니다."

# Transitions a non-admin may request on paymentStatus.
CUSTOMER_PAYMENT_TRANSITIONS = {
    PaymentStatus.PENDING.value: {PaymentStatus.COMPLETED.value, PaymentStatus.FAILED.value},
    PaymentStatus.COMPLETED.value: {PaymentStatus.REFUNDED.value},
}

CANCELLABLE_STATUSES = {OrderStatus.PENDING.value, OrderStatus.PROCESSING.value}

ADMIN_ONLY_FIELDS = {
    'tracking_number': "배송 추적 번호는 관리자만 수정할 수 있습니다.",
    'refund_amount': "환불 금액은 관리자만 수정할 수 있습니다.",
    'refund_date': "환불 일자는 관리자만 수정할 수 있습니다.",
}

ORDER_NUMBER_ATTEMPTS = 5


@dataclass
class OrderPlacement:
    """Result of placing an order: the persisted order and the card payment outcome, if any."""
    order: OrderModel
    payment: Optional[PaymentResult] = None


class CartService:
    """
    Cart (장바구니) business logic service.
    """

    def __init__(self, product_service: ProductService = None):
        self.product_service = product_service or ProductService()

    def get_cart(self, caller: Caller) -> Optional[CartModel]:
        """Get the caller's cart without creating one."""
        return CartModel.objects.filter(user_id=caller.user_id).first()

    def get_or_create_cart(self, caller: Caller) -> CartModel:
        """Get or create cart for a user."""
        cart, created = CartModel.objects.get_or_create(user_id=caller.user_id)
        if created:
            logger.info(f"장바구니 생성: user={caller.user_id}")
        return cart

    def _get_item(self, caller: Caller, item_id: UUID) -> CartItemModel:
        try:
            return CartItemModel.objects.select_related('product').get(
                id=item_id,
                cart__user_id=caller.user_id,
            )
        except (CartItemModel.DoesNotExist, ValueError, DjangoValidationError):
            raise CartItemNotFoundError(item_id)

    def add_item(self, caller: Caller, product_id: UUID, quantity: int = 1) -> CartItemModel:
        """Add item to cart. Adding a product already in the cart increments its quantity."""
        if quantity is None or quantity < 1:
            raise ValidationError("수량은 1 이상이어야 합니다.", field="quantity")
        product = self.product_service.get_product_or_raise(product_id)
        cart = self.get_or_create_cart(caller)

        cart_item, created = CartItemModel.objects.get_or_create(
            cart=cart,
            product=product,
            defaults={'quantity': quantity}
        )
        if not created:
            cart_item.quantity += quantity
            cart_item.save(update_fields=['quantity'])

        cart.save(update_fields=['updated_at'])
        return cart_item

    def update_item_quantity(self, caller: Caller, item_id: UUID, quantity: int) -> CartItemModel:
        """Update cart item quantity."""
        if quantity is None or quantity < 1:
            raise ValidationError("수량은 1 이상이어야 합니다.", field="quantity")
        cart_item = self._get_item(caller, item_id)
        cart_item.quantity = quantity
        cart_item.save(update_fields=['quantity'])
        return cart_item

    def remove_item(self, caller: Caller, item_id: UUID) -> None:
        """Remove item from cart."""
        self._get_item(caller, item_id).delete()

    def clear_cart(self, target: Union[Caller, CartModel]) -> int:
        """Remove every item from the cart. The cart row itself is kept."""
        cart = target if isinstance(target, CartModel) else self.get_cart(target)
        if cart is None:
            return 0
        deleted, _ = cart.items.all().delete()
        cart.save(update_fields=['updated_at'])
        logger.info(f"장바구니 비우기: cart={cart.id}, {deleted}개 상품 삭제")
        return deleted


class OrderService:
    """
    Order business logic service.

    Owns order placement (validation, pricing, duplicate check, persistence,
    cart clearing and card payment) and the status/payment state machines.
    """

    def __init__(
        self,
        cart_service: CartService = None,
        pricing_engine: OrderPricingEngine = None,
        duplicate_detector: OrderDuplicateDetector = None,
        payment_simulator: PaymentSimulator = None,
    ):
        self.cart_service = cart_service or CartService()
        self.pricing_engine = pricing_engine or OrderPricingEngine()
        self.duplicate_detector = duplicate_detector or OrderDuplicateDetector()
        self.payment_simulator = payment_simulator or PaymentSimulator()

    # Placement

    @staticmethod
    def _requested_items(items: Iterable[Any]) -> List[RequestedItem]:
        if not items:
            raise EmptyOrderError()

        requested = []
        for item in items:
            if isinstance(item, RequestedItem):
                requested.append(item)
                continue
            item = item or {}
            product_id = item.get('product_id') or item.get('product')
            quantity = item.get('quantity')
            if not product_id or isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
                raise ValidationError(INVALID_ITEM_MESSAGE, field="items")
            requested.append(RequestedItem(product_id=product_id, quantity=quantity, price=item.get('price')))
        return requested

    @staticmethod
    def _shipping_address(value) -> ShippingAddress:
        if isinstance(value, ShippingAddress):
            return value
        return ShippingAddress.from_dict(value)

    @staticmethod
    def _payment_method(value: Optional[str]) -> str:
        if not value:
            return PaymentMethod.CARD
        if value not in PaymentMethod.values:
            raise ValidationError("유효하지 않은 결제 수단입니다.", field="paymentMethod")
        return value

    @staticmethod
    def _generate_order_number() -> str:
        order_number = OrderNumber.generate().value
        while OrderModel.objects.filter(order_number=order_number).exists():
            order_number = OrderNumber.generate().value
        return order_number

    def create_order(
        self,
        caller: Caller,
        items: Iterable[Any],
        shipping_address,
        payment_method: str = None,
        shipping_fee: Any = 0,
        discount_amount: Any = 0,
        coupon_code: str = None,
        delivery_request: str = None,
        notes: str = None,
        payment_info: Optional[Dict[str, Any]] = None,
    ) -> OrderPlacement:
        """Place an order from an explicit item list."""
        requested = self._requested_items(items)
        address = self._shipping_address(shipping_address)
        payment_method = self._payment_method(payment_method)

        lines = self.pricing_engine.resolve_lines(requested)
        quote = self.pricing_engine.quote(lines, shipping_fee, discount_amount)

        return self._place(
            caller, quote, address, payment_method,
            coupon_code=coupon_code,
            delivery_request=delivery_request,
            notes=notes,
            payment_info=payment_info,
        )

    def create_order_from_cart(
        self,
        caller: Caller,
        shipping_address,
        payment_method: str = None,
        shipping_fee: Any = 0,
        discount_amount: Any = 0,
        coupon_code: str = None,
        delivery_request: str = None,
        notes: str = None,
        payment_info: Optional[Dict[str, Any]] = None,
    ) -> OrderPlacement:
        """Place an order from the caller's cart and clear the cart afterwards."""
        cart = self.cart_service.get_cart(caller)
        if cart is None or not cart.items.exists():
            raise EmptyCartError()
        address = self._shipping_address(shipping_address)
        payment_method = self._payment_method(payment_method)

        lines = self.pricing_engine.lines_from_cart(cart)
        quote = self.pricing_engine.quote(lines, shipping_fee, discount_amount)

        placement = self._place(
            caller, quote, address, payment_method,
            coupon_code=coupon_code,
            delivery_request=delivery_request,
            notes=notes,
            payment_info=payment_info,
            cart=cart,
        )
        logger.info(f"장바구니 주문 생성: {placement.order.order_number}")
        return placement

    def _place(
        self,
        caller: Caller,
        quote: OrderQuote,
        address: ShippingAddress,
        payment_method: str,
        coupon_code: str = None,
        delivery_request: str = None,
        notes: str = None,
        payment_info: Optional[Dict[str, Any]] = None,
        cart: CartModel = None,
    ) -> OrderPlacement:
        duplicate = self.duplicate_detector.check(caller.user_id, quote.lines)
        if duplicate.is_duplicate:
            matched = duplicate.matched_order
            logger.warning(
                f"중복 주문 거부: user={caller.user_id}, 기존 주문={matched.order_number}"
            )
            raise DuplicateOrderError(duplicate.message, matched.id, matched.order_number)

        if not self.payment_simulator.validate(payment_method, payment_info, quote.total_amount):
            raise PaymentValidationError("결제 정보를 확인할 수 없습니다.")

        order = self._insert_order(
            caller, quote, address, payment_method,
            coupon_code=coupon_code, delivery_request=delivery_request, notes=notes,
        )
        logger.info(f"주문 생성 성공: {order.id} ({order.order_number}), 금액 {order.total_amount}")

        if cart is not None:
            self.cart_service.clear_cart(cart)

        payment = None
        if payment_method == PaymentMethod.CARD:
            payment = self._charge_card(caller, order, payment_info)

        return OrderPlacement(order=self._load(order.id), payment=payment)

    def _insert_order(
        self,
        caller: Caller,
        quote: OrderQuote,
        address: ShippingAddress,
        payment_method: str,
        coupon_code: str = None,
        delivery_request: str = None,
        notes: str = None,
    ) -> OrderModel:
        """
        Insert the order and its lines in one transaction.

        A concurrent order can take the generated number between the
        existence check and the insert; the insert is then retried with a
        fresh number.
        """
        for attempt in range(1, ORDER_NUMBER_ATTEMPTS + 1):
            order_number = self._generate_order_number()
            try:
                with transaction.atomic():
                    order = OrderModel.objects.create(
                        order_number=order_number,
                        user_id=caller.user_id,
                        total_amount=quote.total_amount,
                        shipping_fee=quote.shipping_fee,
                        discount_amount=quote.discount_amount,
                        coupon_code=coupon_code or '',
                        status=OrderStatus.PENDING,
                        payment_method=payment_method,
                        payment_status=PaymentStatus.PENDING,
                        delivery_request=delivery_request or '',
                        notes=notes or '',
                        **address.to_model_fields(),
                    )
                    OrderItemModel.objects.bulk_create([
                        OrderItemModel(
                            order=order,
                            line_number=index,
                            product_id=line.product_id,
                            sku=line.sku,
                            name=line.name,
                            quantity=line.quantity,
                            price=line.price,
                            image=line.image,
                        )
                        for index, line in enumerate(quote.lines)
                    ])
                return order
            except IntegrityError:
                taken = OrderModel.objects.filter(order_number=order_number).exists()
                if not taken or attempt == ORDER_NUMBER_ATTEMPTS:
                    raise
                logger.warning(f"주문번호 충돌, 재시도 {attempt}/{ORDER_NUMBER_ATTEMPTS}: {order_number}")

    def _charge_card(self, caller: Caller, order: OrderModel, payment_info: Optional[Dict[str, Any]]) -> PaymentResult:
        card_number = (payment_info or {}).get('cardNumber')
        result = self.payment_simulator.authorize(card_number)
        if not result.success:
            logger.info(f"결제 실패로 주문 대기 유지: {order.order_number}")
            return result

        try:
            self.update_payment_status(caller, order.id, PaymentStatus.COMPLETED)
        except Exception as e:
            logger.error(
                f"결제 후 결제 상태 업데이트 실패: {order.order_number} - {str(e)}",
                exc_info=True,
            )
        return result

    # Queries

    def _load(self, order_id: UUID) -> OrderModel:
        try:
            return OrderModel.objects.select_related('user').prefetch_related('items').get(id=order_id)
        except (OrderModel.DoesNotExist, ValueError, DjangoValidationError):
            raise OrderNotFoundError(order_id)

    def get_order(self, caller: Caller, order_id: UUID) -> OrderModel:
        """Get order by ID. Non-admins may only see their own orders."""
        order = self._load(order_id)
        if not caller.is_admin and not caller.owns(order.user_id):
            raise OrderAccessDeniedError()
        return order

    @staticmethod
    def _parse_date(value, field: str) -> Optional[datetime]:
        if value in (None, ''):
            return None
        if isinstance(value, datetime):
            parsed = value
        else:
            try:
                parsed = isoparse(str(value))
            except (ValueError, OverflowError):
                raise ValidationError(f"날짜 형식이 올바르지 않습니다: {value}", field=field)
        if timezone.is_naive(parsed):
            parsed = timezone.make_aware(parsed)
        return parsed

    def list_orders(
        self,
        caller: Caller,
        status: str = None,
        search: str = None,
        start_date=None,
        end_date=None,
    ) -> List[OrderModel]:
        """List orders, newest first. Non-admins only see their own."""
        queryset = OrderModel.objects.select_related('user').prefetch_related('items')
        if not caller.is_admin:
            queryset = queryset.filter(user_id=caller.user_id)

        if status in OrderStatus.values:
            queryset = queryset.filter(status=status)

        start = self._parse_date(start_date, 'startDate')
        end = self._parse_date(end_date, 'endDate')
        if start:
            queryset = queryset.filter(created_at__gte=start)
        if end:
            queryset = queryset.filter(created_at__lte=end)

        if search and search.strip():
            query = search.strip()
            queryset = queryset.filter(
                Q(order_number__icontains=query) | Q(recipient_name__icontains=query)
            )

        return list(queryset.order_by('-created_at'))

    def get_statistics(self, caller: Caller) -> Dict[str, Any]:
        """Order counts by status and revenue over paid, non-cancelled orders."""
        if not caller.is_admin:
            raise PermissionDeniedError("관리자만 주문 통계를 조회할 수 있습니다.")

        counts = {value: 0 for value in OrderStatus.values}
        for row in OrderModel.objects.values('status').annotate(count=Count('id')):
            counts[row['status']] = row['count']

        revenue = OrderModel.objects.filter(
            payment_status=PaymentStatus.COMPLETED,
        ).exclude(
            status=OrderStatus.CANCELLED,
        ).aggregate(total=Sum('total_amount'))['total']

        return {
            'total_orders': sum(counts.values()),
            'pending_orders': counts[OrderStatus.PENDING.value],
            'processing_orders': counts[OrderStatus.PROCESSING.value],
            'shipped_orders': counts[OrderStatus.SHIPPED.value],
            'delivered_orders': counts[OrderStatus.DELIVERED.value],
            'cancelled_orders': counts[OrderStatus.CANCELLED.value],
            'total_revenue': revenue or Decimal('0'),
        }

    # State changes

    @staticmethod
    def _validate_status(value: str) -> str:
        if value not in OrderStatus.values:
            raise InvalidOrderStatusError(value)
        return value

    @staticmethod
    def _validate_payment_status(value: str) -> str:
        if value not in PaymentStatus.values:
            raise InvalidPaymentStatusError(value)
        return value

    @staticmethod
    def _check_customer_status_change(order: OrderModel, new_status: str) -> None:
        if new_status != OrderStatus.CANCELLED:
            raise StatusChangeNotAllowedError()
        if order.status == OrderStatus.CANCELLED:
            return
        if order.status not in CANCELLABLE_STATUSES:
            raise InvalidOrderStateError(
                f"{order.get_status_display()} 상태의 주문은 취소할 수 없습니다.",
                operation='cancel',
                state=order.status,
            )

    @staticmethod
    def _check_customer_payment_change(order: OrderModel, new_status: str) -> None:
        current = order.payment_status
        if new_status == current:
            return
        if new_status not in CUSTOMER_PAYMENT_TRANSITIONS.get(current, set()):
            raise InvalidOrderStateError(
                f"결제 상태를 {current}에서 {new_status}(으)로 변경할 수 없습니다.",
                operation='update_payment_status',
                state=current,
            )

    @staticmethod
    def _apply_payment_status(order: OrderModel, payment_status: str) -> None:
        order.payment_status = payment_status
        if payment_status == PaymentStatus.COMPLETED and order.status == OrderStatus.PENDING:
            order.status = OrderStatus.PROCESSING

    def update_status(self, caller: Caller, order_id: UUID, status: str) -> OrderModel:
        """Set the order status. Admin only; any valid status is accepted."""
        if not caller.is_admin:
            raise PermissionDeniedError("관리자만 주문 상태를 변경할 수 있습니다.")
        status = self._validate_status(status)

        order = self._load(order_id)
        previous = order.status
        order.status = status
        order.save(update_fields=['status', 'updated_at'])
        logger.info(f"주문 상태 업데이트: {order.order_number} {previous} -> {status}")
        return order

    def update_payment_status(self, caller: Caller, order_id: UUID, payment_status: str) -> OrderModel:
        """Set the payment status. Completing payment on a pending order moves it to processing."""
        payment_status = self._validate_payment_status(payment_status)
        order = self.get_order(caller, order_id)
        if not caller.is_admin:
            self._check_customer_payment_change(order, payment_status)

        self._apply_payment_status(order, payment_status)
        order.save(update_fields=['payment_status', 'status', 'updated_at'])
        logger.info(
            f"결제 상태 업데이트: {order.order_number} payment={order.payment_status}, status={order.status}"
        )
        return order

    def update_order(self, caller: Caller, order_id: UUID, changes: Dict[str, Any]) -> OrderModel:
        """
        Partially update an order.

        Every supplied field is checked before anything is written, so a
        rejected field leaves the order untouched.
        """
        order = self.get_order(caller, order_id)
        updates: Dict[str, Any] = {}

        for field, message in ADMIN_ONLY_FIELDS.items():
            if field in changes and not caller.is_admin:
                raise AdminOnlyFieldError(field, message)

        if 'status' in changes:
            status = self._validate_status(changes['status'])
            if not caller.is_admin:
                self._check_customer_status_change(order, status)
            updates['status'] = status

        if 'payment_status' in changes:
            payment_status = self._validate_payment_status(changes['payment_status'])
            if not caller.is_admin:
                self._check_customer_payment_change(order, payment_status)
            updates['payment_status'] = payment_status

        if 'shipping_address' in changes:
            updates.update(self._shipping_address(changes['shipping_address']).to_model_fields())

        for field in ('cancellation_reason', 'notes', 'tracking_number'):
            if field in changes:
                updates[field] = changes[field] or ''

        if 'refund_amount' in changes:
            refund_amount = changes['refund_amount']
            if refund_amount is not None:
                refund_amount = coerce_amount(refund_amount)
                if refund_amount < 0:
                    raise ValidationError("환불 금액은 0 이상이어야 합니다.", field="refundAmount")
                ensure_amount_fits(refund_amount, "refundAmount")
            updates['refund_amount'] = refund_amount

        if 'refund_date' in changes:
            updates['refund_date'] = self._parse_date(changes['refund_date'], 'refundDate')

        payment_status = updates.pop('payment_status', None)
        for field, value in updates.items():
            setattr(order, field, value)
        if payment_status is not None:
            self._apply_payment_status(order, payment_status)

        order.save()
        logger.info(
            f"주문 업데이트: {order.order_number} "
            f"({', '.join(sorted(changes)) or '변경 없음'})"
        )
        return order

    def delete_order(self, caller: Caller, order_id: UUID) -> None:
        """Hard delete an order. Admin only."""
        if not caller.is_admin:
            raise PermissionDeniedError("관리자만 주문을 삭제할 수 있습니다.")
        order = self._load(order_id)
        order_number = order.order_number
        order.delete()
        logger.info(f"주문 삭제: {order_id} ({order_number})")
