"""
Orders module exceptions.
"""
from shared.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    InvalidOperationError,
    PermissionDeniedError,
    ValidationError,
)


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, order_id):
        super().__init__(
            entity_name="Order",
            entity_id=str(order_id),
            message="주문을 찾을 수 없습니다.",
        )
        self.code = "ORDER_NOT_FOUND"


class CartItemNotFoundError(EntityNotFoundError):
    """Raised when a cart item does not belong to the caller's cart."""

    def __init__(self, item_id):
        super().__init__(
            entity_name="CartItem",
            entity_id=str(item_id),
            message="장바구니 상품을 찾을 수 없습니다.",
        )
        self.code = "CART_ITEM_NOT_FOUND"


class EmptyOrderError(ValidationError):
    """Raised when an order is submitted without items."""

    def __init__(self, message: str = "주문할 상품이 필요합니다."):
        super().__init__(message=message, field="items", code="EMPTY_ORDER")


class EmptyCartError(ValidationError):
    """Raised when ordering from an empty cart."""

    def __init__(self):
        super().__init__(message="장바구니가 비어있습니다.", field="cart", code="EMPTY_CART")


class InvalidShippingAddressError(ValidationError):
    """Raised when the shipping address lacks name, phone or address."""

    def __init__(self):
        super().__init__(
            message="배송지 정보가 필요합니다. (이름, 전화번호, 주소)",
            field="shippingAddress",
            code="INVALID_SHIPPING_ADDRESS",
        )


class InvalidOrderTotalError(ValidationError):
    """Raised when the computed final amount is negative."""

    def __init__(self, total_amount):
        super().__init__(
            message="최종 결제 금액은 0 이상이어야 합니다.",
            field="totalAmount",
            code="INVALID_ORDER_TOTAL",
        )
        self.total_amount = total_amount


class InvalidOrderStatusError(ValidationError):
    def __init__(self, value):
        super().__init__(
            message="유효하지 않은 주문 상태입니다.",
            field="status",
            code="INVALID_ORDER_STATUS",
        )
        self.value = value


class InvalidPaymentStatusError(ValidationError):
    def __init__(self, value):
        super().__init__(
            message="유효한 결제 상태가 필요합니다. (pending, completed, failed, refunded)",
            field="paymentStatus",
            code="INVALID_PAYMENT_STATUS",
        )
        self.value = value


class PaymentValidationError(ValidationError):
    """Raised when the payment admission gate rejects an order."""

    def __init__(self, message: str):
        super().__init__(message=message, field="paymentInfo", code="PAYMENT_VALIDATION_FAILED")


class InvalidOrderStateError(InvalidOperationError):
    """Raised when a transition is not allowed from the current state."""

    def __init__(self, message: str, operation: str, state: str):
        super().__init__(message=message, operation=operation, state=state)
        self.code = "INVALID_ORDER_STATE"


class OrderAccessDeniedError(PermissionDeniedError):
    """Raised when a non-admin touches someone else's order."""

    def __init__(self, message: str = "이 주문에 접근할 권한이 없습니다."):
        super().__init__(message=message, code="ORDER_ACCESS_DENIED")


class AdminOnlyFieldError(PermissionDeniedError):
    """Raised when a non-admin edits an admin-only order field."""

    def __init__(self, field: str, message: str):
        super().__init__(message=message, code="ADMIN_ONLY_FIELD")
        self.field = field


class StatusChangeNotAllowedError(PermissionDeniedError):
    def __init__(self, message: str = "일반 사용자는 주문을 취소 상태로만 변경할 수 있습니다."):
        super().__init__(message=message, code="STATUS_CHANGE_NOT_ALLOWED")


class DuplicateOrderError(ConflictError):
    """Raised when an identical order was placed inside the duplicate window."""

    def __init__(self, message: str, order_id, order_number: str):
        super().__init__(message=message, code="DUPLICATE_ORDER")
        self.order_id = order_id
        self.order_number = order_number
        self.extra = {
            'duplicateOrderId': str(order_id),
            'duplicateOrderNumber': order_number,
        }
