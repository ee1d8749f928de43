"""
Order pricing.

Resolves requested lines against the product catalog, freezes them into
order-line snapshots and computes the final amount.
"""
import logging
import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional, Tuple
from uuid import UUID

from shared.domain import ValidationError, ValueObject
from modules.products.exceptions import ProductNotFoundError
from modules.products.services import ProductService

from .exceptions import InvalidOrderTotalError

logger = logging.getLogger(__name__)

ZERO = Decimal('0')
CENT = Decimal('0.01')
# Largest value a DecimalField(max_digits=12, decimal_places=2) column holds.
MAX_AMOUNT = Decimal('9999999999.99')
AMOUNT_OUT_OF_RANGE_MESSAGE = "금액이 허용 범위를 초과했습니다."
_NUMERIC_PREFIX = re.compile(r'^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)')


def coerce_amount(value: Any) -> Decimal:
    """
    Best-effort conversion of a client-supplied amount.

    Numbers pass through; strings are read up to the first non-numeric
    character ("3000원" -> 3000, "1e3" -> 1000). Anything unusable becomes 0.
    Results are rounded half-up to cents. Values too large for a money
    column are returned unrounded so `ensure_amount_fits` can reject them.
    """
    return _to_cents(_parse_amount(value))


def _parse_amount(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value)) if math.isfinite(value) else ZERO
    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if not match:
            return ZERO
        try:
            return Decimal(match.group(1))
        except InvalidOperation:
            return ZERO
    return ZERO


def _to_cents(amount: Decimal) -> Decimal:
    if abs(amount) > MAX_AMOUNT:
        return amount
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def ensure_amount_fits(amount: Decimal, field: str) -> Decimal:
    """Reject amounts a DecimalField(12, 2) column cannot store."""
    if abs(amount) > MAX_AMOUNT:
        raise ValidationError(AMOUNT_OUT_OF_RANGE_MESSAGE, field=field)
    return amount


@dataclass(frozen=True)
class RequestedItem(ValueObject):
    """A line as requested by the client: product id, quantity and optional price override."""
    product_id: UUID
    quantity: int
    price: Optional[Decimal] = None


@dataclass(frozen=True)
class OrderLine(ValueObject):
    """Snapshot of a product at ordering time."""
    product_id: UUID
    sku: str
    name: str
    quantity: int
    price: Decimal
    image: str = ''

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class OrderQuote(ValueObject):
    lines: Tuple[OrderLine, ...]
    subtotal: Decimal
    shipping_fee: Decimal
    discount_amount: Decimal
    total_amount: Decimal


class OrderPricingEngine:
    """
    Computes order totals from frozen line snapshots.

    total = sum(price * quantity) + shipping fee - discount, rejected when
    negative.
    """

    def __init__(self, product_service: ProductService = None):
        self.product_service = product_service or ProductService()

    @staticmethod
    def _snapshot(product, quantity: int, price: Decimal) -> OrderLine:
        return OrderLine(
            product_id=product.id,
            sku=product.sku,
            name=product.name,
            quantity=quantity,
            price=price,
            image=product.primary_image or '',
        )

    def resolve_lines(self, items: Iterable[RequestedItem]) -> List[OrderLine]:
        """Resolve explicit items against the catalog."""
        items = list(items)
        products = {
            str(product.id): product
            for product in self.product_service.get_products_by_ids(
                [item.product_id for item in items]
            )
        }

        lines = []
        for item in items:
            product = products.get(str(item.product_id))
            if product is None:
                raise ProductNotFoundError(item.product_id)

            line = self._snapshot(product, item.quantity, product.price)
            override = coerce_amount(item.price)
            if override:
                if override < 0:
                    raise ValidationError("상품 가격은 0 이상이어야 합니다.", field="price")
                if override != product.price:
                    logger.warning(
                        f"클라이언트 지정 가격 사용: 상품 {product.id} ({product.sku}) "
                        f"요청 가격 {override}, 카탈로그 가격 {product.price}"
                    )
                line = line.evolve(price=override)

            lines.append(line)
        return lines

    def lines_from_cart(self, cart) -> List[OrderLine]:
        """Snapshot cart lines at the current catalog price."""
        lines = []
        for cart_item in cart.items.select_related('product'):
            if cart_item.product is None:
                raise ProductNotFoundError(cart_item.product_id or cart_item.id)
            lines.append(
                self._snapshot(cart_item.product, cart_item.quantity, cart_item.product.price)
            )
        return lines

    def quote(
        self,
        lines: Iterable[OrderLine],
        shipping_fee: Any = 0,
        discount_amount: Any = 0,
    ) -> OrderQuote:
        """
        Price the lines.

        Raises InvalidOrderTotalError on a negative total and ValidationError
        when any stored amount would not fit its money column.
        """
        lines = tuple(lines)
        shipping_fee = coerce_amount(shipping_fee)
        discount_amount = coerce_amount(discount_amount)
        if shipping_fee < 0:
            raise ValidationError("배송비는 0 이상이어야 합니다.", field="shippingFee")
        if discount_amount < 0:
            raise ValidationError("할인 금액은 0 이상이어야 합니다.", field="discountAmount")
        for line in lines:
            ensure_amount_fits(line.price, "price")
        ensure_amount_fits(shipping_fee, "shippingFee")
        ensure_amount_fits(discount_amount, "discountAmount")

        subtotal = ensure_amount_fits(sum((line.subtotal for line in lines), ZERO), "subtotal")
        total_amount = subtotal + shipping_fee - discount_amount
        if total_amount < 0:
            raise InvalidOrderTotalError(total_amount)
        ensure_amount_fits(total_amount, "totalAmount")

        return OrderQuote(
            lines=lines,
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            discount_amount=discount_amount,
            total_amount=total_amount,
        )
