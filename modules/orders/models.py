"""
Orders module Django ORM models.
"""
import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = 'pending', '주문 접수'
    PROCESSING = 'processing', '처리 중'
    SHIPPED = 'shipped', '배송 중'
    DELIVERED = 'delivered', '배송 완료'
    CANCELLED = 'cancelled', '주문 취소'


class PaymentStatus(models.TextChoices):
    PENDING = 'pending', '결제 대기'
    COMPLETED = 'completed', '결제 완료'
    FAILED = 'failed', '결제 실패'
    REFUNDED = 'refunded', '환불 완료'


class PaymentMethod(models.TextChoices):
    CARD = 'card', '카드'
    BANK = 'bank', '계좌이체'
    CASH = 'cash', '현금'
    OTHER = 'other', '기타'


class CartModel(models.Model):
    """Shopping cart (장바구니) model, one per user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='cart',
        verbose_name='회원'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='생성시각'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='수정시각'
    )

    class Meta:
        db_table = 'carts'
        verbose_name = 'Cart'
        verbose_name_plural = 'Carts'

    def __str__(self):
        return f"Cart for user {self.user_id}"

    @property
    def total_items(self) -> int:
        """Total quantity over all lines."""
        return sum(item.quantity for item in self.items.all())

    @property
    def total_amount(self) -> Decimal:
        """Sum of price x quantity; lines whose product no longer resolves count as 0."""
        return sum(
            (item.subtotal for item in self.items.all()),
            Decimal('0'),
        )


class CartItemModel(models.Model):
    """Cart line (장바구니 상품) model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    cart = models.ForeignKey(
        CartModel,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name='장바구니'
    )
    product = models.ForeignKey(
        'products.ProductModel',
        on_delete=models.SET_NULL,
        null=True,
        related_name='cart_items',
        verbose_name='상품'
    )
    quantity = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
        verbose_name='수량'
    )
    added_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='담은 시각'
    )

    class Meta:
        db_table = 'cart_items'
        verbose_name = 'Cart Item'
        verbose_name_plural = 'Cart Items'
        ordering = ['added_at']
        unique_together = ['cart', 'product']

    def __str__(self):
        return f"Cart {self.cart_id} - Product {self.product_id} x {self.quantity}"

    @property
    def subtotal(self) -> Decimal:
        if self.product is None:
            return Decimal('0')
        return self.product.price * self.quantity


class OrderModel(models.Model):
    """Order (주문) model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.CharField(
        max_length=50,
        unique=True,
        db_index=True,
        verbose_name='주문번호'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='orders',
        verbose_name='회원'
    )
    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name='최종 결제 금액'
    )
    shipping_fee = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)],
        verbose_name='배송비'
    )
    discount_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)],
        verbose_name='할인 금액'
    )
    coupon_code = models.CharField(
        max_length=50,
        blank=True,
        verbose_name='쿠폰 코드'
    )
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
        db_index=True,
        verbose_name='주문 상태'
    )

    # Shipping address
    recipient_name = models.CharField(max_length=100, verbose_name='수령인')
    phone_number = models.CharField(max_length=20, verbose_name='연락처')
    address = models.CharField(max_length=255, verbose_name='주소')
    address_detail = models.CharField(max_length=255, blank=True, verbose_name='상세 주소')
    postal_code = models.CharField(max_length=10, blank=True, verbose_name='우편번호')

    payment_method = models.CharField(
        max_length=20,
        choices=PaymentMethod.choices,
        default=PaymentMethod.CARD,
        verbose_name='결제 수단'
    )
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
        verbose_name='결제 상태'
    )
    tracking_number = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='운송장 번호'
    )
    delivery_request = models.TextField(
        blank=True,
        verbose_name='배송 요청사항'
    )
    cancellation_reason = models.TextField(
        blank=True,
        verbose_name='취소 사유'
    )
    refund_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
        verbose_name='환불 금액'
    )
    refund_date = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='환불 일시'
    )
    notes = models.TextField(
        blank=True,
        verbose_name='메모'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        verbose_name='생성시각'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='수정시각'
    )

    class Meta:
        db_table = 'orders'
        verbose_name = 'Order'
        verbose_name_plural = 'Orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', '-created_at'], name='orders_user_created_idx'),
            models.Index(fields=['status', '-created_at'], name='orders_status_created_idx'),
        ]

    def __str__(self):
        return self.order_number

    @property
    def subtotal(self) -> Decimal:
        """Sum of the frozen item prices."""
        return sum((item.subtotal for item in self.items.all()), Decimal('0'))

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items.all())


class OrderItemModel(models.Model):
    """
    Order line snapshot.

    Holds the product facts as they were when the order was placed. There is
    no foreign key to the live product row.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(
        OrderModel,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name='주문'
    )
    line_number = models.PositiveSmallIntegerField(default=0, verbose_name='순번')
    product_id = models.UUIDField(verbose_name='상품번호')
    sku = models.CharField(max_length=50, verbose_name='SKU')
    name = models.CharField(max_length=200, verbose_name='상품명')
    quantity = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        verbose_name='수량'
    )
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name='주문 시점 가격'
    )
    image = models.CharField(
        max_length=500,
        blank=True,
        verbose_name='대표 이미지'
    )

    class Meta:
        db_table = 'order_items'
        verbose_name = 'Order Item'
        verbose_name_plural = 'Order Items'
        ordering = ['line_number']

    def __str__(self):
        return f"{self.name} x {self.quantity}"

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity
