"""
Orders module serializers.
"""
from rest_framework import serializers

from modules.products.serializers import ProductSummarySerializer

from .models import CartItemModel, CartModel, OrderItemModel, OrderModel, PaymentMethod
from .pricing import coerce_amount
from .services import INVALID_ITEM_MESSAGE
from .value_objects import ShippingAddress

EMPTY_ITEMS_MESSAGE = "주문할 상품이 필요합니다."


class LenientAmountField(serializers.Field):
    """
    Money input that never fails parsing.

    Uses the same best-effort coercion as order pricing: "3000원" -> 3000,
    garbage -> 0. Sign checks are left to the service layer.
    """

    def to_internal_value(self, data):
        return coerce_amount(data)

    def to_representation(self, value):
        return value


# Cart (장바구니) Serializers

class CartItemSerializer(serializers.ModelSerializer):
    """Serializer for cart item output."""
    product = ProductSummarySerializer(read_only=True, allow_null=True)
    productId = serializers.UUIDField(source='product_id', read_only=True, allow_null=True)
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    addedAt = serializers.DateTimeField(source='added_at', read_only=True)

    class Meta:
        model = CartItemModel
        fields = ['id', 'product', 'productId', 'quantity', 'subtotal', 'addedAt']
        read_only_fields = fields


class CartSerializer(serializers.ModelSerializer):
    """Serializer for cart output."""
    items = CartItemSerializer(many=True, read_only=True)
    totalItems = serializers.IntegerField(source='total_items', read_only=True)
    totalAmount = serializers.DecimalField(source='total_amount', max_digits=14, decimal_places=2, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = CartModel
        fields = ['id', 'items', 'totalItems', 'totalAmount', 'createdAt', 'updatedAt']
        read_only_fields = fields


class CartItemCreateSerializer(serializers.Serializer):
    """Serializer for adding item to cart."""
    productId = serializers.UUIDField(source='product_id')
    quantity = serializers.IntegerField(min_value=1, default=1)


class CartItemUpdateSerializer(serializers.Serializer):
    """Serializer for updating cart item quantity."""
    quantity = serializers.IntegerField(min_value=1)


# Order Serializers

class ShippingAddressSerializer(serializers.Serializer):
    """Shipping address as stored on the order."""
    name = serializers.CharField(source='recipient_name', read_only=True)
    phone = serializers.CharField(source='phone_number', read_only=True)
    address = serializers.CharField(read_only=True)
    detailAddress = serializers.CharField(source='address_detail', read_only=True)
    postalCode = serializers.CharField(source='postal_code', read_only=True)
    fullAddress = serializers.SerializerMethodField()

    def get_fullAddress(self, obj) -> str:
        return ShippingAddress.from_order(obj).full_address


class OrderUserSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)


class OrderItemSerializer(serializers.ModelSerializer):
    """Serializer for order item snapshot output."""
    product = serializers.UUIDField(source='product_id', read_only=True)
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItemModel
        fields = ['id', 'product', 'sku', 'name', 'quantity', 'price', 'image', 'subtotal']
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Serializer for order output."""
    orderNumber = serializers.CharField(source='order_number', read_only=True)
    user = OrderUserSerializer(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    totalAmount = serializers.DecimalField(source='total_amount', max_digits=12, decimal_places=2, read_only=True)
    shippingFee = serializers.DecimalField(source='shipping_fee', max_digits=12, decimal_places=2, read_only=True)
    discountAmount = serializers.DecimalField(source='discount_amount', max_digits=12, decimal_places=2, read_only=True)
    couponCode = serializers.CharField(source='coupon_code', read_only=True)
    shippingAddress = ShippingAddressSerializer(source='*', read_only=True)
    paymentMethod = serializers.CharField(source='payment_method', read_only=True)
    paymentStatus = serializers.CharField(source='payment_status', read_only=True)
    trackingNumber = serializers.CharField(source='tracking_number', read_only=True)
    deliveryRequest = serializers.CharField(source='delivery_request', read_only=True)
    cancellationReason = serializers.CharField(source='cancellation_reason', read_only=True)
    refundAmount = serializers.DecimalField(
        source='refund_amount', max_digits=12, decimal_places=2, read_only=True, allow_null=True
    )
    refundDate = serializers.DateTimeField(source='refund_date', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = OrderModel
        fields = [
            'id',
            'orderNumber',
            'user',
            'items',
            'subtotal',
            'totalAmount',
            'shippingFee',
            'discountAmount',
            'couponCode',
            'status',
            'shippingAddress',
            'paymentMethod',
            'paymentStatus',
            'trackingNumber',
            'deliveryRequest',
            'cancellationReason',
            'refundAmount',
            'refundDate',
            'notes',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


class PaymentResultSerializer(serializers.Serializer):
    success = serializers.BooleanField(read_only=True)
    message = serializers.CharField(read_only=True)
    code = serializers.CharField(read_only=True)


class OrderPlacementSerializer(serializers.Serializer):
    """Response body of order creation."""
    message = serializers.CharField(read_only=True)
    order = OrderSerializer(read_only=True)
    payment = PaymentResultSerializer(read_only=True, allow_null=True)


class OrderItemInputSerializer(serializers.Serializer):
    """One requested line. price overrides the catalog price when truthy."""
    product = serializers.UUIDField(
        source='product_id',
        error_messages={
            'required': INVALID_ITEM_MESSAGE,
            'null': INVALID_ITEM_MESSAGE,
            'invalid': INVALID_ITEM_MESSAGE,
        },
    )
    quantity = serializers.IntegerField(
        min_value=1,
        error_messages={
            'required': INVALID_ITEM_MESSAGE,
            'null': INVALID_ITEM_MESSAGE,
            'invalid': INVALID_ITEM_MESSAGE,
            'min_value': INVALID_ITEM_MESSAGE,
        },
    )
    price = LenientAmountField(required=False, allow_null=True)


class PaymentInfoSerializer(serializers.Serializer):
    cardNumber = serializers.CharField(allow_blank=True, allow_null=True, default='')


class OrderCheckoutSerializer(serializers.Serializer):
    """Checkout fields shared by both order creation endpoints."""
    shippingAddress = serializers.DictField(source='shipping_address', required=False, allow_null=True)
    paymentMethod = serializers.ChoiceField(
        source='payment_method',
        choices=PaymentMethod.choices,
        required=False,
        allow_null=True,
        allow_blank=True,
    )
    shippingFee = LenientAmountField(source='shipping_fee', default=0, allow_null=True)
    discountAmount = LenientAmountField(source='discount_amount', default=0, allow_null=True)
    couponCode = serializers.CharField(source='coupon_code', required=False, allow_blank=True, allow_null=True)
    deliveryRequest = serializers.CharField(
        source='delivery_request', required=False, allow_blank=True, allow_null=True
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    paymentInfo = PaymentInfoSerializer(source='payment_info', required=False, allow_null=True)


class OrderCreateSerializer(OrderCheckoutSerializer):
    """Serializer for order creation with an explicit item list."""
    items = serializers.ListField(
        child=OrderItemInputSerializer(),
        allow_empty=False,
        error_messages={
            'required': EMPTY_ITEMS_MESSAGE,
            'null': EMPTY_ITEMS_MESSAGE,
            'not_a_list': EMPTY_ITEMS_MESSAGE,
            'empty': EMPTY_ITEMS_MESSAGE,
        },
    )


class OrderStatusUpdateSerializer(serializers.Serializer):
    status = serializers.CharField(error_messages={'required': "유효한 주문 상태가 필요합니다."})


class OrderPaymentUpdateSerializer(serializers.Serializer):
    paymentStatus = serializers.CharField(
        source='payment_status',
        error_messages={'required': "유효한 결제 상태가 필요합니다. (pending, completed, failed, refunded)"},
    )


class OrderUpdateSerializer(serializers.Serializer):
    """
    Partial order update. Only the keys present in the request end up in
    validated_data; permission checks happen in OrderService.update_order.
    """
    status = serializers.CharField(required=False)
    paymentStatus = serializers.CharField(source='payment_status', required=False)
    shippingAddress = serializers.DictField(source='shipping_address', required=False)
    trackingNumber = serializers.CharField(
        source='tracking_number', required=False, allow_blank=True, allow_null=True
    )
    cancellationReason = serializers.CharField(
        source='cancellation_reason', required=False, allow_blank=True, allow_null=True
    )
    refundAmount = LenientAmountField(source='refund_amount', required=False, allow_null=True)
    refundDate = serializers.CharField(source='refund_date', required=False, allow_blank=True, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class OrderStatisticsSerializer(serializers.Serializer):
    totalOrders = serializers.IntegerField(source='total_orders')
    pendingOrders = serializers.IntegerField(source='pending_orders')
    processingOrders = serializers.IntegerField(source='processing_orders')
    shippedOrders = serializers.IntegerField(source='shipped_orders')
    deliveredOrders = serializers.IntegerField(source='delivered_orders')
    cancelledOrders = serializers.IntegerField(source='cancelled_orders')
    totalRevenue = serializers.DecimalField(source='total_revenue', max_digits=14, decimal_places=2)
