"""
Orders module API views.
"""
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.domain import Caller

from .services import CartService, OrderService
from .serializers import (
    CartSerializer,
    CartItemSerializer,
    CartItemCreateSerializer,
    CartItemUpdateSerializer,
    OrderSerializer,
    OrderPlacementSerializer,
    OrderCreateSerializer,
    OrderCheckoutSerializer,
    OrderStatusUpdateSerializer,
    OrderPaymentUpdateSerializer,
    OrderUpdateSerializer,
    OrderStatisticsSerializer,
)

cart_service = CartService()
order_service = OrderService()


def _placement_response(placement) -> Response:
    return Response(
        {
            'message': '주문이 생성되었습니다.',
            'order': OrderSerializer(placement.order).data,
            'payment': placement.payment.to_dict() if placement.payment else None,
        },
        status=status.HTTP_201_CREATED
    )


# Cart (장바구니)

@extend_schema(tags=['Cart'])
class CartView(APIView):
    """Current user's cart."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: CartSerializer},
        summary="Get current user's cart",
        description="장바구니 조회",
    )
    def get(self, request):
        cart = cart_service.get_or_create_cart(Caller.from_user(request.user))
        return Response(CartSerializer(cart).data)

    @extend_schema(
        responses={200: CartSerializer},
        summary="Clear cart",
        description="장바구니 비우기",
    )
    def delete(self, request):
        caller = Caller.from_user(request.user)
        cart_service.clear_cart(caller)
        cart = cart_service.get_or_create_cart(caller)
        return Response(CartSerializer(cart).data)


@extend_schema(tags=['Cart'])
class CartItemCreateView(APIView):
    """Add a product to the cart."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=CartItemCreateSerializer,
        responses={201: CartSerializer},
        summary="Add item to cart",
        description="장바구니 상품 추가",
    )
    def post(self, request):
        serializer = CartItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        caller = Caller.from_user(request.user)
        cart_service.add_item(caller, **serializer.validated_data)
        cart = cart_service.get_or_create_cart(caller)

        return Response(CartSerializer(cart).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Cart'])
class CartItemDetailView(APIView):
    """Update or remove one cart item."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=CartItemUpdateSerializer,
        responses={200: CartItemSerializer},
        summary="Update cart item quantity",
        description="장바구니 상품 수량 변경",
    )
    def put(self, request, item_id):
        serializer = CartItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cart_item = cart_service.update_item_quantity(
            Caller.from_user(request.user),
            item_id,
            serializer.validated_data['quantity'],
        )
        return Response(CartItemSerializer(cart_item).data)

    @extend_schema(
        responses={200: CartSerializer},
        summary="Remove cart item",
        description="장바구니 상품 삭제",
    )
    def delete(self, request, item_id):
        caller = Caller.from_user(request.user)
        cart_service.remove_item(caller, item_id)
        cart = cart_service.get_or_create_cart(caller)
        return Response(CartSerializer(cart).data)


# Orders

@extend_schema(tags=['Orders'])
class OrderListCreateView(APIView):
    """Order list and create endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='status', type=str, required=False),
            OpenApiParameter(name='search', type=str, required=False, description='주문번호 또는 수령인'),
            OpenApiParameter(name='startDate', type=str, required=False, description='ISO 8601'),
            OpenApiParameter(name='endDate', type=str, required=False, description='ISO 8601'),
        ],
        responses={200: OrderSerializer(many=True)},
        summary="List orders",
        description="주문 목록 조회 (관리자는 전체, 일반 사용자는 본인 주문)",
    )
    def get(self, request):
        params = request.query_params
        orders = order_service.list_orders(
            Caller.from_user(request.user),
            status=params.get('status'),
            search=params.get('search'),
            start_date=params.get('startDate'),
            end_date=params.get('endDate'),
        )
        return Response(OrderSerializer(orders, many=True).data)

    @extend_schema(
        request=OrderCreateSerializer,
        responses={201: OrderPlacementSerializer},
        summary="Create an order",
        description="주문 생성 (카드 결제 시 결제 결과가 payment에 포함됨)",
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        placement = order_service.create_order(
            Caller.from_user(request.user),
            items=data.pop('items'),
            shipping_address=data.pop('shipping_address', None),
            **data
        )
        return _placement_response(placement)


@extend_schema(tags=['Orders'])
class OrderFromCartView(APIView):
    """Create an order from the current cart."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=OrderCheckoutSerializer,
        responses={201: OrderPlacementSerializer},
        summary="Create an order from cart",
        description="장바구니 주문 (성공 시 장바구니 비움)",
    )
    def post(self, request):
        serializer = OrderCheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        placement = order_service.create_order_from_cart(
            Caller.from_user(request.user),
            shipping_address=data.pop('shipping_address', None),
            **data
        )
        return _placement_response(placement)


@extend_schema(tags=['Orders'])
class OrderStatisticsView(APIView):
    """Order statistics (admin)."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        responses={200: OrderStatisticsSerializer},
        summary="Order statistics",
        description="주문 통계 조회 (관리자)",
    )
    def get(self, request):
        statistics = order_service.get_statistics(Caller.from_user(request.user))
        return Response(OrderStatisticsSerializer(statistics).data)


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Order detail endpoint."""

    def get_permissions(self):
        if self.request.method == 'DELETE':
            return [IsAdminUser()]
        return [IsAuthenticated()]

    @extend_schema(
        responses={200: OrderSerializer},
        summary="Get order detail",
    )
    def get(self, request, order_id):
        order = order_service.get_order(Caller.from_user(request.user), order_id)
        return Response(OrderSerializer(order).data)

    @extend_schema(
        request=OrderUpdateSerializer,
        responses={200: OrderSerializer},
        summary="Update an order",
        description="주문 수정 (운송장 번호, 환불 정보는 관리자만 수정 가능)",
    )
    def put(self, request, order_id):
        serializer = OrderUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        order = order_service.update_order(
            Caller.from_user(request.user),
            order_id,
            dict(serializer.validated_data),
        )
        return Response({
            'message': '주문이 업데이트되었습니다.',
            'order': OrderSerializer(order).data,
        })

    @extend_schema(summary="Delete an order")
    def delete(self, request, order_id):
        order_service.delete_order(Caller.from_user(request.user), order_id)
        return Response({'message': '주문이 삭제되었습니다.'}, status=status.HTTP_200_OK)


@extend_schema(tags=['Orders'])
class OrderStatusView(APIView):
    """Order status change (admin)."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        request=OrderStatusUpdateSerializer,
        responses={200: OrderSerializer},
        summary="Update order status",
    )
    def put(self, request, order_id):
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = order_service.update_status(
            Caller.from_user(request.user),
            order_id,
            serializer.validated_data['status'],
        )
        return Response({
            'message': '주문 상태가 업데이트되었습니다.',
            'order': OrderSerializer(order).data,
        })


@extend_schema(tags=['Orders'])
class OrderPaymentView(APIView):
    """Payment status change."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=OrderPaymentUpdateSerializer,
        responses={200: OrderSerializer},
        summary="Update payment status",
    )
    def put(self, request, order_id):
        serializer = OrderPaymentUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = order_service.update_payment_status(
            Caller.from_user(request.user),
            order_id,
            serializer.validated_data['payment_status'],
        )
        return Response({
            'message': '결제 상태가 업데이트되었습니다.',
            'order': OrderSerializer(order).data,
        })
