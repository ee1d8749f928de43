"""
Products module API views.
"""
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import ProductNotFoundError
from .services import ProductService
from .serializers import (
    ProductSerializer,
    ProductCreateSerializer,
    ProductUpdateSerializer,
)


product_service = ProductService()


@extend_schema(tags=['Products'])
class ProductListCreateView(APIView):
    """Product list and create endpoint."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAdminUser()]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='category', type=str, required=False),
            OpenApiParameter(name='search', type=str, required=False),
        ],
        responses={200: ProductSerializer(many=True)},
        summary="List products",
    )
    def get(self, request):
        products = product_service.get_all_products(
            category=request.query_params.get('category'),
            search=request.query_params.get('search'),
        )
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(
        request=ProductCreateSerializer,
        responses={201: ProductSerializer},
        summary="Create a product",
    )
    def post(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = product_service.create_product(**serializer.validated_data)

        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Products'])
class ProductDetailView(APIView):
    """Product detail endpoint."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAdminUser()]

    @extend_schema(
        responses={200: ProductSerializer},
        summary="Get product detail",
    )
    def get(self, request, product_id):
        product = product_service.get_product_or_raise(product_id)
        return Response(ProductSerializer(product).data)

    @extend_schema(
        request=ProductUpdateSerializer,
        responses={200: ProductSerializer},
        summary="Update a product",
    )
    def put(self, request, product_id):
        serializer = ProductUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        product = product_service.update_product(
            product_id=product_id,
            **serializer.validated_data
        )

        return Response(ProductSerializer(product).data)

    @extend_schema(summary="Delete a product")
    def delete(self, request, product_id):
        if not product_service.delete_product(product_id):
            raise ProductNotFoundError(product_id)
        return Response({'message': '상품이 삭제되었습니다.'}, status=status.HTTP_200_OK)
