"""
Products module serializers.
"""
from rest_framework import serializers

from .models import ProductModel


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for product output."""
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = ProductModel
        fields = [
            'id',
            'sku',
            'name',
            'price',
            'category',
            'images',
            'description',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


class ProductCreateSerializer(serializers.Serializer):
    """Serializer for product creation."""

    sku = serializers.CharField(max_length=50)
    name = serializers.CharField(max_length=200)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    category = serializers.ChoiceField(choices=ProductModel.Category.choices)
    images = serializers.ListField(child=serializers.CharField(max_length=500), required=False, default=list)
    description = serializers.CharField(required=False, allow_blank=True, default='')


class ProductUpdateSerializer(serializers.Serializer):
    """Serializer for product update."""

    sku = serializers.CharField(max_length=50, required=False)
    name = serializers.CharField(max_length=200, required=False)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    category = serializers.ChoiceField(choices=ProductModel.Category.choices, required=False)
    images = serializers.ListField(child=serializers.CharField(max_length=500), required=False)
    description = serializers.CharField(required=False, allow_blank=True)


class ProductSummarySerializer(serializers.ModelSerializer):
    """Compact product representation embedded in cart items."""

    class Meta:
        model = ProductModel
        fields = ['id', 'sku', 'name', 'price', 'images']
        read_only_fields = fields
