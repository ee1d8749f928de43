"""
Orders admin configuration.
"""
from django.contrib import admin

from .models import CartModel, CartItemModel, OrderModel, OrderItemModel


class CartItemInline(admin.TabularInline):
    model = CartItemModel
    extra = 0
    readonly_fields = ('added_at',)


@admin.register(CartModel)
class CartAdmin(admin.ModelAdmin):
    """Admin configuration for Cart model."""
    list_display = ('id', 'user', 'total_items', 'total_amount', 'updated_at')
    search_fields = ('user__email',)
    inlines = [CartItemInline]


class OrderItemInline(admin.TabularInline):
    model = OrderItemModel
    extra = 0
    readonly_fields = ('product_id', 'sku', 'name', 'quantity', 'price', 'image')


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """Admin configuration for Order model."""
    list_display = (
        'order_number', 'user', 'item_count', 'total_amount', 'status',
        'payment_method', 'payment_status', 'created_at',
    )
    list_filter = ('status', 'payment_status', 'payment_method', 'created_at')
    search_fields = ('order_number', 'recipient_name', 'user__email')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'order_number', 'created_at', 'updated_at')
    inlines = [OrderItemInline]
