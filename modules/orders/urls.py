"""
Orders module URLs.
"""
from django.urls import path

from .views import (
    CartView,
    CartItemCreateView,
    CartItemDetailView,
    OrderListCreateView,
    OrderFromCartView,
    OrderStatisticsView,
    OrderDetailView,
    OrderStatusView,
    OrderPaymentView,
)

cart_urlpatterns = [
    path('', CartView.as_view(), name='cart'),
    path('items/', CartItemCreateView.as_view(), name='cart-items'),
    path('items/<uuid:item_id>/', CartItemDetailView.as_view(), name='cart-item-detail'),
]

urlpatterns = [
    path('', OrderListCreateView.as_view(), name='order-list'),
    path('from-cart/', OrderFromCartView.as_view(), name='order-from-cart'),
    path('statistics/', OrderStatisticsView.as_view(), name='order-statistics'),
    path('<uuid:order_id>/', OrderDetailView.as_view(), name='order-detail'),
    path('<uuid:order_id>/status/', OrderStatusView.as_view(), name='order-status'),
    path('<uuid:order_id>/payment/', OrderPaymentView.as_view(), name='order-payment'),
]
