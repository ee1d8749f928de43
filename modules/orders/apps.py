"""
Orders module configuration.
장바구니, 주문 생성(중복 주문 방지, 결제 시뮬레이션) 및 주문 상태 관리.
"""
from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'modules.orders'
    label = 'orders'
    verbose_name = 'Orders'
