"""
Products module configuration.
주문 시점의 상품 정보(SKU, 이름, 가격, 이미지)를 제공하는 상품 카탈로그.
"""
from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'modules.products'
    label = 'products'
    verbose_name = 'Products'
