"""
Products module service layer.
"""
import logging
from decimal import Decimal
from typing import Iterable, List, Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q

from .models import ProductModel, normalize_sku
from .exceptions import (
    ProductNotFoundError,
    ProductAlreadyExistsError,
    InvalidProductError,
)

logger = logging.getLogger(__name__)


class ProductService:
    """
    Product business logic service.
    """

    def get_product_by_id(self, product_id: UUID) -> Optional[ProductModel]:
        """Get product by ID."""
        try:
            return ProductModel.objects.get(id=product_id)
        except (ProductModel.DoesNotExist, ValueError, DjangoValidationError):
            return None

    def get_product_or_raise(self, product_id: UUID) -> ProductModel:
        product = self.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def get_products_by_ids(self, product_ids: Iterable[UUID]) -> List[ProductModel]:
        """Get multiple products by IDs."""
        return list(ProductModel.objects.filter(id__in=list(product_ids)))

    def get_all_products(
        self,
        category: str = None,
        search: str = None,
    ) -> List[ProductModel]:
        """Get catalog products, optionally filtered by category or name/SKU."""
        queryset = ProductModel.objects.all()
        if category:
            queryset = queryset.filter(category=category)
        if search and search.strip():
            query = search.strip()
            queryset = queryset.filter(Q(name__icontains=query) | Q(sku__icontains=query))
        return list(queryset.order_by('-created_at'))

    def create_product(
        self,
        sku: str,
        name: str,
        price: Decimal,
        category: str,
        images: List[str] = None,
        description: str = '',
    ) -> ProductModel:
        """Create a new product."""
        sku = normalize_sku(sku)
        if not sku:
            raise InvalidProductError("SKU는 필수 입력 항목입니다.", field="sku")
        if ProductModel.objects.filter(sku=sku).exists():
            raise ProductAlreadyExistsError(sku)
        if price is None or price < 0:
            raise InvalidProductError("가격은 0 이상이어야 합니다.", field="price")

        product = ProductModel.objects.create(
            sku=sku,
            name=name,
            price=price,
            category=category,
            images=images or [],
            description=description or '',
        )
        logger.info(f"상품 등록 완료: {product.id} ({product.sku})")
        return product

    def update_product(self, product_id: UUID, **fields) -> ProductModel:
        """Update catalog fields of a product. Existing orders keep their snapshot."""
        product = self.get_product_or_raise(product_id)

        if 'sku' in fields:
            sku = normalize_sku(fields['sku'])
            if ProductModel.objects.filter(sku=sku).exclude(id=product.id).exists():
                raise ProductAlreadyExistsError(sku)
            fields['sku'] = sku
        if 'price' in fields and (fields['price'] is None or fields['price'] < 0):
            raise InvalidProductError("가격은 0 이상이어야 합니다.", field="price")

        for name, value in fields.items():
            setattr(product, name, value)
        product.save()
        logger.info(f"상품 수정 완료: {product.id} ({', '.join(sorted(fields))})")
        return product

    def delete_product(self, product_id: UUID) -> bool:
        """Delete a product."""
        deleted, _ = ProductModel.objects.filter(id=product_id).delete()
        if deleted:
            logger.info(f"상품 삭제 완료: {product_id}")
        return bool(deleted)
