"""
Products module Django ORM models.
"""
import uuid

from django.core.validators import MinValueValidator
from django.db import models


def normalize_sku(value: str) -> str:
    """SKUs are stored trimmed and upper-cased."""
    return (value or '').strip().upper()


class ProductModel(models.Model):
    """Catalog product."""

    class Category(models.TextChoices):
        TOP = '상의', '상의'
        BOTTOM = '하의', '하의'
        ACCESSORY = '악세서리', '악세서리'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    sku = models.CharField(
        max_length=50,
        unique=True,
        db_index=True,
        verbose_name='SKU'
    )
    name = models.CharField(
        max_length=200,
        verbose_name='상품명'
    )
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name='가격'
    )
    category = models.CharField(
        max_length=20,
        choices=Category.choices,
        db_index=True,
        verbose_name='카테고리'
    )
    images = models.JSONField(
        default=list,
        blank=True,
        verbose_name='이미지 URL 목록'
    )
    description = models.TextField(
        blank=True,
        verbose_name='상품 설명'
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
        db_table = 'products'
        verbose_name = 'Product'
        verbose_name_plural = 'Products'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.sku})"

    def save(self, *args, **kwargs):
        self.sku = normalize_sku(self.sku)
        super().save(*args, **kwargs)

    @property
    def primary_image(self):
        """First image URL, used as the order item thumbnail."""
        return self.images[0] if self.images else None
