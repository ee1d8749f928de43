"""
Products module exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError, ValidationError


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is not found."""

    def __init__(self, identifier):
        super().__init__(
            entity_name="Product",
            entity_id=str(identifier),
            message=f"상품을 찾을 수 없습니다: {identifier}",
        )
        self.code = "PRODUCT_NOT_FOUND"
        self.identifier = identifier


class ProductAlreadyExistsError(ValidationError):
    """Raised when a SKU is already registered."""

    def __init__(self, sku: str):
        super().__init__(
            message=f"이미 등록된 SKU입니다: {sku}",
            field="sku",
            code="PRODUCT_ALREADY_EXISTS",
        )
        self.sku = sku


class InvalidProductError(ValidationError):
    """Raised when product data is invalid."""

    def __init__(self, message: str, field: str = "product"):
        super().__init__(message=message, field=field, code="INVALID_PRODUCT")
