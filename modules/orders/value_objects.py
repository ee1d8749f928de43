"""
Orders module value objects.
"""
import random
import string
from dataclasses import dataclass
from typing import Any, Dict, Optional

from django.utils import timezone

from shared.domain import ValueObject

from .exceptions import InvalidShippingAddressError


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """Order number value object."""
    value: str

    @classmethod
    def generate(cls) -> 'OrderNumber':
        """Generate a new order number."""
        date_part = timezone.localdate().strftime("%Y%m%d")
        random_part = ''.join(random.choices(string.ascii_uppercase + string.digits, k=6))
        return cls(value=f"ORD-{date_part}-{random_part}")

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class ShippingAddress(ValueObject):
    """Shipping address value object."""
    name: str
    phone: str
    address: str
    detail_address: str = ""
    postal_code: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ShippingAddress':
        """
        Build from the request payload.

        Raises InvalidShippingAddressError unless name, phone and address are
        all present and non-blank.
        """
        data = data or {}
        name = str(data.get('name') or '').strip()
        phone = str(data.get('phone') or '').strip()
        address = str(data.get('address') or '').strip()
        if not (name and phone and address):
            raise InvalidShippingAddressError()
        return cls(
            name=name,
            phone=phone,
            address=address,
            detail_address=str(data.get('detailAddress') or '').strip(),
            postal_code=str(data.get('postalCode') or '').strip(),
        )

    @classmethod
    def from_order(cls, order) -> 'ShippingAddress':
        return cls(
            name=order.recipient_name,
            phone=order.phone_number,
            address=order.address,
            detail_address=order.address_detail,
            postal_code=order.postal_code,
        )

    def to_model_fields(self) -> Dict[str, str]:
        """Column values for the flattened address on OrderModel."""
        return {
            'recipient_name': self.name,
            'phone_number': self.phone,
            'address': self.address,
            'address_detail': self.detail_address,
            'postal_code': self.postal_code,
        }

    @property
    def full_address(self) -> str:
        parts = [self.address]
        if self.detail_address:
            parts.append(self.detail_address)
        if self.postal_code:
            parts.insert(0, f"({self.postal_code})")
        return " ".join(parts)
