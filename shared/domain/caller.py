"""
Caller identity value object.
"""
from dataclasses import dataclass
from uuid import UUID

from .base_value_object import ValueObject


@dataclass(frozen=True)
class Caller(ValueObject):
    """
    Identity and role of whoever invokes a service operation.

    Built once at the API boundary from the authenticated user and passed
    explicitly into every order and cart operation.
    """
    user_id: UUID
    is_admin: bool = False

    @classmethod
    def from_user(cls, user) -> 'Caller':
        """Create a caller from an authenticated user model."""
        return cls(user_id=user.id, is_admin=bool(getattr(user, 'is_admin', False)))

    def owns(self, owner_id) -> bool:
        """Check whether the given owner id belongs to this caller."""
        return str(owner_id) == str(self.user_id)
