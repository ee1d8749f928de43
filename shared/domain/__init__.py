# Shared domain module
from .base_value_object import ValueObject
from .caller import Caller
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    PermissionDeniedError,
    ConflictError,
    InvalidOperationError,
)

__all__ = [
    'ValueObject',
    'Caller',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'PermissionDeniedError',
    'ConflictError',
    'InvalidOperationError',
]
