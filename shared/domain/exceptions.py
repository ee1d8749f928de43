"""
Domain exceptions.
"""


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, message: str = None):
        super().__init__(
            message=message or f"{entity_name} with id '{entity_id}' not found",
            code="ENTITY_NOT_FOUND"
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None, code: str = None):
        super().__init__(message=message, code=code or "VALIDATION_ERROR")
        self.field = field


class PermissionDeniedError(DomainException):
    """Raised when the caller is not allowed to perform an operation."""

    def __init__(self, message: str, code: str = None):
        super().__init__(message=message, code=code or "PERMISSION_DENIED")


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(self, message: str, code: str = None):
        super().__init__(message=message, code=code or "CONFLICT")


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: str = None, state: str = None):
        super().__init__(message=message, code="INVALID_OPERATION")
        self.operation = operation
        self.state = state
