"""
Users module exceptions.
"""
from shared.domain.exceptions import DomainException, ValidationError


class UserAlreadyExistsError(ValidationError):
    """Raised when registering with an email that is already in use."""

    def __init__(self, field: str, value: str):
        super().__init__(
            message=f"이미 사용 중인 {'이메일' if field == 'email' else field}입니다.",
            field=field,
            code="USER_ALREADY_EXISTS",
        )
        self.value = value


class InvalidCredentialsError(DomainException):
    """Raised when email or password does not match."""
    status_code = 401

    def __init__(self):
        super().__init__(
            message="유효하지 않은 이메일 또는 비밀번호입니다.",
            code="INVALID_CREDENTIALS",
        )


class UserInactiveError(DomainException):
    """Raised when an inactive account tries to log in."""
    status_code = 401

    def __init__(self, user_id: str):
        super().__init__(message="비활성화된 계정입니다.", code="USER_INACTIVE")
        self.user_id = user_id
