"""
Users module service layer.
"""
import logging
from typing import Optional

from rest_framework_simplejwt.tokens import RefreshToken

from .models import UserModel
from .exceptions import (
    UserAlreadyExistsError,
    InvalidCredentialsError,
    UserInactiveError,
)

logger = logging.getLogger(__name__)


class UserService:
    """
    User business logic service.
    """

    def get_user_by_email(self, email: str) -> Optional[UserModel]:
        """Get user by email."""
        try:
            return UserModel.objects.get(email=email.lower())
        except UserModel.DoesNotExist:
            return None

    def register_user(
        self,
        email: str,
        name: str,
        password: str,
        phone: str = '',
        address: str = '',
    ) -> UserModel:
        """Register a new customer."""
        if UserModel.objects.filter(email=email.lower()).exists():
            raise UserAlreadyExistsError(field="email", value=email)

        user = UserModel.objects.create_user(
            email=email,
            name=name,
            password=password,
            phone=phone or '',
            address=address or '',
        )
        logger.info(f"회원가입 완료: {user.id}")
        return user

    def authenticate(self, email: str, password: str) -> dict:
        """Authenticate user and return tokens."""
        user = self.get_user_by_email(email)

        if not user or not user.check_password(password):
            raise InvalidCredentialsError()

        if not user.is_active:
            raise UserInactiveError(str(user.id))

        refresh = RefreshToken.for_user(user)

        return {
            'access_token': str(refresh.access_token),
            'refresh_token': str(refresh),
            'token_type': 'Bearer',
            'user': user,
        }
