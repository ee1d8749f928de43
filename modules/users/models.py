"""
Users module Django ORM models.
"""
import uuid

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models


class UserManager(BaseUserManager):
    """Manager for email-based users."""

    def create_user(self, email: str, name: str, password: str = None, **extra_fields):
        if not email:
            raise ValueError('이메일은 필수 입력 항목입니다.')
        user = self.model(email=self.normalize_email(email).lower(), name=name, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email: str, name: str, password: str = None, **extra_fields):
        extra_fields.setdefault('user_type', UserModel.UserType.ADMIN)
        extra_fields.setdefault('is_superuser', True)
        return self.create_user(email=email, name=name, password=password, **extra_fields)


class UserModel(AbstractBaseUser, PermissionsMixin):
    """Storefront user (customer or admin)."""

    class UserType(models.TextChoices):
        CUSTOMER = 'customer', '고객'
        ADMIN = 'admin', '관리자'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(
        unique=True,
        verbose_name='이메일'
    )
    name = models.CharField(
        max_length=50,
        verbose_name='이름'
    )
    phone = models.CharField(
        max_length=20,
        blank=True,
        verbose_name='전화번호'
    )
    address = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='주소'
    )
    user_type = models.CharField(
        max_length=20,
        choices=UserType.choices,
        default=UserType.CUSTOMER,
        verbose_name='회원 유형'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='활성 여부'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='생성시각'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='수정시각'
    )

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} <{self.email}>"

    @property
    def is_admin(self) -> bool:
        """Check if the user has back-office privileges."""
        return self.user_type == self.UserType.ADMIN

    @property
    def is_staff(self) -> bool:
        # DRF IsAdminUser and the Django admin site both check is_staff.
        return self.is_admin
