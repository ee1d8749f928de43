"""
Users module serializers.
"""
import re
from rest_framework import serializers

from .models import UserModel


class UserSerializer(serializers.ModelSerializer):
    """Serializer for user output."""
    userType = serializers.CharField(source='user_type', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = UserModel
        fields = [
            'id',
            'email',
            'name',
            'phone',
            'address',
            'userType',
            'createdAt',
        ]
        read_only_fields = fields


class UserCreateSerializer(serializers.Serializer):
    """Serializer for user registration."""

    email = serializers.EmailField()
    name = serializers.CharField(min_length=1, max_length=50)
    password = serializers.CharField(min_length=8, write_only=True)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True)

    def validate_phone(self, value):
        """Validate phone number format."""
        if value:
            # 전화번호 형식: 010-1234-5678 또는 01012345678
            phone_pattern = re.compile(r'^01[0-9]-?\d{3,4}-?\d{4}$')
            if not phone_pattern.match(value):
                raise serializers.ValidationError("유효하지 않은 전화번호 형식입니다.")
        return value


class LoginSerializer(serializers.Serializer):
    """Serializer for login request."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class TokenSerializer(serializers.Serializer):
    """Serializer for token response."""

    accessToken = serializers.CharField(source='access_token', read_only=True)
    refreshToken = serializers.CharField(source='refresh_token', read_only=True)
    tokenType = serializers.CharField(source='token_type', read_only=True, default="Bearer")
    user = UserSerializer(read_only=True)
