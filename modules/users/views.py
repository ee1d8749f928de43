"""
Users module API views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import UserService
from .serializers import (
    UserSerializer,
    UserCreateSerializer,
    LoginSerializer,
    TokenSerializer,
)


user_service = UserService()


@extend_schema(tags=['Users'])
class SignupView(APIView):
    """회원가입 API - 사용자의 정보를 입력받아 신규 계정을 생성"""
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        request=UserCreateSerializer,
        responses={201: UserSerializer},
        summary="회원가입",
    )
    def post(self, request):
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = user_service.register_user(**serializer.validated_data)

        return Response(
            {
                'message': '회원가입이 완료되었습니다.',
                'user': UserSerializer(user).data,
            },
            status=status.HTTP_201_CREATED
        )


@extend_schema(tags=['Users'])
class LoginView(APIView):
    """로그인 API - 사용자의 계정 정보를 확인하고 인증 토큰을 발급"""
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        request=LoginSerializer,
        responses={200: TokenSerializer},
        summary="로그인",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = user_service.authenticate(**serializer.validated_data)

        return Response(TokenSerializer(result).data)


@extend_schema(tags=['Users'])
class UserMeView(APIView):
    """Current user endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: UserSerializer},
        summary="Get current user profile",
    )
    def get(self, request):
        return Response(UserSerializer(request.user).data)
