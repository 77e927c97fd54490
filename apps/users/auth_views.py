"""Views for authentication flows (register, login, logout, password reset)."""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore

from apps.notifications.services import password_reset_email
from apps.notifications.tasks import queue_email

from .auth_serializers import (
    ForgotPasswordSerializer,
    LoginSerializer,
    RegisterSerializer,
    ResetPasswordSerializer,
)
from .models import PasswordResetToken
from .serializers import UserSerializer

logger = logging.getLogger(__name__)


def _tokens_for_user(user) -> dict[str, str]:
    refresh = RefreshToken.for_user(user)
    return {"refresh": str(refresh), "access": str(refresh.access_token)}


class RegisterView(APIView):
    permission_classes = [AllowAny]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"User registered: {user.email}")
        data = {
            "message": "User registered successfully!",
            "user": UserSerializer(user, context={"request": request}).data,
        }
        return Response(data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        user.mark_online()
        data = {
            "tokens": _tokens_for_user(user),
            "user": UserSerializer(user, context={"request": request}).data,
            "role": user.role,
        }
        return Response(data, status=status.HTTP_200_OK)


class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):  # type: ignore
        request.user.mark_offline()
        return Response({"message": "Logged out successfully"}, status=status.HTTP_200_OK)


class ForgotPasswordView(APIView):
    permission_classes = [AllowAny]
    parser_classes = [JSONParser, FormParser]

    def post(self, request):  # type: ignore
        serializer = ForgotPasswordSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"message": "User not found!"}, status=status.HTTP_404_NOT_FOUND)
        token = serializer.save()

        reset_link = f"{settings.CLIENT_URL}/reset-password?token={token.token}"
        content = password_reset_email(reset_link)
        queue_email(token.user.email, content["subject"], content["message"])
        return Response({"message": "Password reset email sent!"}, status=status.HTTP_200_OK)


class ResetPasswordView(APIView):
    permission_classes = [AllowAny]

    def post(self, request, token: str):  # type: ignore
        reset_token = (
            PasswordResetToken.objects.select_related("user").filter(token=token).first()
        )
        if reset_token is None or not reset_token.is_valid:
            return Response(
                {"message": "Token is invalid or has expired."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save(reset_token)
        return Response({"message": "Password has been reset successfully!"}, status=status.HTTP_200_OK)
