# users/views.py
from django.db import transaction
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status, permissions
from rest_framework_simplejwt.tokens import RefreshToken

from profiles.services import create_minimal_profile
from .models import User
from .serializers import RegisterSerializer, LoginSerializer, UserSerializer


def _token_payload(user):
    refresh = RefreshToken.for_user(user)
    profile = getattr(user, 'profile', None)
    return {
        "access": str(refresh.access_token),
        "refresh": str(refresh),
        "user": {
            "id": user.id,
            "email": user.email,
            "role": user.role,
            "registration_completed": bool(profile and profile.registration_completed),
            "registration_step": profile.registration_step if profile else None,
        }
    }


class RegisterView(APIView):
    """
    Register a professional and open an empty directory profile
    POST /api/users/register/
    """
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({
                "code": "invalid_input",
                "detail": serializer.errors
            }, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        with transaction.atomic():
            user = User.objects.create_user(
                data['email'],
                data['password'],
                first_name=data['first_name'],
                last_name=data['last_name'],
            )
            create_minimal_profile(user)

        return Response({
            "status": "registered",
            **_token_payload(user)
        }, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """
    POST /api/users/login/
    """
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data, context={'request': request})
        if not serializer.is_valid():
            return Response({
                "code": "invalid_credentials",
                "detail": serializer.errors
            }, status=status.HTTP_401_UNAUTHORIZED)

        user = serializer.validated_data['user']
        return Response(_token_payload(user), status=status.HTTP_200_OK)


class CurrentUserView(APIView):
    """
    GET/PUT /api/users/me/
    """
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data, status=status.HTTP_200_OK)

    def put(self, request):
        serializer = UserSerializer(request.user, data=request.data, partial=True)
        if serializer.is_valid():
            serializer.save()
            return Response(serializer.data, status=status.HTTP_200_OK)

        return Response({
            "code": "invalid_input",
            "detail": serializer.errors
        }, status=status.HTTP_400_BAD_REQUEST)
