"""
User authentication views.
"""
import logging

from django.contrib.auth.signals import user_logged_in
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from apps.common.utils import success_response, error_response
from ..models import User
from ..serializers import UserDetailSerializer, UserRegistrationSerializer, LoginSerializer

logger = logging.getLogger(__name__)


def issue_tokens(user):
    refresh = RefreshToken.for_user(user)
    return {
        'token': str(refresh.access_token),
        'refresh': str(refresh),
    }


class RegisterView(APIView):
    """User registration endpoint - POST /api/auth/register/"""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Registration failed', serializer.errors)

        user = serializer.save()
        data = {'user': UserDetailSerializer(user).data}
        if user.is_approved():
            data.update(issue_tokens(user))
            message = 'Registration successful'
        else:
            message = 'Registration submitted, waiting for approval'
        return success_response(data, message, status.HTTP_201_CREATED)


class LoginView(APIView):
    """Email and password login - POST /api/auth/login/"""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Email and password are required', serializer.errors)

        email = serializer.validated_data['email']
        user = User.objects.filter(email__iexact=email).first()
        if user is None or not user.check_password(serializer.validated_data['password']):
            logger.info(f"Failed login for {email}")
            return error_response('Invalid email or password', status_code=status.HTTP_401_UNAUTHORIZED)

        if not user.is_active:
            return error_response('Account is disabled', status_code=status.HTTP_403_FORBIDDEN)

        if user.is_pending():
            return error_response(
                'Your registration is pending approval', status_code=status.HTTP_403_FORBIDDEN
            )

        if user.is_rejected():
            reason = f": {user.rejection_reason}" if user.rejection_reason else ''
            return error_response(
                f'Your registration was rejected{reason}', status_code=status.HTTP_403_FORBIDDEN
            )

        data = issue_tokens(user)
        user_logged_in.send(sender=user.__class__, request=request, user=user)
        data['user'] = UserDetailSerializer(user).data
        return success_response(data, 'Login successful')


class LogoutView(APIView):
    """Blacklist the refresh token - POST /api/auth/logout/"""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        refresh = request.data.get('refresh')
        if not refresh:
            return error_response('Refresh token is required')

        try:
            RefreshToken(refresh).blacklist()
        except TokenError as e:
            return error_response(f'Invalid token: {e}')

        return success_response(None, 'Logged out successfully')


class MeView(APIView):
    """Current user profile with roles and points - GET /api/auth/me/"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return success_response(UserDetailSerializer(request.user).data)
