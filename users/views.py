# users/views.py
"""
AUTH API VIEWS - login, current session, logout
Sessions are stateless signed tokens; see users.tokens.
"""
import logging

from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import SchoolManagementException
from core.handlers import error_response

from .serializers import AccountSerializer, SessionSerializer
from .services import AuthService
from .tokens import Session, get_token_max_age

logger = logging.getLogger(__name__)


class LoginView(APIView):
    """POST /auth/login - email + password in, signed token out."""

    authentication_classes = []
    permission_classes = [AllowAny]
    error_message = 'Login failed'

    def post(self, request):
        data = request.data if hasattr(request.data, 'get') else {}

        try:
            user, token = AuthService.authenticate(data.get('email'), data.get('password'))
        except SchoolManagementException as e:
            return error_response(e, self.error_message)

        return Response({
            'token': token,
            'expiresIn': get_token_max_age(),
            'session': SessionSerializer(Session.from_user(user)).data,
            'account': AccountSerializer(user).data,
        })


class SessionView(APIView):
    """GET /auth/session - claims of the presented token."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({'session': SessionSerializer(request.user).data})


class LogoutView(APIView):
    """
    POST /auth/logout

    Nothing to revoke server side; the client discards its token, which
    otherwise stays valid until it expires.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        return Response({'success': True})
