# users/authentication.py
"""
DRF authentication backed by signed session tokens.
"""
import logging

from rest_framework.authentication import BaseAuthentication, get_authorization_header

from .tokens import read_session_token

logger = logging.getLogger(__name__)


class SignedTokenAuthentication(BaseAuthentication):
    """
    Authorization: Bearer <token>

    A missing or invalid token leaves the request anonymous; protected views
    then answer 401 through their permission classes.
    """

    keyword = 'Bearer'

    def authenticate(self, request):
        auth = get_authorization_header(request).split()

        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None

        if len(auth) != 2:
            logger.debug("Malformed Authorization header")
            return None

        try:
            token = auth[1].decode()
        except UnicodeError:
            return None

        session = read_session_token(token)
        if session is None:
            return None

        return session, token

    def authenticate_header(self, request):
        return self.keyword
