# users/tokens.py
"""
Stateless session tokens.

A token is the signed, timestamped JSON of the session claims
(accountId, role, schoolId, schoolSlug). Nothing is stored server side:
every request rebuilds the Session from the token, and expiry is checked
against SESSION_TOKEN_MAX_AGE.
"""
import logging

from django.conf import settings
from django.core import signing

from shared.constants import UserRole

logger = logging.getLogger(__name__)

TOKEN_SALT = 'users.session-token'


def get_token_max_age() -> int:
    return int(getattr(settings, 'SESSION_TOKEN_MAX_AGE', 60 * 60 * 24 * 14))


class Session:
    """Authenticated caller, reconstructed from token claims."""

    is_authenticated = True
    is_anonymous = False

    def __init__(self, account_id, role, school_id=None, school_slug=None):
        self.account_id = account_id
        self.role = role
        self.school_id = school_id
        self.school_slug = school_slug

    def __repr__(self):
        return f"<Session account={self.account_id} role={self.role} school={self.school_id}>"

    @property
    def pk(self):
        return self.account_id

    id = pk

    @property
    def is_super_admin(self) -> bool:
        return self.role == UserRole.SUPER_ADMIN

    @property
    def has_school(self) -> bool:
        return self.school_id is not None

    @classmethod
    def from_user(cls, user):
        school = user.school
        return cls(
            account_id=user.pk,
            role=user.role,
            school_id=school.pk if school else None,
            school_slug=school.slug if school else None,
        )

    def to_claims(self) -> dict:
        return {
            'accountId': self.account_id,
            'role': self.role,
            'schoolId': self.school_id,
            'schoolSlug': self.school_slug,
        }

    @classmethod
    def from_claims(cls, claims):
        return cls(
            account_id=claims['accountId'],
            role=claims['role'],
            school_id=claims.get('schoolId'),
            school_slug=claims.get('schoolSlug'),
        )


def issue_session_token(user) -> str:
    """Sign the session claims for a freshly authenticated user."""
    return signing.dumps(Session.from_user(user).to_claims(), salt=TOKEN_SALT, compress=True)


def read_session_token(token):
    """
    Rebuild a Session from a token.

    Returns None for a missing, tampered, malformed or expired token.
    """
    if not token:
        return None

    try:
        claims = signing.loads(token, salt=TOKEN_SALT, max_age=get_token_max_age())
    except signing.SignatureExpired:
        logger.debug("Session token expired")
        return None
    except signing.BadSignature:
        logger.debug("Session token with bad signature")
        return None

    if not isinstance(claims, dict) or 'accountId' not in claims or 'role' not in claims:
        logger.warning("Session token with unexpected claims shape")
        return None

    return Session.from_claims(claims)
