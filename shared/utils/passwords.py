# shared/utils/passwords.py
"""
Password hashing, verification and temporary password generation.

Hashing goes through Django's password hasher framework, so the algorithm
and its work factor are whatever PASSWORD_HASHERS / PASSWORD_BCRYPT_ROUNDS
configure (bcrypt_sha256 by default).
"""
import logging

from django.contrib.auth.hashers import check_password, make_password
from django.utils.crypto import get_random_string

from core.exceptions import PasswordHashingError
from shared.constants import TEMP_PASSWORD_CHARSET

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD_LENGTH = 12


def hash_password(password: str) -> str:
    """
    Hash a plaintext password with a fresh random salt.

    Raises:
        PasswordHashingError: empty input or a failure inside the hasher
    """
    if not isinstance(password, str) or not password:
        raise PasswordHashingError("Password hashing failed: password must be a non-empty string")

    try:
        return make_password(password)
    except Exception as e:
        logger.error("Password hashing failed", exc_info=True)
        raise PasswordHashingError(f"Password hashing failed: {e}") from e


def verify_password(password: str, hashed: str) -> bool:
    """Constant-time check of a plaintext password against a stored hash."""
    if not password or not hashed:
        return False
    try:
        return check_password(password, hashed)
    except ValueError:
        # Unknown or malformed hash format
        logger.warning("Password verification against an unreadable hash")
        return False


def generate_password(length: int = DEFAULT_PASSWORD_LENGTH) -> str:
    """Random password for onboarding; the holder is expected to change it."""
    if length <= 0:
        raise ValueError("Password length must be positive")
    return get_random_string(length, allowed_chars=TEMP_PASSWORD_CHARSET)
