# shared/hashers.py
"""
Password hasher with a work factor taken from settings.
"""
from django.conf import settings
from django.contrib.auth.hashers import BCryptSHA256PasswordHasher


class ConfigurableBCryptSHA256PasswordHasher(BCryptSHA256PasswordHasher):
    """
    bcrypt over a SHA-256 digest (no 72-byte truncation) whose cost comes
    from PASSWORD_BCRYPT_ROUNDS. Stored hashes keep the 'bcrypt_sha256'
    algorithm name, so they stay readable by Django's stock hasher.
    """

    @property
    def rounds(self):
        return getattr(settings, 'PASSWORD_BCRYPT_ROUNDS', 12)
