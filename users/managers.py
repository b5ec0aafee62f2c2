# users/managers.py
"""
CUSTOM USER MANAGER - Uses email as username
NO dependencies beyond shared constants, clean and focused
"""
from django.contrib.auth.models import UserManager as BaseUserManager
from django.utils.translation import gettext_lazy as _

# SHARED IMPORTS
from shared.constants import UserRole


class UserManager(BaseUserManager):
    """
    Custom manager for User model with email as username.
    Inherits from BaseUserManager for Django auth compatibility.
    """

    @classmethod
    def normalize_email(cls, email):
        """
        Trim and lower-case the whole address.

        Django's default only lower-cases the domain part; accounts here are
        unique on the fully case-folded address.
        """
        return (email or '').strip().lower()

    def create_user(self, email, password=None, **extra_fields):
        """
        Create and save a regular User with the given email and password.

        Args:
            email: User's email address (required)
            password: User's password (optional)
            **extra_fields: Additional user fields

        Returns:
            User instance

        Raises:
            ValueError: If email is not provided
        """
        email = self.normalize_email(email)
        if not email:
            raise ValueError(_('The Email must be set'))

        user = self.model(email=email, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Create and save a platform super admin.

        Super admins never belong to a school and get Django admin access.
        """
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields['role'] = UserRole.SUPER_ADMIN
        extra_fields['school'] = None

        if extra_fields.get('is_staff') is not True:
            raise ValueError(_('Superuser must have is_staff=True.'))
        if extra_fields.get('is_superuser') is not True:
            raise ValueError(_('Superuser must have is_superuser=True.'))

        return self.create_user(email, password, **extra_fields)

    def get_by_natural_key(self, email):
        """Case-insensitive lookup used by the authentication backend."""
        return self.get(email=self.normalize_email(email))

    def get_school_users(self, school):
        """Get all active users of a school."""
        return self.filter(school=school, is_active=True)
