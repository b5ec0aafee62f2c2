# users/permissions.py
"""
Permission classes for the JSON API.

Missing sessions and missing school bindings both answer 401, matching
the setup wizard contract; a wrong role answers 403.
"""
from django.conf import settings
from rest_framework import exceptions
from rest_framework.permissions import BasePermission


def _is_authenticated(request) -> bool:
    user = getattr(request, 'user', None)
    return bool(user and user.is_authenticated)


class HasSchoolContext(BasePermission):
    """Authenticated session bound to a school."""

    def has_permission(self, request, view):
        if not _is_authenticated(request) or not getattr(request.user, 'school_id', None):
            raise exceptions.NotAuthenticated('Unauthorized')
        return True


class IsSuperAdmin(BasePermission):
    """
    Platform super admins only.

    PROVISIONING_REQUIRE_SUPER_ADMIN = False opens the endpoint, which is
    how the provisioning API originally behaved.
    """
    message = 'Insufficient permissions'

    def has_permission(self, request, view):
        if not getattr(settings, 'PROVISIONING_REQUIRE_SUPER_ADMIN', True):
            return True
        if not _is_authenticated(request):
            raise exceptions.NotAuthenticated('Unauthorized')
        return bool(getattr(request.user, 'is_super_admin', False))
