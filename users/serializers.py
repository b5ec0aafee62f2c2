# users/serializers.py
"""
Read-only serializers for accounts and sessions.
"""
from rest_framework import serializers

from .models import User


class AccountSerializer(serializers.ModelSerializer):
    schoolId = serializers.IntegerField(source='school_id', read_only=True, allow_null=True)
    isActive = serializers.BooleanField(source='is_active', read_only=True)
    lastLogin = serializers.DateTimeField(source='last_login', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'email', 'name', 'role', 'schoolId', 'isActive', 'lastLogin']
        read_only_fields = fields


class SessionSerializer(serializers.Serializer):
    """Claims carried by a session token."""

    accountId = serializers.IntegerField(source='account_id', read_only=True)
    role = serializers.CharField(read_only=True)
    schoolId = serializers.IntegerField(source='school_id', read_only=True, allow_null=True)
    schoolSlug = serializers.CharField(source='school_slug', read_only=True, allow_null=True)
