# core/serializers.py
"""
Read-only DRF serializers for tenant objects.
Field names are camelCase to match the JSON API.
"""
from rest_framework import serializers

from .models import AcademicYear, Plan, School


class PlanSerializer(serializers.ModelSerializer):
    studentLimit = serializers.IntegerField(source='student_limit', read_only=True)
    certificatePrintingAllowed = serializers.BooleanField(source='certificate_printing_allowed', read_only=True)
    customDomainEnabled = serializers.BooleanField(source='custom_domain_enabled', read_only=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True)

    class Meta:
        model = Plan
        fields = [
            'id',
            'name',
            'studentLimit',
            'certificatePrintingAllowed',
            'customDomainEnabled',
            'price',
            'features',
        ]
        read_only_fields = fields


class SchoolSerializer(serializers.ModelSerializer):
    """School as returned by provisioning and the setup wizard."""

    type = serializers.CharField(source='school_type', read_only=True)
    email = serializers.EmailField(source='contact_email', read_only=True)
    phone = serializers.CharField(source='phone_number', read_only=True)
    principalName = serializers.CharField(source='principal_name', read_only=True)
    planId = serializers.IntegerField(source='plan_id', read_only=True)
    trialEndsAt = serializers.DateTimeField(source='trial_ends_at', read_only=True)
    setupCompleted = serializers.BooleanField(source='setup_completed', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = School
        fields = [
            'id',
            'name',
            'slug',
            'type',
            'country',
            'email',
            'phone',
            'address',
            'principalName',
            'planId',
            'status',
            'trialEndsAt',
            'setupCompleted',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


class SchoolListSerializer(SchoolSerializer):
    """School with its plan and headcounts (expects annotated querysets)."""

    plan = PlanSerializer(read_only=True)
    counts = serializers.SerializerMethodField()

    class Meta(SchoolSerializer.Meta):
        fields = SchoolSerializer.Meta.fields + ['plan', 'counts']
        read_only_fields = fields

    def get_counts(self, obj):
        return {
            'users': getattr(obj, 'user_count', 0),
            'students': getattr(obj, 'student_count', 0),
            'teachers': getattr(obj, 'teacher_count', 0),
        }


class AcademicYearSerializer(serializers.ModelSerializer):
    schoolId = serializers.IntegerField(source='school_id', read_only=True)
    startDate = serializers.DateField(source='start_date', read_only=True)
    endDate = serializers.DateField(source='end_date', read_only=True)
    isCurrent = serializers.BooleanField(source='is_current', read_only=True)
    isSetupComplete = serializers.BooleanField(source='is_setup_complete', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = AcademicYear
        fields = [
            'id',
            'schoolId',
            'name',
            'startDate',
            'endDate',
            'isCurrent',
            'isSetupComplete',
            'createdAt',
        ]
        read_only_fields = fields
