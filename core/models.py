# core/models.py
"""
CORE MODELS - tenancy foundation
Plans, schools (tenants), academic years and the class/section references
that role profiles point at.
"""
import logging
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

# SHARED IMPORTS
from shared.constants import SchoolStatus

logger = logging.getLogger(__name__)


# ============ PLAN MODEL ============

class Plan(models.Model):
    """Subscription plan a school is provisioned on."""
    name = models.CharField(max_length=50, unique=True)
    student_limit = models.PositiveIntegerField(default=50, null=True, blank=True, help_text="Empty means unlimited")
    certificate_printing_allowed = models.BooleanField(default=True)
    custom_domain_enabled = models.BooleanField(default=False)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    features = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'core_plan'
        ordering = ['price', 'name']

    def __str__(self):
        return self.name


# ============ SCHOOL MODEL ============

class School(models.Model):
    """School institution model - foundation for multi-tenancy."""

    # Basic Information
    name = models.CharField(max_length=255, help_text="Official school name")
    slug = models.SlugField(max_length=80, unique=True)
    school_type = models.CharField(max_length=20, help_text="Free text, e.g. Primary or K-12")
    country = models.CharField(max_length=100)
    contact_email = models.EmailField(blank=True, null=True)
    phone_number = models.CharField(max_length=20, blank=True, null=True)
    address = models.TextField(blank=True, null=True)
    principal_name = models.CharField(max_length=255, blank=True, null=True)

    # Subscription
    plan = models.ForeignKey(Plan, on_delete=models.PROTECT, related_name='schools')
    status = models.CharField(max_length=20, choices=SchoolStatus.CHOICES, default=SchoolStatus.TRIAL)
    trial_ends_at = models.DateTimeField(null=True, blank=True)

    # Onboarding
    setup_completed = models.BooleanField(default=False)

    # Operational
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'schools_school'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'trial_ends_at'], name='school_status_trial_idx'),
            models.Index(fields=['name'], name='school_name_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.slug})"

    @property
    def is_trial(self) -> bool:
        return self.status == SchoolStatus.TRIAL

    @property
    def trial_days_remaining(self):
        """Whole days left in the trial, None when not on trial."""
        if not self.is_trial or not self.trial_ends_at:
            return None
        return max(0, (self.trial_ends_at - timezone.now()).days)

    @property
    def current_academic_year(self):
        return self.academic_years.filter(is_current=True).order_by('-start_date').first()


# ============ ACADEMIC YEAR MODEL ============

class AcademicYear(models.Model):
    """Academic year model for organizing school years."""
    school = models.ForeignKey(School, on_delete=models.CASCADE, related_name='academic_years')
    name = models.CharField(max_length=50, help_text="e.g., 2024/2025")
    start_date = models.DateField()
    end_date = models.DateField()
    is_current = models.BooleanField(default=False)
    is_setup_complete = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'core_academic_year'
        unique_together = ['school', 'name']
        ordering = ['-start_date']
        indexes = [
            models.Index(fields=['school', 'is_current'], name='acad_year_school_current_idx'),
        ]
        verbose_name = 'Academic Year'
        verbose_name_plural = 'Academic Years'

    def __str__(self):
        return f"{self.name} - {self.school.name}"

    @property
    def duration_months(self) -> int:
        """Get duration of academic year in months."""
        if self.start_date and self.end_date:
            return (self.end_date.year - self.start_date.year) * 12 + self.end_date.month - self.start_date.month
        return 0

    def clean(self):
        """Validate academic year dates."""
        if self.start_date and self.end_date and self.start_date >= self.end_date:
            raise ValidationError({'end_date': 'End date must be after start date.'})


# ============ CLASS / SECTION MODELS ============

class SchoolClass(models.Model):
    """Academic class a student is enrolled in (e.g. 'Primary 3')."""
    school = models.ForeignKey(School, on_delete=models.CASCADE, related_name='classes')
    name = models.CharField(max_length=100)
    academic_year = models.ForeignKey(
        AcademicYear,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='classes'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'core_class'
        unique_together = ('school', 'name', 'academic_year')
        ordering = ['name']
        verbose_name = "Class"
        verbose_name_plural = "Classes"

    def __str__(self):
        return f"{self.name} - {self.school.name}"


class Section(models.Model):
    """Subdivision of a class (e.g. 'A', 'Blue')."""
    school_class = models.ForeignKey(SchoolClass, on_delete=models.CASCADE, related_name='sections')
    name = models.CharField(max_length=50)

    class Meta:
        db_table = 'core_section'
        unique_together = ('school_class', 'name')
        ordering = ['name']

    def __str__(self):
        return f"{self.school_class.name} {self.name}"

    @property
    def school(self):
        return self.school_class.school
