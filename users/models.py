# users/models.py
import logging

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _

# SHARED IMPORTS
from shared.constants import UserRole

from .managers import UserManager

logger = logging.getLogger(__name__)


class User(AbstractUser):
    """Custom user model for multi-tenant support."""

    username = models.CharField(
        _("username"),
        max_length=150,
        blank=True,
        null=True,
        help_text=_("Optional. 150 characters or fewer."),
    )

    email = models.EmailField(_("email address"), unique=True)
    name = models.CharField(_("display name"), max_length=255)
    role = models.CharField(max_length=20, choices=UserRole.CHOICES)

    # Absent for super admins and optional for parents
    school = models.ForeignKey(
        "core.School",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='users'
    )

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'auth_user'
        indexes = [
            models.Index(fields=['school', 'role'], name='user_school_role_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(role=UserRole.SUPER_ADMIN, school__isnull=True)
                    | Q(role=UserRole.PARENT)
                    | (Q(role__in=UserRole.SCHOOL_BOUND) & Q(school__isnull=False))
                ),
                name='user_role_school_binding',
            ),
        ]

    def __str__(self):
        return self.email

    @property
    def is_super_admin(self) -> bool:
        return self.role == UserRole.SUPER_ADMIN


class StudentProfile(models.Model):
    """Student-specific record attached one-to-one to a STUDENT account."""
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='student_profile')
    school = models.ForeignKey("core.School", on_delete=models.CASCADE, related_name='students')
    admission_no = models.CharField(max_length=50)
    roll_no = models.CharField(max_length=20, blank=True, null=True)
    school_class = models.ForeignKey("core.SchoolClass", on_delete=models.PROTECT, related_name='students')
    section = models.ForeignKey(
        "core.Section",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='students'
    )
    date_of_birth = models.DateField()
    gender = models.CharField(max_length=20)
    blood_group = models.CharField(max_length=5, blank=True, null=True)
    address = models.TextField(blank=True, null=True)
    photo = models.CharField(max_length=500, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'users_student_profile'
        unique_together = ['school', 'admission_no']
        indexes = [
            models.Index(fields=['school', 'is_active'], name='student_school_active_idx'),
        ]

    def __str__(self):
        return f"{self.user.name} ({self.admission_no})"


class TeacherProfile(models.Model):
    """Teacher-specific record attached one-to-one to a TEACHER account."""
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='teacher_profile')
    school = models.ForeignKey("core.School", on_delete=models.CASCADE, related_name='teachers')
    employee_id = models.CharField(max_length=50)
    phone = models.CharField(max_length=20)
    joining_date = models.DateField()
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=20, blank=True, null=True)
    address = models.TextField(blank=True, null=True)
    photo = models.CharField(max_length=500, blank=True, null=True)
    qualification = models.CharField(max_length=100, blank=True, null=True)
    designation = models.CharField(max_length=100, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'users_teacher_profile'
        unique_together = ['school', 'employee_id']

    def __str__(self):
        return f"{self.user.name} ({self.employee_id})"


class StaffProfile(models.Model):
    """Non-teaching staff record attached one-to-one to a STAFF account."""
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='staff_profile')
    school = models.ForeignKey("core.School", on_delete=models.CASCADE, related_name='staff_members')
    employee_id = models.CharField(max_length=50)
    phone = models.CharField(max_length=20)
    designation = models.CharField(max_length=100)
    joining_date = models.DateField()
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'users_staff_profile'
        unique_together = ['school', 'employee_id']
        verbose_name = 'Staff Member'
        verbose_name_plural = 'Staff Members'

    def __str__(self):
        return f"{self.user.name} - {self.designation}"


class ParentProfile(models.Model):
    """Parent/guardian record attached one-to-one to a PARENT account."""
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='parent_profile')
    phone = models.CharField(max_length=20)
    occupation = models.CharField(max_length=100, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'users_parent_profile'

    def __str__(self):
        return f"{self.user.name} (parent)"
