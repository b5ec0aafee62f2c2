# core/services.py
"""
CORE SERVICES - tenant provisioning and the school setup wizard
NO view logic, PROPER error handling, WELL LOGGED
"""
import logging
from datetime import timedelta
from typing import Any, Dict, Tuple

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import Count
from django.utils import timezone
from django.utils.crypto import get_random_string
from django.utils.text import slugify

# SHARED IMPORTS
from shared.constants import PLAN_CATALOG, PlanKeys, SchoolStatus
from shared.helpers import clean_optional, coerce_date, require_fields
from shared.utils import FieldMapper
from shared.utils.passwords import generate_password

from .exceptions import (
    AuthenticationError,
    DuplicateIdentityError,
    SchoolManagementException,
    SchoolOnboardingError,
    StorageError,
    ValidationError,
)
from .models import AcademicYear, Plan, School

logger = logging.getLogger(__name__)

SLUG_SUFFIX_CHARS = 'abcdefghijklmnopqrstuvwxyz0123456789'
SLUG_SUFFIX_LENGTH = 5
SLUG_MAX_ATTEMPTS = 5
SLUG_MAX_LENGTH = School._meta.get_field('slug').max_length


# ============ HELPER FUNCTIONS ============

def get_trial_period_days() -> int:
    return int(getattr(settings, 'TRIAL_PERIOD_DAYS', 30))


def base_slug(name: str) -> str:
    """URL-safe slug for a school name, short enough to take a suffix."""
    slug = slugify(name or '')[:SLUG_MAX_LENGTH - SLUG_SUFFIX_LENGTH - 1].strip('-')
    return slug or 'school'


def suffixed_slug(base: str) -> str:
    return f"{base}-{get_random_string(SLUG_SUFFIX_LENGTH, allowed_chars=SLUG_SUFFIX_CHARS)}"


def _get_school(school_id):
    """School for the current session; a dangling reference is treated as no session."""
    try:
        school = School.objects.filter(pk=school_id).first()
    except (TypeError, ValueError):
        school = None
    if school is None:
        logger.warning(f"Session references missing school {school_id}")
        raise AuthenticationError("Unauthorized")
    return school


# ============ PROVISIONING SERVICE ============

class ProvisioningService:
    """
    Creates tenants: plan lookup, unique slug, the school row and its first
    school admin with a one-time temporary password.
    """

    REQUIRED_FIELDS = ['name', 'type', 'country', 'admin_name', 'admin_email']

    @staticmethod
    def provision_school(data: Dict[str, Any]) -> Tuple[School, Dict[str, str]]:
        """
        Provision a school and its first admin in one transaction.

        Returns:
            Tuple: (school, {'email': ..., 'password': ...})

        Raises:
            ValidationError: missing fields or unknown plan key
            DuplicateIdentityError: admin email already registered
            SchoolOnboardingError: anything else
        """
        # Imported here: users depends on core
        from users.services import RoleSeederService

        payload = FieldMapper.map_payload(data, 'provisioning')
        require_fields(payload, ProvisioningService.REQUIRED_FIELDS, message="Missing required fields")

        school_type = str(payload['type']).strip()
        if len(school_type) > School._meta.get_field('school_type').max_length:
            raise ValidationError("School type is too long")

        try:
            with transaction.atomic():
                plan_key, plan = ProvisioningService.resolve_plan(payload.get('plan_key'))

                created_at = timezone.now()
                is_trial = plan_key == PlanKeys.TRIAL

                school = ProvisioningService._create_school(
                    name=str(payload['name']).strip(),
                    school_type=school_type,
                    country=str(payload['country']).strip(),
                    contact_email=clean_optional(payload.get('contact_email')),
                    phone_number=FieldMapper.standardize_phone_number(clean_optional(payload.get('contact_phone'))),
                    plan=plan,
                    status=SchoolStatus.TRIAL if is_trial else SchoolStatus.ACTIVE,
                    trial_ends_at=created_at + timedelta(days=get_trial_period_days()) if is_trial else None,
                    created_at=created_at,
                )

                temp_password = generate_password()
                seeded = RoleSeederService.seed_school_admin({
                    'email': payload['admin_email'],
                    'password': temp_password,
                    'name': payload['admin_name'],
                    'school_id': school.pk,
                })

        except DuplicateIdentityError as e:
            email = (e.details or {}).get('email')
            logger.warning(f"School provisioning rejected: admin email {email} already registered")
            raise DuplicateIdentityError(
                f"Admin email {email} is already registered", details={'email': email}
            ) from e
        except SchoolManagementException:
            raise
        except Exception as e:
            logger.error(f"School provisioning failed: {e}", exc_info=True)
            raise SchoolOnboardingError(f"Failed to create school: {e}") from e

        logger.info(f"School provisioned: {school.slug} on plan {plan.name} (admin {seeded.account.email})")
        return school, {'email': seeded.account.email, 'password': temp_password}

    @staticmethod
    def resolve_plan(plan_key=None) -> Tuple[str, Plan]:
        """
        Map a plan key to its Plan row, creating the row from PLAN_CATALOG
        the first time a key is used. An absent key means trial.
        """
        key = str(plan_key).strip().lower() if plan_key not in (None, '') else PlanKeys.TRIAL

        if key not in PlanKeys.ALL:
            raise ValidationError(f"Unknown plan: {plan_key}", details={'plan_key': plan_key})

        defaults = dict(PLAN_CATALOG[key])
        name = defaults.pop('name')
        defaults.setdefault('features', {})

        plan, created = Plan.objects.get_or_create(name=name, defaults=defaults)
        if created:
            logger.info(f"Plan created from catalog: {plan.name}")
        return key, plan

    @staticmethod
    def _create_school(name: str, **fields) -> School:
        """
        Insert the school under a unique slug.

        The unique index on slug is the source of truth: a concurrent insert
        that wins the same slug makes us retry with a fresh suffix.
        """
        base = base_slug(name)
        slug = base
        if School.objects.filter(slug=slug).exists():
            slug = suffixed_slug(base)

        for attempt in range(1, SLUG_MAX_ATTEMPTS + 1):
            try:
                with transaction.atomic():
                    return School.objects.create(name=name, slug=slug, **fields)
            except IntegrityError:
                if not School.objects.filter(slug=slug).exists():
                    raise
                logger.warning(f"Slug collision on '{slug}' (attempt {attempt})")
                slug = suffixed_slug(base)

        raise SchoolOnboardingError(f"Could not allocate a unique slug for '{name}'")

    @staticmethod
    def list_schools():
        """All schools newest first, with plan and user/student/teacher counts."""
        try:
            return list(
                School.objects.select_related('plan')
                .annotate(
                    user_count=Count('users', distinct=True),
                    student_count=Count('students', distinct=True),
                    teacher_count=Count('teachers', distinct=True),
                )
                .order_by('-created_at')
            )
        except Exception as e:
            logger.error(f"Failed to list schools: {e}", exc_info=True)
            raise StorageError(f"Failed to fetch schools: {e}") from e


# ============ SETUP WIZARD SERVICE ============

class SetupWizardService:
    """Two-step onboarding a school admin completes after provisioning."""

    @staticmethod
    def record_academic_year(school_id, data: Dict[str, Any]) -> AcademicYear:
        """
        Create the school's current academic year.

        Any previously current year of the same school is demoted in the
        same transaction, so a school has at most one current year.
        """
        payload = FieldMapper.map_payload(data)
        require_fields(payload, ['name', 'start_date', 'end_date'], message="Missing required fields")

        name = str(payload['name']).strip()
        start_date = coerce_date(payload['start_date'], 'start_date')
        end_date = coerce_date(payload['end_date'], 'end_date')
        if start_date >= end_date:
            raise ValidationError("End date must be after start date")

        school = _get_school(school_id)

        try:
            with transaction.atomic():
                demoted = AcademicYear.objects.filter(school=school, is_current=True).update(is_current=False)
                academic_year = AcademicYear.objects.create(
                    school=school,
                    name=name,
                    start_date=start_date,
                    end_date=end_date,
                    is_current=True,
                )
        except IntegrityError as e:
            if AcademicYear.objects.filter(school=school, name=name).exists():
                raise ValidationError(f"Academic year {name} already exists") from e
            logger.error(f"Academic year creation failed for {school.slug}: {e}", exc_info=True)
            raise StorageError(f"Failed to create academic year: {e}") from e

        logger.info(f"Academic year {academic_year.name} recorded for {school.slug} ({demoted} demoted)")
        return academic_year

    @staticmethod
    def complete_school_profile(school_id, data: Dict[str, Any]) -> School:
        """Store address/phone/principal and flag current years setup-complete."""
        payload = FieldMapper.map_payload(data, 'school_profile')
        require_fields(payload, ['address', 'phone_number', 'principal_name'], message="Missing required fields")

        school = _get_school(school_id)

        with transaction.atomic():
            school.address = str(payload['address']).strip()
            school.phone_number = FieldMapper.standardize_phone_number(payload['phone_number'])
            school.principal_name = str(payload['principal_name']).strip()
            school.setup_completed = True
            school.save(update_fields=['address', 'phone_number', 'principal_name', 'setup_completed', 'updated_at'])

            flagged = AcademicYear.objects.filter(school=school, is_current=True).update(is_setup_complete=True)

        logger.info(f"School profile completed for {school.slug} ({flagged} academic year(s) flagged)")
        return school
