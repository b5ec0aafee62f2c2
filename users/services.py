# users/services.py
"""
USER SERVICES - account creation, role seeding and authentication
NO view logic, NO HTTP concerns, PROPER logging
"""
import logging
from typing import Any, Dict, NamedTuple, Optional, Tuple

from django.contrib.auth import get_user_model
from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

# SHARED IMPORTS
from core.exceptions import (
    AuthenticationError,
    DuplicateIdentityError,
    SchoolManagementException,
    StorageError,
    ValidationError,
)
from core.models import School, SchoolClass, Section
from shared.constants import UserRole
from shared.helpers import clean_optional, coerce_date, coerce_optional_date, require_fields
from shared.utils.field_mapping import FieldMapper
from shared.utils.passwords import hash_password, verify_password

from .models import ParentProfile, StaffProfile, StudentProfile, TeacherProfile
from .tokens import issue_session_token

logger = logging.getLogger(__name__)


class SeedResult(NamedTuple):
    """Account plus the role profile attached to it (None for admins)."""
    account: Any
    profile: Optional[Any] = None


# ============ HELPER FUNCTIONS ============

def _get_scoped(model, pk, label, **scope):
    """Fetch a row by primary key inside a scope, or raise ValidationError."""
    try:
        obj = model.objects.filter(pk=pk, **scope).first()
    except (TypeError, ValueError):
        obj = None
    if obj is None:
        raise ValidationError(f"{label} not found", details={'id': pk})
    return obj


# ============ IDENTITY SERVICE ============

class IdentityService:
    """Creates base accounts. Never creates profiles."""

    @staticmethod
    def create_account(email: str, password: str, name: str, role: str,
                       school_id=None, is_active: bool = True, skip_hash: bool = False):
        """
        Create exactly one account row.

        Args:
            email: any case / surrounding whitespace; stored trimmed and lower-cased
            password: plaintext, or an encoded hash when skip_hash is set
            name: display name
            role: one of UserRole.ALL
            school_id: owning school; must be absent for super admins
            is_active: whether the account may log in
            skip_hash: store `password` as-is (already hashed)

        Raises:
            ValidationError: bad role, tenant binding or missing input
            DuplicateIdentityError: the normalized email is taken
            StorageError: any other persistence failure
        """
        User = get_user_model()

        if not isinstance(email, str) or not isinstance(password, str):
            raise ValidationError("Missing required fields")
        if name is not None and not isinstance(name, str):
            raise ValidationError("Name is required")

        normalized_email = User.objects.normalize_email(email)
        display_name = (name or '').strip()

        if not normalized_email:
            raise ValidationError("Email is required")
        if not password:
            raise ValidationError("Password is required")
        if not display_name:
            raise ValidationError("Name is required")
        if role not in UserRole.ALL:
            raise ValidationError(f"Invalid role: {role}")
        if role == UserRole.SUPER_ADMIN and school_id is not None:
            raise ValidationError("Super admin accounts cannot belong to a school")
        if role in UserRole.SCHOOL_BOUND and school_id is None:
            raise ValidationError(f"{role} accounts require a school")
        if school_id is not None:
            _get_scoped(School, school_id, "School")

        hashed_password = password if skip_hash else hash_password(password)

        try:
            # Savepoint keeps an enclosing transaction usable after a failure
            with transaction.atomic():
                user = User(
                    email=normalized_email,
                    password=hashed_password,
                    name=display_name,
                    role=role,
                    school_id=school_id,
                    is_active=is_active,
                    is_staff=role == UserRole.SUPER_ADMIN,
                    is_superuser=role == UserRole.SUPER_ADMIN,
                )
                user.save()
        except IntegrityError as e:
            if User.objects.filter(email=normalized_email).exists():
                logger.warning(f"Duplicate account rejected: {normalized_email}")
                raise DuplicateIdentityError.for_email(normalized_email) from e
            logger.error(f"Account insert failed for {normalized_email}: {e}", exc_info=True)
            raise StorageError(f"Failed to create user: {e}") from e
        except DatabaseError as e:
            logger.error(f"Account insert failed for {normalized_email}: {e}", exc_info=True)
            raise StorageError(f"Failed to create user: {e}") from e

        logger.info(f"Account created: {user.email} ({role})")
        return user

    @staticmethod
    def create_auth_seed(user_data: Dict, skip_hash: bool = False) -> SeedResult:
        """Create a base account from a dict of email/password/name/role/school_id."""
        data = FieldMapper.map_payload(user_data)
        require_fields(data, ['email', 'password', 'name', 'role'])

        is_active = data.get('is_active')
        account = IdentityService.create_account(
            email=data['email'],
            password=data['password'],
            name=data['name'],
            role=data['role'],
            school_id=data.get('school_id'),
            is_active=True if is_active is None else bool(is_active),
            skip_hash=skip_hash,
        )
        return SeedResult(account=account)


# ============ ROLE SEEDER SERVICE ============

class RoleSeederService:
    """
    One seeder per role. Each validates its own field set, then writes the
    account and its profile inside a single transaction.
    """

    REQUIRED_FIELDS = {
        'student': ['email', 'password', 'name', 'school_id', 'admission_no',
                    'class_id', 'date_of_birth', 'gender'],
        'teacher': ['email', 'password', 'name', 'school_id', 'employee_id',
                    'phone', 'joining_date'],
        'staff': ['email', 'password', 'name', 'school_id', 'employee_id',
                  'phone', 'designation', 'joining_date'],
        'parent': ['email', 'password', 'name', 'phone'],
        'school admin': ['email', 'password', 'name', 'school_id'],
        'super admin': ['email', 'password', 'name'],
    }

    @staticmethod
    def seed_student(data: Dict, skip_hash: bool = False) -> SeedResult:
        return RoleSeederService._seed(
            'student', UserRole.STUDENT, data, RoleSeederService._create_student_profile, skip_hash
        )

    @staticmethod
    def seed_teacher(data: Dict, skip_hash: bool = False) -> SeedResult:
        return RoleSeederService._seed(
            'teacher', UserRole.TEACHER, data, RoleSeederService._create_teacher_profile, skip_hash
        )

    @staticmethod
    def seed_staff(data: Dict, skip_hash: bool = False) -> SeedResult:
        return RoleSeederService._seed(
            'staff', UserRole.STAFF, data, RoleSeederService._create_staff_profile, skip_hash
        )

    @staticmethod
    def seed_parent(data: Dict, skip_hash: bool = False) -> SeedResult:
        return RoleSeederService._seed(
            'parent', UserRole.PARENT, data, RoleSeederService._create_parent_profile, skip_hash
        )

    @staticmethod
    def seed_school_admin(data: Dict, skip_hash: bool = False) -> SeedResult:
        return RoleSeederService._seed('school admin', UserRole.SCHOOL_ADMIN, data, None, skip_hash)

    @staticmethod
    def seed_super_admin(data: Dict, skip_hash: bool = False) -> SeedResult:
        data = dict(FieldMapper.map_payload(data))
        data['school_id'] = None
        return RoleSeederService._seed('super admin', UserRole.SUPER_ADMIN, data, None, skip_hash)

    @staticmethod
    def _seed(role_label: str, role: str, raw_data: Dict, profile_builder, skip_hash: bool) -> SeedResult:
        data = FieldMapper.map_payload(raw_data)

        try:
            require_fields(data, RoleSeederService.REQUIRED_FIELDS[role_label])

            # Profile-level flag for role profiles; account-level for admins
            is_active = data.get('is_active')
            is_active = True if is_active is None else bool(is_active)

            with transaction.atomic():
                account = IdentityService.create_account(
                    email=data['email'],
                    password=data['password'],
                    name=data['name'],
                    role=role,
                    school_id=data.get('school_id'),
                    is_active=is_active if profile_builder is None else True,
                    skip_hash=skip_hash,
                )
                profile = profile_builder(account, data, is_active) if profile_builder else None

        except SchoolManagementException as e:
            logger.warning(f"Failed to seed {role_label}: {e.message}")
            raise e.with_prefix(f"Failed to seed {role_label}") from e
        except Exception as e:
            logger.error(f"Failed to seed {role_label}: {e}", exc_info=True)
            raise StorageError(f"Failed to seed {role_label}: {e}") from e

        logger.info(f"Seeded {role_label}: {account.email}")
        return SeedResult(account=account, profile=profile)

    @staticmethod
    def _create_student_profile(account, data: Dict, is_active: bool):
        school_class = _get_scoped(SchoolClass, data['class_id'], "Class", school_id=account.school_id)

        section = None
        if clean_optional(data.get('section_id')) is not None:
            section = _get_scoped(Section, data['section_id'], "Section", school_class=school_class)

        return StudentProfile.objects.create(
            user=account,
            school_id=account.school_id,
            admission_no=str(data['admission_no']).strip(),
            roll_no=clean_optional(data.get('roll_no')),
            school_class=school_class,
            section=section,
            date_of_birth=coerce_date(data['date_of_birth'], 'date_of_birth'),
            gender=data['gender'],
            blood_group=clean_optional(data.get('blood_group')),
            address=clean_optional(data.get('address')),
            photo=clean_optional(data.get('photo')),
            is_active=is_active,
        )

    @staticmethod
    def _create_teacher_profile(account, data: Dict, is_active: bool):
        return TeacherProfile.objects.create(
            user=account,
            school_id=account.school_id,
            employee_id=str(data['employee_id']).strip(),
            phone=FieldMapper.standardize_phone_number(data['phone']),
            joining_date=coerce_date(data['joining_date'], 'joining_date'),
            date_of_birth=coerce_optional_date(data.get('date_of_birth'), 'date_of_birth'),
            gender=clean_optional(data.get('gender')),
            address=clean_optional(data.get('address')),
            photo=clean_optional(data.get('photo')),
            qualification=clean_optional(data.get('qualification')),
            designation=clean_optional(data.get('designation')),
            is_active=is_active,
        )

    @staticmethod
    def _create_staff_profile(account, data: Dict, is_active: bool):
        return StaffProfile.objects.create(
            user=account,
            school_id=account.school_id,
            employee_id=str(data['employee_id']).strip(),
            phone=FieldMapper.standardize_phone_number(data['phone']),
            designation=data['designation'],
            joining_date=coerce_date(data['joining_date'], 'joining_date'),
            is_active=is_active,
        )

    @staticmethod
    def _create_parent_profile(account, data: Dict, is_active: bool):
        return ParentProfile.objects.create(
            user=account,
            phone=FieldMapper.standardize_phone_number(data['phone']),
            occupation=clean_optional(data.get('occupation')),
        )


# ============ AUTH SERVICE ============

class AuthService:
    """Credential checks and session issuing."""

    INVALID_CREDENTIALS = "Invalid credentials"

    @staticmethod
    def authenticate(email: str, password: str) -> Tuple[Any, str]:
        """
        Validate credentials and issue a session token.

        Unknown email, inactive account and wrong password all raise the
        same AuthenticationError.
        """
        if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
            raise ValidationError("Missing required fields")

        User = get_user_model()
        normalized_email = User.objects.normalize_email(email)

        user = User.objects.select_related('school').filter(email=normalized_email).first()

        if user is None or not user.is_active:
            # Equalize timing with the wrong-password path
            hash_password(password)
            logger.info(f"Login rejected for {normalized_email}")
            raise AuthenticationError(AuthService.INVALID_CREDENTIALS)

        if not verify_password(password, user.password):
            logger.info(f"Login rejected for {normalized_email}")
            raise AuthenticationError(AuthService.INVALID_CREDENTIALS)

        AuthService._record_login(user)
        token = issue_session_token(user)

        logger.info(f"Login succeeded for {user.email}")
        return user, token

    @staticmethod
    def _record_login(user):
        """Best-effort last_login write; never blocks the login."""
        now = timezone.now()
        try:
            # Own savepoint so a failure leaves ATOMIC_REQUESTS usable
            with transaction.atomic():
                type(user).objects.filter(pk=user.pk).update(last_login=now)
            user.last_login = now
        except DatabaseError as e:
            logger.warning(f"Could not record last login for {user.email}: {e}", exc_info=True)
