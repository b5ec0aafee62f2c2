# shared/constants/model_fields.py

"""
CONSTANT field names and choices to enforce consistency across the entire system.
NO DEPENDENCIES - safe to import from models, services and migrations.
"""
from decimal import Decimal

# Field name constants (prevent phone vs phone_number confusion)
PHONE_FIELD = 'phone_number'  # ALWAYS use this on School
SCHOOL_CONTEXT_FIELD = 'school'
ROLE_FIELD = 'role'

# JSON/API key → service key mapping
API_TO_MODEL = {
    # accounts
    'userEmail': 'email',
    'userPassword': 'password',
    'userName': 'name',
    'schoolId': 'school_id',
    'tenantId': 'school_id',
    'isActive': 'is_active',
    # students
    'admissionNo': 'admission_no',
    'rollNo': 'roll_no',
    'classId': 'class_id',
    'sectionId': 'section_id',
    'dateOfBirth': 'date_of_birth',
    'bloodGroup': 'blood_group',
    # teachers / staff
    'employeeId': 'employee_id',
    'joiningDate': 'joining_date',
    # provisioning
    'adminName': 'admin_name',
    'adminEmail': 'admin_email',
    'contactEmail': 'contact_email',
    'contactPhone': 'contact_phone',
    'planKey': 'plan_key',
    'planId': 'plan_key',
    # setup wizard
    'startDate': 'start_date',
    'endDate': 'end_date',
    'principalName': 'principal_name',
}


class UserRole:
    SUPER_ADMIN = 'SUPER_ADMIN'
    SCHOOL_ADMIN = 'SCHOOL_ADMIN'
    TEACHER = 'TEACHER'
    STUDENT = 'STUDENT'
    PARENT = 'PARENT'
    STAFF = 'STAFF'

    CHOICES = (
        (SUPER_ADMIN, 'Super Admin'),
        (SCHOOL_ADMIN, 'School Admin'),
        (TEACHER, 'Teacher'),
        (STUDENT, 'Student'),
        (PARENT, 'Parent'),
        (STAFF, 'Staff'),
    )

    ALL = tuple(value for value, _ in CHOICES)

    # Roles that must always belong to a school
    SCHOOL_BOUND = (SCHOOL_ADMIN, TEACHER, STUDENT, STAFF)


class SchoolStatus:
    TRIAL = 'trial'
    ACTIVE = 'active'

    CHOICES = (
        (TRIAL, 'Trial'),
        (ACTIVE, 'Active'),
    )


class PlanKeys:
    TRIAL = 'trial'
    BASIC = 'basic'
    PREMIUM = 'premium'
    ENTERPRISE = 'enterprise'

    ALL = (TRIAL, BASIC, PREMIUM, ENTERPRISE)


# Plan rows created lazily when a known key has no matching Plan yet.
# student_limit None means unlimited.
PLAN_CATALOG = {
    PlanKeys.TRIAL: {
        'name': 'Trial',
        'student_limit': 50,
        'certificate_printing_allowed': True,
        'custom_domain_enabled': False,
        'price': Decimal('0'),
    },
    PlanKeys.BASIC: {
        'name': 'Basic',
        'student_limit': 100,
        'certificate_printing_allowed': True,
        'custom_domain_enabled': False,
        'price': Decimal('0'),
    },
    PlanKeys.PREMIUM: {
        'name': 'Premium',
        'student_limit': 500,
        'certificate_printing_allowed': True,
        'custom_domain_enabled': False,
        'price': Decimal('0'),
    },
    PlanKeys.ENTERPRISE: {
        'name': 'Enterprise',
        'student_limit': None,
        'certificate_printing_allowed': True,
        'custom_domain_enabled': False,
        'price': Decimal('0'),
    },
}

# Charset for temporary/onboarding passwords
TEMP_PASSWORD_CHARSET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789!@#$%^&*_'
