# shared/constants/__init__.py
from .model_fields import (
    PHONE_FIELD,
    SCHOOL_CONTEXT_FIELD,
    ROLE_FIELD,
    API_TO_MODEL,
    UserRole,
    SchoolStatus,
    PlanKeys,
    PLAN_CATALOG,
    TEMP_PASSWORD_CHARSET,
)

__all__ = [
    'PHONE_FIELD',
    'SCHOOL_CONTEXT_FIELD',
    'ROLE_FIELD',
    'API_TO_MODEL',
    'UserRole',
    'SchoolStatus',
    'PlanKeys',
    'PLAN_CATALOG',
    'TEMP_PASSWORD_CHARSET',
]
