# shared/__init__.py
"""
Shared package - central access to constants and utils.
Avoids importing services or models to prevent circular dependencies.
"""

# Constants
from .constants import (
    API_TO_MODEL,
    UserRole,
    SchoolStatus,
    PlanKeys,
)

# Utilities
from .utils.field_mapping import FieldMapper

__all__ = [
    # Constants
    'API_TO_MODEL',
    'UserRole',
    'SchoolStatus',
    'PlanKeys',

    # Utilities
    'FieldMapper',
]
