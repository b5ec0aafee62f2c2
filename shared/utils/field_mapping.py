# shared/utils/field_mapping.py
"""
Consistent field mapping across all APIs and seed inputs.
DEPENDS ONLY ON: shared.constants
"""
import logging

from shared.constants.model_fields import API_TO_MODEL, PHONE_FIELD

logger = logging.getLogger(__name__)


class FieldMapper:
    """Handle field name standardization and mapping."""

    # Per-payload overrides on top of API_TO_MODEL
    MAPS = {
        'provisioning': {
            'email': 'contact_email',
            'phone': 'contact_phone',
        },
        'school_profile': {
            'phone': PHONE_FIELD,
        },
    }

    @staticmethod
    def map_payload(payload, payload_name=None):
        """
        Map camelCase JSON keys to the snake_case keys services expect.

        Keys that are already snake_case pass through untouched, so the
        same services accept both API bodies and Python callers.
        """
        if not payload:
            return {}

        mapping = dict(API_TO_MODEL)
        mapping.update(FieldMapper.MAPS.get(payload_name, {}))

        standardized_data = {}
        for key, value in payload.items():
            new_key = mapping.get(key, key)
            # First alias wins; an explicit snake_case key always wins
            if key != new_key and new_key in standardized_data:
                continue
            standardized_data[new_key] = value

        return standardized_data

    @staticmethod
    def standardize_phone_number(phone):
        """Trim surrounding whitespace; the number is otherwise stored as submitted."""
        if not phone:
            return phone
        return str(phone).strip()
