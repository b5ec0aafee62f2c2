# shared/helpers.py
"""
Input helpers shared by the service layer.
"""
from datetime import date, datetime

from django.utils.dateparse import parse_date, parse_datetime

from core.exceptions import ValidationError


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data, required_fields, message=None):
    """
    Raise ValidationError when any required key is missing or blank.

    The message lists the missing keys unless an explicit one is given.
    """
    missing_fields = [field for field in required_fields if _is_blank((data or {}).get(field))]

    if missing_fields:
        raise ValidationError(
            message or f"Missing required fields: {', '.join(missing_fields)}",
            details={'missing_fields': missing_fields},
        )


def coerce_date(value, field_name):
    """Accept a date, a datetime or an ISO-8601 string and return a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        try:
            parsed = parse_date(text)
            if parsed is None:
                parsed_dt = parse_datetime(text)
                parsed = parsed_dt.date() if parsed_dt else None
        except ValueError:
            parsed = None
        if parsed is not None:
            return parsed

    raise ValidationError(f"Invalid date for {field_name}", details={'field': field_name})


def coerce_optional_date(value, field_name):
    if _is_blank(value):
        return None
    return coerce_date(value, field_name)


def clean_optional(value):
    """Blank strings become None; everything else passes through."""
    if _is_blank(value):
        return None
    return value.strip() if isinstance(value, str) else value
