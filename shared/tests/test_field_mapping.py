# shared/tests/test_field_mapping.py
from django.test import SimpleTestCase

from shared.helpers import coerce_date, require_fields
from shared.utils import FieldMapper
from core.exceptions import ValidationError


class FieldMapperTest(SimpleTestCase):
    def test_camel_case_keys_are_mapped(self):
        mapped = FieldMapper.map_payload({'userEmail': 'a@b.com', 'classId': 3, 'dateOfBirth': '2010-01-01'})
        self.assertEqual(mapped, {'email': 'a@b.com', 'class_id': 3, 'date_of_birth': '2010-01-01'})

    def test_snake_case_keys_pass_through(self):
        self.assertEqual(FieldMapper.map_payload({'school_id': 1}), {'school_id': 1})

    def test_explicit_snake_case_key_wins_over_alias(self):
        mapped = FieldMapper.map_payload({'school_id': 1, 'schoolId': 2})
        self.assertEqual(mapped['school_id'], 1)

    def test_plan_aliases(self):
        self.assertEqual(FieldMapper.map_payload({'planId': 'basic'})['plan_key'], 'basic')
        self.assertEqual(FieldMapper.map_payload({'planKey': 'premium'})['plan_key'], 'premium')

    def test_payload_specific_overrides(self):
        mapped = FieldMapper.map_payload({'email': 'info@school.com', 'phone': '+1 555'}, 'provisioning')
        self.assertEqual(mapped, {'contact_email': 'info@school.com', 'contact_phone': '+1 555'})

        mapped = FieldMapper.map_payload({'phone': '+1 555'}, 'school_profile')
        self.assertEqual(mapped, {'phone_number': '+1 555'})

    def test_empty_payload(self):
        self.assertEqual(FieldMapper.map_payload(None), {})

    def test_standardize_phone_number(self):
        self.assertEqual(FieldMapper.standardize_phone_number(' +234 801 234 5678 '), '+234 801 234 5678')


class HelpersTest(SimpleTestCase):
    def test_require_fields_lists_missing_keys(self):
        with self.assertRaises(ValidationError) as ctx:
            require_fields({'name': 'x', 'email': '  '}, ['name', 'email', 'password'])

        self.assertEqual(ctx.exception.message, 'Missing required fields: email, password')
        self.assertEqual(ctx.exception.details['missing_fields'], ['email', 'password'])

    def test_coerce_date_accepts_iso_strings(self):
        self.assertEqual(coerce_date('2024-09-01', 'start_date').isoformat(), '2024-09-01')
        self.assertEqual(coerce_date('2024-09-01T08:00:00Z', 'start_date').isoformat(), '2024-09-01')

    def test_coerce_date_rejects_garbage(self):
        with self.assertRaises(ValidationError):
            coerce_date('next tuesday', 'start_date')
        with self.assertRaises(ValidationError):
            coerce_date('2024-13-45', 'start_date')
