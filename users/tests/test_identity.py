# users/tests/test_identity.py
from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase

from core.exceptions import DuplicateIdentityError, StorageError, ValidationError
from core.tests.helpers import make_school
from shared.constants import UserRole
from shared.utils.passwords import hash_password, verify_password
from users.models import User
from users.services import IdentityService


class CreateAccountTest(TestCase):
    def setUp(self):
        self.school = make_school()

    def test_email_is_trimmed_and_lowercased(self):
        user = IdentityService.create_account(
            email='  John.Doe@School.COM ',
            password='Secret-pass-123',
            name='  John Doe ',
            role=UserRole.TEACHER,
            school_id=self.school.pk,
        )
        self.assertEqual(user.email, 'john.doe@school.com')
        self.assertEqual(user.name, 'John Doe')

    def test_password_is_hashed(self):
        user = IdentityService.create_account(
            'hash@school.com', 'Secret-pass-123', 'Hash', UserRole.TEACHER, self.school.pk
        )
        self.assertNotEqual(user.password, 'Secret-pass-123')
        self.assertTrue(verify_password('Secret-pass-123', user.password))

    def test_skip_hash_stores_password_as_given(self):
        hashed = hash_password('Secret-pass-123')
        user = IdentityService.create_account(
            'prehashed@school.com', hashed, 'Pre', UserRole.TEACHER, self.school.pk, skip_hash=True
        )
        self.assertEqual(user.password, hashed)

    def test_duplicate_normalized_email_rejected(self):
        IdentityService.create_account('dup@school.com', 'pw-1', 'First', UserRole.TEACHER, self.school.pk)

        with self.assertRaises(DuplicateIdentityError) as ctx:
            IdentityService.create_account(' DUP@School.com', 'pw-2', 'Second', UserRole.TEACHER, self.school.pk)

        self.assertIn('dup@school.com', ctx.exception.message)
        self.assertEqual(User.objects.filter(email='dup@school.com').count(), 1)

    def test_super_admin_cannot_have_school(self):
        with self.assertRaises(ValidationError):
            IdentityService.create_account('root@platform.com', 'pw', 'Root', UserRole.SUPER_ADMIN, self.school.pk)

    def test_school_bound_roles_require_school(self):
        for role in UserRole.SCHOOL_BOUND:
            with self.subTest(role=role):
                with self.assertRaises(ValidationError):
                    IdentityService.create_account(f'{role.lower()}@school.com', 'pw', 'X', role)

    def test_parent_school_is_optional(self):
        parent = IdentityService.create_account('parent@home.com', 'pw', 'Parent', UserRole.PARENT)
        self.assertIsNone(parent.school)

    def test_unknown_role_rejected(self):
        with self.assertRaises(ValidationError):
            IdentityService.create_account('x@school.com', 'pw', 'X', 'JANITOR', self.school.pk)

    def test_non_string_email_or_password_rejected(self):
        for email, password in [(5, 'pw'), ('x@school.com', 42)]:
            with self.subTest(email=email):
                with self.assertRaises(ValidationError) as ctx:
                    IdentityService.create_account(email, password, 'X', UserRole.TEACHER, self.school.pk)
                self.assertEqual(ctx.exception.message, 'Missing required fields')

        self.assertFalse(User.objects.exists())

    def test_unknown_school_rejected(self):
        with self.assertRaises(ValidationError):
            IdentityService.create_account('x@school.com', 'pw', 'X', UserRole.TEACHER, 999999)

    def test_other_storage_failures_become_storage_error(self):
        with patch.object(User, 'save', side_effect=DatabaseError('disk full')):
            with self.assertRaises(StorageError) as ctx:
                IdentityService.create_account('x@school.com', 'pw', 'X', UserRole.TEACHER, self.school.pk)

        self.assertTrue(ctx.exception.message.startswith('Failed to create user:'))

    def test_super_admin_gets_admin_site_access(self):
        root = IdentityService.create_account('root@platform.com', 'pw', 'Root', UserRole.SUPER_ADMIN)
        self.assertTrue(root.is_staff)
        self.assertTrue(root.is_superuser)
        self.assertTrue(root.is_super_admin)


class CreateAuthSeedTest(TestCase):
    def test_accepts_camel_case_payload(self):
        school = make_school()
        result = IdentityService.create_auth_seed({
            'userEmail': 'Seed@School.com',
            'userPassword': 'Secret-pass-123',
            'userName': 'Seed',
            'role': UserRole.TEACHER,
            'schoolId': school.pk,
        })
        self.assertEqual(result.account.email, 'seed@school.com')
        self.assertIsNone(result.profile)

    def test_missing_fields_rejected(self):
        with self.assertRaises(ValidationError):
            IdentityService.create_auth_seed({'email': 'x@school.com'})
