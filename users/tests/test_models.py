# users/tests/test_models.py
from django.db import IntegrityError, transaction
from django.test import TestCase

from core.tests.helpers import make_school
from shared.constants import UserRole
from users.models import User


class UserModelTest(TestCase):
    def test_manager_normalizes_whole_email(self):
        self.assertEqual(User.objects.normalize_email(' Mixed.Case@Example.COM '), 'mixed.case@example.com')

    def test_create_superuser_has_no_school(self):
        root = User.objects.create_superuser('Root@Platform.com', 'pw-123456', name='Root')

        self.assertEqual(root.email, 'root@platform.com')
        self.assertEqual(root.role, UserRole.SUPER_ADMIN)
        self.assertIsNone(root.school)
        self.assertTrue(root.is_superuser)

    def test_database_rejects_school_bound_role_without_school(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                User.objects.create_user('t@school.com', 'pw', name='T', role=UserRole.TEACHER)

    def test_database_rejects_super_admin_with_school(self):
        school = make_school()
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                User.objects.create_user('r@platform.com', 'pw', name='R', role=UserRole.SUPER_ADMIN, school=school)

    def test_natural_key_lookup_is_case_insensitive(self):
        school = make_school()
        user = User.objects.create_user('admin@school.com', 'pw', name='A', role=UserRole.SCHOOL_ADMIN, school=school)

        self.assertEqual(User.objects.get_by_natural_key('ADMIN@school.com'), user)
