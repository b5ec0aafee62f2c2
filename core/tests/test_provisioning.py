# core/tests/test_provisioning.py
from datetime import timedelta
from unittest.mock import patch

from django.test import TestCase
from django.utils.text import slugify

from core.exceptions import DuplicateIdentityError, ValidationError
from core.models import Plan, School
from core.services import ProvisioningService
from core.tests.helpers import make_school
from shared.constants import SchoolStatus, UserRole
from users.models import User
from users.services import AuthService, RoleSeederService


def school_payload(**overrides):
    data = {
        'name': 'Springfield High',
        'type': 'Secondary',
        'country': 'USA',
        'email': 'office@springfield.edu',
        'phone': '+1 555 0100',
        'adminName': 'Seymour Skinner',
        'adminEmail': 'Principal@Springfield.edu',
    }
    data.update(overrides)
    return data


class ProvisionSchoolTest(TestCase):
    def test_slug_from_name(self):
        school, _ = ProvisioningService.provision_school(school_payload())
        self.assertEqual(school.slug, 'springfield-high')

    def test_same_name_gets_distinct_slug(self):
        first, _ = ProvisioningService.provision_school(school_payload())
        second, _ = ProvisioningService.provision_school(school_payload(adminEmail='other@springfield.edu'))

        self.assertNotEqual(first.slug, second.slug)
        self.assertTrue(second.slug.startswith('springfield-high-'))
        self.assertEqual(len(second.slug), len('springfield-high-') + 5)

    def test_slug_collision_on_insert_retries(self):
        make_school('Taken', slug='taken')
        make_school('Taken Too', slug='taken-aaaaa')

        with patch('core.services.suffixed_slug', side_effect=['taken-aaaaa', 'taken-bbbbb']):
            school, _ = ProvisioningService.provision_school(school_payload(name='Taken'))

        self.assertEqual(school.slug, 'taken-bbbbb')

    def test_symbol_only_name_still_gets_slug(self):
        school, _ = ProvisioningService.provision_school(school_payload(name='!!!'))
        self.assertEqual(school.slug, 'school')

    def test_trial_plan_by_default(self):
        school, _ = ProvisioningService.provision_school(school_payload())

        self.assertEqual(school.plan.name, 'Trial')
        self.assertEqual(school.plan.student_limit, 50)
        self.assertTrue(school.plan.certificate_printing_allowed)
        self.assertFalse(school.plan.custom_domain_enabled)
        self.assertEqual(school.status, SchoolStatus.TRIAL)
        self.assertEqual(school.trial_ends_at, school.created_at + timedelta(days=30))

    def test_paid_plan_is_active_without_trial_end(self):
        school, _ = ProvisioningService.provision_school(school_payload(planId='basic'))

        self.assertEqual(school.plan.name, 'Basic')
        self.assertEqual(school.status, SchoolStatus.ACTIVE)
        self.assertIsNone(school.trial_ends_at)

    def test_catalog_plans_created_on_first_use(self):
        expected = {
            'trial': ('Trial', 50),
            'basic': ('Basic', 100),
            'premium': ('Premium', 500),
            'enterprise': ('Enterprise', None),
        }
        for key, (name, student_limit) in expected.items():
            resolved_key, plan = ProvisioningService.resolve_plan(key)

            self.assertEqual(resolved_key, key)
            self.assertEqual(plan.name, name)
            self.assertEqual(plan.student_limit, student_limit)
            self.assertEqual(plan.price, 0)
            self.assertTrue(plan.certificate_printing_allowed)

        self.assertEqual(Plan.objects.count(), 4)

    def test_existing_plan_is_reused(self):
        ProvisioningService.provision_school(school_payload(planKey='premium'))
        ProvisioningService.provision_school(school_payload(planKey='premium', adminEmail='b@springfield.edu'))

        self.assertEqual(Plan.objects.filter(name='Premium').count(), 1)

    def test_unknown_plan_rejected(self):
        with self.assertRaises(ValidationError):
            ProvisioningService.provision_school(school_payload(planId='platinum'))

        self.assertFalse(School.objects.exists())

    def test_missing_fields_rejected(self):
        data = school_payload()
        del data['country']

        with self.assertRaises(ValidationError) as ctx:
            ProvisioningService.provision_school(data)

        self.assertEqual(ctx.exception.message, 'Missing required fields')

    def test_contact_details_stored(self):
        school, _ = ProvisioningService.provision_school(school_payload())

        self.assertEqual(school.contact_email, 'office@springfield.edu')
        self.assertEqual(school.phone_number, '+1 555 0100')
        self.assertEqual(school.school_type, 'Secondary')

    def test_admin_credentials_work(self):
        school, credentials = ProvisioningService.provision_school(school_payload())

        self.assertEqual(credentials['email'], 'principal@springfield.edu')
        self.assertEqual(len(credentials['password']), 12)

        admin = User.objects.get(email='principal@springfield.edu')
        self.assertEqual(admin.role, UserRole.SCHOOL_ADMIN)
        self.assertEqual(admin.school, school)
        self.assertNotEqual(admin.password, credentials['password'])

        user, token = AuthService.authenticate(credentials['email'], credentials['password'])
        self.assertEqual(user.pk, admin.pk)

    def test_duplicate_admin_email_rolls_back_school(self):
        ProvisioningService.provision_school(school_payload())

        with self.assertRaises(DuplicateIdentityError) as ctx:
            ProvisioningService.provision_school(school_payload(name='Shelbyville High'))

        self.assertEqual(ctx.exception.message, 'Admin email principal@springfield.edu is already registered')
        self.assertNotIn('seed', ctx.exception.message)
        self.assertFalse(School.objects.filter(name='Shelbyville High').exists())

    def test_provisioned_school_passes_model_validation(self):
        for school_type in ['Secondary', 'Higher Secondary', 'K-12']:
            school, _ = ProvisioningService.provision_school(school_payload(
                name=f'{school_type} School', type=school_type, adminEmail=f'{slugify(school_type)}@x.com',
            ))

            school.full_clean()
            self.assertEqual(school.school_type, school_type)


class ListSchoolsTest(TestCase):
    def test_newest_first_with_counts(self):
        older, _ = ProvisioningService.provision_school(school_payload(name='Older School'))
        newer, _ = ProvisioningService.provision_school(school_payload(name='Newer School', adminEmail='n@x.com'))
        RoleSeederService.seed_teacher({
            'email': 'teacher@x.com',
            'password': 'Teacher2024!',
            'name': 'Teacher',
            'school_id': newer.pk,
            'employee_id': 'T1',
            'phone': '+15550001',
            'joining_date': '2024-01-08',
        })

        schools = ProvisioningService.list_schools()

        self.assertEqual([s.pk for s in schools], [newer.pk, older.pk])
        self.assertEqual(schools[0].user_count, 2)
        self.assertEqual(schools[0].teacher_count, 1)
        self.assertEqual(schools[0].student_count, 0)
        self.assertEqual(schools[1].user_count, 1)
