# core/tests/test_models.py
from datetime import date, timedelta

from django.core.exceptions import ValidationError as DjangoValidationError
from django.test import TestCase
from django.utils import timezone

from core.models import AcademicYear
from core.tests.helpers import make_class, make_school
from shared.constants import SchoolStatus


class SchoolModelTest(TestCase):
    def test_trial_days_remaining(self):
        school = make_school(trial_ends_at=timezone.now() + timedelta(days=10, hours=1))

        self.assertTrue(school.is_trial)
        self.assertEqual(school.trial_days_remaining, 10)

    def test_active_school_has_no_trial_days(self):
        school = make_school(plan_key='basic', status=SchoolStatus.ACTIVE)

        self.assertFalse(school.is_trial)
        self.assertIsNone(school.trial_days_remaining)

    def test_current_academic_year(self):
        school = make_school()
        AcademicYear.objects.create(
            school=school, name='2023/2024', start_date=date(2023, 9, 1), end_date=date(2024, 7, 31)
        )
        current = AcademicYear.objects.create(
            school=school, name='2024/2025', start_date=date(2024, 9, 1), end_date=date(2025, 7, 31),
            is_current=True,
        )

        self.assertEqual(school.current_academic_year, current)


class AcademicYearModelTest(TestCase):
    def test_clean_rejects_inverted_dates(self):
        year = AcademicYear(
            school=make_school(), name='2024/2025', start_date=date(2025, 7, 31), end_date=date(2024, 9, 1)
        )
        with self.assertRaises(DjangoValidationError):
            year.clean()

    def test_duration_months(self):
        year = AcademicYear(name='2024/2025', start_date=date(2024, 9, 1), end_date=date(2025, 7, 31))
        self.assertEqual(year.duration_months, 10)


class SectionModelTest(TestCase):
    def test_section_belongs_to_class_school(self):
        school = make_school()
        _, section = make_class(school)

        self.assertEqual(section.school, school)
