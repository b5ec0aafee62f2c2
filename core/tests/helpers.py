# core/tests/helpers.py
"""Fixtures shared by the core and users test suites."""
from django.utils.text import slugify

from core.models import AcademicYear, School, SchoolClass, Section
from core.services import ProvisioningService
from shared.constants import UserRole
from users.services import IdentityService
from users.tokens import issue_session_token

DEFAULT_PASSWORD = 'Secret-pass-123'


def make_school(name='Greenfield Academy', plan_key='trial', **fields):
    _, plan = ProvisioningService.resolve_plan(plan_key)
    fields.setdefault('slug', slugify(name))
    fields.setdefault('country', 'Nigeria')
    fields.setdefault('school_type', 'Primary')
    return School.objects.create(name=name, plan=plan, **fields)


def make_account(email, role=UserRole.SCHOOL_ADMIN, school=None, password=DEFAULT_PASSWORD, **kwargs):
    return IdentityService.create_account(
        email=email,
        password=password,
        name=kwargs.pop('name', 'Test User'),
        role=role,
        school_id=school.pk if school else None,
        **kwargs
    )


def make_class(school, name='Primary 1', section_name='A', academic_year=None):
    school_class = SchoolClass.objects.create(school=school, name=name, academic_year=academic_year)
    section = Section.objects.create(school_class=school_class, name=section_name) if section_name else None
    return school_class, section


def make_current_year(school, name='2024/2025', start='2024-09-01', end='2025-07-31'):
    return AcademicYear.objects.create(
        school=school, name=name, start_date=start, end_date=end, is_current=True
    )


def auth_header(user):
    return {'HTTP_AUTHORIZATION': f'Bearer {issue_session_token(user)}'}
