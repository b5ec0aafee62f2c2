# users/management/commands/seed_school_users.py
from datetime import date

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils.crypto import get_random_string

from core.exceptions import SchoolManagementException
from core.models import School, SchoolClass, Section
from shared.utils.passwords import generate_password
from users.services import RoleSeederService


class Command(BaseCommand):
    help = 'Seed a school admin, teachers, staff, parents and students for an existing school'

    def add_arguments(self, parser):
        parser.add_argument('slug', help='Slug of the school to seed')
        parser.add_argument('--teachers', type=int, default=3)
        parser.add_argument('--staff', type=int, default=2)
        parser.add_argument('--students', type=int, default=5)
        parser.add_argument('--parents', type=int, default=3)
        parser.add_argument('--password', default=None, help='Shared password; random when omitted')

    def handle(self, *args, **options):
        school = School.objects.filter(slug=options['slug']).first()
        if school is None:
            raise CommandError(f"No school with slug '{options['slug']}'")

        academic_year = school.current_academic_year
        if academic_year is None:
            raise CommandError(f"{school.name} has no current academic year; complete setup first")

        password = options['password'] or generate_password()
        # Keeps repeated runs from colliding on emails and employee ids
        batch = get_random_string(6, allowed_chars='abcdefghijklmnopqrstuvwxyz0123456789')
        domain = f"{school.slug}.example.com"

        try:
            with transaction.atomic():
                school_class, _ = SchoolClass.objects.get_or_create(
                    school=school, name='Class 1', academic_year=academic_year
                )
                section, _ = Section.objects.get_or_create(school_class=school_class, name='A')

                admin = RoleSeederService.seed_school_admin({
                    'email': f"admin.{batch}@{domain}",
                    'password': password,
                    'name': 'School Administrator',
                    'school_id': school.pk,
                })
                self.stdout.write(f"  School admin: {admin.account.email}")

                for i in range(1, options['teachers'] + 1):
                    result = RoleSeederService.seed_teacher({
                        'userEmail': f"teacher.{i}.{batch}@{domain}",
                        'userPassword': password,
                        'userName': f"Teacher {i}",
                        'schoolId': school.pk,
                        'employeeId': f"T{batch}{i}".upper(),
                        'phone': f"+12345678{i:02d}",
                        'joiningDate': date.today(),
                        'qualification': 'B.Ed',
                        'designation': 'Class Teacher',
                    })
                    self.stdout.write(f"  Teacher: {result.account.email}")

                for i in range(1, options['staff'] + 1):
                    result = RoleSeederService.seed_staff({
                        'userEmail': f"staff.{i}.{batch}@{domain}",
                        'userPassword': password,
                        'userName': f"Staff {i}",
                        'schoolId': school.pk,
                        'employeeId': f"ST{batch}{i}".upper(),
                        'phone': f"+98765432{i:02d}",
                        'designation': 'Librarian' if i == 1 else 'Accountant',
                        'joiningDate': date.today(),
                    })
                    self.stdout.write(f"  Staff: {result.account.email}")

                for i in range(1, options['students'] + 1):
                    result = RoleSeederService.seed_student({
                        'userEmail': f"student.{i}.{batch}@{domain}",
                        'userPassword': password,
                        'userName': f"Student {i}",
                        'schoolId': school.pk,
                        'admissionNo': f"S{batch}{i}".upper(),
                        'classId': school_class.pk,
                        'sectionId': section.pk,
                        'dateOfBirth': date(2012, 1, 1),
                        'gender': 'Female' if i % 2 == 0 else 'Male',
                        'bloodGroup': 'O+',
                    })
                    self.stdout.write(f"  Student: {result.account.email}")

                for i in range(1, options['parents'] + 1):
                    result = RoleSeederService.seed_parent({
                        'userEmail': f"parent.{i}.{batch}@{domain}",
                        'userPassword': password,
                        'userName': f"Parent {i}",
                        'schoolId': school.pk,
                        'phone': f"+11223344{i:02d}",
                        'occupation': 'Engineer',
                    })
                    self.stdout.write(f"  Parent: {result.account.email}")

        except SchoolManagementException as e:
            raise CommandError(e.message) from e

        self.stdout.write(self.style.SUCCESS(f"✓ Seeded users for {school.name} (password: {password})"))
