# users/management/commands/seed_auth.py
from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from core.exceptions import SchoolManagementException
from users.services import RoleSeederService


class Command(BaseCommand):
    help = 'Create the platform super admin (skipped when the email already exists)'

    def add_arguments(self, parser):
        parser.add_argument('--email', default=None, help='Defaults to SUPER_ADMIN_EMAIL')
        parser.add_argument('--password', default=None, help='Defaults to SUPER_ADMIN_PASSWORD')
        parser.add_argument('--name', default=None, help='Defaults to SUPER_ADMIN_NAME')

    def handle(self, *args, **options):
        email = options['email'] or getattr(settings, 'SUPER_ADMIN_EMAIL', '')
        password = options['password'] or getattr(settings, 'SUPER_ADMIN_PASSWORD', '')
        name = options['name'] or getattr(settings, 'SUPER_ADMIN_NAME', 'Platform Admin')

        if not email or not password:
            raise CommandError("Super admin email and password are required (--email/--password or SUPER_ADMIN_EMAIL/SUPER_ADMIN_PASSWORD)")

        User = get_user_model()
        if User.objects.filter(email=User.objects.normalize_email(email)).exists():
            self.stdout.write(self.style.WARNING(f"Super admin {email} already exists, skipping"))
            return

        try:
            result = RoleSeederService.seed_super_admin({
                'email': email,
                'password': password,
                'name': name,
            })
        except SchoolManagementException as e:
            raise CommandError(e.message) from e

        self.stdout.write(self.style.SUCCESS(f"✓ Super admin created: {result.account.email}"))
