"""
WSGI config for the schoolms project.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application

# DJANGO_SETTINGS_MODULE wins when set; otherwise settings/__init__.py picks by DJANGO_ENV
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'settings')

application = get_wsgi_application()
