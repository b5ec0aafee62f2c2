"""
ASGI config for the schoolms project.

It exposes the ASGI callable as a module-level variable named ``application``.
"""

import os

from django.core.asgi import get_asgi_application

# DJANGO_SETTINGS_MODULE wins when set; otherwise settings/__init__.py picks by DJANGO_ENV
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'settings')

application = get_asgi_application()
