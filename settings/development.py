# settings/development.py
"""
Development settings for the schoolms project.
"""
from .base import *
import os

# Debug settings
DEBUG = True
ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0']

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'dev-insecure-secret-key-change-me')

# Database configuration for development
DATABASES['default'].update({
    'ATOMIC_REQUESTS': True,
})

# Cheaper hashing while iterating locally
PASSWORD_BCRYPT_ROUNDS = int(os.getenv('PASSWORD_BCRYPT_ROUNDS', '10'))

# Browsable API for manual testing
REST_FRAMEWORK['DEFAULT_RENDERER_CLASSES'] = [
    'rest_framework.renderers.JSONRenderer',
    'rest_framework.renderers.BrowsableAPIRenderer',
]

# Logging configuration for development
# Ensure logs directory exists
(BASE_DIR / 'logs').mkdir(exist_ok=True)

LOGGING['handlers']['file'] = {
    'level': 'DEBUG',
    'class': 'logging.FileHandler',
    'filename': BASE_DIR / 'logs' / 'development.log',
    'formatter': 'verbose',
}

for logger_name in ('django', 'core', 'users', 'shared'):
    LOGGING['loggers'][logger_name]['handlers'] = ['console', 'file']

for logger_name in ('core', 'users', 'shared'):
    LOGGING['loggers'][logger_name]['level'] = 'DEBUG'

# Disable security settings for development
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
SECURE_SSL_REDIRECT = False

# CORS settings for development
CORS_ALLOWED_ORIGINS += [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
