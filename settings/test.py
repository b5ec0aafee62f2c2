# settings/test.py
"""
Test settings: in-memory SQLite, fast hashing, no throttling.
"""
from .base import *

DEBUG = False

SECRET_KEY = 'test-secret-key-not-for-production'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Minimum bcrypt cost keeps the suite fast
PASSWORD_BCRYPT_ROUNDS = 4

PROVISIONING_REQUIRE_SUPER_ADMIN = True
TRIAL_PERIOD_DAYS = 30
SESSION_TOKEN_MAX_AGE = 60 * 60 * 24 * 14

REST_FRAMEWORK['DEFAULT_THROTTLE_CLASSES'] = []

ALLOWED_HOSTS = ['testserver', 'localhost']

LOGGING['handlers']['console']['level'] = 'WARNING'
REST_FRAMEWORK['TEST_REQUEST_DEFAULT_FORMAT'] = 'json'
