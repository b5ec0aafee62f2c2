# users/tests/test_views.py
from django.test import TestCase
from rest_framework.test import APIClient

from core.tests.helpers import DEFAULT_PASSWORD, auth_header, make_account, make_school
from shared.constants import UserRole


class AuthApiTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.school = make_school()
        self.user = make_account('teacher@school.com', role=UserRole.TEACHER, school=self.school)

    def test_login_returns_token_and_session(self):
        response = self.client.post('/auth/login', {'email': 'teacher@school.com', 'password': DEFAULT_PASSWORD})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body['token'])
        self.assertEqual(body['expiresIn'], 60 * 60 * 24 * 14)
        self.assertEqual(body['session'], {
            'accountId': self.user.pk,
            'role': UserRole.TEACHER,
            'schoolId': self.school.pk,
            'schoolSlug': self.school.slug,
        })
        self.assertEqual(body['account']['email'], 'teacher@school.com')
        self.assertNotIn('password', body['account'])

    def test_login_with_bad_password(self):
        response = self.client.post('/auth/login', {'email': 'teacher@school.com', 'password': 'nope'})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {'error': 'Invalid credentials'})

    def test_login_with_missing_fields(self):
        response = self.client.post('/auth/login', {'email': 'teacher@school.com'})
        self.assertEqual(response.status_code, 400)

    def test_login_with_non_string_email(self):
        response = self.client.post('/auth/login', {'email': 5, 'password': 'x'}, format='json')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {'error': 'Missing required fields'})

    def test_session_with_token(self):
        login = self.client.post('/auth/login', {'email': 'teacher@school.com', 'password': DEFAULT_PASSWORD})
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.json()['token']}")

        response = self.client.get('/auth/session')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['session']['accountId'], self.user.pk)

    def test_session_without_token(self):
        response = self.client.get('/auth/session')

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {'error': 'Unauthorized'})

    def test_session_with_garbage_token(self):
        response = self.client.get('/auth/session', HTTP_AUTHORIZATION='Bearer not-a-token')
        self.assertEqual(response.status_code, 401)

    def test_logout(self):
        response = self.client.post('/auth/logout', **auth_header(self.user))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'success': True})
