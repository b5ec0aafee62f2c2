# shared/tests/test_passwords.py
from unittest.mock import patch

from django.test import SimpleTestCase

from core.exceptions import PasswordHashingError
from shared.constants import TEMP_PASSWORD_CHARSET
from shared.utils.passwords import generate_password, hash_password, verify_password


class HashPasswordTest(SimpleTestCase):
    def test_hash_uses_bcrypt_sha256(self):
        self.assertTrue(hash_password('Secret-pass-123').startswith('bcrypt_sha256$'))

    def test_same_input_gives_different_hashes(self):
        """Every hash carries a fresh salt."""
        self.assertNotEqual(hash_password('Secret-pass-123'), hash_password('Secret-pass-123'))

    def test_hash_never_contains_plaintext(self):
        self.assertNotIn('Secret-pass-123', hash_password('Secret-pass-123'))

    def test_empty_password_rejected(self):
        with self.assertRaises(PasswordHashingError):
            hash_password('')

    def test_non_string_password_rejected(self):
        with self.assertRaises(PasswordHashingError):
            hash_password(None)

    def test_hasher_failure_is_wrapped(self):
        with patch('shared.utils.passwords.make_password', side_effect=RuntimeError('boom')):
            with self.assertRaises(PasswordHashingError) as ctx:
                hash_password('Secret-pass-123')

        self.assertEqual(ctx.exception.message, 'Password hashing failed: boom')
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)


class VerifyPasswordTest(SimpleTestCase):
    def test_matching_password_verifies(self):
        hashed = hash_password('correct horse')
        self.assertTrue(verify_password('correct horse', hashed))

    def test_different_password_fails(self):
        hashed = hash_password('correct horse')
        self.assertFalse(verify_password('battery staple', hashed))

    def test_malformed_hash_fails(self):
        self.assertFalse(verify_password('correct horse', 'not-a-hash'))

    def test_empty_inputs_fail(self):
        self.assertFalse(verify_password('', hash_password('x')))
        self.assertFalse(verify_password('x', ''))


class GeneratePasswordTest(SimpleTestCase):
    def test_default_length(self):
        self.assertEqual(len(generate_password()), 12)

    def test_custom_length(self):
        self.assertEqual(len(generate_password(20)), 20)

    def test_only_charset_characters(self):
        password = generate_password(200)
        self.assertTrue(set(password) <= set(TEMP_PASSWORD_CHARSET))

    def test_non_positive_length_rejected(self):
        with self.assertRaises(ValueError):
            generate_password(0)
