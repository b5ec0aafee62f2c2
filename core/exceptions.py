# core/exceptions.py
class SchoolManagementException(Exception):
    """Base exception for all school management system errors."""

    status_code = 500
    default_message = "An error occurred"

    def __init__(self, message=None, user_friendly=False, details=None, error_code=None):
        self.message = message or self.default_message
        self.user_friendly = user_friendly
        self.details = details or {}
        self.error_code = error_code
        super().__init__(self.message)

    def with_prefix(self, prefix):
        """Same error class and flags, message prefixed with context."""
        return type(self)(
            f"{prefix}: {self.message}",
            user_friendly=self.user_friendly,
            details=self.details,
        )


class AuthenticationError(SchoolManagementException):
    """Authentication and authorization errors."""
    status_code = 401
    default_message = "Unauthorized"

    def __init__(self, message=None, user_friendly=True, details=None):
        super().__init__(message, user_friendly, details, "AUTH_ERROR")


class ValidationError(SchoolManagementException):
    """Data validation errors."""
    status_code = 400
    default_message = "Validation failed"

    def __init__(self, message=None, user_friendly=True, details=None):
        super().__init__(message, user_friendly, details, "VALIDATION_ERROR")


class RolePermissionError(SchoolManagementException):
    """Authenticated, but the role may not perform this operation."""
    status_code = 403
    default_message = "Insufficient permissions"

    def __init__(self, message=None, user_friendly=True, details=None):
        super().__init__(message, user_friendly, details, "PERMISSION_ERROR")


class DuplicateIdentityError(SchoolManagementException):
    """An account with the same normalized email already exists."""
    status_code = 409
    default_message = "Account already exists"

    def __init__(self, message=None, user_friendly=True, details=None):
        super().__init__(message, user_friendly, details, "DUPLICATE_IDENTITY")

    @classmethod
    def for_email(cls, email):
        return cls(f"User with email {email} already exists", details={'email': email})


class StorageError(SchoolManagementException):
    """Any persistence failure other than a duplicate identity."""
    default_message = "Storage operation failed"

    def __init__(self, message=None, user_friendly=False, details=None):
        super().__init__(message, user_friendly, details, "STORAGE_ERROR")


class PasswordHashingError(SchoolManagementException):
    """Password could not be hashed."""
    default_message = "Password hashing failed"

    def __init__(self, message=None, user_friendly=False, details=None):
        super().__init__(message, user_friendly, details, "HASHING_ERROR")


class SchoolOnboardingError(SchoolManagementException):
    """Errors during school provisioning and setup."""
    default_message = "School setup failed"

    def __init__(self, message=None, user_friendly=False, details=None):
        super().__init__(message, user_friendly, details, "ONBOARDING_ERROR")
