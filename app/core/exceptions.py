"""
Application errors.

Every error carries the user-facing message and the HTTP status it maps to.
The handler registered in `app.main` renders them as `{"error": message}`.
"""
from fastapi import status


class SRMException(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(SRMException):
    """Missing or invalid required fields"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(SRMException):
    status_code = status.HTTP_404_NOT_FOUND


class AuthFailure(SRMException):
    status_code = status.HTTP_401_UNAUTHORIZED


class SignInFailure(AuthFailure):
    """The identity provider refused the password sign-in. Carries the raw provider text."""


class SignUpFailure(SRMException):
    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateEmail(SignUpFailure):
    pass


class InvalidEmail(SignUpFailure):
    pass


class StorageFailure(SRMException):
    """Any failure of the document store. Callers do not distinguish subtypes."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class InternalError(SRMException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
