"""Typed errors raised by the business layer and mapped to HTTP at the boundary."""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """A required field is missing or malformed."""

    status_code = 400


class AuthError(AppError):
    """Missing, invalid or expired token, or bad credentials."""

    status_code = 401


class ForbiddenError(AppError):
    """Authenticated, but neither the record owner nor an admin."""

    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Raised when registering an email that is already taken."""

    status_code = 409


class TransientError(AppError):
    """The request could not complete in time; the caller may try again."""

    status_code = 504
