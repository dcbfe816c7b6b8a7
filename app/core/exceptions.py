class EnrollmentServiceError(Exception):
    """Base class for errors raised by the competitor enrollment services."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(EnrollmentServiceError):
    """Applicant data failed schema validation (age restriction included)."""


class DuplicateError(EnrollmentServiceError):
    """A user or competitor already exists with the given email or national ID."""


class NotFoundError(EnrollmentServiceError):
    """No competitor is linked to the given user."""
