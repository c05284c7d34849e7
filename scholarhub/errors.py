"""
Error taxonomy shared by the services and mapped to HTTP status codes in main.py.
"""


class ScholarHubError(Exception):
    """Base class for every error the core raises on purpose."""
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(ScholarHubError):
    """Unknown entity, bookmark or user id."""
    status_code = 404


class InvalidCredentialsError(ScholarHubError):
    status_code = 401


class AuthenticationRequiredError(ScholarHubError):
    """Operation needs a logged in session."""
    status_code = 401


class PermissionDeniedError(ScholarHubError):
    """Session role is not allowed to run the operation."""
    status_code = 403


class AlreadyExistsError(ScholarHubError):
    """Duplicate signup email or duplicate bookmark."""
    status_code = 409


class FormValidationError(ScholarHubError):
    status_code = 422


class ExternalServiceError(ScholarHubError):
    """The summary collaborator (Gemini) failed."""
    status_code = 502
