class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is missing or invalid."""

    status_code = 400


class AuthenticationError(DomainError):
    """Raised when no credential was presented."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    status_code = 403


class TokenInvalidError(AuthorizationError):
    """Raised when a bearer token fails signature or expiry checks."""


class NotFoundError(DomainError):
    status_code = 404


class ConflictError(DomainError):
    status_code = 409


class StoreError(DomainError):
    """Raised when the document store fails for reasons unrelated to the request."""

    status_code = 500
