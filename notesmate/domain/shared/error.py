"""NotesMate exceptions.

``DomainError`` subclasses describe something wrong with the request or the
caller and surface as 4xx responses. ``InfrastructureError`` subclasses mean
the service itself cannot proceed and surface as 503. Each carries a stable
``code`` that API clients can branch on; the message is for humans.
"""


class NotesMateError(Exception):
    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or type(self).__name__
        super().__init__(message)


class DomainError(NotesMateError):
    pass


class BadRequestError(DomainError):
    """Missing or malformed input. ``field`` names the offending input when known."""

    def __init__(self, message: str, code: str | None = None, field: str | None = None) -> None:
        super().__init__(message, code=code or "bad_request")
        self.field = field


class AuthenticationError(DomainError):
    """No usable identity: no token, wrong credentials or a deactivated account."""


class InvalidTokenError(AuthenticationError):
    """Malformed, tampered and expired tokens all raise this; only the log says which."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message, code="invalid_token")


class AuthorizationError(DomainError):
    """Known caller, forbidden operation."""


class NotFoundError(DomainError):
    pass


class ConflictError(DomainError):
    pass


class InfrastructureError(NotesMateError):
    pass


class StorageUnavailableError(InfrastructureError):
    pass


class ConfigurationError(InfrastructureError):
    """Settings that make it unsafe to start."""
