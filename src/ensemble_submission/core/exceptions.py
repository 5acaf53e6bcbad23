class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingInputError(ValidationError):
    """Raised when a required identifying field (name, piece) is absent."""


class AuthorizationError(DomainError):
    """Raised when the report secret is missing or wrong."""


class CollaboratorError(DomainError):
    """Raised when a sheet/drive call fails; chained to the underlying error."""


class ReportInProgressError(DomainError):
    """Raised when a report run is already materializing."""
