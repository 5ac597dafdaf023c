class DomainError(Exception):
    """Base exception for business rule violations."""


class InputValidationError(DomainError):
    """Raised when input data is invalid; nothing has been computed yet."""


class StateConflictError(DomainError):
    """Raised when a leave transition starts from an unexpected state."""


class AuthorizationError(DomainError):
    """Raised when a user is not allowed to act on a request."""


class NotFoundError(DomainError):
    """Raised when a referenced user or request does not exist."""


class ConfigurationError(DomainError):
    """Raised when settings make an operation impossible."""
