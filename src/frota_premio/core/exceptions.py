class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class BusinessRuleError(DomainError):
    """Raised when valid input cannot be processed under the business rules."""


class MissingFuelRecordError(BusinessRuleError):
    """Raised when the goal was reached but no fuel average exists for the period."""


class InvalidStoppageError(BusinessRuleError):
    """Raised when a stoppage does not last a positive amount of time."""


class ImportFileError(ValidationError):
    """Raised when an uploaded spreadsheet cannot be read or lacks columns."""
