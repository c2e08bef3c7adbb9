class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class RequiredFieldError(ValidationError):
    """Raised when a required form field is empty."""


class LengthExceededError(ValidationError):
    """Raised when a text field is longer than allowed."""


class DuplicateNameError(ValidationError):
    """Raised when a name must be unique and is already taken."""


class InvalidNumberError(ValidationError):
    """Raised when a numeric field is negative or not a number."""


class NotFoundError(DomainError):
    """Raised when a record id does not exist in its store."""
