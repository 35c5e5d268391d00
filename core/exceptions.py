# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str,*, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when data is invalid or violates constraints."""


class NotFoundError(DomainError):
    """Raised when an entity is not found."""


class BusinessRuleError(DomainError):
    """Raised when business rules are violated (e.g., missing permissions)."""


class InvalidCredentialsError(ValidationError):
    """Raised when no account matches the given email and password."""
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class EmailAlreadyInUseError(ValidationError):
    def __init__(self, message: str = "Email already in use"):
        super().__init__(message, code="EMAIL_IN_USE")


class TaskNotFoundError(NotFoundError):
    def __init__(self, message: str = "Task not found"):
        super().__init__(message, code="TASK_NOT_FOUND")


class PermissionDeniedError(BusinessRuleError):
    def __init__(self, message: str = "Permission denied"):
        super().__init__(message, code="PERMISSION_DENIED")
