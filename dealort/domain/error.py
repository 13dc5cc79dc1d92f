"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class ConflictError(BusinessRuleViolationError):
    """Raised when an operation would duplicate existing state."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when an operation requires a session and none is present."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a resource they don't own."""

    def __init__(
        self,
        resource: str,
        resource_id: str,
        user_id: str,
        message: str | None = None,
    ):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            message
            or f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")
