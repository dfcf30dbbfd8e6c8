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


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't govern."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
