"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidArgumentError(DomainError):
    """Raised when an argument violates a structural rule.

    Examples: replying to a comment of another article, a non-positive
    page size.
    """

    def __init__(self, message: str):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when an action duplicates one that already happened."""

    def __init__(self, message: str):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action on content they may not touch."""

    def __init__(self, action: str, resource: str, resource_id: object, user_id: object):
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class ContentDeletedException(DomainError):
    """Raised when attempting to edit deleted content."""

    def __init__(self, resource: str, resource_id: object):
        super().__init__(f"Cannot edit deleted {resource} {resource_id}")
