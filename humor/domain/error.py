"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Invalid argument rejected before any state change."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class AuthenticationError(DomainError):
    """Raised when a handle/password pair does not match a user."""

    def __init__(self) -> None:
        super().__init__("Invalid handle or password")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConcurrentModificationError(DomainError):
    """Raised when a versioned write loses the race against another writer."""

    def __init__(self, resource: str, identifier: str, expected_version: int):
        self.resource = resource
        self.identifier = identifier
        self.expected_version = expected_version
        super().__init__(
            f"{resource} {identifier} was modified concurrently "
            f"(expected version {expected_version})"
        )
