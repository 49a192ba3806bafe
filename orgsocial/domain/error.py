"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAPollError(DomainError):
    """Raised when a vote targets a post that does not carry a valid poll."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Post {post_id} is not a poll")
