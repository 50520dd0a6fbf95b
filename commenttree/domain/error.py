"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class EmptyContentError(ValidationError):
    """Raised when a comment is submitted without content."""

    def __init__(self) -> None:
        super().__init__("comment content cannot be empty")


class InvalidParentError(ValidationError):
    """Raised when a reply references a parent comment that does not exist."""

    def __init__(self, parent_id: int):
        self.parent_id = parent_id
        super().__init__(f"invalid parent comment: {parent_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class CommentNotFoundError(NotFoundError):
    """Raised when a comment ID does not reference an existing comment."""

    def __init__(self, comment_id: int):
        super().__init__("comment", str(comment_id))


class StoreError(DomainError):
    """Raised when the underlying comment store fails.

    The original exception is chained as __cause__.
    """

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        super().__init__(f"failed to {operation}: {cause}")
