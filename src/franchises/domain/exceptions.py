"""Domain-level exceptions.

All failures surfaced by the use cases are subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller-supplied data violates a precondition."""


class NotFoundError(DomainException):
    """A referenced franchise, branch or product does not exist."""

    def __init__(self, kind: str, entity_id: str | None) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind.capitalize()} not found: {entity_id}")


class StorageError(DomainException):
    """The storage adapter failed to read or write an aggregate."""
