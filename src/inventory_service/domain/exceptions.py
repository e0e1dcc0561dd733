"""Domain-level exceptions.

Every failure the core reports is a subclass of DomainException so the
HTTP and CLI layers can catch them uniformly and translate each kind into
a status code or a user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Required input is missing, empty, or violates an invariant."""


class EntityNotFoundError(DomainException):
    """A requested item or photo does not exist."""


class CorruptRecordError(DomainException):
    """A stored document exists but cannot be parsed."""


class StorageError(DomainException):
    """Reading, writing or deleting a file failed."""
