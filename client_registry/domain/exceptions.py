"""Framework-independent repository exceptions.

Every expected failure of a repository operation surfaces as a subclass of
RepositoryError so callers can map outcomes (e.g. to HTTP statuses) with a
single except clause.  Driver exceptions never escape a repository; they are
chained as __cause__ of a StorageError or StoreConnectionError.
"""


class RepositoryError(Exception):
    """Base class for all repository failures."""


class StoreConnectionError(RepositoryError):
    """Raised when the store is unreachable or not configured."""


class StorageError(RepositoryError):
    """Raised when the store rejects an operation (constraint violation, I/O)."""


class MissingIdentifierError(RepositoryError):
    """Raised when a row-targeting operation receives an unpersisted entity."""

    def __init__(self, entity_type: str, operation: str):
        self.entity_type = entity_type
        self.operation = operation
        super().__init__(f"{entity_type} must have an identifier to {operation}")


class ItemValidationError(RepositoryError):
    """Raised by the pre-insert validation hook."""

    def __init__(self, entity_type: str, reason: str):
        self.entity_type = entity_type
        self.reason = reason
        super().__init__(f"Invalid {entity_type}: {reason}")


class InvalidPageError(RepositoryError):
    """Raised when a search asks for a page number below 1."""

    def __init__(self, page_number: int):
        self.page_number = page_number
        super().__init__(f"Page numbers start at 1, got {page_number}")
