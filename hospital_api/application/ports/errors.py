class StoreError(Exception):
    """Base class for constraint failures reported by a repository."""


class UniqueViolation(StoreError):
    """A unique constraint rejected the write."""


class MissingReference(StoreError):
    """A foreign key pointed at a row that does not exist."""
