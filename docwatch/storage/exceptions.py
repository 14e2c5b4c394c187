class StorageError(Exception):
    """Base exception for storage backend failures."""


class StorageNotFoundError(StorageError):
    """Raised when a file or folder id does not resolve."""
