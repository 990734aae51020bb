"""Custom exceptions for Board Store."""


class BoardStoreError(Exception):
    """Base exception for Board Store errors."""


class StorageUnavailableError(BoardStoreError):
    """Object store is unreachable, timed out, or rejected the request."""


class StorageCorruptError(BoardStoreError):
    """Persisted board document exists but cannot be parsed."""
