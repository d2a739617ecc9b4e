"""
Project-wide custom exception hierarchy.
All modules raise subclasses of NameStoreError — never bare Exception.
"""

__all__ = [
    "NameStoreError",
    "StoreError",
    "StorageUnavailable",
]


class NameStoreError(Exception):
    """Root exception for all namestore errors."""


# ── Store ─────────────────────────────────────────────────────────────────────

class StoreError(NameStoreError):
    """Raised on SQLite / store I/O errors."""


class StorageUnavailable(StoreError):
    """Raised when the database file cannot be opened, read or written."""
