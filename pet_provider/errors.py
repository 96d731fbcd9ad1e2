"""Domain exceptions for the pet content provider.

Every expected failure of a provider operation maps to one of these.
None of them is retried or recovered internally.
"""

from __future__ import annotations

from typing import Optional


class ProviderError(RuntimeError):
    """Base error for all provider operations."""


class InvalidResource(ProviderError):
    """Raised when a resource identifier matches no registered pattern."""

    def __init__(self, uri: str):
        super().__init__(f"Unknown URI: {uri}")
        self.uri = uri


class UnsupportedOperation(ProviderError):
    """Raised when an operation is not defined for the matched resource shape."""

    def __init__(self, operation: str, uri: str):
        super().__init__(f"{operation} is not supported for {uri}")
        self.operation = operation
        self.uri = uri


class ValidationError(ProviderError):
    """Raised when a field value violates a domain constraint."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class StorageError(ProviderError):
    """Raised when the underlying SQLite engine fails or rejects a row."""
