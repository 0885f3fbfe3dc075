"""Exceptions raised by the persistence layer."""

from __future__ import annotations


class DatabaseError(Exception):
    """Raised when a database operation fails for I/O or driver reasons."""


class RecordNotFoundError(DatabaseError):
    """Raised when no row matches the requested identifier."""

    def __init__(self, resource: str, identifier: int) -> None:
        """Initialize the exception.

        Args:
            resource: Name of the resource that was looked up.
            identifier: The identifier that matched no row.
        """
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier} not found")
