"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
A referenced object that does not exist is not an error: it is modelled as
``None`` by the gateway.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ParameterValidationError(DomainError):
    """Raised when a required parameter is missing or malformed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class UnknownMethodError(DomainError):
    """Raised when a dispatched method name is not registered."""

    def __init__(self, method: str, details: Optional[Dict[str, Any]] = None):
        self.method = method
        super().__init__(f"Unknown method: {method}", details)


class ExternalStoreError(DomainError):
    """Raised when a call to the object store fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class SnapshotConflictError(ExternalStoreError):
    """Raised when two object kinds report the same identifier."""

    def __init__(self, object_id: str, first_kind: str, second_kind: str):
        message = (
            f"Object {object_id} returned as both {first_kind} and {second_kind}"
        )
        super().__init__(
            message,
            {"id": object_id, "kinds": [first_kind, second_kind]},
        )
