"""
Custom exceptions for the Infrastructure layer.
"""
from typing import Any, Optional


class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    pass


class ResourceNotFoundError(InfrastructureError):
    """The requested record does not exist in its collection."""

    def __init__(self, resource: str, resource_id: Any):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} not found")


class IdMismatchError(InfrastructureError):
    """The id in the request path and the id in the request body disagree."""

    def __init__(self, path_id: Any, body_id: Any):
        self.path_id = path_id
        self.body_id = body_id
        super().__init__(f"Path id {path_id} does not match body id {body_id}")


class StorageValidationError(InfrastructureError):
    """A constraint was rejected by the database."""

    def __init__(self, resource: str, detail: Optional[str] = None):
        self.resource = resource
        self.detail = detail
        super().__init__(f"{resource} violates a storage constraint")


class WriteConflictError(InfrastructureError):
    """
    The record changed between being loaded and being written back.

    Raised only after re-checking that the record still exists. It is never
    converted into a client response.
    """

    def __init__(self, resource: str, resource_id: Any):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} was modified concurrently")
