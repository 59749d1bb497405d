"""
Domain exceptions shared by the catalog modules.

HTTP mapping lives in the API layer; these classes carry no status codes.
"""
from typing import Any, Mapping, Optional


class NotFoundError(Exception):
    """An entity looked up by identifier does not exist."""

    def __init__(self, entity: str, identifier: Any):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found: {identifier!r}")


class InvalidOptionsError(ValueError):
    """Unrecognized option keys were passed to a catalog operation."""

    def __init__(self, unknown: set[str], allowed: set[str]):
        self.unknown = unknown
        self.allowed = allowed
        super().__init__(
            f"unknown options {sorted(unknown)}, allowed: {sorted(allowed)}"
        )


class CourseValidationError(Exception):
    """Invalid attributes supplied when creating a course."""

    def __init__(self, errors: Mapping[str, list[str]]):
        self.errors = dict(errors)
        super().__init__(f"invalid course attributes: {self.errors}")


class DataIntegrityError(Exception):
    """A stored row holds a value the application cannot interpret."""

    def __init__(self, message: str, context: Optional[dict] = None):
        self.context = context or {}
        super().__init__(message)
