"""
Tagged results for operations whose failures are expected outcomes.

Callers branch with ``isinstance(result, Ok)``; nothing here raises.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]


class Missing(enum.Enum):
    """Marker carried by ``Err`` when the target row does not exist."""

    NOT_FOUND = "not_found"

    def __repr__(self) -> str:
        return self.name


NOT_FOUND = Missing.NOT_FOUND
