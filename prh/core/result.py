"""Result type for explicit error handling at I/O boundaries.

Inventory queries, config parsing and hook installation return a `Result`
instead of raising, so callers decide locally how a failure degrades:

    result = inventory.query_projects()
    if isinstance(result, Err):
        log.warning("%s", result.error.message)
        return []
    return result.value
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result carrying `value`."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result carrying `error`."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Union[Ok[T], Err[E]]
