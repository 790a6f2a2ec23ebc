"""Value containers understood by the combinators.

- Success / Failure: two-variant outcome container, matched by ok()
- Box / Shared: owners of a single value, matched by points_to()

All containers are frozen; matchers never mutate them.
"""

import weakref
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Success variant holding a value."""

    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failure variant holding an error."""

    error: E


Outcome = Success[T] | Failure[E]


@runtime_checkable
class Dereferenceable(Protocol):
    """Owner of a single value."""

    def deref(self) -> Any: ...


@dataclass(frozen=True)
class Box(Generic[T]):
    """Single-owner box around a value."""

    value: T

    def deref(self) -> T:
        return self.value


class Shared(Generic[T]):
    """Shared-ownership pointer.

    clone() returns a new handle to the same referent, so several holders
    observe the same object. Equality compares referents.
    """

    __slots__ = ("_cell",)

    def __init__(self, value: T):
        self._cell = [value]

    @classmethod
    def _from_cell(cls, cell: list) -> "Shared[T]":
        handle = cls.__new__(cls)
        handle._cell = cell
        return handle

    def deref(self) -> T:
        return self._cell[0]

    def clone(self) -> "Shared[T]":
        return Shared._from_cell(self._cell)

    def ptr_eq(self, other: "Shared") -> bool:
        """True if both handles share the same referent."""
        return self._cell is other._cell

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Shared):
            return self.deref() == other.deref()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.deref())

    def __repr__(self) -> str:
        return f"Shared({self.deref()!r})"


def is_dereferenceable(value: Any) -> bool:
    """Check whether points_to() can look through value."""
    return isinstance(value, (Dereferenceable, weakref.ReferenceType))


def deref(owner: Any) -> Any:
    """Return the value owned by owner.

    Args:
        owner: Box, Shared, weakref.ref or any object with deref()

    Returns:
        The owned value (None for a dead weak reference)
    """
    if isinstance(owner, weakref.ReferenceType):
        return owner()
    return owner.deref()
