"""DTO module for values inspected by matchers."""

from matchkit.dto.values import (
    Box,
    Dereferenceable,
    Failure,
    Outcome,
    Shared,
    Success,
    deref,
    is_dereferenceable,
)

__all__ = [
    "Box",
    "Dereferenceable",
    "Failure",
    "Outcome",
    "Shared",
    "Success",
    "deref",
    "is_dereferenceable",
]
