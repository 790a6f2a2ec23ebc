"""Description module for match explanations."""

from matchkit.description.description import INDENT, Description

__all__ = [
    "INDENT",
    "Description",
]
