"""Serializer module for matchkit."""

from matchkit.serializer.canonical import compute_hash, debug_repr, serialize_to_json

__all__ = [
    "compute_hash",
    "debug_repr",
    "serialize_to_json",
]
