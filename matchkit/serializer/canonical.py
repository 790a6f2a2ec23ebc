"""Canonical rendering for matchkit.

Provides deterministic output to enable:
- Byte-identical failure messages across runs
- Hash-based config change detection
- Diff-friendly output
"""

import hashlib
import json
from typing import Any

from pydantic import BaseModel


def debug_repr(value: Any) -> str:
    """Render a value for diagnostics.

    Uses repr(), except that sets and frozensets are rendered with their
    elements sorted by rendering, since their iteration order depends on
    hash randomization. Lists, tuples and dicts are rendered recursively
    so nested sets are covered too. Self-referencing containers render
    as repr() does ([...], {...}).

    Args:
        value: Any value

    Returns:
        Deterministic debug rendering
    """
    return _render(value, set())


def _render(value: Any, active: set[int]) -> str:
    if isinstance(value, (set, frozenset)):
        items = sorted(_render(item, active) for item in value)
        if isinstance(value, frozenset):
            return f"frozenset({{{', '.join(items)}}})" if items else "frozenset()"
        return f"{{{', '.join(items)}}}" if items else "set()"

    # Only plain containers; subclasses may define their own repr
    if type(value) not in (list, tuple, dict):
        return repr(value)

    if id(value) in active:
        return {list: "[...]", tuple: "(...)", dict: "{...}"}[type(value)]

    active.add(id(value))
    try:
        if type(value) is list:
            return f"[{', '.join(_render(item, active) for item in value)}]"
        if type(value) is tuple:
            if len(value) == 1:
                return f"({_render(value[0], active)},)"
            return f"({', '.join(_render(item, active) for item in value)})"
        entries = (f"{_render(k, active)}: {_render(v, active)}" for k, v in value.items())
        return f"{{{', '.join(entries)}}}"
    finally:
        active.discard(id(value))


def serialize_to_json(obj: BaseModel) -> str:
    """Serialize Pydantic model to canonical JSON.

    Produces deterministic output with:
    - Sorted keys
    - 2-space indentation
    - Trailing newline

    Args:
        obj: Pydantic model to serialize

    Returns:
        Canonical JSON string
    """
    data = obj.model_dump(mode="json")

    content = json.dumps(
        data,
        ensure_ascii=False,
        indent=2,
        sort_keys=True,
    )

    if not content.endswith("\n"):
        content += "\n"

    return content


def compute_hash(content: str) -> str:
    """Compute SHA256 hash of content.

    Args:
        content: String content to hash

    Returns:
        Hex-encoded SHA256 hash
    """
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
