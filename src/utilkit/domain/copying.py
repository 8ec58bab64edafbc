"""Cycle-safe deep copy.

Containers are registered in the memo before their contents are copied,
so a back-reference met during the walk resolves to the copy already under
construction. Two references to the same original always map to the same
copy, which preserves shared structure and guarantees termination on any
reference graph.

INVARIANT: the memo lives for exactly one top-level call.
"""

from __future__ import annotations

import dataclasses
from types import SimpleNamespace
from typing import Any


def _copies_attributes(obj: Any) -> bool:
    """Objects whose instance ``__dict__`` is copied attribute by attribute."""
    if isinstance(obj, SimpleNamespace):
        return True
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type) and hasattr(obj, "__dict__")


def deep_copy(obj: Any, memo: dict[int, Any] | None = None) -> Any:
    """Return a structurally independent copy of *obj*.

    Lists, dicts, sets, tuples, dataclass instances and ``SimpleNamespace``
    objects are copied recursively. Everything else (None, numbers, strings,
    functions, arbitrary objects) is treated as an atom and returned as-is.

    Args:
        obj: The value to copy.
        memo: Map of ``id(original)`` to copy. Leave unset on the first call.
    """
    if memo is None:
        memo = {}

    key = id(obj)
    if key in memo:
        return memo[key]

    if isinstance(obj, list):
        items: list[Any] = []
        memo[key] = items
        items.extend(deep_copy(item, memo) for item in obj)
        return items

    if isinstance(obj, dict):
        mapping: dict[Any, Any] = {}
        memo[key] = mapping
        for k, v in obj.items():
            mapping[k] = deep_copy(v, memo)
        return mapping

    if isinstance(obj, set):
        members: set[Any] = set()
        memo[key] = members
        members.update(deep_copy(item, memo) for item in obj)
        return members

    if isinstance(obj, tuple):
        # A tuple cannot exist before its items, so a cycle through it is
        # resolved by checking whether a nested call already produced it.
        copied = tuple(deep_copy(item, memo) for item in obj)
        if key in memo:
            return memo[key]
        if hasattr(obj, "_fields"):
            copied = type(obj)(*copied)
        memo[key] = copied
        return copied

    if _copies_attributes(obj):
        cls = type(obj)
        clone = cls.__new__(cls)
        memo[key] = clone
        attrs = vars(clone)
        for name, value in vars(obj).items():
            attrs[name] = deep_copy(value, memo)
        return clone

    return obj
