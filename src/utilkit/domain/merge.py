"""Deep merge of nested mappings.

Mappings present on both sides are merged key by key. Arrays (lists and
tuples) follow the selected :class:`ArrayMode`. Any other pairing lets the
override value win.

Merging values of incompatible shapes (an array against a mapping, a
mapping against a scalar) is the caller's responsibility: the override
value is taken as-is, nothing is coerced.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from utilkit.domain.copying import deep_copy


class ArrayMode(StrEnum):
    """How arrays under the same key are combined."""

    REPLACE = "replace"
    MERGE = "merge"


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _same(a: Any, b: Any) -> bool:
    # bool is an int subclass; True and 1 stay distinct values.
    if isinstance(a, bool) is not isinstance(b, bool):
        return False
    return a == b


def _unique(items: list[Any]) -> list[Any]:
    """Drop later duplicates, keeping first-seen order."""
    result: list[Any] = []
    for item in items:
        if not any(_same(item, seen) for seen in result):
            result.append(item)
    return result


def _merge_arrays(base: Any, override: Any, mode: ArrayMode) -> list[Any]:
    if mode is ArrayMode.REPLACE:
        return deep_copy(list(override))
    return _unique(deep_copy([*base, *override]))


def _merge_values(base: Any, override: Any, mode: ArrayMode) -> Any:
    if isinstance(base, Mapping) and isinstance(override, Mapping):
        return _merge_mappings(base, override, mode)
    if _is_array(base) and _is_array(override):
        return _merge_arrays(base, override, mode)
    return deep_copy(override)


def _merge_mappings(
    base: Mapping[Any, Any], override: Mapping[Any, Any], mode: ArrayMode
) -> dict[Any, Any]:
    merged: dict[Any, Any] = {key: deep_copy(value) for key, value in base.items()}
    for key, value in override.items():
        if key in base:
            merged[key] = _merge_values(base[key], value, mode)
        else:
            merged[key] = deep_copy(value)
    return merged


def deep_merge(
    base: Mapping[Any, Any],
    override: Mapping[Any, Any],
    array_mode: ArrayMode | str = ArrayMode.MERGE,
) -> dict[Any, Any]:
    """Recursively merge *override* into *base*, returning a new dict.

    Neither input is mutated and the result shares no mutable objects
    with them.

    Args:
        base: Initial values.
        override: New values; wins on scalar conflicts.
        array_mode: ``"replace"`` keeps the override array, ``"merge"``
            concatenates base then override and removes duplicates.

    Raises:
        ValueError: If *array_mode* is not a known mode.

    Examples:
        >>> deep_merge({"a": [1, 2]}, {"a": [3]}, "replace")
        {'a': [3]}
        >>> deep_merge({"a": [1, 2]}, {"a": [2, 3]})
        {'a': [1, 2, 3]}
    """
    mode = ArrayMode(array_mode)
    return _merge_mappings(base, override, mode)
