"""Property access and dot-path resolution over nested values."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

from seekr.types import UNDEFINED, DataType, classify_type


PATH_SEPARATOR = "."


def _is_array_index(key: Hashable) -> bool:
    return isinstance(key, str) and key.isascii() and key.isdigit() and key == str(int(key))


def get_property(item: Any, key: Hashable) -> Any:
    """Look up *key* on *item*, returning ``UNDEFINED`` when it is absent.

    Mappings are indexed by key, lists and tuples by a canonical non-negative
    index string (``"1"`` but not ``"01"``), and other objects by attribute
    name. Primitive values have no properties.

    Raises:
        TypeError: If *key* is unhashable and *item* is a mapping.
        Exception: Whatever an attribute getter on *item* raises, other than
            ``AttributeError``, propagates unchanged.
    """
    if isinstance(item, Mapping):
        return item.get(key, UNDEFINED)

    data_type = classify_type(item)
    if data_type is DataType.ARRAY:
        if _is_array_index(key):
            index = int(key)
            return item[index] if index < len(item) else UNDEFINED
        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(item):
            return item[key]
        return UNDEFINED
    if data_type in {DataType.OBJECT, DataType.FUNCTION, DataType.SYMBOL} and isinstance(key, str):
        return getattr(item, key, UNDEFINED)
    return UNDEFINED


def resolve_path(root: Any, path: str) -> Any:
    """Walk a dot-separated *path* from *root*.

    Stops at the first segment whose container is falsy or whose value is
    ``UNDEFINED`` and returns ``UNDEFINED``. Never raises for missing
    intermediates or paths deeper than the data.

    Examples:
        >>> resolve_path({"user": {"name": "Ann"}}, "user.name")
        'Ann'
        >>> resolve_path({"user": None}, "user.name")
        UNDEFINED
    """
    current = root
    for segment in path.split(PATH_SEPARATOR):
        if not current:
            return UNDEFINED
        current = get_property(current, segment)
        if current is UNDEFINED:
            return UNDEFINED
    return current
