"""Value and property comparison under the active search options."""

from __future__ import annotations

from collections.abc import Callable, Hashable
import logging
from typing import Any

from seekr.options import SearchMode, SearchOptions
from seekr.paths import PATH_SEPARATOR, get_property, resolve_path
from seekr.types import UNDEFINED, classify_type


logger = logging.getLogger(__name__)

ModeStrategy = Callable[[Any, Any, SearchOptions], bool]


def strict_equals(value: Any, query: Any) -> bool:
    """Equality without cross-type coercion.

    Values of different type tags never match (``True`` is not ``1``).
    Primitives compare by value, everything else by identity.
    """
    value_type = classify_type(value)
    if value_type is not classify_type(query):
        return False
    if value_type.is_primitive:
        return value == query
    return value is query


def exact_match(value: Any, query: Any, options: SearchOptions) -> bool:
    if isinstance(value, str) and isinstance(query, str):
        if options.case_sensitive:
            return value == query
        return value.lower() == query.lower()
    return strict_equals(value, query)


MODE_STRATEGIES: dict[str, ModeStrategy] = {
    SearchMode.EXACT.value: exact_match,
}


def register_mode(mode: str, strategy: ModeStrategy) -> None:
    """Register a comparison strategy for *mode*.

    Raises:
        ValueError: If *mode* is empty or already registered.
    """
    if not mode:
        raise ValueError("Search mode name must be a non-empty string")
    if mode in MODE_STRATEGIES:
        raise ValueError(f"Search mode '{mode}' is already registered")
    MODE_STRATEGIES[mode] = strategy
    logger.debug("Registered search mode %s", mode)


def compare_value(value: Any, query: Any, options: SearchOptions) -> bool:
    """Decide whether *value* matches *query*.

    ``None`` and ``UNDEFINED`` values never match. Modes without a registered
    strategy (including no mode at all) never match either.
    """
    if value is None or value is UNDEFINED:
        return False

    strategy = MODE_STRATEGIES.get(options.mode) if options.mode is not None else None
    if strategy is None:
        return False
    return strategy(value, query, options)


def compare_property(item: Any, property_name: Hashable, query: Any, options: SearchOptions) -> bool:
    """Compare one property of *item* against *query*.

    With ``deep`` enabled a name containing ``.`` is resolved as a nested
    path; otherwise the name is looked up as a single literal key.
    """
    if options.deep and isinstance(property_name, str) and PATH_SEPARATOR in property_name:
        value = resolve_path(item, property_name)
    else:
        value = get_property(item, property_name)
    return compare_value(value, query, options)
