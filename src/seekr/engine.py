"""Search engine over a single in-memory value.

A ``Seekr`` wraps one caller-owned value, classifies it once at construction
and answers ``search`` calls with a linear scan. The data is never copied or
mutated, so concurrent searches are safe as long as the caller does not
mutate the data at the same time.

Typical use::

    engine = Seekr([{"user": {"name": "Ann"}}, {"user": None}])
    engine.search("ann", "user.name", {"mode": "exact", "deep": True})
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from contextlib import ExitStack
from dataclasses import dataclass
import logging
from typing import Any

from seekr.compare import compare_property, compare_value
from seekr.config import Settings, get_settings
from seekr.errors import ConstructionError, SearchError, SearchErrorReason
from seekr.observability.metrics import SEARCH_COUNT, SEARCH_LATENCY, SEARCH_MATCHES, track_latency
from seekr.observability.tracing import create_span
from seekr.options import SearchOptions, coerce_options
from seekr.types import UNDEFINED, DataType, classify_type
from seekr.validation import validate_data_type


logger = logging.getLogger(__name__)

SearchHandler = Callable[["Seekr", Any, "Hashable | None", SearchOptions], list[Any]]


def is_trivial_query(query: Any) -> bool:
    """Queries that can never match: ``""``, ``None`` and ``UNDEFINED``."""
    return query is None or query is UNDEFINED or (isinstance(query, str) and query == "")


@dataclass(frozen=True, slots=True)
class ConstructionResult:
    """Outcome of ``Seekr.create``: either an engine or the reason there is none."""

    engine: Seekr | None = None
    error: ConstructionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Seekr:
        """Return the engine, raising the construction error if there is one."""
        if self.error is not None:
            raise self.error
        return self.engine  # type: ignore[return-value]


class Seekr:
    """Lightweight search utility over Python data structures.

    Args:
        data: Value to search. Lists and tuples are searchable; ``None`` is
            accepted here but rejected by ``search``.
        settings: Configuration for default options and telemetry. Defaults
            to the process-wide settings.

    Raises:
        ConstructionError: If *data* is ``UNDEFINED`` or of an unrecognised type.
    """

    def __init__(self, data: Any, *, settings: Settings | None = None) -> None:
        data_type = classify_type(data)
        validate_data_type(data_type)

        self._original_data = data
        self._data_type = data_type
        self._settings = settings or get_settings()
        logger.debug("Seekr constructed over %s data", data_type.value)

    @classmethod
    def create(cls, data: Any, *, settings: Settings | None = None) -> ConstructionResult:
        """Build an engine without raising.

        Returns:
            ``ConstructionResult`` holding the engine, or the
            ``ConstructionError`` explaining why *data* is not searchable.
        """
        try:
            return ConstructionResult(engine=cls(data, settings=settings))
        except ConstructionError as exc:
            logger.debug("Seekr construction rejected %s data", exc.data_type.value)
            return ConstructionResult(error=exc)

    @property
    def original_data(self) -> Any:
        return self._original_data

    @property
    def data_type(self) -> DataType:
        return self._data_type

    @property
    def type(self) -> DataType:
        """Alias of ``data_type``."""
        return self._data_type

    def __repr__(self) -> str:
        return f"{type(self).__name__}(data_type={self._data_type.value!r})"

    def search(
        self,
        query: Any,
        property_name: Hashable | None = None,
        options: SearchOptions | Mapping[str, Any] | None = None,
    ) -> list[Any]:
        """Find the elements matching *query*.

        Args:
            query: Value to look for. ``""``, ``None`` and ``UNDEFINED``
                return ``[]`` without scanning.
            property_name: Key (or dot path with ``deep``) to compare on each
                element. ``None`` compares whole elements.
            options: ``SearchOptions`` or a mapping of its fields. ``None``
                uses the configured defaults.

        Returns:
            New list of matching elements, in original order, duplicates kept.

        Raises:
            SearchError: If the data is ``None``, ``UNDEFINED`` or not an array.
            TypeError: If *property_name* is unhashable and an element is a mapping.
        """
        if is_trivial_query(query):
            return []

        resolved = coerce_options(options, self._settings)
        handler = SEARCH_HANDLERS[self._data_type]
        data_type = self._data_type.value

        with ExitStack() as stack:
            if self._settings.tracing_enabled:
                stack.enter_context(
                    create_span(
                        "seekr.search",
                        attributes={"seekr.data_type": data_type, "seekr.mode": resolved.mode or ""},
                    )
                )
            if self._settings.metrics_enabled:
                stack.enter_context(track_latency(SEARCH_LATENCY, data_type=data_type))
            try:
                results = handler(self, query, property_name, resolved)
            except SearchError as exc:
                logger.warning("Search rejected for %s data", data_type, extra={"reason": exc.reason.value})
                if self._settings.metrics_enabled:
                    SEARCH_COUNT.labels(data_type=data_type, outcome=exc.reason.value).inc()
                raise

        if self._settings.metrics_enabled:
            SEARCH_COUNT.labels(data_type=data_type, outcome="ok").inc()
            SEARCH_MATCHES.labels(data_type=data_type).observe(len(results))
        logger.debug(
            "Search matched %d of %d elements",
            len(results),
            len(self._original_data),
            extra={"mode": resolved.mode, "deep": resolved.deep},
        )
        return results


def _search_array(engine: Seekr, query: Any, property_name: Hashable | None, options: SearchOptions) -> list[Any]:
    if property_name is None or property_name is UNDEFINED:
        return [item for item in engine.original_data if compare_value(item, query, options)]
    return [item for item in engine.original_data if compare_property(item, property_name, query, options)]


def _reject_null(engine: Seekr, query: Any, property_name: Hashable | None, options: SearchOptions) -> list[Any]:
    raise SearchError(
        engine.data_type,
        SearchErrorReason.NULL_DATA,
        error="Search data passed to Seekr is None, so it's not searchable.",
        solution="Don't provide None as searching data.",
    )


def _reject_undefined(engine: Seekr, query: Any, property_name: Hashable | None, options: SearchOptions) -> list[Any]:
    raise SearchError(
        engine.data_type,
        SearchErrorReason.UNDEFINED_DATA,
        error="Search data passed to Seekr is undefined, so it's not searchable.",
        solution="Provide a valid Python value as searching data.",
    )


def _reject_unsupported(
    engine: Seekr, query: Any, property_name: Hashable | None, options: SearchOptions
) -> list[Any]:
    raise SearchError(
        engine.data_type,
        SearchErrorReason.UNSUPPORTED_TYPE,
        error=f"Unsupported data type: {engine.data_type.value}.",
        solution="Search a list or tuple of elements.",
    )


SEARCH_HANDLERS: dict[DataType, SearchHandler] = {
    DataType.ARRAY: _search_array,
    DataType.NULL: _reject_null,
    DataType.UNDEFINED: _reject_undefined,
    DataType.STRING: _reject_unsupported,
    DataType.BOOLEAN: _reject_unsupported,
    DataType.NUMBER: _reject_unsupported,
    DataType.SET: _reject_unsupported,
    DataType.OBJECT: _reject_unsupported,
    DataType.SYMBOL: _reject_unsupported,
    DataType.FUNCTION: _reject_unsupported,
    DataType.BIGINT: _reject_unsupported,
    DataType.UNKNOWN: _reject_unsupported,
}

_missing = set(DataType) - SEARCH_HANDLERS.keys()
if _missing:
    raise RuntimeError(f"No search handler for data types: {sorted(tag.value for tag in _missing)}")
