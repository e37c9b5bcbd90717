"""Coarse type classification for searchable values.

Every value maps to exactly one ``DataType`` tag. The ordering of the checks
matters:

- ``UNDEFINED`` and ``None`` are tested first so later checks never touch them
- ``bool`` is tested before numbers because it subclasses ``int``
- arrays, sets and mappings are tested before the generic attribute-bearing
  object fallback, which would otherwise swallow them
- anything left over is ``unknown``
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
import inspect
import numbers
from typing import Any, Final


MAX_SAFE_INTEGER: Final = 2**53 - 1


class _Undefined:
    """Singleton marking the absence of a value (distinct from ``None``)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


class DataType(str, Enum):
    """Semantic type tag used to pick a search strategy."""

    UNDEFINED = "undefined"
    NULL = "null"
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    ARRAY = "array"
    SET = "set"
    OBJECT = "object"
    SYMBOL = "symbol"
    FUNCTION = "function"
    BIGINT = "bigint"
    UNKNOWN = "unknown"

    @property
    def is_primitive(self) -> bool:
        return self in {
            DataType.UNDEFINED,
            DataType.NULL,
            DataType.STRING,
            DataType.BOOLEAN,
            DataType.NUMBER,
            DataType.BIGINT,
        }


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def _is_number(value: Any) -> bool:
    if isinstance(value, complex) or not isinstance(value, numbers.Number):
        return False
    if isinstance(value, int):
        return -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER
    return True


def _is_bigint(value: Any) -> bool:
    return isinstance(value, int) and not -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


def _is_function(value: Any) -> bool:
    return inspect.isroutine(value) or inspect.isclass(value) or callable(value)


def _has_attributes(value: Any) -> bool:
    return hasattr(value, "__dict__") or hasattr(type(value), "__slots__")


def classify_type(value: Any) -> DataType:
    """Return the ``DataType`` tag for *value*.

    Total over all inputs: values matching no category get ``DataType.UNKNOWN``.

    Examples:
        >>> classify_type([1, 2])
        <DataType.ARRAY: 'array'>
        >>> classify_type(None)
        <DataType.NULL: 'null'>
        >>> classify_type(b"raw")
        <DataType.UNKNOWN: 'unknown'>
    """
    if value is UNDEFINED:
        return DataType.UNDEFINED
    if value is None:
        return DataType.NULL
    if isinstance(value, str):
        return DataType.STRING
    if isinstance(value, bool):
        return DataType.BOOLEAN
    if _is_number(value):
        return DataType.NUMBER
    if isinstance(value, (list, tuple)):
        return DataType.ARRAY
    if isinstance(value, (set, frozenset)):
        return DataType.SET
    if isinstance(value, Mapping):
        return DataType.OBJECT
    if isinstance(value, Enum):
        return DataType.SYMBOL
    if _is_function(value):
        return DataType.FUNCTION
    if _is_bigint(value):
        return DataType.BIGINT
    if isinstance(value, (bytes, bytearray, memoryview, range, complex)):
        return DataType.UNKNOWN
    if _has_attributes(value):
        return DataType.OBJECT
    return DataType.UNKNOWN
