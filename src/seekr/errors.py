"""Exceptions raised by the seekr engine."""

from __future__ import annotations

from enum import Enum

from seekr.types import DataType


class SeekrError(Exception):
    """Base error for the seekr engine."""


class SearchErrorReason(str, Enum):
    """Why a search call was rejected."""

    NULL_DATA = "null_data"
    UNDEFINED_DATA = "undefined_data"
    UNSUPPORTED_TYPE = "unsupported_type"


def _format_message(method: str, data_type: DataType, error: str, solution: str) -> str:
    return (
        f"Seekr {method} terminated. "
        f"Received data type: {data_type.value}. "
        f"Error: {error} "
        f"Solution: {solution}"
    )


class ConstructionError(SeekrError):
    """Raised when the data handed to the engine can never be searched."""

    def __init__(self, data_type: DataType, error: str, solution: str) -> None:
        super().__init__(_format_message("constructor", data_type, error, solution))
        self.data_type = data_type


class SearchError(SeekrError):
    """Raised when a search is attempted against data without a search strategy."""

    def __init__(self, data_type: DataType, reason: SearchErrorReason, error: str, solution: str) -> None:
        super().__init__(_format_message("search method", data_type, error, solution))
        self.data_type = data_type
        self.reason = reason
