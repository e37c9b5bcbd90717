"""Search options value object."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from seekr.config import Settings, get_settings


class SearchMode(str, Enum):
    """Comparison modes with a registered strategy."""

    EXACT = "exact"


class SearchOptions(BaseModel):
    """Immutable options controlling how values are compared.

    Accepts both snake_case and camelCase field names, so
    ``SearchOptions.model_validate({"mode": "exact", "caseSensitive": True})``
    works.

    Attributes:
        mode: Comparison strategy. ``None`` or an unregistered mode matches
            nothing; an empty string means ``"exact"``.
        case_sensitive: Compare string pairs without lowercasing them first.
        deep: Treat property names containing ``.`` as nested paths instead
            of literal keys.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    mode: str | None = None
    case_sensitive: bool = Field(default=False, alias="caseSensitive")
    deep: bool = False

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value: object) -> object:
        if isinstance(value, Enum):
            value = value.value
        if value == "":
            return SearchMode.EXACT.value
        if value is not None and not isinstance(value, str):
            # Unregistered, so it matches nothing
            return str(value)
        return value

    @field_validator("case_sensitive", "deep", mode="before")
    @classmethod
    def _truthy(cls, value: object) -> bool:
        return bool(value)

    @classmethod
    def from_settings(cls, settings: Settings) -> SearchOptions:
        """Build the default options described by *settings*."""
        return cls(mode=settings.default_mode, case_sensitive=settings.case_sensitive, deep=settings.deep)


def coerce_options(
    options: SearchOptions | Mapping[str, Any] | None,
    settings: Settings | None = None,
) -> SearchOptions:
    """Turn whatever the caller passed into a ``SearchOptions``.

    ``None`` falls back to the defaults in *settings*, or the process-wide
    settings when none are given.
    """
    if isinstance(options, SearchOptions):
        return options
    if options is None:
        return SearchOptions.from_settings(settings or get_settings())
    return SearchOptions.model_validate(dict(options))
