"""Construction-time validation of searchable data."""

from __future__ import annotations

from seekr.errors import ConstructionError
from seekr.types import DataType


def validate_data_type(data_type: DataType) -> None:
    """Reject tags that can never be searched.

    Only ``undefined`` and ``unknown`` fail here. ``null`` passes and is
    rejected when a search is attempted.

    Raises:
        ConstructionError: For ``DataType.UNDEFINED`` or ``DataType.UNKNOWN``.
    """
    if data_type is DataType.UNDEFINED:
        raise ConstructionError(
            data_type,
            error="Search data passed to Seekr is undefined, so it's not searchable.",
            solution="Provide a valid Python value as searching data.",
        )
    if data_type is DataType.UNKNOWN:
        raise ConstructionError(
            data_type,
            error="The runtime type of the search data is not a recognised category.",
            solution="Provide a list of records or another supported value.",
        )
