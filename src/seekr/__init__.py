"""seekr - exact-match search over in-memory Python data.

Public surface:
- Seekr: engine wrapping one value, with ``search`` and ``create``
- SearchOptions / SearchMode: comparison configuration
- DataType / classify_type / UNDEFINED: type classification
- ConstructionError / SearchError: error taxonomy
"""

from seekr.compare import compare_property, compare_value, register_mode
from seekr.engine import ConstructionResult, Seekr
from seekr.errors import ConstructionError, SearchError, SearchErrorReason, SeekrError
from seekr.options import SearchMode, SearchOptions
from seekr.paths import get_property, resolve_path
from seekr.types import UNDEFINED, DataType, classify_type


__version__ = "1.0.0"

__all__ = [
    "UNDEFINED",
    "ConstructionError",
    "ConstructionResult",
    "DataType",
    "SearchError",
    "SearchErrorReason",
    "SearchMode",
    "SearchOptions",
    "Seekr",
    "SeekrError",
    "classify_type",
    "compare_property",
    "compare_value",
    "get_property",
    "register_mode",
    "resolve_path",
]
