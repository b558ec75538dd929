"""Pipeline — discovery → sort & filter → assemble.

Превращает calendar capability-object в детерминированный output document.
"""

from .assembler import (
    UNAVAILABLE_TEXT,
    AssemblerConfig,
    assemble,
    build_metadata,
    build_times,
)
from .discovery import (
    ACCESSOR_PREFIX,
    EXCLUDED_ACCESSORS,
    ClassifiedAccessors,
    ResultCategory,
    classify,
    derive_label,
    discover,
    is_eligible,
    iter_eligible_accessors,
    takes_no_arguments,
)
from .ordering import DURATION_THRESHOLD_MS, filter_durations, sort_durations, sort_timestamps

__all__ = [
    # Discovery
    "ACCESSOR_PREFIX",
    "EXCLUDED_ACCESSORS",
    "ResultCategory",
    "ClassifiedAccessors",
    "takes_no_arguments",
    "is_eligible",
    "derive_label",
    "iter_eligible_accessors",
    "classify",
    "discover",
    # Ordering
    "DURATION_THRESHOLD_MS",
    "filter_durations",
    "sort_durations",
    "sort_timestamps",
    # Assembler
    "UNAVAILABLE_TEXT",
    "AssemblerConfig",
    "build_metadata",
    "build_times",
    "assemble",
]
