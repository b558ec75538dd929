"""
Domain models and value objects.

Contains TimeQuantity, named zmanim, calendar kinds and the output metadata model.
"""

from zmanim_formatter.core.domain.calendar import (
    KIND_PRECEDENCE,
    Accessor,
    CalendarCapability,
    CalendarKind,
    GeoLocation,
    GeoLocationLike,
    resolve_output_key,
)
from zmanim_formatter.core.domain.output import OutputDocument, OutputMetadata
from zmanim_formatter.core.domain.time_quantity import (
    HOUR_MILLIS,
    MINUTE_MILLIS,
    SECOND_MILLIS,
    TimeLike,
    TimeQuantity,
    as_time_quantity,
)
from zmanim_formatter.core.domain.zman import (
    NamedDuration,
    NamedTimestamp,
    date_order_key,
    duration_order_key,
)

__all__ = [
    # TimeQuantity
    "SECOND_MILLIS",
    "MINUTE_MILLIS",
    "HOUR_MILLIS",
    "TimeLike",
    "TimeQuantity",
    "as_time_quantity",
    # Zman
    "NamedTimestamp",
    "NamedDuration",
    "date_order_key",
    "duration_order_key",
    # Calendar
    "CalendarKind",
    "KIND_PRECEDENCE",
    "resolve_output_key",
    "GeoLocation",
    "GeoLocationLike",
    "Accessor",
    "CalendarCapability",
    # Output
    "OutputMetadata",
    "OutputDocument",
]
