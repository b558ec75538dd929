"""
zmanim_formatter — форматирование времён и output document для zmanim календарей.

- TimeQuantity / FormatMode / xsd:duration / xsd:dateTime форматирование
- discovery → sort & filter → assemble pipeline для calendar capability-object
"""

from zmanim_formatter.core.domain import (
    CalendarCapability,
    CalendarKind,
    GeoLocation,
    OutputDocument,
    OutputMetadata,
    TimeQuantity,
)
from zmanim_formatter.core.format import (
    FormatMode,
    format_date_time,
    format_decimal,
    format_time,
    format_xs_date_time,
    format_xsd_duration,
)
from zmanim_formatter.errors import (
    InvalidPatternError,
    InvalidTimeZoneError,
    UnsupportedOperationError,
    ZmanimFormatterError,
)
from zmanim_formatter.formatter import FormatterConfig, ZmanimFormatter
from zmanim_formatter.pipeline import AssemblerConfig, assemble

__all__ = [
    # Formatter
    "ZmanimFormatter",
    "FormatterConfig",
    "AssemblerConfig",
    "assemble",
    # Domain
    "TimeQuantity",
    "CalendarKind",
    "CalendarCapability",
    "GeoLocation",
    "OutputMetadata",
    "OutputDocument",
    # Formatting
    "FormatMode",
    "format_time",
    "format_xsd_duration",
    "format_decimal",
    "format_date_time",
    "format_xs_date_time",
    # Errors
    "ZmanimFormatterError",
    "UnsupportedOperationError",
    "InvalidTimeZoneError",
    "InvalidPatternError",
]
