"""
Formatting primitives.

Pure functions rendering durations (sexagesimal / decimal / xsd:duration)
and zoned timestamps (LDML patterns / xsd:dateTime).
"""

from .date_time import (
    DEFAULT_DATE_FORMAT,
    METADATA_DATE_FORMAT,
    XSD_DATE_FORMAT,
    format_date_time,
    format_xs_date_time,
    load_time_zone,
    offset_hours,
    render_pattern,
    to_zone,
    validate_pattern,
)
from .duration import (
    SEXAGESIMAL_XSD_ZERO,
    XSD_ZERO_DURATION,
    format_decimal,
    format_time,
    format_xsd_duration,
)
from .modes import FORMAT_SETTINGS, FormatMode, FormatSettings, settings_for

__all__ = [
    # Modes
    "FormatMode",
    "FormatSettings",
    "FORMAT_SETTINGS",
    "settings_for",
    # Durations
    "XSD_ZERO_DURATION",
    "SEXAGESIMAL_XSD_ZERO",
    "format_time",
    "format_xsd_duration",
    "format_decimal",
    # Date/time
    "XSD_DATE_FORMAT",
    "DEFAULT_DATE_FORMAT",
    "METADATA_DATE_FORMAT",
    "load_time_zone",
    "to_zone",
    "offset_hours",
    "render_pattern",
    "validate_pattern",
    "format_date_time",
    "format_xs_date_time",
]
