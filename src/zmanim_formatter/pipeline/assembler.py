"""Output Assembler

Сборка output document из calendar capability-object:
1. metadata из identity-полей календаря
2. kind-ключ по объявленному виду (Zmanim > BasicZmanim > AstronomicalTimes)
3. discovery → sort & filter
4. рендеринг: timestamps → xsd:dateTime, durations → xsd:duration,
   unavailable → "N/A"
5. слияние в один mapping: timestamps, затем durations, затем unavailable
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime, time
from typing import AbstractSet, Dict

from zmanim_formatter.core.contracts import validate_output_document
from zmanim_formatter.core.domain.calendar import CalendarCapability, resolve_output_key
from zmanim_formatter.core.domain.output import OutputDocument, OutputMetadata
from zmanim_formatter.core.format.date_time import (
    METADATA_DATE_FORMAT,
    format_xs_date_time,
    load_time_zone,
    offset_hours,
    render_pattern,
)
from zmanim_formatter.core.format.duration import format_decimal, format_xsd_duration
from zmanim_formatter.pipeline.discovery import EXCLUDED_ACCESSORS, discover
from zmanim_formatter.pipeline.ordering import (
    DURATION_THRESHOLD_MS,
    sort_durations,
    sort_timestamps,
)


logger = logging.getLogger(__name__)

UNAVAILABLE_TEXT = "N/A"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AssemblerConfig:
    """Конфигурация сборки output document."""

    duration_threshold_ms: float = DURATION_THRESHOLD_MS
    excluded_accessors: AbstractSet[str] = EXCLUDED_ACCESSORS
    unavailable_text: str = UNAVAILABLE_TEXT

    # Проверка результата JSON Schema контрактом
    validate_output: bool = True


# =============================================================================
# METADATA
# =============================================================================


def build_metadata(calendar: CalendarCapability) -> OutputMetadata:
    """
    Metadata блок из identity-полей календаря.

    Имя зоны и offset берутся на начало календарного дня в зоне геолокации.
    """
    geo = calendar.geo_location
    day_start = datetime.combine(calendar.date, time(), tzinfo=load_time_zone(geo.time_zone))

    return OutputMetadata(
        date=render_pattern(day_start, METADATA_DATE_FORMAT),
        type=calendar.type_name,
        algorithm=calendar.calculator_name,
        location=geo.location_name,
        latitude=str(geo.latitude),
        longitude=str(geo.longitude),
        elevation=format_decimal(geo.elevation),
        time_zone_name=day_start.tzname() or geo.time_zone,
        time_zone_id=geo.time_zone,
        time_zone_offset=format_decimal(offset_hours(day_start)),
    )


# =============================================================================
# TIMES
# =============================================================================


def build_times(
    calendar: CalendarCapability,
    config: AssemblerConfig = AssemblerConfig(),
) -> Dict[str, str]:
    """
    label → formatted string в каноническом порядке.

    Returns:
        Insertion order: timestamps (по времени), durations (по длительности),
        unavailable (discovery order)
    """
    time_zone = calendar.geo_location.time_zone
    buckets = discover(calendar, config.excluded_accessors)

    times: Dict[str, str] = {}
    for zman in sort_timestamps(buckets.timestamps):
        times[zman.label] = format_xs_date_time(zman.value, time_zone)
    for zman in sort_durations(buckets.durations, config.duration_threshold_ms):
        times[zman.label] = format_xsd_duration(math.trunc(zman.value_millis))
    for label in buckets.unavailable:
        times[label] = config.unavailable_text

    logger.debug(
        "Assembled %d entries (%d timestamps, %d durations, %d unavailable, %d ignored)",
        len(times),
        len(buckets.timestamps),
        len(buckets.durations),
        len(buckets.unavailable),
        len(buckets.ignored),
    )
    return times


def assemble(
    calendar: CalendarCapability,
    config: AssemblerConfig = AssemblerConfig(),
) -> OutputDocument:
    """
    Полный output document для календаря.

    Raises:
        InvalidTimeZoneError: Неизвестная зона геолокации
        ValueError: Календарь не объявил известный вид
        jsonschema.ValidationError: Документ нарушает контракт (validate_output=True)
    """
    document: OutputDocument = {
        "metadata": build_metadata(calendar).to_output(),
    }
    document[resolve_output_key(calendar.kind)] = build_times(calendar, config)

    if config.validate_output:
        validate_output_document(document)
    return document
