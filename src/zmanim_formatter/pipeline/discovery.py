"""Accessor Discovery & Classification

Обход явного реестра accessor-ов календаря (zmanim_accessors()):
1. Eligibility: имя начинается с "get", callable без обязательных параметров,
   имя не входит в EXCLUDED_ACCESSORS
2. Вызов каждого eligible accessor ровно один раз
3. Label = имя без префикса "get"
4. Классификация результата:
   - datetime        → timestamps
   - число (не bool) → duration candidates
   - None            → unavailable ("N/A")
   - прочее          → ignored (не ошибка)
"""

import inspect
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from numbers import Real
from typing import AbstractSet, Any, Callable, Final, Iterator, List, Tuple

from zmanim_formatter.core.domain.calendar import Accessor, CalendarCapability
from zmanim_formatter.core.domain.zman import NamedDuration, NamedTimestamp


logger = logging.getLogger(__name__)

ACCESSOR_PREFIX: Final[str] = "get"

# Общие/внутренние accessor-ы и варианты, не предназначенные для перечисления
EXCLUDED_ACCESSORS: Final[frozenset] = frozenset(
    {
        "getAdjustedDate",
        "getDate",
        "getElevationAdjustedSunrise",
        "getElevationAdjustedSunset",
        "getMidnightLastNight",
        "getMidnightTonight",
        "getSunriseBaalHatanya",
        "getSunsetBaalHatanya",
    }
)


# =============================================================================
# RESULT
# =============================================================================


class ResultCategory(str, Enum):
    """Категория результата accessor-а."""

    TIMESTAMP = "TIMESTAMP"
    DURATION = "DURATION"
    UNAVAILABLE = "UNAVAILABLE"
    IGNORED = "IGNORED"


@dataclass(frozen=True)
class ClassifiedAccessors:
    """Buckets в discovery order (до сортировки и фильтрации)."""

    timestamps: Tuple[NamedTimestamp, ...]
    durations: Tuple[NamedDuration, ...]
    unavailable: Tuple[str, ...]
    ignored: Tuple[str, ...]


# =============================================================================
# ELIGIBILITY
# =============================================================================


def takes_no_arguments(fn: Callable[..., Any]) -> bool:
    """True, если callable можно вызвать без аргументов."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return False

    for param in signature.parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        if param.default is param.empty:
            return False
    return True


def is_eligible(name: str, fn: Callable[..., Any], excluded: AbstractSet[str] = EXCLUDED_ACCESSORS) -> bool:
    if not name.startswith(ACCESSOR_PREFIX):
        return False
    if name in excluded:
        return False
    return takes_no_arguments(fn)


def derive_label(name: str) -> str:
    """getSunrise -> Sunrise"""
    return name[len(ACCESSOR_PREFIX):]


def iter_eligible_accessors(
    calendar: CalendarCapability,
    excluded: AbstractSet[str] = EXCLUDED_ACCESSORS,
) -> Iterator[Accessor]:
    for name, fn in calendar.zmanim_accessors():
        if is_eligible(name, fn, excluded):
            yield name, fn
        else:
            logger.debug("Skipping accessor %s", name)


# =============================================================================
# CLASSIFICATION
# =============================================================================


def classify(value: Any) -> ResultCategory:
    if value is None:
        return ResultCategory.UNAVAILABLE
    if isinstance(value, datetime):
        return ResultCategory.TIMESTAMP
    if isinstance(value, Real) and not isinstance(value, bool):
        return ResultCategory.DURATION
    return ResultCategory.IGNORED


def discover(
    calendar: CalendarCapability,
    excluded: AbstractSet[str] = EXCLUDED_ACCESSORS,
) -> ClassifiedAccessors:
    """
    Вызов eligible accessor-ов и распределение результатов по buckets.

    Args:
        calendar: Calendar capability-object
        excluded: Имена accessor-ов, исключённые из перечисления

    Returns:
        ClassifiedAccessors в discovery order
    """
    timestamps: List[NamedTimestamp] = []
    durations: List[NamedDuration] = []
    unavailable: List[str] = []
    ignored: List[str] = []

    for name, fn in iter_eligible_accessors(calendar, excluded):
        label = derive_label(name)
        value = fn()
        category = classify(value)

        if category == ResultCategory.TIMESTAMP:
            timestamps.append(NamedTimestamp(label=label, value=value))
        elif category == ResultCategory.DURATION:
            durations.append(NamedDuration(label=label, value_millis=value))
        elif category == ResultCategory.UNAVAILABLE:
            unavailable.append(label)
        else:
            logger.debug(
                "Ignoring accessor %s: unsupported result type %s",
                name,
                type(value).__name__,
            )
            ignored.append(label)

    return ClassifiedAccessors(
        timestamps=tuple(timestamps),
        durations=tuple(durations),
        unavailable=tuple(unavailable),
        ignored=tuple(ignored),
    )
