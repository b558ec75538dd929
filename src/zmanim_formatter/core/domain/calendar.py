"""
Calendar capability — контракт внешнего вычислительного слоя.

Слой астрономических вычислений (солнечные события, еврейский календарь)
находится вне пакета. Отсюда видны только:
- объявленный вид календаря (CalendarKind)
- identity-поля (дата, геолокация, имя калькулятора, имя типа)
- явный упорядоченный реестр accessor-ов (name, zero-arg callable)
"""

from datetime import date
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Protocol, Tuple, Union

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class CalendarKind(str, Enum):
    """
    Вид календаря. Значение совпадает с ключом в output document.

    Иерархия (от общего к частному):
    AstronomicalTimes ⊂ BasicZmanim ⊂ Zmanim
    """

    ASTRONOMICAL_TIMES = "AstronomicalTimes"
    BASIC_ZMANIM = "BasicZmanim"
    ZMANIM = "Zmanim"


# Самый специализированный вид проверяется первым
KIND_PRECEDENCE: Tuple[CalendarKind, ...] = (
    CalendarKind.ZMANIM,
    CalendarKind.BASIC_ZMANIM,
    CalendarKind.ASTRONOMICAL_TIMES,
)

KindDeclaration = Union[CalendarKind, str, Iterable[Union[CalendarKind, str]]]


def resolve_output_key(kind: KindDeclaration) -> str:
    """
    Выбор ключа output document по объявленному виду календаря.

    Календарь может объявить один вид или набор видов (например, Zmanim-календарь
    одновременно является BasicZmanim и AstronomicalTimes). Выбирается самый
    специализированный.

    Args:
        kind: CalendarKind, его строковое значение или iterable из них

    Returns:
        "Zmanim" | "BasicZmanim" | "AstronomicalTimes"

    Raises:
        ValueError: Если ни один объявленный вид не распознан
    """
    if isinstance(kind, (CalendarKind, str)):
        declared = {CalendarKind(kind)}
    else:
        declared = {CalendarKind(k) for k in kind}

    for candidate in KIND_PRECEDENCE:
        if candidate in declared:
            return candidate.value

    raise ValueError(f"Calendar declares no known kind: {kind!r}")


# =============================================================================
# COLLABORATOR CONTRACT
# =============================================================================


class GeoLocation(BaseModel):
    """Геолокация календаря (identity-поля для metadata)."""

    location_name: Optional[str] = Field(None, description="Название места")
    latitude: float = Field(..., ge=-90, le=90, description="Широта (градусы)")
    longitude: float = Field(..., ge=-180, le=180, description="Долгота (градусы)")
    elevation: float = Field(0.0, ge=0, description="Высота над уровнем моря (м)")
    time_zone: str = Field(..., description="IANA time zone id, например America/New_York")

    model_config = {"frozen": True}


class GeoLocationLike(Protocol):
    location_name: Optional[str]
    latitude: float
    longitude: float
    elevation: float
    time_zone: str


Accessor = Tuple[str, Callable[..., Any]]


class CalendarCapability(Protocol):
    """
    Calendar capability-object.

    zmanim_accessors() возвращает упорядоченный реестр пар (name, callable);
    порядок реестра определяет discovery order (tie-break при сортировке).
    Accessor-ы должны быть запросами без side effects.
    """

    kind: KindDeclaration
    type_name: str
    date: date
    calculator_name: str
    geo_location: GeoLocationLike

    def zmanim_accessors(self) -> Iterable[Accessor]:
        ...
