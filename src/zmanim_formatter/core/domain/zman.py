"""
Zman — именованные результаты accessor-ов календаря.

- NamedTimestamp: событие (zoned datetime)
- NamedDuration: длительность в миллисекундах
"""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class NamedTimestamp:
    """Одно событие календаря (например, Sunrise)."""

    label: str
    value: datetime

    @property
    def instant(self) -> datetime:
        """Абсолютный момент; naive datetime трактуется как UTC."""
        if self.value.tzinfo is None:
            return self.value.replace(tzinfo=timezone.utc)
        return self.value


@dataclass(frozen=True)
class NamedDuration:
    """Одна длительность (например, TemporalHour)."""

    label: str
    value_millis: float

    @property
    def magnitude(self) -> float:
        return abs(self.value_millis)


def date_order_key(zman: NamedTimestamp) -> datetime:
    """Sort key: ранние события первыми."""
    return zman.instant


def duration_order_key(zman: NamedDuration) -> float:
    """Sort key: короткие длительности первыми."""
    return zman.magnitude
