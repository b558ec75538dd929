"""
TimeQuantity — разложение длительности в миллисекундах

Единственный допустимый способ перевода длительности (ms) в компоненты:
- hours (не ограничены сверху: temporal hour, многодневные интервалы)
- minutes (0..59)
- seconds (0..59)
- milliseconds (0..999)
- negative (знак)

Дробная часть миллисекунд отбрасывается (truncate toward zero) до разложения.
"""

import math
from dataclasses import dataclass
from typing import Final, Union


# =============================================================================
# КОНСТАНТЫ
# =============================================================================
SECOND_MILLIS: Final[int] = 1000

# Миллисекунд в минуте (60,000)
MINUTE_MILLIS: Final[int] = 60 * SECOND_MILLIS

# Миллисекунд в часе (3,600,000)
HOUR_MILLIS: Final[int] = 60 * MINUTE_MILLIS


# =============================================================================
# TIME QUANTITY
# =============================================================================


@dataclass(frozen=True)
class TimeQuantity:
    """
    Длительность, разложенная на часы/минуты/секунды/миллисекунды.

    Компоненты всегда неотрицательны, знак хранится отдельно в negative.
    """

    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    negative: bool = False

    def __post_init__(self) -> None:
        if self.hours < 0:
            raise ValueError(f"hours must be non-negative: {self.hours}")
        if not 0 <= self.minutes < 60:
            raise ValueError(f"minutes out of range 0..59: {self.minutes}")
        if not 0 <= self.seconds < 60:
            raise ValueError(f"seconds out of range 0..59: {self.seconds}")
        if not 0 <= self.milliseconds < 1000:
            raise ValueError(f"milliseconds out of range 0..999: {self.milliseconds}")

    @classmethod
    def from_millis(cls, millis: float) -> "TimeQuantity":
        """
        Разложение длительности в миллисекундах.

        Args:
            millis: Длительность (ms), может быть отрицательной или дробной

        Returns:
            TimeQuantity с неотрицательными компонентами и флагом negative
        """
        truncated = math.trunc(millis)
        magnitude = abs(truncated)
        return cls(
            hours=magnitude // HOUR_MILLIS,
            minutes=(magnitude // MINUTE_MILLIS) % 60,
            seconds=(magnitude // SECOND_MILLIS) % 60,
            milliseconds=magnitude % SECOND_MILLIS,
            negative=truncated < 0,
        )

    @property
    def is_zero(self) -> bool:
        return (
            self.hours == 0
            and self.minutes == 0
            and self.seconds == 0
            and self.milliseconds == 0
        )

    def to_millis(self) -> int:
        """Обратное преобразование в миллисекунды (со знаком)."""
        magnitude = (
            self.hours * HOUR_MILLIS
            + self.minutes * MINUTE_MILLIS
            + self.seconds * SECOND_MILLIS
            + self.milliseconds
        )
        return -magnitude if self.negative else magnitude


TimeLike = Union[TimeQuantity, int, float]


def as_time_quantity(value: TimeLike) -> TimeQuantity:
    """Приведение миллисекунд или готового TimeQuantity к TimeQuantity."""
    if isinstance(value, TimeQuantity):
        return value
    return TimeQuantity.from_millis(value)
