"""
FormatMode — режимы форматирования длительностей.

Каждый sexagesimal режим отображается в тройку настроек
(prepend_zero_hours, use_seconds, use_millis). Таблица неизменяема и
безопасна для совместного чтения.
"""

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Union


class FormatMode(IntEnum):
    """
    Режим форматирования. Целые коды совпадают с историческими константами.
    """

    # H:MM:SS.mmm с zero-padded часами (xsd:time), ноль -> 00:00:00.0
    SEXAGESIMAL_XSD = 0
    # Десятичные часы, 5 знаков после точки
    DECIMAL = 1
    # H:MM
    SEXAGESIMAL = 2
    # H:MM:SS
    SEXAGESIMAL_SECONDS = 3
    # H:MM:SS.mmm
    SEXAGESIMAL_MILLIS = 4
    # PT1H6M7.869S
    XSD_DURATION = 5

    @classmethod
    def resolve(cls, mode: Union["FormatMode", int, str]) -> "FormatMode":
        """
        Приведение int-кода или имени режима к FormatMode.

        Raises:
            ValueError: Если режим не распознан
        """
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls[mode.upper()]
            except KeyError:
                raise ValueError(f"Unknown format mode: {mode!r}") from None
        return cls(mode)


@dataclass(frozen=True)
class FormatSettings:
    """Тройка настроек sexagesimal рендеринга."""

    prepend_zero_hours: bool
    use_seconds: bool
    use_millis: bool


FORMAT_SETTINGS: Mapping[FormatMode, FormatSettings] = MappingProxyType(
    {
        FormatMode.SEXAGESIMAL_XSD: FormatSettings(True, True, True),
        FormatMode.SEXAGESIMAL: FormatSettings(False, False, False),
        FormatMode.SEXAGESIMAL_SECONDS: FormatSettings(False, True, False),
        FormatMode.SEXAGESIMAL_MILLIS: FormatSettings(False, True, True),
    }
)


def settings_for(mode: FormatMode) -> FormatSettings:
    """
    Raises:
        ValueError: Для DECIMAL и XSD_DURATION (режимы без тройки настроек)
    """
    try:
        return FORMAT_SETTINGS[mode]
    except KeyError:
        raise ValueError(f"Format mode {mode.name} has no sexagesimal settings") from None
