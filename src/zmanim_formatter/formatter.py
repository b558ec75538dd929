"""ZmanimFormatter — форматирование времён и длительностей календаря.

Конфигурация (режим длительностей, date pattern, зона) хранится как неизменяемое
значение FormatterConfig. Setter-ы заменяют значение целиком; экземпляр не
предназначен для конкурентной мутации, для разных конфигураций создавайте
разные экземпляры или используйте функции core.format с явным config.
"""

import json
from dataclasses import dataclass, replace
from datetime import datetime
from typing import NoReturn, Optional, Union

from zmanim_formatter.core.domain.calendar import CalendarCapability
from zmanim_formatter.core.domain.output import OutputDocument
from zmanim_formatter.core.domain.time_quantity import TimeLike
from zmanim_formatter.core.format.date_time import (
    DEFAULT_DATE_FORMAT,
    format_date_time,
    format_xs_date_time,
    load_time_zone,
    validate_pattern,
)
from zmanim_formatter.core.format.duration import format_decimal, format_time, format_xsd_duration
from zmanim_formatter.core.format.modes import FormatMode
from zmanim_formatter.errors import UnsupportedOperationError
from zmanim_formatter.pipeline.assembler import AssemblerConfig, assemble


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatterConfig:
    """Конфигурация форматтера.

    По умолчанию: SEXAGESIMAL_XSD для длительностей, "h:mm:ss" для времён.
    """

    time_zone: str
    time_format: FormatMode = FormatMode.SEXAGESIMAL_XSD
    date_format: str = DEFAULT_DATE_FORMAT

    def __post_init__(self) -> None:
        object.__setattr__(self, "time_format", FormatMode.resolve(self.time_format))
        load_time_zone(self.time_zone)
        validate_pattern(self.date_format)


# =============================================================================
# FORMATTER
# =============================================================================


class ZmanimFormatter:
    """Форматтер длительностей и zoned timestamps.

    Example:
        >>> formatter = ZmanimFormatter("America/New_York",
        ...                             time_format=FormatMode.SEXAGESIMAL_SECONDS)
        >>> formatter.format(90 * 60 * 1000)
        '1:30:00'
    """

    def __init__(
        self,
        time_zone: str,
        time_format: Union[FormatMode, int, str] = FormatMode.SEXAGESIMAL_XSD,
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        """
        Args:
            time_zone: IANA идентификатор зоны
            time_format: режим форматирования длительностей
            date_format: LDML паттерн для format_date_time

        Raises:
            InvalidTimeZoneError: неизвестная зона
            InvalidPatternError: некорректный паттерн
        """
        self._config = FormatterConfig(
            time_zone=time_zone,
            time_format=time_format,
            date_format=date_format,
        )

    @classmethod
    def from_config(cls, config: FormatterConfig) -> "ZmanimFormatter":
        return cls(config.time_zone, config.time_format, config.date_format)

    @property
    def config(self) -> FormatterConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Setters / getters
    # -------------------------------------------------------------------------

    def set_time_format(self, time_format: Union[FormatMode, int, str]) -> None:
        self._config = replace(self._config, time_format=time_format)

    def get_time_format(self) -> FormatMode:
        return self._config.time_format

    def set_date_format(self, date_format: str) -> None:
        self._config = replace(self._config, date_format=date_format)

    def get_date_format(self) -> str:
        return self._config.date_format

    def set_time_zone(self, time_zone: str) -> None:
        self._config = replace(self._config, time_zone=time_zone)

    def get_time_zone(self) -> str:
        return self._config.time_zone

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format(self, value: TimeLike) -> str:
        """Длительность (ms или TimeQuantity) в текущем режиме."""
        return format_time(value, self._config.time_format)

    def format_date_time(self, timestamp: datetime) -> str:
        """Момент в текущей зоне по текущему date pattern."""
        return format_date_time(timestamp, self._config.time_zone, self._config.date_format)

    def get_xs_date_time(self, timestamp: datetime) -> str:
        """xsd:dateTime момента в текущей зоне, например 2007-02-18T06:45:27-05:00."""
        return format_xs_date_time(timestamp, self._config.time_zone)

    # -------------------------------------------------------------------------
    # Static API
    # -------------------------------------------------------------------------

    @staticmethod
    def format_xsd_duration_time(value: TimeLike) -> str:
        return format_xsd_duration(value)

    @staticmethod
    def format_decimal(num: float) -> str:
        return format_decimal(num)

    @staticmethod
    def to_json(
        calendar: CalendarCapability,
        config: Optional[AssemblerConfig] = None,
    ) -> OutputDocument:
        """Output document календаря: metadata + times под kind-ключом.

        Пример:
            {
                "metadata": {"date": "1969-02-08", "type": "AstronomicalCalendar", ...,
                             "timeZoneID": "America/New_York", "timeZoneOffset": "-5.0"},
                "AstronomicalTimes": {"Sunrise": "1969-02-08T06:59:27-05:00",
                                      "TemporalHour": "PT54M17.529S", ...}
            }
        """
        return assemble(calendar, config or AssemblerConfig())

    @staticmethod
    def to_json_string(
        calendar: CalendarCapability,
        indent: Optional[int] = None,
        config: Optional[AssemblerConfig] = None,
    ) -> str:
        """to_json, сериализованный в строку JSON (порядок ключей сохраняется)."""
        return json.dumps(ZmanimFormatter.to_json(calendar, config), indent=indent, ensure_ascii=False)

    @staticmethod
    def to_xml(*args, **kwargs) -> NoReturn:
        """XML сериализация удалена.

        Raises:
            UnsupportedOperationError: всегда
        """
        raise UnsupportedOperationError("XML serialization is not supported; use to_json().")
