"""
Форматирование zoned timestamps

Паттерны: диалект luxon-style token format. Буквы даты и времени совпадают
с LDML, но offset и день недели отличаются:
- Z / ZZ / ZZZ — узкий / с двоеточием / без двоеточия offset (+5, +05:00,
  +0500), а не LDML RFC 822 / ISO варианты
- E / EE / EEE — сокращённое имя дня, EEEE — полное (без numeric формы)
- offset с секундами (LMT зоны) отбрасывает секунды к нулю

Поддерживаемые токены:
    yyyy yy     год
    MMMM MMM MM M (или L)  месяц
    dd d        день месяца
    EEEE E..EEE день недели (полное / сокращённое)
    HH H        час 0-23       hh h   час 1-12
    kk k        час 1-24       KK K   час 0-11
    mm m        минуты         ss s   секунды
    S...        доли секунды (SSS = миллисекунды)
    a           AM/PM
    Z / ZZ / ZZZ  offset: +5 / +05:00 / +0500
    X / XX / XXX  ISO offset (Z для UTC): +05 / +0500 / +05:00
    z           сокращённое имя зоны
    'text'      literal, '' = одинарная кавычка

Канонический xsd:dateTime: yyyy-MM-ddTHH:mm:ss±HH:MM (числовой offset, без Z).
"""

import calendar
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Iterator, List, Tuple

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from zmanim_formatter.errors import InvalidPatternError, InvalidTimeZoneError


XSD_DATE_FORMAT = "yyyy-MM-dd'T'HH:mm:ss"

# Формат по умолчанию для ZmanimFormatter
DEFAULT_DATE_FORMAT = "h:mm:ss"

METADATA_DATE_FORMAT = "yyyy-MM-dd"

_SUPPORTED_LETTERS = frozenset("yMLdEHhkKmsSaZXz")


# =============================================================================
# TIME ZONES
# =============================================================================


def load_time_zone(time_zone: str) -> tzinfo:
    """
    IANA зона по идентификатору.

    Raises:
        InvalidTimeZoneError: Если зона неизвестна
    """
    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        raise InvalidTimeZoneError(time_zone) from e


def to_zone(timestamp: datetime, time_zone: str) -> datetime:
    """Перевод момента в зону; naive datetime трактуется как UTC."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(load_time_zone(time_zone))


def offset_hours(moment: datetime) -> float:
    """UTC offset момента в часах (например, -5.0 или 5.5)."""
    offset = moment.utcoffset() or timedelta(0)
    return offset.total_seconds() / 3600


# =============================================================================
# PATTERN RENDERING
# =============================================================================


def _tokenize(pattern: str) -> Iterator[Tuple[bool, str]]:
    """
    Разбор паттерна на (is_field, text).

    Поле: серия одинаковых букв; всё остальное literal.

    Raises:
        InvalidPatternError: Незакрытый quoted literal
    """
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                yield False, "'"
                i += 2
                continue
            literal: List[str] = []
            i += 1
            while True:
                if i >= n:
                    raise InvalidPatternError(f"Unterminated quote in pattern: {pattern!r}")
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            yield False, "".join(literal)
        elif char.isascii() and char.isalpha():
            j = i
            while j < n and pattern[j] == char:
                j += 1
            yield True, pattern[i:j]
            i = j
        else:
            yield False, char
            i += 1


def _format_offset(moment: datetime, separator: str, narrow: bool = False) -> str:
    offset = moment.utcoffset() or timedelta(0)
    seconds = int(offset.total_seconds())
    # Секунды LMT offset отбрасываются к нулю для обоих знаков
    sign = "-" if seconds < 0 else "+"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    if narrow:
        return f"{sign}{hours}" if minutes == 0 else f"{sign}{hours}:{minutes:02d}"
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _render_field(moment: datetime, field: str) -> str:
    letter = field[0]
    width = len(field)

    if letter not in _SUPPORTED_LETTERS:
        raise InvalidPatternError(f"Unsupported pattern letter: {letter!r}")

    if letter == "y":
        if width == 2:
            return f"{moment.year % 100:02d}"
        return f"{moment.year:0{width}d}"
    if letter in "ML":
        if width >= 4:
            return calendar.month_name[moment.month]
        if width == 3:
            return calendar.month_abbr[moment.month]
        return f"{moment.month:0{width}d}"
    if letter == "d":
        return f"{moment.day:0{width}d}"
    if letter == "E":
        if width >= 4:
            return calendar.day_name[moment.weekday()]
        return calendar.day_abbr[moment.weekday()]
    if letter == "H":
        return f"{moment.hour:0{width}d}"
    if letter == "h":
        return f"{moment.hour % 12 or 12:0{width}d}"
    if letter == "k":
        return f"{moment.hour or 24:0{width}d}"
    if letter == "K":
        return f"{moment.hour % 12:0{width}d}"
    if letter == "m":
        return f"{moment.minute:0{width}d}"
    if letter == "s":
        return f"{moment.second:0{width}d}"
    if letter == "S":
        return f"{moment.microsecond:06d}"[:width].ljust(width, "0")
    if letter == "a":
        return "AM" if moment.hour < 12 else "PM"
    if letter == "Z":
        if width == 1:
            return _format_offset(moment, "", narrow=True)
        return _format_offset(moment, ":" if width == 2 else "")
    if letter == "X":
        if not moment.utcoffset():
            return "Z"
        if width == 1:
            return _format_offset(moment, "")[:3]
        return _format_offset(moment, ":" if width >= 3 else "")
    # z
    return moment.tzname() or ""


def render_pattern(moment: datetime, pattern: str) -> str:
    """
    Рендеринг datetime по token паттерну (без перевода зоны).

    Raises:
        InvalidPatternError: Некорректный паттерн
    """
    return "".join(
        _render_field(moment, text) if is_field else text
        for is_field, text in _tokenize(pattern)
    )


def validate_pattern(pattern: str) -> None:
    """
    Проверка паттерна без рендеринга.

    Raises:
        InvalidPatternError: Некорректный паттерн
    """
    for is_field, text in _tokenize(pattern):
        if is_field and text[0] not in _SUPPORTED_LETTERS:
            raise InvalidPatternError(f"Unsupported pattern letter: {text[0]!r}")


# =============================================================================
# PUBLIC API
# =============================================================================


def format_xs_date_time(timestamp: datetime, time_zone: str) -> str:
    """
    xsd:dateTime представление момента в зоне.

    Returns:
        Например, 2007-02-18T06:45:27-05:00
    """
    moment = to_zone(timestamp, time_zone)
    return render_pattern(moment, XSD_DATE_FORMAT + "ZZ")


def format_date_time(timestamp: datetime, time_zone: str, pattern: str) -> str:
    """
    Форматирование момента в зоне по паттерну.

    Для канонического XSD_DATE_FORMAT результат совпадает с format_xs_date_time.
    """
    if pattern == XSD_DATE_FORMAT:
        return format_xs_date_time(timestamp, time_zone)
    return render_pattern(to_zone(timestamp, time_zone), pattern)
