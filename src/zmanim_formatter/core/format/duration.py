"""
Форматирование длительностей

- format_time: sexagesimal / decimal / XSD режимы (FormatMode)
- format_xsd_duration: W3C xsd:duration, лексическая форма [-]PT[nH][nM][n.mmmS]
- format_decimal: число с минимум одним знаком после точки

Правила XSD duration:
- единица с нулевым значением не выводится
- секунды и миллисекунды выводятся вместе, если хотя бы одна ненулевая
- полностью нулевая длительность -> "PT0S"
- знак ставится перед P: "-PT1H30M"
"""

import math
from decimal import Decimal
from numbers import Real

from zmanim_formatter.core.domain.time_quantity import (
    HOUR_MILLIS,
    TimeLike,
    as_time_quantity,
)
from zmanim_formatter.core.format.modes import FormatMode, settings_for


XSD_ZERO_DURATION = "PT0S"

# xsd:time рендеринг нулевой длительности
SEXAGESIMAL_XSD_ZERO = "00:00:00.0"

# Знаков после точки в DECIMAL режиме
DECIMAL_PLACES = 5


# =============================================================================
# XSD DURATION
# =============================================================================


def format_xsd_duration(value: TimeLike) -> str:
    """
    xsd:duration представление длительности.

    Args:
        value: Длительность в миллисекундах или TimeQuantity

    Returns:
        Строка вида PT1H6M7.869S (или PT0S для нулевой длительности)
    """
    time = as_time_quantity(value)

    if time.is_zero:
        return XSD_ZERO_DURATION

    duration = "PT"
    if time.hours != 0:
        duration += f"{time.hours}H"
    if time.minutes != 0:
        duration += f"{time.minutes}M"
    if time.seconds != 0 or time.milliseconds != 0:
        duration += f"{time.seconds}.{time.milliseconds:03d}S"

    if time.negative:
        duration = "-" + duration
    return duration


# =============================================================================
# SEXAGESIMAL / DECIMAL
# =============================================================================


def format_time(value: TimeLike, mode: FormatMode = FormatMode.SEXAGESIMAL_XSD) -> str:
    """
    Форматирование длительности в заданном режиме.

    Args:
        value: Длительность в миллисекундах или TimeQuantity
        mode: Режим форматирования

    Returns:
        Например, 90 минут в SEXAGESIMAL_SECONDS -> "1:30:00"
    """
    mode = FormatMode.resolve(mode)
    time = as_time_quantity(value)

    if mode == FormatMode.XSD_DURATION:
        return format_xsd_duration(time)

    if mode == FormatMode.DECIMAL:
        return f"{time.to_millis() / HOUR_MILLIS:.{DECIMAL_PLACES}f}"

    if mode == FormatMode.SEXAGESIMAL_XSD and time.is_zero:
        return SEXAGESIMAL_XSD_ZERO

    settings = settings_for(mode)
    hours = f"{time.hours:02d}" if settings.prepend_zero_hours else str(time.hours)
    text = f"{hours}:{time.minutes:02d}"
    if settings.use_seconds:
        text += f":{time.seconds:02d}"
    if settings.use_millis:
        text += f".{time.milliseconds:03d}"

    return "-" + text if time.negative else text


def format_decimal(num: Real) -> str:
    """
    Число с ненулевой дробной частью выводится полностью (без округления)
    в позиционной записи без экспоненты, целое выводится ровно с одним знаком
    после точки.

    >>> format_decimal(5)
    '5.0'
    >>> format_decimal(5.25)
    '5.25'
    """
    if num != math.trunc(num):
        return format(Decimal(str(num)), "f")
    return f"{num:.1f}"
