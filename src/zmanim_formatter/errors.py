"""
Исключения пакета zmanim_formatter.

Все ошибки наследуются от ZmanimFormatterError, плюс от соответствующего
стандартного исключения (ValueError / NotImplementedError), чтобы вызывающий
код мог ловить их привычным образом.
"""


class ZmanimFormatterError(Exception):
    """Базовое исключение пакета."""


class UnsupportedOperationError(ZmanimFormatterError, NotImplementedError):
    """
    Операция удалена и не поддерживается.

    Бросается всегда и синхронно (legacy XML сериализация).
    """


class InvalidTimeZoneError(ZmanimFormatterError, ValueError):
    """Неизвестный IANA идентификатор часового пояса."""

    def __init__(self, time_zone: str):
        self.time_zone = time_zone
        super().__init__(f"Unknown time zone: {time_zone!r}")


class InvalidPatternError(ZmanimFormatterError, ValueError):
    """Некорректный date pattern (например, незакрытый quoted literal)."""
