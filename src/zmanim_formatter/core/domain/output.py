"""
Output document — модель результата to_json.

Форма документа:
{
    "metadata": {date, type, algorithm, location, latitude, longitude,
                 elevation, timeZoneName, timeZoneID, timeZoneOffset},
    "<AstronomicalTimes|BasicZmanim|Zmanim>": {label: formatted string, ...}
}

Совместимость с JSON Schema (core/contracts/schema/output_document.json).
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# Тип итогового документа: metadata + ровно один kind-ключ
OutputDocument = Dict[str, Any]


class OutputMetadata(BaseModel):
    """
    Metadata блок output document.

    Все поля строковые (location может быть None). Сериализуется по alias
    (camelCase ключи JSON документа).
    """

    date: str = Field(..., description="Дата календаря, yyyy-MM-dd")
    type: str = Field(..., description="Имя типа календаря")
    algorithm: str = Field(..., description="Имя астрономического калькулятора")
    location: Optional[str] = Field(None, description="Название места")
    latitude: str = Field(..., description="Широта")
    longitude: str = Field(..., description="Долгота")
    elevation: str = Field(..., description="Высота (format_decimal)")
    time_zone_name: str = Field(..., alias="timeZoneName")
    time_zone_id: str = Field(..., alias="timeZoneID")
    time_zone_offset: str = Field(
        ..., alias="timeZoneOffset", description="UTC offset в часах (format_decimal)"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def to_output(self) -> Dict[str, Optional[str]]:
        """Словарь с camelCase ключами (в порядке объявления полей)."""
        return self.model_dump(by_alias=True)
