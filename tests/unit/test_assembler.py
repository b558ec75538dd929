"""
Тесты Output Assembler (to_json / to_xml)

Покрытие:
- Выбор kind-ключа для трёх видов календаря и наборов видов
- Metadata из identity-полей
- Порядок: timestamps → durations → N/A
- Рендеринг xsd:dateTime / xsd:duration, truncation дробных ms
- Валидация JSON Schema контрактом
- to_xml всегда unsupported
"""

import json
import math
from datetime import date, datetime, timedelta, timezone

import pytest

from zmanim_formatter import (
    AssemblerConfig,
    CalendarKind,
    GeoLocation,
    UnsupportedOperationError,
    ZmanimFormatter,
)
from zmanim_formatter.core.domain import resolve_output_key
from zmanim_formatter.errors import InvalidTimeZoneError
from zmanim_formatter.pipeline import assemble, build_metadata


# =============================================================================
# FIXTURES
# =============================================================================


SUNRISE = datetime(2007, 2, 18, 11, 45, 27, tzinfo=timezone.utc)
SUNSET = datetime(2007, 2, 18, 22, 40, 3, tzinfo=timezone.utc)
NOON = datetime(2007, 2, 18, 17, 12, 45, tzinfo=timezone.utc)


class FakeAstronomicalCalendar:
    """Минимальный AstronomicalTimes календарь."""

    kind = CalendarKind.ASTRONOMICAL_TIMES
    type_name = "AstronomicalCalendar"
    calculator_name = "US Naval Almanac Algorithm"

    def __init__(self, geo_location=None, calendar_date=date(2007, 2, 18)):
        self.date = calendar_date
        self.geo_location = geo_location or GeoLocation(
            location_name="Lakewood, NJ",
            latitude=40.095965,
            longitude=-74.22213,
            elevation=31,
            time_zone="America/New_York",
        )

    def get_sunset(self):
        return SUNSET

    def get_sunrise(self):
        return SUNRISE

    def get_sun_transit(self):
        return NOON

    def get_temporal_hour(self):
        return 3_257_529.7

    def get_sea_level_sunrise(self):
        return None

    def get_sunrise_offset_by_degrees(self, degrees):
        raise AssertionError("accessors with parameters must not be called")

    def zmanim_accessors(self):
        return [
            ("getSunset", self.get_sunset),
            ("getSunrise", self.get_sunrise),
            ("getSeaLevelSunrise", self.get_sea_level_sunrise),
            ("getTemporalHour", self.get_temporal_hour),
            ("getSunTransit", self.get_sun_transit),
            ("getSunriseOffsetByDegrees", self.get_sunrise_offset_by_degrees),
            ("getDate", lambda: self.date),
        ]


class FakeZmanimCalendar(FakeAstronomicalCalendar):
    kind = (CalendarKind.ASTRONOMICAL_TIMES, CalendarKind.BASIC_ZMANIM)
    type_name = "ZmanimCalendar"

    def get_candle_lighting_offset(self):
        return 18

    def get_shaah_zmanis_gra(self):
        return 3_300_000

    def zmanim_accessors(self):
        return super().zmanim_accessors() + [
            ("getCandleLightingOffset", self.get_candle_lighting_offset),
            ("getShaahZmanisGra", self.get_shaah_zmanis_gra),
        ]


class FakeComplexZmanimCalendar(FakeZmanimCalendar):
    kind = (CalendarKind.ASTRONOMICAL_TIMES, CalendarKind.BASIC_ZMANIM, CalendarKind.ZMANIM)
    type_name = "ComplexZmanimCalendar"

    def get_tzais_72(self):
        return SUNSET + timedelta(minutes=72)

    def get_fixed_local_chatzos(self):
        return None

    def zmanim_accessors(self):
        return super().zmanim_accessors() + [
            ("getTzais72", self.get_tzais_72),
            ("getFixedLocalChatzos", self.get_fixed_local_chatzos),
        ]


@pytest.fixture
def astronomical_calendar():
    return FakeAstronomicalCalendar()


# =============================================================================
# KIND KEY
# =============================================================================


class TestOutputKey:
    """Тесты выбора kind-ключа"""

    @pytest.mark.parametrize(
        "calendar_cls, key",
        [
            (FakeAstronomicalCalendar, "AstronomicalTimes"),
            (FakeZmanimCalendar, "BasicZmanim"),
            (FakeComplexZmanimCalendar, "Zmanim"),
        ],
    )
    def test_key_per_kind(self, calendar_cls, key: str) -> None:
        document = ZmanimFormatter.to_json(calendar_cls())
        assert list(document) == ["metadata", key]

    def test_most_specific_first(self) -> None:
        assert resolve_output_key([CalendarKind.ASTRONOMICAL_TIMES, CalendarKind.ZMANIM]) == "Zmanim"
        assert resolve_output_key({"BasicZmanim", "AstronomicalTimes"}) == "BasicZmanim"
        assert resolve_output_key("AstronomicalTimes") == "AstronomicalTimes"

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError):
            resolve_output_key("HebrewCalendar")
        with pytest.raises(ValueError, match="no known kind"):
            resolve_output_key([])


# =============================================================================
# METADATA
# =============================================================================


class TestMetadata:
    """Тесты metadata блока"""

    def test_fields(self, astronomical_calendar) -> None:
        metadata = ZmanimFormatter.to_json(astronomical_calendar)["metadata"]
        assert metadata == {
            "date": "2007-02-18",
            "type": "AstronomicalCalendar",
            "algorithm": "US Naval Almanac Algorithm",
            "location": "Lakewood, NJ",
            "latitude": "40.095965",
            "longitude": "-74.22213",
            "elevation": "31.0",
            "timeZoneName": "EST",
            "timeZoneID": "America/New_York",
            "timeZoneOffset": "-5.0",
        }

    def test_field_order(self, astronomical_calendar) -> None:
        metadata = build_metadata(astronomical_calendar).to_output()
        assert list(metadata) == [
            "date",
            "type",
            "algorithm",
            "location",
            "latitude",
            "longitude",
            "elevation",
            "timeZoneName",
            "timeZoneID",
            "timeZoneOffset",
        ]

    def test_metadata_per_calendar_type(self) -> None:
        metadata = ZmanimFormatter.to_json(FakeComplexZmanimCalendar())["metadata"]
        assert metadata["type"] == "ComplexZmanimCalendar"

    def test_daylight_time_and_fractional_offset(self) -> None:
        geo = GeoLocation(latitude=28.6139, longitude=77.209, time_zone="Asia/Kolkata")
        metadata = build_metadata(FakeAstronomicalCalendar(geo, date(2023, 7, 1)))
        assert metadata.time_zone_offset == "5.5"
        assert metadata.elevation == "0.0"
        assert metadata.location is None

        summer = build_metadata(FakeAstronomicalCalendar(calendar_date=date(2023, 7, 1)))
        assert summer.time_zone_name == "EDT"
        assert summer.time_zone_offset == "-4.0"

    def test_small_fractional_elevation(self) -> None:
        geo = GeoLocation(
            latitude=40.095965, longitude=-74.22213, elevation=1e-05, time_zone="America/New_York"
        )
        metadata = ZmanimFormatter.to_json(FakeAstronomicalCalendar(geo))["metadata"]
        assert metadata["elevation"] == "0.00001"

    def test_unknown_zone(self) -> None:
        class BrokenGeo:
            location_name = None
            latitude = 0.0
            longitude = 0.0
            elevation = 0.0
            time_zone = "Nowhere/Atlantis"

        with pytest.raises(InvalidTimeZoneError):
            ZmanimFormatter.to_json(FakeAstronomicalCalendar(BrokenGeo()))


# =============================================================================
# TIMES
# =============================================================================


class TestTimes:
    """Тесты блока времён"""

    def test_astronomical_output(self, astronomical_calendar) -> None:
        times = ZmanimFormatter.to_json(astronomical_calendar)["AstronomicalTimes"]
        assert list(times.items()) == [
            ("Sunrise", "2007-02-18T06:45:27-05:00"),
            ("SunTransit", "2007-02-18T12:12:45-05:00"),
            ("Sunset", "2007-02-18T17:40:03-05:00"),
            ("TemporalHour", "PT54M17.529S"),
            ("SeaLevelSunrise", "N/A"),
        ]

    def test_excluded_and_parameterized_absent(self, astronomical_calendar) -> None:
        times = ZmanimFormatter.to_json(astronomical_calendar)["AstronomicalTimes"]
        assert "Date" not in times
        assert "SunriseOffsetByDegrees" not in times

    def test_minute_values_filtered(self) -> None:
        """CandleLightingOffset = 18 (минуты) не выводится"""
        times = ZmanimFormatter.to_json(FakeZmanimCalendar())["BasicZmanim"]
        assert "CandleLightingOffset" not in times
        assert list(times)[3:5] == ["TemporalHour", "ShaahZmanisGra"]
        assert times["ShaahZmanisGra"] == "PT55M"

    def test_complex_ordering(self) -> None:
        times = ZmanimFormatter.to_json(FakeComplexZmanimCalendar())["Zmanim"]
        assert list(times) == [
            "Sunrise",
            "SunTransit",
            "Sunset",
            "Tzais72",
            "TemporalHour",
            "ShaahZmanisGra",
            "SeaLevelSunrise",
            "FixedLocalChatzos",
        ]
        assert times["Tzais72"] == "2007-02-18T18:52:03-05:00"

    def test_non_finite_duration_omitted(self) -> None:
        class InfiniteHourCalendar(FakeAstronomicalCalendar):
            def get_temporal_hour(self):
                return math.inf

        times = ZmanimFormatter.to_json(InfiniteHourCalendar())["AstronomicalTimes"]
        assert "TemporalHour" not in times
        assert list(times) == ["Sunrise", "SunTransit", "Sunset", "SeaLevelSunrise"]

    def test_custom_unavailable_text(self, astronomical_calendar) -> None:
        config = AssemblerConfig(unavailable_text="", validate_output=False)
        times = assemble(astronomical_calendar, config)["AstronomicalTimes"]
        assert times["SeaLevelSunrise"] == ""


# =============================================================================
# SERIALIZATION
# =============================================================================


class TestSerialization:
    def test_json_string_preserves_order(self, astronomical_calendar) -> None:
        text = ZmanimFormatter.to_json_string(astronomical_calendar, indent=2)
        parsed = json.loads(text)
        assert list(parsed) == ["metadata", "AstronomicalTimes"]
        assert list(parsed["AstronomicalTimes"])[0] == "Sunrise"

    def test_to_xml_unsupported(self, astronomical_calendar) -> None:
        with pytest.raises(UnsupportedOperationError):
            ZmanimFormatter.to_xml()
        with pytest.raises(UnsupportedOperationError):
            ZmanimFormatter.to_xml(astronomical_calendar)

    def test_to_xml_is_not_implemented_error(self) -> None:
        with pytest.raises(NotImplementedError, match="not supported"):
            ZmanimFormatter("UTC").to_xml()
