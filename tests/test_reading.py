import pytest

from core.advice import render_advice
from core.errors import CalendarError, InvalidInput
from core.models import CalendarType, LunarDate, TimeBranch
from core.reading import (
    cast_reading,
    format_reading,
    parse_calendar_type,
    parse_date,
    resolve_lunar_date,
)


class TestParseDate:
    @pytest.mark.parametrize("text,expected", [
        ("2024-05-10", (2024, 5, 10)),
        ("2024-5-1", (2024, 5, 1)),
        (" 1999-12-31 ", (1999, 12, 31)),
    ])
    def test_accepts(self, text, expected):
        assert parse_date(text) == expected

    @pytest.mark.parametrize("text", ["2024/05/10", "24-5-10", "2024-5", "2024-123-1", "", None])
    def test_rejects(self, text):
        with pytest.raises(InvalidInput, match="日期格式错误"):
            parse_date(text)


def test_calendar_type():
    assert parse_calendar_type("solar") is CalendarType.SOLAR
    assert parse_calendar_type("LUNAR") is CalendarType.LUNAR
    assert parse_calendar_type(CalendarType.LUNAR) is CalendarType.LUNAR
    with pytest.raises(InvalidInput):
        parse_calendar_type("julian")


class TestResolveLunarDate:
    def test_solar_converts_directly(self, fake_calendar):
        lunar = resolve_lunar_date(fake_calendar, 2024, 6, 15, CalendarType.SOLAR)
        assert (lunar.month, lunar.day) == (5, 10)
        assert fake_calendar.calls == [("solar_to_lunar", 2024, 6, 15)]

    def test_lunar_round_trip_keeps_labels(self, fake_calendar):
        lunar = resolve_lunar_date(fake_calendar, 2024, 5, 10, CalendarType.LUNAR)
        direct = fake_calendar.solar_to_lunar(2024, 6, 15)
        assert (lunar.year, lunar.month, lunar.day) == (2024, 5, 10)
        assert lunar.year_stem_branch == direct.year_stem_branch
        assert lunar.month_stem_branch == direct.month_stem_branch
        assert lunar.day_stem_branch == direct.day_stem_branch

    def test_lunar_leap_month(self, fake_calendar):
        lunar = resolve_lunar_date(
            fake_calendar, 2023, 2, 1, CalendarType.LUNAR, leap_month=True
        )
        assert lunar.is_leap_month
        assert lunar.day_stem_branch == "丙辰"

    def test_round_trip_mismatch_is_a_calendar_error(self):
        class DriftingCalendar:
            def lunar_to_solar(self, year, month, day, is_leap_month=False):
                return (2024, 6, 15)

            def solar_to_lunar(self, year, month, day):
                return LunarDate(2024, 5, 11, False, "甲辰", "庚午", "辛未")

        with pytest.raises(CalendarError):
            resolve_lunar_date(DriftingCalendar(), 2024, 5, 10, CalendarType.LUNAR)

    def test_adapter_errors_propagate(self, fake_calendar):
        with pytest.raises(CalendarError):
            resolve_lunar_date(fake_calendar, 2024, 13, 1, CalendarType.LUNAR)


class TestCastReading:
    def test_solar_reading(self, fake_calendar):
        reading = cast_reading("2024-6-15", "14:00", "solar", adapter=fake_calendar)
        assert reading.time_branch is TimeBranch.WEI
        assert reading.calendar_type is CalendarType.SOLAR
        assert reading.result.final_state.name == "速喜"
        assert reading.advice == render_advice("速喜")

    def test_lunar_reading_with_branch_name(self, fake_calendar):
        reading = cast_reading("2024-1-1", "子时", "lunar", adapter=fake_calendar)
        assert reading.time_branch is TimeBranch.ZI
        assert reading.result.final_state.name == "大安"

    def test_same_answer_in_either_calendar(self, fake_calendar):
        solar = cast_reading("2024-06-15", "未时", "solar", adapter=fake_calendar)
        lunar = cast_reading("2024-05-10", "未时", "lunar", adapter=fake_calendar)
        assert solar.result == lunar.result

    def test_bad_time_never_reaches_the_calendar(self, fake_calendar):
        with pytest.raises(InvalidInput):
            cast_reading("2024-6-15", "noon", adapter=fake_calendar)
        assert fake_calendar.calls == []

    def test_leap_flag_needs_lunar_calendar(self, fake_calendar):
        with pytest.raises(InvalidInput):
            cast_reading("2024-6-15", "14:00", "solar", leap_month=True, adapter=fake_calendar)

    def test_unknown_solar_date(self, fake_calendar):
        with pytest.raises(CalendarError):
            cast_reading("2024-6-16", "14:00", adapter=fake_calendar)


class TestFormatReading:
    def test_sections_in_order(self, fake_calendar):
        text = format_reading(
            cast_reading("2024-6-15", "14:00", "solar", adapter=fake_calendar)
        )
        headers = ["小六壬占卜结果：", "🗓️ 输入信息：", "📅 农历信息：",
                   "🧮 小六壬推算过程：", "🔮 占卜结果：【速喜】", "💡 建议指导："]
        positions = [text.index(h) for h in headers]
        assert positions == sorted(positions)

        assert "- 原始日期：2024-6-15（阳历）" in text
        assert "- 时辰：14:00 (未时)" in text
        assert "- 农历日期：2024年五月初十" in text
        assert "- 五行属性：火" in text
        assert "- 吉凶性质：吉" in text
        assert "- 从小吉数10日 → 留连" in text
        assert "节气" not in text
        assert text.endswith(render_advice("速喜"))

    def test_solar_term_and_leap_marker(self, fake_calendar):
        term_text = format_reading(
            cast_reading("2024-6-5", "8:00", adapter=fake_calendar)
        )
        assert "- 节气：芒种" in term_text

        leap_text = format_reading(
            cast_reading("2023-2-1", "8:00", "lunar", leap_month=True, adapter=fake_calendar)
        )
        assert "(闰月)" in leap_text
        assert "（农历）" in leap_text
