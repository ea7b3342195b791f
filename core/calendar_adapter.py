# =============================================================================
# core/calendar_adapter.py  —  Solar ⇄ Lunar Conversion (the external collaborator)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps the `lunar_python` library behind a two-method contract:
#
#     solar_to_lunar(year, month, day)                   -> LunarDate
#     lunar_to_solar(year, month, day, is_leap_month)    -> (year, month, day)
#
#   The divination core only ever sees a LunarDate.  It never does calendar
#   astronomy itself, and it does not care which library is underneath.
#
# TESTING:
#   Tests pass a small fake that satisfies CalendarAdapter; the pipeline
#   then runs against hand-picked dates (leap months, solar terms,
#   round-trip drift).
#
# ERRORS:
#   Dates that do not exist (2023-02-30, lunar month 13, a leap month the
#   year does not have, lunar day 30 in a 29-day month) raise CalendarError.
#   Library exceptions are re-raised as CalendarError with the cause chained.
# =============================================================================

import datetime
import logging
from typing import Protocol

from lunar_python import Lunar, LunarYear, Solar

from core.errors import CalendarError
from core.models import LunarDate

logger = logging.getLogger(__name__)


class CalendarAdapter(Protocol):
    """Anything that can convert between solar and lunar dates."""

    def solar_to_lunar(self, year: int, month: int, day: int) -> LunarDate:
        ...

    def lunar_to_solar(
        self, year: int, month: int, day: int, is_leap_month: bool = False
    ) -> tuple[int, int, int]:
        ...


def _to_lunar_date(lunar: Lunar) -> LunarDate:
    """Copy the fields the core needs out of a lunar_python Lunar."""
    raw_month = lunar.getMonth()
    month_name = lunar.getMonthInChinese().lstrip("闰") + "月"
    return LunarDate(
        year=lunar.getYear(),
        month=abs(raw_month),
        day=lunar.getDay(),
        is_leap_month=raw_month < 0,
        year_stem_branch=lunar.getYearInGanZhi(),
        month_stem_branch=lunar.getMonthInGanZhiExact(),
        day_stem_branch=lunar.getDayInGanZhi(),
        solar_term=lunar.getJieQi() or None,
        month_name=month_name,
        day_name=lunar.getDayInChinese(),
    )


class LunarPythonCalendar:
    """CalendarAdapter backed by the `lunar_python` library."""

    def solar_to_lunar(self, year: int, month: int, day: int) -> LunarDate:
        """Convert a Gregorian date to a LunarDate with stem-branch labels.

        Raises:
            CalendarError: If the Gregorian date does not exist or the
                library cannot convert it.
        """
        try:
            datetime.date(year, month, day)
        except (TypeError, ValueError) as e:
            raise CalendarError(f"无效的阳历日期：{year}-{month}-{day}（{e}）") from e

        try:
            lunar = Solar.fromYmd(year, month, day).getLunar()
            result = _to_lunar_date(lunar)
        except Exception as e:
            raise CalendarError(f"阳历转农历失败：{year}-{month}-{day}（{e}）") from e

        logger.debug("solar %d-%d-%d -> lunar %s", year, month, day, result)
        return result

    def lunar_to_solar(
        self, year: int, month: int, day: int, is_leap_month: bool = False
    ) -> tuple[int, int, int]:
        """Convert a lunar date to its Gregorian (year, month, day).

        Args:
            year: Lunar year.
            month: Lunar month, 1-12 (always positive).
            day: Lunar day, 1-30.
            is_leap_month: True to address the 闰月 that follows ``month``.

        Raises:
            CalendarError: If that lunar month or day does not exist.
        """
        leap_text = "闰" if is_leap_month else ""
        label = f"{year}年{leap_text}{month}月{day}日"
        if not 1 <= month <= 12:
            raise CalendarError(f"无效的农历月份：{label}")

        # lunar_python marks a leap month with a negative month number
        signed_month = -month if is_leap_month else month
        try:
            lunar_month = LunarYear.fromYear(year).getMonth(signed_month)
        except Exception as e:
            raise CalendarError(f"无法计算农历年份：{label}（{e}）") from e

        if lunar_month is None:
            if is_leap_month:
                raise CalendarError(f"农历{year}年没有闰{month}月")
            raise CalendarError(f"无效的农历日期：{label}")
        if not 1 <= day <= lunar_month.getDayCount():
            raise CalendarError(
                f"无效的农历日期：{label}（该月只有{lunar_month.getDayCount()}天）"
            )

        try:
            solar = Lunar.fromYmd(year, signed_month, day).getSolar()
        except Exception as e:
            raise CalendarError(f"农历转阳历失败：{label}（{e}）") from e

        return solar.getYear(), solar.getMonth(), solar.getDay()


# Shared default instance; the adapter holds no state.
default_calendar = LunarPythonCalendar()
