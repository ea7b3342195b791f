# =============================================================================
# core/reading.py  —  Query Pipeline & Report Formatting
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the three strings a caller sends (date, time, calendar type)
#   into a finished XiaoLiuRenReading, and turns that reading into the
#   text the user sees.
#
# THE PIPELINE:
#   1. parse_date()            "2024-5-10"   →  (2024, 5, 10)
#   2. parse_time()            "14:00"       →  未时 (ordinal 8)
#   3. resolve_lunar_date()    calendar adapter → LunarDate
#   4. compute_divination()    lunar month/day + ordinal → DivinationResult
#   5. render_advice()         final state → guidance text
#   6. format_reading()        everything → display text
#
# Any step that fails raises; a reading is either complete or absent.
# =============================================================================

import logging
import re

from core.advice import render_advice
from core.calendar_adapter import CalendarAdapter, default_calendar
from core.divination import compute_divination
from core.errors import CalendarError, InvalidInput
from core.models import CalendarType, LunarDate, XiaoLiuRenReading
from core.time_branch import parse_time

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")


def parse_date(text: str) -> tuple[int, int, int]:
    """Split "YYYY-M-D" (1-2 digit month and day) into integers.

    Only the shape is checked here.  Whether the date exists is the
    calendar adapter's call.

    Raises:
        InvalidInput: If the text does not match the pattern.
    """
    match = _DATE_RE.match(text.strip()) if isinstance(text, str) else None
    if not match:
        raise InvalidInput("日期格式错误，请使用 YYYY-MM-DD 格式")
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def parse_calendar_type(value: str | CalendarType) -> CalendarType:
    """Accept "solar" / "lunar" (any case) or a CalendarType."""
    if isinstance(value, CalendarType):
        return value
    try:
        return CalendarType(str(value).strip().lower())
    except ValueError:
        raise InvalidInput(
            f"未知的日历类型：{value}，只支持 solar（阳历）或 lunar（农历）"
        ) from None


def resolve_lunar_date(
    adapter: CalendarAdapter,
    year: int,
    month: int,
    day: int,
    calendar_type: CalendarType,
    leap_month: bool = False,
) -> LunarDate:
    """Produce the LunarDate for a caller's date.

    Solar input converts directly.  Lunar input goes to solar and back
    again so the stem-branch labels and solar term can be read off the
    adapter; the caller's own year/month/day and leap flag are kept.

    Raises:
        CalendarError: From the adapter, or if the lunar round trip does
            not land on the same lunar date.
    """
    if calendar_type is CalendarType.SOLAR:
        return adapter.solar_to_lunar(year, month, day)

    solar = adapter.lunar_to_solar(year, month, day, leap_month)
    round_trip = adapter.solar_to_lunar(*solar)
    if (round_trip.year, round_trip.month, round_trip.day, round_trip.is_leap_month) != (
        year, month, day, leap_month,
    ):
        raise CalendarError(
            f"农历日期往返转换不一致：{year}-{month}-{day} → "
            f"{solar[0]}-{solar[1]}-{solar[2]} → "
            f"{round_trip.year}-{round_trip.month}-{round_trip.day}"
        )

    return LunarDate(
        year=year,
        month=month,
        day=day,
        is_leap_month=leap_month,
        year_stem_branch=round_trip.year_stem_branch,
        month_stem_branch=round_trip.month_stem_branch,
        day_stem_branch=round_trip.day_stem_branch,
        solar_term=round_trip.solar_term,
        month_name=round_trip.month_name,
        day_name=round_trip.day_name,
    )


def cast_reading(
    date: str,
    time: str,
    calendar_type: str | CalendarType = CalendarType.SOLAR,
    leap_month: bool = False,
    adapter: CalendarAdapter | None = None,
) -> XiaoLiuRenReading:
    """Run a full XiaoLiuRen query.

    Args:
        date: "YYYY-M-D" in the chosen calendar.
        time: "HH:MM", "HH", or a branch name such as "子时".
        calendar_type: "solar" or "lunar".
        leap_month: For lunar dates only, whether the month is a 闰月.
        adapter: Calendar adapter; defaults to the lunar_python one.

    Returns:
        A complete XiaoLiuRenReading.

    Raises:
        InvalidInput: Malformed date/time/calendar type, or leap_month with
            a solar date.
        CalendarError: The date does not exist in that calendar.
    """
    kind = parse_calendar_type(calendar_type)
    year, month, day = parse_date(date)
    _, branch = parse_time(time)
    if leap_month and kind is CalendarType.SOLAR:
        raise InvalidInput("闰月选项只适用于农历日期")

    lunar_date = resolve_lunar_date(
        adapter or default_calendar, year, month, day, kind, leap_month
    )
    result = compute_divination(lunar_date.month, lunar_date.day, int(branch))
    logger.debug(
        "%s %s (%s) → %s", date, time, kind.value, result.final_state.name
    )

    return XiaoLiuRenReading(
        date_input=date,
        time_input=time,
        calendar_type=kind,
        time_branch=branch,
        lunar_date=lunar_date,
        result=result,
        advice=render_advice(result.final_state),
    )


def format_reading(reading: XiaoLiuRenReading) -> str:
    """Render a reading as the multi-section Chinese report."""
    lunar = reading.lunar_date
    branch_name = reading.time_branch.name_zh
    final = reading.result.final_state
    leap_mark = "(闰月)" if lunar.is_leap_month else ""

    lines = [
        "小六壬占卜结果：",
        "",
        "🗓️ 输入信息：",
        f"- 原始日期：{reading.date_input}（{reading.calendar_type.label_zh}）",
        f"- 时辰：{reading.time_input} ({branch_name})",
        "",
        "📅 农历信息：",
        f"- 农历日期：{lunar.year}年{lunar.month_name}{lunar.day_name}{leap_mark}",
        f"- 年干支：{lunar.year_stem_branch}",
        f"- 月干支：{lunar.month_stem_branch}",
        f"- 日干支：{lunar.day_stem_branch}",
        f"- 时辰：{branch_name}",
    ]
    if lunar.solar_term:
        lines.append(f"- 节气：{lunar.solar_term}")

    lines += ["", "🧮 小六壬推算过程："]
    lines += [f"- {step.description}" for step in reading.result.trace]

    lines += [
        "",
        f"🔮 占卜结果：【{final.name}】",
        f"- 五行属性：{final.element.value}",
        f"- 吉凶性质：{final.polarity.value}",
        f"- 基本含义：{final.meaning}",
        f"- 详细解释：{final.details}",
        "",
        "💡 建议指导：",
        reading.advice,
    ]
    return "\n".join(lines)
