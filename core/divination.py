# =============================================================================
# core/divination.py  —  The XiaoLiuRen Engine (小六壬推算)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Given a lunar month, a lunar day and a time-branch ordinal, counts
#   around the six-state cycle three times and returns where it lands.
#
# THE ALGORITHM (three chained stages):
#
#   1. Month:  start at 大安 (position 0), count lunar_month.
#              month_pos = (lunar_month - 1) % 6
#   2. Day:    start at month_pos, count lunar_day.
#              day_pos   = (month_pos + lunar_day - 1) % 6
#   3. Hour:   start at day_pos, count the branch ordinal.
#              final_pos = (day_pos + hour_ordinal - 1) % 6
#
#   Each stage begins where the previous one ended.  Computing the three
#   stages independently from the raw inputs gives different answers.
#
# PURITY:
#   No state, no I/O.  Same inputs, same result, every time.
# =============================================================================

import logging

from core.catalog import get_state
from core.errors import InvalidInput
from core.models import ComputationTrace, DivinationResult, TraceStep

logger = logging.getLogger(__name__)

CYCLE_LENGTH = 6


def _require_positive_int(value, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{what}必须是整数，收到：{value!r}")
    if value < 1:
        raise InvalidInput(f"{what}必须大于等于 1，收到：{value}")


def compute_divination(
    lunar_month: int,
    lunar_day: int,
    hour_ordinal: int,
) -> DivinationResult:
    """Run the three counting stages and return the landing states.

    Args:
        lunar_month: Lunar month number, >= 1.
        lunar_day: Lunar day number, >= 1.
        hour_ordinal: Time-branch ordinal, 1 (子) to 12 (亥).

    Returns:
        A DivinationResult.  ``final_state`` is the answer; the month and
        day stage states are kept for the explanation only.

    Raises:
        InvalidInput: For non-integers, values below 1, or an ordinal
            outside 1-12.
    """
    _require_positive_int(lunar_month, "农历月份")
    _require_positive_int(lunar_day, "农历日期")
    _require_positive_int(hour_ordinal, "时辰序号")
    if hour_ordinal > 12:
        raise InvalidInput(f"时辰序号超出范围（1-12）：{hour_ordinal}")

    month_pos = (lunar_month - 1) % CYCLE_LENGTH
    day_pos = (month_pos + lunar_day - 1) % CYCLE_LENGTH
    final_pos = (day_pos + hour_ordinal - 1) % CYCLE_LENGTH

    month_state = get_state(month_pos)
    day_state = get_state(day_pos)
    final_state = get_state(final_pos)

    logger.debug(
        "month=%d day=%d ordinal=%d -> positions %d/%d/%d (%s)",
        lunar_month, lunar_day, hour_ordinal,
        month_pos, day_pos, final_pos, final_state.name,
    )

    trace = ComputationTrace(
        month=TraceStep(
            stage="month",
            start=get_state(0).name,
            count=lunar_month,
            result=month_state.name,
            description=f"农历{lunar_month}月 → {month_state.name}",
        ),
        day=TraceStep(
            stage="day",
            start=month_state.name,
            count=lunar_day,
            result=day_state.name,
            description=f"从{month_state.name}数{lunar_day}日 → {day_state.name}",
        ),
        hour=TraceStep(
            stage="hour",
            start=day_state.name,
            count=hour_ordinal,
            result=final_state.name,
            description=(
                f"从{day_state.name}数{hour_ordinal}(时辰序号) → {final_state.name}"
            ),
        ),
    )

    return DivinationResult(
        month_stage_state=month_state,
        day_stage_state=day_state,
        final_state=final_state,
        trace=trace,
    )
