# =============================================================================
# core/time_branch.py  —  Hour → Time-Branch (时辰) Resolution
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps an hour of the day to one of the twelve two-hour branches, and
#   parses the free-form time strings callers send ("14:30", "14",
#   "未时", "未", "wei").
#
# THE MAPPING:
#   子时 covers [23:00, 01:00), 丑时 [01:00, 03:00), and so on.
#     hour >= 23 or hour < 1   →  ordinal 1 (子)
#     otherwise                →  (hour + 1) // 2 + 1
#
#   A time at 23:xx stays on the same calendar date; the day does not
#   roll over.
# =============================================================================

import re

from core.errors import InvalidInput
from core.models import TimeBranch

_CLOCK_RE = re.compile(r"^(\d{1,2})(?::(\d{2}))?$")

# Every spelling a caller might use for a branch: 子时 / 子時 / 子 / zi
_BRANCH_ALIASES: dict[str, TimeBranch] = {}
for _branch in TimeBranch:
    _stem = _branch.name_zh[0]
    _BRANCH_ALIASES[_branch.name_zh] = _branch
    _BRANCH_ALIASES[_stem + "時"] = _branch
    _BRANCH_ALIASES[_stem] = _branch
    _BRANCH_ALIASES[_branch.name.lower()] = _branch


def resolve_time_branch(hour: int) -> TimeBranch:
    """Return the branch whose window contains ``hour``.

    Args:
        hour: Hour of the day, 0-23.

    Returns:
        The TimeBranch; ``int(branch)`` is its 1-based ordinal and
        ``branch.name_zh`` its traditional name.

    Raises:
        InvalidInput: If hour is not an integer in [0, 23].
    """
    if isinstance(hour, bool) or not isinstance(hour, int):
        raise InvalidInput(f"小时必须是整数，收到：{hour!r}")
    if hour < 0 or hour > 23:
        raise InvalidInput(f"小时超出范围（0-23）：{hour}")

    if hour >= 23 or hour < 1:
        return TimeBranch.ZI
    return TimeBranch((hour + 1) // 2 + 1)


def branch_from_name(name: str) -> TimeBranch | None:
    """Look up a branch by any accepted spelling, or None."""
    return _BRANCH_ALIASES.get(name.strip().lower())


def parse_time(text: str) -> tuple[int | None, TimeBranch]:
    """Parse a caller's time string into (hour, branch).

    "HH:MM" and bare "HH" give an hour that is then resolved to its
    branch.  A branch name gives that branch directly with hour None,
    since a branch covers two hours.

    Raises:
        InvalidInput: If the text is neither a clock time nor a branch name.
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput("时辰不能为空，请使用 HH:MM 格式或传统时辰名称（如：子时）")

    cleaned = text.strip()
    match = _CLOCK_RE.match(cleaned)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2)) if match.group(2) is not None else 0
        if minute > 59:
            raise InvalidInput(f"分钟超出范围（0-59）：{cleaned}")
        return hour, resolve_time_branch(hour)

    branch = branch_from_name(cleaned)
    if branch is None:
        raise InvalidInput(
            f"无法识别的时辰：{cleaned}，请使用 HH:MM 格式或传统时辰名称（如：子时）"
        )
    return None, branch
