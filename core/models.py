# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses and enums define the *shape* of every piece of
# information that flows through a reading:
#
#   LunarDate  →  TimeBranch  →  DivinationResult  →  XiaoLiuRenReading
#   (calendar)    (hour)         (the computation)     (what gets printed)
#
# Closed sets (the six states, the twelve branches, elements, polarity)
# are enums.  Nothing is ever added to them at runtime.
#
# Everything here is frozen: a reading is built once per query and then
# discarded.
# =============================================================================

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


# -----------------------------------------------------------------------------
# CalendarType — which calendar the caller's date string is written in
# -----------------------------------------------------------------------------
class CalendarType(str, Enum):
    SOLAR = "solar"
    LUNAR = "lunar"

    @property
    def label_zh(self) -> str:
        return "农历" if self is CalendarType.LUNAR else "阳历"


# -----------------------------------------------------------------------------
# TimeBranch — the twelve traditional two-hour periods (时辰)
# -----------------------------------------------------------------------------
# The IntEnum value IS the 1-based ordinal the divination counts with.
# 子时 starts the day at 23:00, so its window wraps past midnight.
# -----------------------------------------------------------------------------
class TimeBranch(IntEnum):
    ZI = 1
    CHOU = 2
    YIN = 3
    MAO = 4
    CHEN = 5
    SI = 6
    WU = 7
    WEI = 8
    SHEN = 9
    YOU = 10
    XU = 11
    HAI = 12

    @property
    def name_zh(self) -> str:
        """Traditional name, e.g. "子时"."""
        return _BRANCH_NAMES_ZH[self - 1]

    @property
    def pinyin(self) -> str:
        return self.name.capitalize()

    @property
    def start_hour(self) -> int:
        """First hour of the window (23 for 子时, then 1, 3, 5, ...)."""
        return (2 * self - 3) % 24

    @property
    def window(self) -> str:
        """Hour window as text, e.g. "23:00-01:00"."""
        end = (self.start_hour + 2) % 24
        return f"{self.start_hour:02d}:00-{end:02d}:00"


_BRANCH_NAMES_ZH = (
    "子时", "丑时", "寅时", "卯时", "辰时", "巳时",
    "午时", "未时", "申时", "酉时", "戌时", "亥时",
)


# -----------------------------------------------------------------------------
# SixState — the six positions of the XiaoLiuRen cycle (六神)
# -----------------------------------------------------------------------------
# Canonical order, never permuted.  The value is the catalog index, so
# position 5 + 1 wraps back to DA_AN.
# -----------------------------------------------------------------------------
class SixState(IntEnum):
    DA_AN = 0        # 大安  Great Peace
    LIU_LIAN = 1     # 留连  Lingering
    SU_XI = 2        # 速喜  Quick Joy
    CHI_KOU = 3      # 赤口  Red Mouth
    XIAO_JI = 4      # 小吉  Small Fortune
    KONG_WANG = 5    # 空亡  Emptiness/Void


class Element(str, Enum):
    """Five-element tag (五行)."""

    WOOD = "木"
    FIRE = "火"
    EARTH = "土"
    METAL = "金"
    WATER = "水"


class Polarity(str, Enum):
    """Auspicious / inauspicious / neutral classification (吉凶)."""

    AUSPICIOUS = "吉"
    INAUSPICIOUS = "凶"
    NEUTRAL = "平"


# -----------------------------------------------------------------------------
# LunarDate — what the calendar adapter hands to the core
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class LunarDate:
    """A lunar date plus the sexagenary labels of its year, month and day."""

    year: int                          # Lunar year number (e.g. 2024)
    month: int                         # 1-12, always positive (see is_leap_month)
    day: int                           # 1-30
    is_leap_month: bool                # True inside a 闰月
    year_stem_branch: str              # e.g. "甲辰"
    month_stem_branch: str             # Month pillar, split on solar terms
    day_stem_branch: str               # e.g. "庚午"
    solar_term: Optional[str] = None   # 节气 falling on this day, if any
    month_name: str = ""               # Display name, e.g. "四月"
    day_name: str = ""                 # Display name, e.g. "初十"


# -----------------------------------------------------------------------------
# DivinationState — one entry of the six-state catalog
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class DivinationState:
    """One of the six XiaoLiuRen outcomes with its fixed interpretation."""

    position: SixState
    name: str            # Chinese name, unique ("大安")
    label: str           # English transliteration ("Great Peace")
    element: Element
    polarity: Polarity
    meaning: str         # Short meaning (基本含义)
    details: str         # Longer explanation (详细解释)


# -----------------------------------------------------------------------------
# TraceStep / ComputationTrace — the "show your work" part of a result
# -----------------------------------------------------------------------------
# Informational only.  Nothing downstream branches on the trace.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TraceStep:
    """One counting stage: start somewhere, count N, land on a state."""

    stage: str           # "month", "day" or "hour"
    start: str           # Name of the state counting starts from
    count: int           # How many positions were counted
    result: str          # Name of the state counting lands on
    description: str     # Human-readable line, e.g. "从赤口数10日 → 留连"


@dataclass(frozen=True)
class ComputationTrace:
    """The three stages in order: month, day, hour."""

    month: TraceStep
    day: TraceStep
    hour: TraceStep

    def __iter__(self):
        return iter((self.month, self.day, self.hour))


# -----------------------------------------------------------------------------
# DivinationResult — the engine's output
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class DivinationResult:
    """Result of one engine call.  Only final_state is "the answer"."""

    month_stage_state: DivinationState
    day_stage_state: DivinationState
    final_state: DivinationState
    trace: ComputationTrace


# -----------------------------------------------------------------------------
# XiaoLiuRenReading — everything needed to print one reading
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class XiaoLiuRenReading:
    """A complete query: the raw input, the calendar data and the result."""

    date_input: str                    # As typed by the caller ("2024-5-10")
    time_input: str                    # As typed ("14:00" or "未时")
    calendar_type: CalendarType
    time_branch: TimeBranch
    lunar_date: LunarDate
    result: DivinationResult
    advice: str
