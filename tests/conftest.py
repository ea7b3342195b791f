import pytest

from core.errors import CalendarError
from core.models import LunarDate


class FakeCalendar:
    """In-memory CalendarAdapter: a handful of known solar ⇄ lunar pairs."""

    def __init__(self, table):
        # table: {(sy, sm, sd): LunarDate}
        self.table = dict(table)
        self.calls = []

    def solar_to_lunar(self, year, month, day):
        self.calls.append(("solar_to_lunar", year, month, day))
        try:
            return self.table[(year, month, day)]
        except KeyError:
            raise CalendarError(f"no such solar date {year}-{month}-{day}") from None

    def lunar_to_solar(self, year, month, day, is_leap_month=False):
        self.calls.append(("lunar_to_solar", year, month, day, is_leap_month))
        for solar, lunar in self.table.items():
            if (lunar.year, lunar.month, lunar.day, lunar.is_leap_month) == (
                year, month, day, is_leap_month,
            ):
                return solar
        raise CalendarError(f"no such lunar date {year}-{month}-{day}")


def _lunar(year, month, day, leap=False, term=None, day_gz="庚午"):
    return LunarDate(
        year=year,
        month=month,
        day=day,
        is_leap_month=leap,
        year_stem_branch="甲辰",
        month_stem_branch="庚午",
        day_stem_branch=day_gz,
        solar_term=term,
        month_name="五月",
        day_name="初十",
    )


@pytest.fixture
def fake_calendar():
    return FakeCalendar({
        (2024, 6, 15): _lunar(2024, 5, 10),
        (2024, 2, 10): _lunar(2024, 1, 1, day_gz="甲辰"),
        (2024, 6, 5): _lunar(2024, 4, 29, term="芒种", day_gz="庚申"),
        (2023, 3, 22): _lunar(2023, 2, 1, leap=True, day_gz="丙辰"),
    })
