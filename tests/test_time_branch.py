import pytest

from core.errors import InvalidInput
from core.models import TimeBranch
from core.time_branch import branch_from_name, parse_time, resolve_time_branch


@pytest.mark.parametrize("hour", [0, 23])
def test_midnight_window_is_first_branch(hour):
    branch = resolve_time_branch(hour)
    assert branch is TimeBranch.ZI
    assert int(branch) == 1
    assert branch.name_zh == "子时"


def test_one_oclock_starts_second_branch():
    assert int(resolve_time_branch(1)) == 2
    assert resolve_time_branch(1).name_zh == "丑时"


def test_two_pm_is_wei():
    branch = resolve_time_branch(14)
    assert int(branch) == 8
    assert branch.name_zh == "未时"


def test_every_hour_matches_formula():
    for hour in range(24):
        expected = 1 if hour >= 23 or hour < 1 else (hour + 1) // 2 + 1
        assert int(resolve_time_branch(hour)) == expected


def test_each_branch_covers_two_hours():
    counts = {}
    for hour in range(24):
        branch = resolve_time_branch(hour)
        counts[branch] = counts.get(branch, 0) + 1
    assert set(counts) == set(TimeBranch)
    assert all(n == 2 for n in counts.values())


@pytest.mark.parametrize("hour", [-1, 24, 100])
def test_out_of_range_hour_rejected(hour):
    with pytest.raises(InvalidInput):
        resolve_time_branch(hour)


@pytest.mark.parametrize("hour", [1.5, "3", True, None])
def test_non_integer_hour_rejected(hour):
    with pytest.raises(InvalidInput):
        resolve_time_branch(hour)


def test_branch_windows():
    assert TimeBranch.ZI.window == "23:00-01:00"
    assert TimeBranch.CHOU.window == "01:00-03:00"
    assert TimeBranch.HAI.window == "21:00-23:00"


class TestParseTime:
    def test_clock_time(self):
        assert parse_time("14:00") == (14, TimeBranch.WEI)

    def test_single_digit_hour(self):
        assert parse_time("9:30") == (9, TimeBranch.SI)

    def test_bare_hour(self):
        assert parse_time("23") == (23, TimeBranch.ZI)

    @pytest.mark.parametrize("text", ["子时", "子", "子時", "zi", "Zi", " 子时 "])
    def test_branch_names(self, text):
        assert parse_time(text) == (None, TimeBranch.ZI)

    def test_every_chinese_name_round_trips(self):
        for branch in TimeBranch:
            assert parse_time(branch.name_zh) == (None, branch)

    @pytest.mark.parametrize("text", ["", "   ", "noon", "25:00", "12:60", "12:5", "午夜"])
    def test_rejects_garbage(self, text):
        with pytest.raises(InvalidInput):
            parse_time(text)

    def test_unknown_name_lookup_is_none(self):
        assert branch_from_name("midnight") is None
