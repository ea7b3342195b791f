import dataclasses

import pytest

from core.advice import FALLBACK_ADVICE, render_advice
from core.catalog import SIX_STATES, find_state, get_state
from core.models import Element, Polarity, SixState


def test_canonical_order():
    assert [s.name for s in SIX_STATES] == ["大安", "留连", "速喜", "赤口", "小吉", "空亡"]
    assert [s.label for s in SIX_STATES] == [
        "Great Peace", "Lingering", "Quick Joy",
        "Red Mouth", "Small Fortune", "Emptiness/Void",
    ]


def test_index_matches_enum():
    for state in SixState:
        assert SIX_STATES[state].position is state


def test_elements_and_polarity():
    da_an, liu_lian, su_xi, chi_kou, xiao_ji, kong_wang = SIX_STATES
    assert (da_an.element, da_an.polarity) == (Element.WOOD, Polarity.AUSPICIOUS)
    assert (liu_lian.element, liu_lian.polarity) == (Element.EARTH, Polarity.INAUSPICIOUS)
    assert (su_xi.element, su_xi.polarity) == (Element.FIRE, Polarity.AUSPICIOUS)
    assert (chi_kou.element, chi_kou.polarity) == (Element.METAL, Polarity.INAUSPICIOUS)
    assert (xiao_ji.element, xiao_ji.polarity) == (Element.WATER, Polarity.NEUTRAL)
    assert (kong_wang.element, kong_wang.polarity) == (Element.EARTH, Polarity.INAUSPICIOUS)


def test_get_state_wraps():
    assert get_state(6) is SIX_STATES[0]
    assert get_state(11) is SIX_STATES[5]


def test_states_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SIX_STATES[0].name = "changed"


@pytest.mark.parametrize("name", ["速喜", "Quick Joy", "quick joy", "su_xi", "SU_XI"])
def test_find_state_by_any_name(name):
    assert find_state(name) is SIX_STATES[SixState.SU_XI]


def test_find_state_unknown():
    assert find_state("unknown-name") is None
    assert find_state(None) is None


class TestAdvice:
    def test_every_state_has_its_own_advice(self):
        texts = [render_advice(state) for state in SIX_STATES]
        assert len(set(texts)) == 6
        assert FALLBACK_ADVICE not in texts

    def test_lookup_by_name_enum_and_record_agree(self):
        assert (
            render_advice("大安")
            == render_advice(SixState.DA_AN)
            == render_advice(SIX_STATES[0])
        )
        assert render_advice("大安").startswith("✅ 当前状态稳定平和")

    def test_kong_wang_advice(self):
        assert "总体建议：重新审视目标" in render_advice("Emptiness/Void")

    @pytest.mark.parametrize("name", ["unknown-name", "", "大吉", 3, None])
    def test_unknown_name_falls_back(self, name):
        assert render_advice(name) == FALLBACK_ADVICE
