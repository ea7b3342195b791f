# =============================================================================
# core/catalog.py  —  The Six-State Catalog (六神)
# =============================================================================
#
# A fixed, read-only table of the six XiaoLiuRen states.  The tuple index
# equals the SixState value, so lookups are a single subscript.
#
# Built once at import time.  Nothing mutates it afterwards, so every
# query can share it freely.
# =============================================================================

from core.models import DivinationState, Element, Polarity, SixState

SIX_STATES: tuple[DivinationState, ...] = (
    DivinationState(
        position=SixState.DA_AN,
        name="大安",
        label="Great Peace",
        element=Element.WOOD,
        polarity=Polarity.AUSPICIOUS,
        meaning="安稳安逸美事，但也有静止之意。事情平稳发展，宜守不宜动。",
        details=(
            "大安为吉宫，主平稳、安定。感情方面发展平稳但可能过于平淡，"
            "财运稳定有进有出。适合问\"能否成功\"类问题，不适合问\"能否行动\"类问题。"
        ),
    ),
    DivinationState(
        position=SixState.LIU_LIAN,
        name="留连",
        label="Lingering",
        element=Element.EARTH,
        polarity=Polarity.INAUSPICIOUS,
        meaning="反复、犹豫、拖延、漫长、纠缠、暧昧。纯阴卦，主不光明、秘密、隐私。",
        details=(
            "留连纯阴卦，代表事情未定，仍有变化。夜晚测得尤为不稳定。"
            "与小吉同处吉凶交界，但凶性稍多。事情发展缓慢，多有阻碍。"
        ),
    ),
    DivinationState(
        position=SixState.SU_XI,
        name="速喜",
        label="Quick Joy",
        element=Element.FIRE,
        polarity=Polarity.AUSPICIOUS,
        meaning="火热、快速、好事。有好事但不长久，应快速行动把握时机。",
        details=(
            "速喜为吉宫，如大火燎原，一烧既尽。短期事情大吉（考试、消息、决策），"
            "长期事情后劲不足。为朱雀，有口舌争辩之象。"
        ),
    ),
    DivinationState(
        position=SixState.CHI_KOU,
        name="赤口",
        label="Red Mouth",
        element=Element.METAL,
        polarity=Polarity.INAUSPICIOUS,
        meaning="口舌官非、吵闹打斗、意外凶险。为白虎，代表挫败和突发意外。",
        details=(
            "赤口为凶宫，主口舌官非。落此宫事情已非常凶，必定失败且为挫败。"
            "也主精神紧张，对所问之事不抱希望。但也有交谈、合作等正面象意。"
        ),
    ),
    DivinationState(
        position=SixState.XIAO_JI,
        name="小吉",
        label="Small Fortune",
        element=Element.WATER,
        polarity=Polarity.NEUTRAL,
        meaning="驿马宫，为动，向好发展但力量微弱需自身努力。为桃花，主美事。",
        details=(
            "小吉为纯阳卦，变化可能性最大。成功与否更多取决于个人努力和行动。"
            "消极对待则吉性减退，积极行动则成功率增加。"
        ),
    ),
    DivinationState(
        position=SixState.KONG_WANG,
        name="空亡",
        label="Emptiness/Void",
        element=Element.EARTH,
        polarity=Polarity.INAUSPICIOUS,
        meaning="空、亡，事情落空不成，但也有无事之意。性质特殊，倾向虚无。",
        details=(
            "空亡有两种可能：一是大凶结果很差，二是什么都不会发生。"
            "问失物为未丢，问寻找为找不到。常代表弃考、放弃等情况。"
        ),
    ),
)

_BY_NAME: dict[str, DivinationState] = {}
for _state in SIX_STATES:
    _BY_NAME[_state.name] = _state
    _BY_NAME[_state.label.lower()] = _state
    _BY_NAME[_state.position.name.lower()] = _state


def get_state(position: int) -> DivinationState:
    """Return the state at ``position``, reduced modulo 6 first."""
    return SIX_STATES[position % len(SIX_STATES)]


def find_state(name: str) -> DivinationState | None:
    """Look up a state by Chinese name, English label or enum name.

    Returns None for anything unrecognised.
    """
    if not isinstance(name, str):
        return None
    return _BY_NAME.get(name.strip().lower())
