# =============================================================================
# core/advice.py  —  Guidance Text for Each State (建议指导)
# =============================================================================
#
# One pre-written block of guidance per state, keyed by SixState so the
# table is exhaustive.  render_advice() also accepts a state name, because
# that is what arrives from the tool layer and from the agent.
#
# An unknown name gets FALLBACK_ADVICE instead of an exception.
# =============================================================================

from core.catalog import find_state
from core.models import DivinationState, SixState

FALLBACK_ADVICE = "请以平常心对待，顺其自然。"

_ADVICE: dict[SixState, str] = {
    SixState.DA_AN: """✅ 当前状态稳定平和，适合保持现状。
• 如问行动类问题：不宜轻举妄动，静待时机
• 如问成功类问题：事情能成，但需要时间和耐心
• 感情方面：关系稳定但需注意不要过于平淡
• 财运方面：收支稳定，适合稳健投资
• 总体建议：宜守不宜攻，以静制动""",

    SixState.LIU_LIAN: """⚠️ 事情发展缓慢，多有反复和阻碍。
• 当前状况：事情未定，仍有变数，需要耐心等待
• 隐性因素：可能存在不为人知的情况或内幕
• 时间特性：如果是晚上占卜，变化性更大
• 行动建议：避免急于求成，多方了解情况
• 总体建议：事情虽有阻碍但并非绝对，需要坚持和策略""",

    SixState.SU_XI: """🎉 好消息即将到来，但需抓紧时机！
• 时效性强：短期内会有好的结果或消息
• 持续性弱：好事可能不长久，需要快速行动
• 适用场景：考试成绩、工作消息、即时决策等
• 注意事项：可能伴有争论或口舌，但性质为争辩非争斗
• 总体建议：把握当下，迅速行动，不要拖延""",

    SixState.CHI_KOU: """❌ 情况较为严峻，需要特别谨慎。
• 失败风险：此事成功率很低，且可能遭遇挫败
• 意外因素：可能出现突发状况，结果与预期相反
• 精神状态：可能内心已经不抱希望或抗拒此事
• 人际关系：小心口舌是非，避免冲突和争执
• 总体建议：暂缓行动，重新评估，或寻求帮助""",

    SixState.XIAO_JI: """🌟 前景看好，但成功更多取决于个人努力！
• 潜力指数：有成功的基础和可能性
• 关键因素：个人的态度和行动力是决定性因素
• 变化特性：是六神中变化可能性最大的
• 积极心态：主动出击则吉，消极等待则平
• 总体建议：发挥主观能动性，多行动多努力必有收获""",

    SixState.KONG_WANG: """🌫️ 情况比较特殊，可能有两种截然不同的结果。
• 可能性一：事情完全落空，什么都不会发生
• 可能性二：结果很差，遭遇较大失败
• 特殊含义：在某些情况下反而表示"没有问题"
• 心理状态：可能已经有放弃的念头
• 总体建议：重新审视目标，或许应该转换思路和方向""",
}


def render_advice(state: str | SixState | DivinationState) -> str:
    """Return the guidance text for a state.

    Args:
        state: A SixState, a DivinationState, or a name ("大安",
            "Great Peace", "da_an").

    Returns:
        The multi-line guidance block, or FALLBACK_ADVICE when the name
        is not recognised.  Never raises.
    """
    if isinstance(state, DivinationState):
        return _ADVICE[state.position]
    if isinstance(state, SixState):
        return _ADVICE[state]

    found = find_state(state)
    if found is None:
        return FALLBACK_ADVICE
    return _ADVICE[found.position]
