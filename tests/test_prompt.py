from datetime import date

from agent.prompt import get_xiaoliuren_prompt


def test_prompt_carries_todays_date():
    assert f"CURRENT LOCAL DATE: {date.today().isoformat()}" in get_xiaoliuren_prompt()


def test_prompt_names_every_tool():
    prompt = get_xiaoliuren_prompt()
    for tool in ("analyze_xiaoliuren", "resolve_time_branch", "list_divination_states"):
        assert tool in prompt
