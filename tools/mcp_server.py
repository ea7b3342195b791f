# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the MCP tools an agent (or any MCP host) can call.  Each tool
#   is a thin wrapper around a core/ function: it formats the input and
#   output and reports errors as data.
#
# HOW IT WORKS (the flow):
#   1. The agent decides it needs a reading
#   2. It calls "analyze_xiaoliuren" via MCP
#   3. FastMCP routes the call to the decorated function below
#   4. The function runs core.reading.cast_reading() and formats the result
#   5. The agent receives the report text plus the structured result
#
# TOOLS:
#   - analyze_xiaoliuren      → the full reading (the main tool)
#   - resolve_time_branch     → which 时辰 a time falls in
#   - list_divination_states  → the six states and their meanings
#   All tools are read-only and idempotent.
#
# ERRORS:
#   Bad input (InvalidInput) and impossible dates (CalendarError) come back
#   as {"error": "错误：...", "error_type": ...} so the agent can explain
#   the problem.  Anything else is a bug and propagates to FastMCP.
#
# RUNNING THIS SERVER:
#   From the project root:  python -m tools.mcp_server
#   The agent starts it the same way over stdio transport.
# =============================================================================

import json
import logging
import os
import sys
from dataclasses import asdict

from fastmcp import FastMCP

from core.catalog import SIX_STATES
from core.errors import XiaoLiuRenError
from core.models import DivinationState, TimeBranch, XiaoLiuRenReading
from core.reading import cast_reading, format_reading
from core.time_branch import parse_time

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT.
# Anything printed to stdout would corrupt the JSON-RPC stream.
#
# ANSI colours:
#   - CYAN for incoming requests (tool name + parameters)
#   - GREEN for response JSON
#   - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=os.environ.get("XIAOLIUREN_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, ensure_ascii=False, separators=(',', ':'))}{_RESET}"
    )
    return result


def _error_response(tool_name: str, error: XiaoLiuRenError) -> dict:
    _log_status(f"{type(error).__name__}: {error}")
    return _log_response(tool_name, {
        "error": f"错误：{error}",
        "error_type": type(error).__name__,
    })


# =============================================================================
# Dataclass → dict helpers
# =============================================================================
# Enums are flattened to their plain values so the payload is ordinary JSON.
# =============================================================================

def _state_to_dict(state: DivinationState) -> dict:
    return {
        "position": int(state.position),
        "name": state.name,
        "label": state.label,
        "element": state.element.value,
        "polarity": state.polarity.value,
        "meaning": state.meaning,
        "details": state.details,
    }


def _branch_to_dict(branch: TimeBranch) -> dict:
    return {
        "name": branch.name_zh,
        "pinyin": branch.pinyin,
        "ordinal": int(branch),
        "window": branch.window,
    }


def _reading_to_dict(reading: XiaoLiuRenReading) -> dict:
    result = reading.result
    return {
        "report": format_reading(reading),
        "calendar_type": reading.calendar_type.value,
        "time_branch": _branch_to_dict(reading.time_branch),
        "lunar_date": asdict(reading.lunar_date),
        "month_stage_state": result.month_stage_state.name,
        "day_stage_state": result.day_stage_state.name,
        "final_state": _state_to_dict(result.final_state),
        "trace": [asdict(step) for step in result.trace],
        "advice": reading.advice,
    }


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("xiaoliuren-mcp")


# =============================================================================
# TOOL 1: analyze_xiaoliuren
# =============================================================================
# The main tool.  Everything else exists to help the agent call this one
# correctly or explain its output.
# =============================================================================
@mcp.tool()
def analyze_xiaoliuren(
    date: str,
    time: str,
    calendar_type: str = "solar",
    leap_month: bool = False,
) -> dict:
    """分析指定日期时辰的小六壬指导意见 (XiaoLiuRen reading for a date and time).

    WHEN TO CALL THIS: Whenever the user asks for a 小六壬 / XiaoLiuRen
    reading, or asks how a matter will turn out at a given date and time.
    If the user gives no date or time, ask, or use the current local
    date and time.

    Args:
        date: 日期，格式：YYYY-MM-DD (1-2 digit month and day accepted).
        time: 时辰，格式：HH:MM 或者传统时辰名称（如：子时、丑时等）.
        calendar_type: "solar" = 阳历 (Gregorian), "lunar" = 农历.
        leap_month: Only for lunar dates: True if the month is a 闰月.

    Returns:
        A dict with:
          - report: The full formatted reading (show this to the user)
          - final_state: The result state (name, label, element,
            polarity, meaning, details)
          - month_stage_state, day_stage_state: Intermediate states
          - trace: The three counting steps
          - time_branch, lunar_date, calendar_type, advice

        On bad input: {"error": "错误：...", "error_type": ...}.
    """
    tool = "analyze_xiaoliuren"
    _log_request(tool, date=date, time=time,
                 calendar_type=calendar_type, leap_month=leap_month)

    try:
        reading = cast_reading(date, time, calendar_type, leap_month=leap_month)
    except XiaoLiuRenError as e:
        return _error_response(tool, e)

    _log_status(
        f"{reading.time_branch.name_zh}, 农历{reading.lunar_date.month}月"
        f"{reading.lunar_date.day}日 → {reading.result.final_state.name}"
    )
    return _log_response(tool, _reading_to_dict(reading))


# =============================================================================
# TOOL 2: resolve_time_branch
# =============================================================================
@mcp.tool()
def resolve_time_branch(time: str) -> dict:
    """Tell which traditional two-hour period (时辰) a time belongs to.

    WHEN TO CALL THIS: When the user asks which 时辰 it is, or gives a
    time you want to confirm before a reading.

    Args:
        time: "HH:MM", "HH", or a branch name ("子时", "子", "zi").

    Returns:
        A dict with name, pinyin, ordinal (1-12) and window
        ("23:00-01:00").  On bad input: {"error": ..., "error_type": ...}.
    """
    tool = "resolve_time_branch"
    _log_request(tool, time=time)

    try:
        hour, branch = parse_time(time)
    except XiaoLiuRenError as e:
        return _error_response(tool, e)

    result = _branch_to_dict(branch)
    result["hour"] = hour
    return _log_response(tool, result)


# =============================================================================
# TOOL 3: list_divination_states
# =============================================================================
@mcp.tool()
def list_divination_states() -> dict:
    """List the six XiaoLiuRen states (六神) in their fixed cycle order.

    WHEN TO CALL THIS: When the user asks what the possible outcomes are
    or what a particular state means.

    Returns:
        {"states": [...]} with position, name, label, element, polarity,
        meaning and details for each of the six states.
    """
    tool = "list_divination_states"
    _log_request(tool)
    return _log_response(tool, {"states": [_state_to_dict(s) for s in SIX_STATES]})


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
