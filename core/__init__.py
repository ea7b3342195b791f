# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL divination logic for the XiaoLiuRen service.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any
#   orchestration framework.  The only third-party import is the calendar
#   library behind core/calendar_adapter.py.
#
# Layout (leaf-first):
#   models.py            — dataclasses and enums
#   errors.py            — InvalidInput, CalendarError
#   time_branch.py       — hour / time string → 时辰
#   catalog.py           — the six states (六神)
#   divination.py        — the three-stage counting engine
#   advice.py            — guidance text per state
#   calendar_adapter.py  — solar ⇄ lunar via lunar_python
#   reading.py           — full query pipeline and report text
# =============================================================================
