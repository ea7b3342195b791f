# =============================================================================
# core/errors.py  —  Exception types raised by the core
# =============================================================================
#
# Core functions RAISE these; they never return half-finished results.
# The tools/ layer catches XiaoLiuRenError and turns it into an
# {"error": ...} dict for the agent.  Anything else is a bug and is left
# to propagate.
# =============================================================================


class XiaoLiuRenError(Exception):
    """Base class for every error the divination pipeline reports."""


class InvalidInput(XiaoLiuRenError, ValueError):
    """Malformed date/time text, an hour outside 0-23, an unknown calendar
    type, or a non-positive month/day reaching the engine."""


class CalendarError(XiaoLiuRenError):
    """The calendar adapter cannot represent the requested date."""
