# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP clients (the agent, or any
#   MCP host) and the divination logic in core/.  Each tool:
#     1. Calls into core/
#     2. Converts dataclasses and enums into plain dicts for JSON
#     3. Turns XiaoLiuRenError into an {"error": ...} payload
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT compute anything themselves (that's in core/)
#   - They do NOT know about Google ADK
# =============================================================================
