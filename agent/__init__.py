# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is the conversational front end.  It:
#     1. Receives the user's question ("今天下午三点去面试怎么样？")
#     2. Works out the date, 时辰 and calendar the question implies
#     3. Calls the MCP tools to cast the reading
#     4. Explains the result in the user's terms
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the divination logic (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
#   The LLM never computes a reading itself; the tool decides, the agent
#   explains.
# =============================================================================
