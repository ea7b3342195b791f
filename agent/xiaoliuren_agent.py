# =============================================================================
# agent/xiaoliuren_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures and creates the Google ADK agent that talks to the user,
#   gathers the date/time for a reading, calls the MCP tools, and explains
#   the result.
#
# HOW IT FITS TOGETHER:
#
#   ┌──────────────────────────────────────────────────────────────────┐
#   │                       Google ADK Agent                          │
#   │  system prompt (agent/prompt.py) + LLM via LiteLlm + MCP tools   │
#   └──────────────────────────────────────────────────────────────────┘
#                                   │  stdio
#                                   ▼
#                       ┌───────────────────────────┐
#                       │  FastMCP Server           │
#                       │  (tools/mcp_server.py)    │
#                       │  • analyze_xiaoliuren     │
#                       │  • resolve_time_branch    │
#                       │  • list_divination_states │
#                       └───────────────────────────┘
#                                   │
#                                   ▼
#                       ┌───────────────────────────┐
#                       │  core/ (pure Python)      │
#                       └───────────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess ("python -m tools.mcp_server"
#   from the project root) and talks to it over stdin/stdout.
#
# MODEL:
#   Any LiteLlm model string works.  XIAOLIUREN_MODEL overrides the default
#   "openrouter/openai/gpt-4o"; LiteLlm reads OPENROUTER_API_KEY itself.
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool.mcp_toolset import MCPToolset, StdioServerParameters

from agent.prompt import get_xiaoliuren_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent() -> Agent:
    """Create and configure the XiaoLiuRen reader agent.

    The agent itself has NO divination logic.  It has:
      - a system prompt (agent/prompt.py)
      - a connection to the tool server (tools/mcp_server.py)
      - a model for conversation (via LiteLlm)

    Returns:
        A configured Google ADK Agent instance.
    """
    # -------------------------------------------------------------------------
    # Step 1: MCP tool connection
    # -------------------------------------------------------------------------
    # Run the server with the same interpreter as this process, so the
    # subprocess sees the same installed packages (fastmcp, lunar_python).
    # cwd is the project root so "core" and "tools" import as packages.
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,
            args=["-m", "tools.mcp_server"],
            cwd=project_root,
        ),
    )

    # -------------------------------------------------------------------------
    # Step 2: the agent itself
    # -------------------------------------------------------------------------
    model_name = os.environ.get("XIAOLIUREN_MODEL", DEFAULT_MODEL)

    agent = Agent(
        name="xiaoliuren_reader",                 # Used in logs and traces
        model=LiteLlm(model=model_name),
        instruction=get_xiaoliuren_prompt(),
        tools=[mcp_tools],
    )

    return agent
