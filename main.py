# =============================================================================
# main.py  —  Entry Point for the XiaoLiuRen Reader
# =============================================================================
#
# HOW TO RUN:
#   One-shot reading, no LLM involved:
#     python main.py reading --date 2024-5-10 --time 14:00
#     python main.py reading --date 2024-4-3 --time 子时 --calendar lunar
#
#   Conversational agent (needs OPENROUTER_API_KEY):
#     python main.py chat
#
# WHAT "chat" DOES:
#   1. Creates the Google ADK agent (agent/xiaoliuren_agent.py)
#   2. Sets up an in-memory session
#   3. Sends each line the user types to the agent
#   4. The agent calls the MCP tools (tools/mcp_server.py) and answers
# =============================================================================

import argparse
import asyncio
import sys

from dotenv import load_dotenv

# Must run BEFORE the agent is created: LiteLlm reads OPENROUTER_API_KEY
# and the agent reads XIAOLIUREN_MODEL from the environment.
load_dotenv()

from core.errors import XiaoLiuRenError  # noqa: E402
from core.reading import cast_reading, format_reading  # noqa: E402


def run_reading(args: argparse.Namespace) -> int:
    """Print one formatted reading.  Returns the process exit status."""
    try:
        reading = cast_reading(
            args.date,
            args.time,
            args.calendar,
            leap_month=args.leap_month,
        )
    except XiaoLiuRenError as e:
        print(f"错误：{e}", file=sys.stderr)
        return 1

    print(format_reading(reading))
    return 0


async def run_agent() -> None:
    """Run the XiaoLiuRen agent interactively."""
    from google.adk.runners import Runner
    from google.adk.sessions import InMemorySessionService
    from google.genai import types

    from agent.xiaoliuren_agent import create_agent

    print("=" * 70)
    print("  小六壬 XIAOLIUREN READER")
    print("  Powered by Google ADK + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name="xiaoliuren",
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name="xiaoliuren",
        user_id="demo_user",
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 问一件事，并告诉我日期和时辰（或者直接说「现在」）。")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🔮 Casting...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id="demo_user",
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xiaoliuren",
        description="小六壬 (XiaoLiuRen) divination for a date and 时辰.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    reading = commands.add_parser("reading", help="print one reading and exit")
    reading.add_argument("--date", required=True, help="YYYY-MM-DD")
    reading.add_argument("--time", required=True, help="HH:MM or a 时辰 name such as 子时")
    reading.add_argument(
        "--calendar",
        choices=["solar", "lunar"],
        default="solar",
        help="calendar the date is written in (default: solar)",
    )
    reading.add_argument(
        "--leap-month",
        action="store_true",
        help="lunar date falls in a 闰月",
    )

    commands.add_parser("chat", help="talk to the reader agent")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "reading":
        return run_reading(args)
    asyncio.run(run_agent())
    return 0


if __name__ == "__main__":
    sys.exit(main())
