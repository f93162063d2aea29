"""
Minds System Prompt

Builds the system message that tells an agent which minds exist and how to
use the mind tools. Served by the MCP server as the "minds-system" prompt.
"""

from typing import Literal, Optional, Sequence, Union

from minds_mcp.minds import get_mind_registry

MINDS_PROMPT_NAME = "minds-system"

Instructions = Union[str, Sequence[str], None]


def build_minds_system_message(available_minds: str) -> str:
    """Render the minds instruction block around the available minds list."""
    return f"""## Minds System

You have access to a minds system that provides specialized capabilities.
When a user's request matches a mind's description, use the load-mind tool
to load that mind's instructions, then follow them.

{available_minds}

## How to Use Minds

1. Check if the user's request matches any available mind
2. If yes, use the load-mind tool with the mind name
3. Follow the loaded instructions to complete the task
4. Use read-mind-resource if instructions reference additional files
5. Use execute-mind-script if instructions tell you to run a script"""


def _normalize(instructions: Instructions) -> list[str]:
    if instructions is None:
        return []
    if isinstance(instructions, str):
        return [instructions]
    return list(instructions)


def with_minds(
    instructions: Instructions = None,
    position: Literal["before", "after"] = "after",
) -> list[str]:
    """
    System messages with the minds block added to the caller's instructions.

    Args:
        instructions: A string, a list of strings, or None
        position: Put the minds block "before" or "after" the instructions

    Returns:
        Ordered list of system message strings
    """
    if position not in ("before", "after"):
        raise ValueError(f"Invalid position '{position}' (must be 'before' or 'after')")

    registry = get_mind_registry()
    minds_message = build_minds_system_message(registry.generate_available_minds())
    messages = _normalize(instructions)

    if position == "before":
        return [minds_message, *messages]
    return [*messages, minds_message]
