"""
Tools Module

The MCP tools for minds:
- load-mind: Load a mind's instructions
- read-mind-resource: Read a file shipped with a mind
- execute-mind-script: Run a script from a mind's scripts/ directory
- list-minds: List available minds
"""

from .base import BaseTool
from .registry import ToolRegistry

from .load_mind import LoadMindTool
from .read_resource import ReadMindResourceTool
from .execute_script import ExecuteMindScriptTool
from .list_minds import ListMindsTool

MIND_TOOLS = (LoadMindTool, ReadMindResourceTool, ExecuteMindScriptTool, ListMindsTool)

__all__ = [
    "BaseTool",
    "ToolRegistry",
    "LoadMindTool",
    "ReadMindResourceTool",
    "ExecuteMindScriptTool",
    "ListMindsTool",
    "MIND_TOOLS",
]
