"""
Load Mind Tool

Loads a mind's full instructions into the agent's context on demand.
"""

from typing import Any

from minds_mcp.mcp_types import MCPErrorCode, ToolContext, ToolHandlerResult, ToolInput
from minds_mcp.minds import MindNotFoundError
from minds_mcp.tools.base import BaseTool


class LoadMindTool(BaseTool):
    """Return the markdown instructions of a mind, plus its allowed tools."""

    @property
    def name(self) -> str:
        return "load-mind"

    @property
    def description(self) -> str:
        return """Load a mind's instructions to help with a specific task.

When a mind in the available minds list matches the user's request, call this
tool with its name. The returned instructions should guide your next actions.

REQUIRED: name (mind name, e.g. "git-commit")"""

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "The name of the mind to load"
                }
            },
            "required": ["name"]
        }

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        name = input.get("name", "")
        registry = self.get_registry()

        mind = await registry.load_mind(name)
        if mind is None:
            return self.mindErrorResult(
                MCPErrorCode.RESOURCE_NOT_FOUND,
                MindNotFoundError(name, registry.list_minds()),
            )

        response: dict[str, Any] = {
            "success": True,
            "mindName": mind.metadata.name,
            "instructions": mind.content,
        }
        allowed_tools = mind.frontmatter.allowed_tools_list()
        if allowed_tools:
            response["allowedTools"] = allowed_tools
        if mind.frontmatter.model:
            response["model"] = mind.frontmatter.model

        self.logger.info(f"Loaded mind: {mind.metadata.name}")
        return self.success(response)
