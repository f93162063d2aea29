"""
Read Mind Resource Tool

Reads files shipped with a mind (references/, assets/, scripts/).
"""

from typing import Any

from minds_mcp.mcp_types import MCPErrorCode, ToolContext, ToolHandlerResult, ToolInput
from minds_mcp.minds import MindNotFoundError, MindResourceNotFoundError
from minds_mcp.tools.base import BaseTool


class ReadMindResourceTool(BaseTool):

    @property
    def name(self) -> str:
        return "read-mind-resource"

    @property
    def description(self) -> str:
        return """Read a resource file from a mind's directory.

Use this to access files in references/, scripts/, or assets/ when the mind's
instructions reference them. Paths are relative to the mind directory."""

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "mindName": {
                    "type": "string",
                    "description": "The name of the mind"
                },
                "resourcePath": {
                    "type": "string",
                    "description": "Relative path to the resource (e.g., 'references/guide.md')"
                }
            },
            "required": ["mindName", "resourcePath"]
        }

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        mind_name = input.get("mindName", "")
        resource_path = input.get("resourcePath", "")
        registry = self.get_registry()

        if not registry.has_mind(mind_name):
            return self.mindErrorResult(
                MCPErrorCode.RESOURCE_NOT_FOUND,
                MindNotFoundError(mind_name, registry.list_minds()),
            )

        content = await registry.read_resource(mind_name, resource_path)
        if content is None:
            return self.mindErrorResult(
                MCPErrorCode.RESOURCE_NOT_FOUND,
                MindResourceNotFoundError(mind_name, resource_path),
            )

        return self.success({"success": True, "content": content})
