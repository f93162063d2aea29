"""List Minds Tool"""

from typing import Any

from minds_mcp.mcp_types import ToolCategory, ToolContext, ToolHandlerResult, ToolInput
from minds_mcp.tools.base import BaseTool


class ListMindsTool(BaseTool):

    def __init__(self, logger):
        super().__init__(logger, category=ToolCategory.UTILITY)

    @property
    def name(self) -> str:
        return "list-minds"

    @property
    def description(self) -> str:
        return "List all available minds with their descriptions"

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {"type": "object", "properties": {}}

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        registry = self.get_registry()
        minds = []
        for name in registry.list_minds():
            metadata = registry.get_metadata(name)
            minds.append({
                "name": name,
                "description": metadata.description if metadata else "",
            })
        return self.success({"minds": minds})
