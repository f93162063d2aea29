"""
Tool Registry
Manages tool registration, execution and per-tool metrics.
"""

import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from mcp.types import Tool as MCPTool

from minds_mcp.mcp_types import (
    MCPErrorCode,
    ToolContext,
    ToolError,
    ToolExecution,
    ToolMetrics,
)
from minds_mcp.observability import get_hooks, track_error
from minds_mcp.tools.base import BaseTool


class ToolRegistry:
    """Tool Registry Implementation."""

    def __init__(self, logger):
        self.logger = logger
        self.tools: Dict[str, BaseTool] = {}
        self.metrics: Dict[str, ToolMetrics] = {}

    def register(self, tool: BaseTool) -> None:
        """Register a tool with the registry."""
        if tool.name in self.tools:
            raise ValueError(f"Tool {tool.name} is already registered")

        self.tools[tool.name] = tool
        self.logger.debug(f"Tool registered: {tool.name}")

    def unregister(self, toolName: str) -> bool:
        """Unregister a tool from the registry."""
        removed = self.tools.pop(toolName, None) is not None
        if removed:
            self.metrics.pop(toolName, None)
            self.logger.debug(f"Tool unregistered: {toolName}")
        return removed

    def get(self, toolName: str) -> Optional[BaseTool]:
        """Get a tool by name."""
        return self.tools.get(toolName)

    def listTools(self) -> List[BaseTool]:
        """List all registered tools."""
        return list(self.tools.values())

    def hasTool(self, toolName: str) -> bool:
        """Check if a tool is registered."""
        return toolName in self.tools

    async def execute(self, toolName: str, input: Dict[str, Any], context: ToolContext) -> ToolExecution:
        """Validate input, run the tool and record the execution."""
        tool = self.get(toolName)
        if not tool:
            raise ValueError(f"Tool {toolName} not found")

        get_hooks().fire("on_tool_call", toolName, dict(input))

        started_at = datetime.now(timezone.utc).isoformat()
        start = time.perf_counter()
        try:
            validation = tool.validateInput(input)
            if validation.valid:
                handled = await tool.execute(input, context)
            else:
                handled = tool.invalidInputResult(validation)
            result, error = handled.result, None
            if not handled.success:
                error = handled.error or ToolError(code=MCPErrorCode.TOOL_EXECUTION_ERROR, message="Unknown error")
        except Exception as e:
            track_error(e, {"tool": toolName, "requestId": context.requestId})
            result, error = None, ToolError(code=MCPErrorCode.TOOL_EXECUTION_ERROR, message=str(e))

        execution = ToolExecution(
            id=f"exec_{uuid.uuid4().hex[:12]}",
            toolName=toolName,
            requestId=context.requestId,
            startedAt=started_at,
            durationMs=int((time.perf_counter() - start) * 1000),
            result=result,
            error=error,
        )
        self.metrics.setdefault(toolName, ToolMetrics(toolName=toolName)).record(execution)
        self.logger.debug(f"Tool executed: {toolName}", {
            'status': execution.status,
            'durationMs': execution.durationMs,
            'requestId': execution.requestId,
        })
        return execution

    def getMetrics(self, toolName: str) -> ToolMetrics:
        """Get metrics for a tool."""
        return self.metrics.get(toolName) or ToolMetrics(toolName=toolName)

    def getToolSchemas(self) -> List[MCPTool]:
        """Get tool schemas for MCP protocol - returns proper MCP Tool objects."""
        return [
            MCPTool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.inputSchema
            )
            for tool in self.listTools()
        ]
