"""
MCP Types Module
Types and dataclasses for the MCP server implementation.
"""

from .tools import (
    # Enums
    ToolCategory,
    MCPErrorCode,

    # Calls and results
    ToolInput,
    ToolContext,
    ToolResult,
    ToolError,
    ToolHandlerResult,
    ToolMetadata,

    # Validation
    ToolValidationError,
    ToolValidationResult,

    # Execution records
    ToolExecution,
    ToolMetrics,
)

__all__ = [
    "ToolCategory",
    "MCPErrorCode",
    "ToolInput",
    "ToolContext",
    "ToolResult",
    "ToolError",
    "ToolHandlerResult",
    "ToolMetadata",
    "ToolValidationError",
    "ToolValidationResult",
    "ToolExecution",
    "ToolMetrics",
]
