"""
Tool Types
Records passed between the MCP server, the tool registry and the mind tools.

Result content uses mcp.types.TextContent directly so handler output can be
returned to the client unchanged.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from mcp.types import TextContent

# Arguments of one tools/call request, as decoded from JSON
ToolInput = Dict[str, Any]


class ToolCategory(Enum):
    """Tool categories for organization."""
    MIND = "mind"           # Loading, resources and scripts of one mind
    UTILITY = "utility"     # Registry-wide helpers


class MCPErrorCode(Enum):
    """Error codes reported by the mind tools."""
    INVALID_INPUT = "INVALID_INPUT"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    UNSUPPORTED = "UNSUPPORTED"
    TOOL_EXECUTION_ERROR = "TOOL_EXECUTION_ERROR"


@dataclass(frozen=True)
class ToolContext:
    """Identifies the tools/call request a tool runs for."""
    requestId: str

    @classmethod
    def new(cls) -> "ToolContext":
        return cls(requestId=f"req_{uuid.uuid4().hex[:12]}")


@dataclass
class ToolResult:
    content: List[TextContent]
    isError: bool = False


@dataclass
class ToolError:
    code: MCPErrorCode
    message: str
    details: Optional[str] = None  # suggestion shown after the message


@dataclass
class ToolHandlerResult:
    """What a tool's execute() returns: a result, and an error on failure."""
    success: bool
    result: Optional[ToolResult] = None
    error: Optional[ToolError] = None


@dataclass(frozen=True)
class ToolMetadata:
    category: ToolCategory
    version: str


@dataclass
class ToolValidationError:
    field: str  # dotted path into the input, empty for the top level
    message: str
    code: str


@dataclass
class ToolValidationResult:
    errors: List[ToolValidationError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass
class ToolExecution:
    """One finished tool call, as recorded by the tool registry."""
    id: str
    toolName: str
    requestId: str
    startedAt: str
    durationMs: int
    result: Optional[ToolResult] = None
    error: Optional[ToolError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def status(self) -> str:
        return "completed" if self.success else "failed"


@dataclass
class ToolMetrics:
    """Running totals for one tool."""
    toolName: str
    totalExecutions: int = 0
    failedExecutions: int = 0
    totalDurationMs: int = 0
    lastExecutedAt: Optional[str] = None

    @property
    def successfulExecutions(self) -> int:
        return self.totalExecutions - self.failedExecutions

    @property
    def averageDurationMs(self) -> float:
        if not self.totalExecutions:
            return 0.0
        return self.totalDurationMs / self.totalExecutions

    @property
    def errorRate(self) -> float:
        if not self.totalExecutions:
            return 0.0
        return self.failedExecutions / self.totalExecutions

    def record(self, execution: ToolExecution) -> None:
        self.totalExecutions += 1
        if not execution.success:
            self.failedExecutions += 1
        self.totalDurationMs += execution.durationMs
        self.lastExecutedAt = execution.startedAt
