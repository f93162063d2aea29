"""
Base Tool Classes
Abstract base classes for tool implementations.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator
from mcp.types import TextContent

from minds_mcp import __version__
from minds_mcp.mcp_types import (
    MCPErrorCode,
    ToolCategory,
    ToolContext,
    ToolError,
    ToolHandlerResult,
    ToolInput,
    ToolMetadata,
    ToolResult,
    ToolValidationError,
    ToolValidationResult,
)
from minds_mcp.minds import MindError, MindRegistry, get_error_suggestion, get_mind_registry


class BaseTool(ABC):
    """Abstract base class for all tool implementations."""

    def __init__(self, logger, category: ToolCategory = ToolCategory.MIND):
        self.logger = logger
        self.metadata = ToolMetadata(category=category, version=__version__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description."""
        pass

    @property
    @abstractmethod
    def inputSchema(self) -> Dict[str, Any]:
        """Tool input schema (JSON Schema)."""
        pass

    @abstractmethod
    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Execute the tool with input and context."""
        pass

    def get_registry(self) -> MindRegistry:
        """The process-wide mind registry (raises if not initialized)."""
        return get_mind_registry()

    def validateInput(self, input: Dict[str, Any]) -> ToolValidationResult:
        """Validate tool input against the tool's JSON Schema, collecting every error."""
        errors = []
        for error in Draft7Validator(self.inputSchema).iter_errors(dict(input)):
            # Empty for top-level errors; required-field messages name the field
            field = ".".join(str(p) for p in error.absolute_path)
            errors.append(ToolValidationError(
                field=field,
                message=error.message,
                code="MISSING_REQUIRED_FIELD" if error.validator == "required" else "INVALID_TYPE",
            ))

        return ToolValidationResult(errors=errors)

    def invalidInputResult(self, validation: ToolValidationResult) -> ToolHandlerResult:
        message = "; ".join(
            f"{e.field}: {e.message}" if e.field else e.message for e in validation.errors
        )
        return self.failure(MCPErrorCode.INVALID_INPUT, f"Invalid input: {message}")

    def createSuccessResult(self, data: Any) -> ToolResult:
        """Create a successful tool result - follows the MCP protocol."""
        if isinstance(data, str):
            text = data
        else:
            try:
                text = json.dumps(data, indent=2, default=str, ensure_ascii=False)
            except (TypeError, ValueError) as e:
                self.logger.warning(f"Failed to serialize tool result: {e}")
                text = json.dumps({"error": "Failed to serialize result"}, indent=2)

        return ToolResult(
            content=[TextContent(type="text", text=text.strip())],
            isError=False
        )

    def createErrorResult(self, error: ToolError) -> ToolResult:
        """Create an error tool result - follows the MCP protocol."""
        text = error.message
        if error.details:
            text = f"{text}\n{error.details}"
        return ToolResult(
            content=[TextContent(type="text", text=text)],
            isError=True
        )

    def success(self, data: Any) -> ToolHandlerResult:
        return ToolHandlerResult(success=True, result=self.createSuccessResult(data))

    def failure(
        self,
        code: MCPErrorCode,
        message: str,
        details: Optional[str] = None,
    ) -> ToolHandlerResult:
        error = ToolError(code=code, message=message, details=details)
        return ToolHandlerResult(success=False, error=error, result=self.createErrorResult(error))

    def mindErrorResult(self, code: MCPErrorCode, error: MindError) -> ToolHandlerResult:
        """Failure carrying a mind error's message and its suggestion."""
        return self.failure(code, str(error), get_error_suggestion(error))
