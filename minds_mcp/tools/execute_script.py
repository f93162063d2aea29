"""
Execute Mind Script Tool

Runs a script from a mind's scripts/ directory. A non-zero exit is reported
in the payload (stdout, stderr, exit code) rather than as a tool error.
"""

from typing import Any

from minds_mcp.mcp_types import MCPErrorCode, ToolContext, ToolHandlerResult, ToolInput
from minds_mcp.minds import MindNotFoundError, ScriptExecutionError, get_error_suggestion
from minds_mcp.tools.base import BaseTool


class ExecuteMindScriptTool(BaseTool):

    @property
    def name(self) -> str:
        return "execute-mind-script"

    @property
    def description(self) -> str:
        return """Execute a script from a mind's scripts/ directory.

Use this when a mind's instructions tell you to run a script for a
deterministic operation. Scripts can be .ts, .js, .sh, or .py files.
Not every provider supports script execution."""

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "mindName": {
                    "type": "string",
                    "description": "The name of the mind"
                },
                "scriptPath": {
                    "type": "string",
                    "description": "Path relative to the mind's scripts/ directory (e.g., 'helper.py')"
                },
                "args": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Arguments to pass to the script"
                }
            },
            "required": ["mindName", "scriptPath"]
        }

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        mind_name = input.get("mindName", "")
        script_path = input.get("scriptPath", "")
        args = input.get("args") or []
        registry = self.get_registry()

        if not registry.has_mind(mind_name):
            return self.mindErrorResult(
                MCPErrorCode.RESOURCE_NOT_FOUND,
                MindNotFoundError(mind_name, registry.list_minds()),
            )

        if not registry.supports_scripts(mind_name):
            return self.failure(
                MCPErrorCode.UNSUPPORTED,
                f'Script execution is not supported by the provider for mind "{mind_name}"',
            )

        result = await registry.execute_script(mind_name, script_path, args)
        if result is None:
            return self.failure(MCPErrorCode.TOOL_EXECUTION_ERROR, "Script execution failed")

        response = result.to_dict()
        if not result.success:
            error = ScriptExecutionError(script_path, result.exit_code, result.stdout, result.stderr)
            response["suggestion"] = get_error_suggestion(error)
            self.logger.warning(f"Script {script_path} for {mind_name} exited with {result.exit_code}")

        return self.success(response)
