#!/usr/bin/env python3
"""
Minds MCP Server
Main server implementation following proper MCP architecture.
"""

import argparse
import asyncio
from typing import Any, Optional

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from minds_mcp import __package_name__, __version__
from minds_mcp.config import ConfigManager, build_providers
from minds_mcp.mcp_types import ToolContext
from minds_mcp.minds import init_mind_registry
from minds_mcp.prompts import MINDS_PROMPT_NAME, with_minds
from minds_mcp.tools import MIND_TOOLS, ToolRegistry
from minds_mcp.utils import Logger


class MindsMCPServer:
    """Main MCP Server for minds."""

    def __init__(self):
        # Initialize configuration
        self.config = ConfigManager.get_instance()
        config = self.config.get()

        # Initialize MCP Server
        self.server = Server(__package_name__)

        # Initialize logger
        self.logger = Logger(name=__package_name__, level=config.log_level)

        # Initialize tool registry
        self.tool_registry = ToolRegistry(self.logger)
        self.initialized = False

        # Set up MCP protocol handlers
        self._setup_handlers()

    def _setup_handlers(self):
        """Set up MCP protocol request handlers using decorators."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            return await self.list_tools()

        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict) -> list[types.TextContent]:
            return await self.call_tool(name, arguments)

        @self.server.list_prompts()
        async def handle_list_prompts() -> list[types.Prompt]:
            return self.list_prompts()

        @self.server.get_prompt()
        async def handle_get_prompt(name: str, arguments: Optional[dict[str, str]]) -> types.GetPromptResult:
            return self.get_prompt(name, arguments)

    # =========================================================================
    # Handlers
    # =========================================================================

    async def list_tools(self) -> list[types.Tool]:
        """List available tools."""
        try:
            tools = self.tool_registry.getToolSchemas()
            self.logger.debug(f"Exposing {len(tools)} tools")
            return tools
        except Exception as e:
            self.logger.error(f"Error listing tools: {e}")
            return []

    async def call_tool(self, name: str, arguments: Optional[dict[str, Any]]) -> list[types.TextContent]:
        """Execute a tool - MCP tools/call handler."""
        if not self.tool_registry.hasTool(name):
            self.logger.error(f"Tool not found: {name}")
            raise ValueError(f"Tool '{name}' not found")

        context = ToolContext.new()

        try:
            result = await self.tool_registry.execute(name, arguments or {}, context)
        except Exception as e:
            self.logger.error(f"Tool execution error: {e}")
            raise RuntimeError(f"Internal error: {str(e)}") from e

        if result.success:
            return result.result.content if result.result else []

        if result.result and result.result.content:
            error_msg = result.result.content[0].text
        else:
            error_msg = result.error.message
        raise RuntimeError(f"Tool execution failed: {error_msg}")

    def list_prompts(self) -> list[types.Prompt]:
        return [
            types.Prompt(
                name=MINDS_PROMPT_NAME,
                description="System instructions listing the available minds and how to use them",
                arguments=[
                    types.PromptArgument(
                        name="instructions",
                        description="Your own instructions to combine with the minds block",
                        required=False,
                    ),
                    types.PromptArgument(
                        name="position",
                        description="Place the minds block 'before' or 'after' your instructions (default: after)",
                        required=False,
                    ),
                ],
            )
        ]

    def get_prompt(self, name: str, arguments: Optional[dict[str, str]]) -> types.GetPromptResult:
        if name != MINDS_PROMPT_NAME:
            raise ValueError(f"Prompt '{name}' not found")

        arguments = arguments or {}
        messages = with_minds(
            arguments.get("instructions") or None,
            position=arguments.get("position") or "after",
        )
        return types.GetPromptResult(
            description="Minds system instructions",
            messages=[
                types.PromptMessage(role="user", content=types.TextContent(type="text", text=message))
                for message in messages
            ],
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def _register_tools(self):
        """Register the mind tools."""
        for tool_class in MIND_TOOLS:
            self.tool_registry.register(tool_class(self.logger))

        names = ", ".join(tool.name for tool in self.tool_registry.listTools())
        self.logger.info(f"Registered {len(MIND_TOOLS)} tools: {names}")

    async def initialize(self):
        """Load configuration, discover minds and register tools (idempotent)."""
        if self.initialized:
            return

        await self.config.load()
        config = self.config.get()
        self.logger.set_level(config.log_level)

        registry = await init_mind_registry(build_providers(config), config.conflict_strategy)
        self.logger.info(f"Discovered {len(registry.list_minds())} minds", {
            "dirs": [str(d) for d in config.minds_dirs],
            "strategy": config.conflict_strategy.value,
        })

        self._register_tools()
        self.initialized = True

    async def start(self):
        """Start the MCP server."""
        try:
            await self.initialize()

            # Create transport and run server
            async with stdio_server() as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    InitializationOptions(
                        server_name=__package_name__,
                        server_version=__version__,
                        capabilities=self.server.get_capabilities(
                            notification_options=NotificationOptions(),
                            experimental_capabilities={}
                        ),
                    ),
                )

            self.logger.info("Minds MCP Server stopped")

        except Exception as e:
            self.logger.error(f"Failed to start server: {e}")
            raise


async def run_stdio():
    """Run in stdio mode."""
    server = MindsMCPServer()
    await server.start()


async def run_http(port: int):
    """Run in HTTP mode using Streamable HTTP transport.

    This delegates to server_http.py which uses Starlette + StreamableHTTPServerTransport.
    """
    from minds_mcp.server_http import main as http_main
    await http_main(port=port)


def main():
    parser = argparse.ArgumentParser(description="Minds MCP Server")
    parser.add_argument("--stdio", action="store_true", help="Run in stdio mode")
    parser.add_argument("--http", action="store_true", help="Run in HTTP mode")
    parser.add_argument("--port", type=int, default=None, help="HTTP port")
    args = parser.parse_args()

    if args.http:
        asyncio.run(run_http(args.port))
    else:
        asyncio.run(run_stdio())


if __name__ == "__main__":
    main()
