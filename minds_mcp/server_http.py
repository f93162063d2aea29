#!/usr/bin/env python3
"""
Minds MCP Server - HTTP Transport
Runs as a web server using MCP Streamable HTTP protocol.

For local agents, use `minds-mcp --stdio` instead.
"""

import asyncio
import contextlib
from typing import Optional

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Mount, Route

from minds_mcp import __version__
from minds_mcp.minds import get_mind_registry
from minds_mcp.server import MindsMCPServer


async def _server(request: Request) -> MindsMCPServer:
    server = request.app.state.mcp_server
    await server.initialize()
    return server


async def health_check(request: Request) -> PlainTextResponse:
    """Health check endpoint."""
    server = await _server(request)
    mind_count = len(get_mind_registry().list_minds())
    tool_count = len(server.tool_registry.listTools())
    return PlainTextResponse(
        f"Minds MCP Server (HTTP)\n"
        f"Version: {__version__}\n"
        f"Status: Running\n"
        f"Minds: {mind_count}\n"
        f"Tools: {tool_count}\n"
        f"MCP endpoint: /mcp/\n"
    )


async def list_minds(request: Request) -> JSONResponse:
    """List available minds (JSON response)."""
    await _server(request)
    registry = get_mind_registry()
    minds = []
    for name in registry.list_minds():
        metadata = registry.get_metadata(name)
        minds.append({"name": name, "description": metadata.description if metadata else ""})
    return JSONResponse({"minds": minds})


async def get_mind_raw(request: Request) -> Response:
    """Serve a mind's instructions as markdown.

    Usage: curl -sL http://localhost:8000/minds/git-commit
    """
    await _server(request)
    name = request.path_params.get("name", "")
    if name.endswith(".md"):
        name = name[:-3]

    mind = await get_mind_registry().load_mind(name)
    if mind is None:
        return PlainTextResponse(f"Mind not found: {name}", status_code=404)

    return Response(
        content=mind.content,
        media_type="text/markdown; charset=utf-8",
        headers={"Content-Disposition": f"inline; filename={name}.md"}
    )


def create_app(mcp_server: Optional[MindsMCPServer] = None) -> Starlette:
    """
    Create the Starlette app.

    Endpoints:
    - /mcp/ - MCP protocol (all tool interaction)
    - /health - Deployment health check
    - /minds - JSON list of available minds
    - /minds/{name} - Raw mind instructions (for curl)
    """
    mcp_server = mcp_server or MindsMCPServer()
    session_manager = StreamableHTTPSessionManager(app=mcp_server.server)

    async def mcp_endpoint(scope, receive, send):
        await session_manager.handle_request(scope, receive, send)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        await mcp_server.initialize()
        async with session_manager.run():
            mcp_server.logger.info("MCP session manager started")
            yield

    app = Starlette(
        routes=[
            Route("/health", endpoint=health_check),
            Route("/minds", endpoint=list_minds),
            Route("/minds/{name}", endpoint=get_mind_raw),
            Mount("/mcp", app=mcp_endpoint),
        ],
        lifespan=lifespan,
    )
    app.state.mcp_server = mcp_server
    return app


async def main(port: Optional[int] = None):
    """Run the HTTP server."""
    import uvicorn

    mcp_server = MindsMCPServer()
    await mcp_server.config.load()
    config = mcp_server.config.get()
    host = config.http_host
    port = port or config.http_port

    server = uvicorn.Server(uvicorn.Config(
        create_app(mcp_server),
        host=host,
        port=port,
        log_level="info",
    ))

    print(f"Minds MCP Server (HTTP) starting on http://{host}:{port}")
    print()
    print(f"Endpoints:")
    print(f"  MCP:    http://{host}:{port}/mcp/  (all tool interaction)")
    print(f"  Health: http://{host}:{port}/health")
    print(f"  Minds:  http://{host}:{port}/minds")

    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
