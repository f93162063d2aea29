#!/usr/bin/env python3
"""
Minds MCP CLI Entry Point

Handles:
- Server modes (stdio, http)
- Listing discovered minds
- Validating a MIND.md file
"""

import argparse
import asyncio
import sys
from pathlib import Path

from minds_mcp import __package_name__, __version__
from minds_mcp.config import build_providers, config_from_env
from minds_mcp.minds import MindError, MindValidationError, init_mind_registry, load_mind_file


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


async def list_minds() -> int:
    """Discover minds from the configured directories and print them."""
    config = config_from_env()
    registry = await init_mind_registry(build_providers(config), config.conflict_strategy)

    print(registry.generate_available_minds())
    print()
    print("Searched:")
    for minds_dir in config.minds_dirs:
        marker = "✓" if minds_dir.is_dir() else "-"
        print(f"  {marker} {minds_dir}")
    return 0


def validate(path: str) -> int:
    """Parse a MIND.md (or a mind directory) and report every problem found."""
    try:
        mind = load_mind_file(Path(path))
    except MindValidationError as e:
        print(f"✗ {path}: validation failed", file=sys.stderr)
        for error in e.errors:
            print(f"  - {error.format()}", file=sys.stderr)
        return 1
    except MindError as e:
        print(f"✗ {path}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"✗ {path}: {e.strerror or e}", file=sys.stderr)
        return 1

    print(f"✓ {mind.metadata.name}: {mind.metadata.description}")
    allowed_tools = mind.frontmatter.allowed_tools_list()
    if allowed_tools:
        print(f"  allowed-tools: {', '.join(allowed_tools)}")
    return 0


async def run_stdio():
    """Run in stdio mode (for MCP clients)."""
    from minds_mcp.server import MindsMCPServer
    server = MindsMCPServer()
    await server.start()


async def run_http(port: int):
    """Run in HTTP mode."""
    from minds_mcp.server_http import main as http_main
    await http_main(port=port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minds-mcp",
        description="Minds MCP server - progressive-disclosure skills for AI agents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  minds-mcp                       Run in stdio mode (default)
  minds-mcp --http --port 3000    Run HTTP server on port 3000
  minds-mcp --list                Show discovered minds
  minds-mcp --validate minds/git-commit

Minds are discovered from MINDS_DIRS (os.pathsep-separated), or from
./minds and ~/.minds/minds by default.
"""
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Run in stdio mode (default)"
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Run in HTTP mode"
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        help="HTTP port (default: MCP_PORT or 8000)"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List discovered minds and exit"
    )
    parser.add_argument(
        "--validate",
        metavar="PATH",
        help="Validate a MIND.md file or mind directory and exit"
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.version:
        print_version()
        sys.exit(0)

    if args.validate:
        sys.exit(validate(args.validate))

    if args.list:
        sys.exit(asyncio.run(list_minds()))

    if args.http:
        asyncio.run(run_http(args.port))
    else:
        asyncio.run(run_stdio())


if __name__ == "__main__":
    main()
