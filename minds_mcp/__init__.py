"""
Minds MCP

Capability registry for AI agents: markdown-defined minds are discovered
across one or more sources and loaded into an agent's context on demand.
"""

__version__ = "0.1.0"
__package_name__ = "minds-mcp"
