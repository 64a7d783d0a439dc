"""MCP server factory."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .tools import register_tools

SERVER_NAME = "interest-proxy"


def create_server(service_factory=None) -> FastMCP:
    """Build and return a configured FastMCP server.

    Args:
        service_factory: Optional zero-argument callable returning the
            InterestProxyService used by ``interests_search``.

    Returns:
        A FastMCP instance with the interest tools registered.
    """
    server = FastMCP(SERVER_NAME)
    register_tools(server, service_factory=service_factory)
    return server
