"""MCP surface (FastMCP)."""

from .server import create_server
from .tools import ALLOWED_TOOLS

__all__ = ["ALLOWED_TOOLS", "create_server"]
