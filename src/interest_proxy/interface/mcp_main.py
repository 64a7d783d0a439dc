"""MCP entrypoint.

Starts the MCP server over stdio. This module deliberately avoids importing
the HTTP or CLI modules so it can be used as a minimal container entrypoint.

Usage:
    python -m interest_proxy.interface.mcp_main
    # or via the script entrypoint:
    interest-proxy-mcp
"""

from __future__ import annotations

from ..config.runtime import get_settings
from .mcp.server import create_server
from .observability import configure_logging


def main() -> None:
    configure_logging(get_settings().log_level)
    server = create_server()
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
