"""Inbound surfaces: HTTP, MCP and CLI."""
