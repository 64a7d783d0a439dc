"""CLI commands: run the HTTP or MCP server, or run one search from the shell."""

import argparse
import asyncio
import json
import sys

from ..config.runtime import get_settings
from ..domain.errors import ProxyError
from ..domain.suggestions import get_suggestions
from .observability import configure_logging


def serve(host: str | None = None, port: int | None = None) -> None:
    """Run the FastAPI app under uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "interest_proxy.interface.http.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


def run_search(query: str, limit: int | None = None) -> int:
    """Run one search and print the envelope (or error body) as JSON. Returns the exit code."""
    from ..wiring import build_interest_service

    service = build_interest_service()
    try:
        envelope = asyncio.run(service.search(query, limit))
    except ProxyError as e:
        print(json.dumps(e.to_body(), indent=2, ensure_ascii=False), file=sys.stderr)
        return 1
    print(json.dumps(envelope.model_dump(mode="json"), indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Meta ad-interest search proxy")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind host (default: HOST env or 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port (default: PORT env or 3000)")

    subparsers.add_parser("mcp", help="Run the MCP server over stdio")

    search_parser = subparsers.add_parser("search", help="Run one interest search and print the JSON result")
    search_parser.add_argument("query", type=str, help="Free-text interest query")
    search_parser.add_argument("--limit", type=int, default=None, help="Maximum upstream results")

    suggest_parser = subparsers.add_parser("suggest", help="Print keyword suggestions without calling upstream")
    suggest_parser.add_argument("query", type=str, help="Free-text query")
    suggest_parser.add_argument(
        "--path",
        dest="paths",
        action="append",
        default=[],
        help="Taxonomy path used as a family hint (repeatable)",
    )

    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)

    if args.command == "serve":
        serve(args.host, args.port)
    elif args.command == "mcp":
        from .mcp_main import main as mcp_main

        mcp_main()
    elif args.command == "search":
        return run_search(args.query, args.limit)
    elif args.command == "suggest":
        print(json.dumps(list(get_suggestions(args.query, args.paths)), ensure_ascii=False))
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
