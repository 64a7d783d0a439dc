"""Infrastructure adapters implementing the ports."""

from .graph_client import GraphInterestClient, build_async_client

__all__ = ["GraphInterestClient", "build_async_client"]
