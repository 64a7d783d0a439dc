"""Port interfaces (Protocols).

The proxy service depends only on these, never on concrete adapters.
No httpx or other infrastructure imports allowed here.
"""

from .id_gen import RequestIdProvider, UuidRequestIdProvider
from .interest_search import InterestSearchPort

__all__ = [
    "InterestSearchPort",
    "RequestIdProvider",
    "UuidRequestIdProvider",
]
