"""URI value type consumed by the router."""

from treeroute.http.uri import URI

__all__ = ["URI"]
