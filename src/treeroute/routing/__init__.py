"""Routing — route tree, name registry and path reconstruction.

Routes form a tree whose full paths are the concatenation of their
ancestors' templates. Matching is first-match in registration order.
"""

from treeroute.routing.pattern import CompiledPattern, compile_pattern, parse_template
from treeroute.routing.registry import RouteRegistry
from treeroute.routing.route import Handler, ResolvedMatch, Route
from treeroute.routing.service import TreeRouterService

__all__ = [
    "CompiledPattern",
    "Handler",
    "ResolvedMatch",
    "Route",
    "RouteRegistry",
    "TreeRouterService",
    "compile_pattern",
    "parse_template",
]
