"""treeroute exception hierarchy.

Lookups that find nothing return ``None``; the only failure raised by the
routing core is a duplicated route name, which surfaces while the route
tree is being built at startup.
"""

from typing import Any


class TreeRouterError(Exception):
    """Base for all treeroute errors."""


class DuplicatedRouteError(TreeRouterError):
    """Raised when a route name is already taken in a registry.

    The registry is left unchanged; the rejected route is kept on the
    exception for diagnostics.
    """

    def __init__(self, route: Any) -> None:
        self.route = route
        super().__init__(
            f"Route name of {route} is duplicated, every route must provide its own unique name"
        )
