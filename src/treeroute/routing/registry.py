"""Route registry — name-indexed store of every route in a tree.

Routes are added while the tree is built at startup; afterwards the
registry is only read.
"""

import logging
from collections.abc import Iterator

from treeroute.errors import DuplicatedRouteError
from treeroute.routing.route import Route

logger = logging.getLogger("treeroute.routing")


class RouteRegistry:
    """Stores routes by name and finds the route for a request path.

    Usage::

        registry = RouteRegistry()
        registry.add_route(Route("/users", "users", Handler("listUsers")))
        registry.by_name("users")
        registry.matching_route("/users")
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: dict[str, Route] = {}

    def add_route(self, route: Route) -> None:
        """Register *route* under its name.

        Raises ``DuplicatedRouteError`` if the name is already taken.
        """
        if route.name in self._routes:
            raise DuplicatedRouteError(route)
        self._routes[route.name] = route
        logger.debug("Registered %s", route)

    def by_name(self, name: str) -> Route | None:
        """Return the route registered as *name*, or None."""
        return self._routes.get(name)

    def matching_route(self, path: str) -> Route | None:
        """Return the first registered route matching *path*, or None.

        Routes are tried in registration order.
        """
        for route in self._routes.values():
            if route.matches(path):
                logger.debug("Path %r matched %s", path, route)
                return route
        logger.debug("No route matches %r", path)
        return None

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes.values())

    def __contains__(self, name: object) -> bool:
        return name in self._routes

    def __iter__(self) -> Iterator[Route]:
        return iter(list(self._routes.values()))

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteRegistry({list(self._routes)!r})"
