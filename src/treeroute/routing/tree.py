"""Declarative route tree construction.

Trees are built bottom-up: children are created first and handed to
their parent, which adopts them and registers itself::

    registry = tree.registry()
    route = tree.route_factory(registry)

    route("/", {"name": "home", "handler": tree.signal("home")}, [
        route("/users", {"name": "users", "handler": tree.signal("listUsers")}, [
            route("/:id", {"name": "user", "handler": tree.signal("showUser")}),
        ]),
    ])
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, NotRequired, TypedDict

from treeroute.config import RouterConfig
from treeroute.routing.pattern import remove_end_slash
from treeroute.routing.registry import RouteRegistry
from treeroute.routing.route import Handler, Route


class RouteProps(TypedDict):
    handler: Handler
    name: NotRequired[str | None]


RouteFactory = Callable[[str, RouteProps, Iterable[Route]], Route]


def registry() -> RouteRegistry:
    """Create a new, empty route registry."""
    return RouteRegistry()


def signal(name: str, args: Mapping[str, Any] | None = None) -> Handler:
    """Create a handler for signal *name* with optional static *args*."""
    return Handler(signal=name, args=dict(args) if args else {})


def route_factory(
    route_registry: RouteRegistry,
    config: RouterConfig | None = None,
) -> RouteFactory:
    """Return a route builder bound to *route_registry*.

    The builder creates a ``Route`` from *url* (trailing slash removed),
    becomes the parent of each child, registers itself and returns
    itself. Registration raises ``DuplicatedRouteError`` on a name clash.
    """
    cache_patterns = (config or RouterConfig()).cache_patterns

    def route(url: str, props: RouteProps, children: Iterable[Route] = ()) -> Route:
        current = Route(
            remove_end_slash(url),
            props.get("name"),
            props["handler"],
            cache_patterns=cache_patterns,
        )
        for child in children:
            child.parent = current
        route_registry.add_route(current)
        return current

    return route
