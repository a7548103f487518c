"""treeroute — hierarchical routing with reverse lookup by name.

Routes form a tree: each route's full path is its ancestors' paths
followed by its own. A request path resolves to a signal name plus
arguments; a route name resolves back to a concrete path.

Basic usage::

    from treeroute import registry, route_factory, signal, TreeRouterService

    routes = registry()
    route = route_factory(routes)

    route("/users", {"name": "users", "handler": signal("listUsers")}, [
        route("/:id", {"name": "user", "handler": signal("showUser")}),
    ])

    routes.matching_route("/users/42").handle("/users/42")
    # ResolvedMatch(signal="showUser", args={"routeName": "user", "id": "42"})

    TreeRouterService(routes).named("user", {"id": 7})  # "/users/7"
"""

__version__ = "0.1.0"
__all__ = [
    "URI",
    "ArgsProvider",
    "DuplicatedRouteError",
    "Handler",
    "ResolvedMatch",
    "Route",
    "RouteRegistry",
    "RouterConfig",
    "TreeRouterError",
    "TreeRouterService",
    "register",
    "registry",
    "route_factory",
    "signal",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import treeroute`` fast while providing a clean top-level API.
    """
    if name in ("TreeRouterError", "DuplicatedRouteError"):
        from treeroute import errors as _errors

        return getattr(_errors, name)

    if name == "RouterConfig":
        from treeroute.config import RouterConfig

        return RouterConfig

    if name == "URI":
        from treeroute.http.uri import URI

        return URI

    if name in ("Handler", "ResolvedMatch", "Route"):
        from treeroute.routing import route as _route

        return getattr(_route, name)

    if name == "RouteRegistry":
        from treeroute.routing.registry import RouteRegistry

        return RouteRegistry

    if name == "TreeRouterService":
        from treeroute.routing.service import TreeRouterService

        return TreeRouterService

    if name in ("registry", "route_factory", "signal"):
        from treeroute.routing import tree as _tree

        return getattr(_tree, name)

    if name in ("ArgsProvider", "register"):
        from treeroute import integration as _integration

        return getattr(_integration, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
