"""Host framework integration.

Exposes the two read contracts a host needs, resolving a request URI to
a signal and rebuilding paths by route name, and registers them with
the host's service locator.
"""

import logging
from typing import Any, Protocol

from treeroute.config import RouterConfig
from treeroute.http.uri import URI, as_uri
from treeroute.routing.registry import RouteRegistry
from treeroute.routing.route import ResolvedMatch
from treeroute.routing.service import TreeRouterService

logger = logging.getLogger("treeroute.routing")

URL_ARGS_PROVIDER = "url_args_provider"
TREE_ROUTER = "tree_router"


class ServiceLocator(Protocol):
    """The part of a host's dependency container treeroute uses."""

    def register_instance(self, name: str, instance: Any) -> None: ...


class ArgsProvider:
    """Resolves request locations to a signal and its args."""

    __slots__ = ("_config", "_registry")

    def __init__(self, registry: RouteRegistry, config: RouterConfig | None = None) -> None:
        self._registry = registry
        self._config = config or RouterConfig()

    def get_args_and_signal_by_uri(self, location: URI | str) -> ResolvedMatch | None:
        """Return the resolved match for *location*, or None if no route matches."""
        uri = as_uri(location)
        route = self._registry.matching_route(uri.path)
        if route is None:
            return None
        return route.handle(uri, name_key=self._config.route_name_key)


def register(
    locator: ServiceLocator,
    registry: RouteRegistry,
    config: RouterConfig | None = None,
) -> None:
    """Register an ``ArgsProvider`` and a ``TreeRouterService`` with *locator*.

    Both share *registry*; there is no implicit default registry.
    """
    config = config or RouterConfig()
    locator.register_instance(URL_ARGS_PROVIDER, ArgsProvider(registry, config))
    locator.register_instance(TREE_ROUTER, TreeRouterService(registry, config))
    logger.debug("Registered tree router with %d routes", len(registry))
