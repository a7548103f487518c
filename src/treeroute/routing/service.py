"""Path reconstruction by route name.

Rebuilds a concrete path for a named route, or for its parent, by
substituting ``:param`` tokens in the full path template.
"""

import re
from collections.abc import Mapping
from typing import Any

from treeroute.config import RouterConfig
from treeroute.routing.pattern import PARAM_PREFIX
from treeroute.routing.registry import RouteRegistry

# A whole parameter token: ":name" up to the next separator
_TOKEN = re.compile(re.escape(PARAM_PREFIX) + r"([^/?&=#]+)")


def replace_params(path: str, args: Mapping[str, Any] | None) -> str:
    """Substitute ``:key`` tokens in *path* with values from *args*.

    For each key, in mapping order, the first occurrence of ``:key`` is
    replaced by ``str(value)``. This is plain string replacement: a key
    that is a prefix of another token (``:id`` in ``:identifier``) or a
    value that contains a later key's token is substituted as-is.
    Keys absent from *path* are ignored.
    """
    for key, value in (args or {}).items():
        path = path.replace(PARAM_PREFIX + key, str(value), 1)
    return path


def replace_params_strict(path: str, args: Mapping[str, Any] | None) -> str:
    """Substitute whole ``:key`` tokens in *path* in a single pass.

    Tokens without a value in *args* are left in place. Substituted
    values are never rescanned.
    """
    if not args:
        return path

    def _sub(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in args:
            return str(args[name])
        return match.group(0)

    return _TOKEN.sub(_sub, path)


class TreeRouterService:
    """Looks up routes by name and renders their paths.

    Usage::

        service = TreeRouterService(registry)
        service.named("user", {"id": 42})      # "/users/42"
        service.parent("user", {"id": 42})     # "/users"
    """

    __slots__ = ("_config", "_registry")

    def __init__(self, registry: RouteRegistry, config: RouterConfig | None = None) -> None:
        self._registry = registry
        self._config = config or RouterConfig()

    def named(self, name: str, args: Mapping[str, Any] | None = None) -> str | None:
        """Return the path of route *name* with *args* substituted.

        Returns None if no route has that name.
        """
        found = self._registry.by_name(name)
        if found is None:
            return None
        return self._replace_params(found.path(), args)

    def parent(self, name: str, args: Mapping[str, Any] | None = None) -> str | None:
        """Return the path of the parent of route *name* with *args* substituted.

        Returns None if the route is unknown or has no parent.
        """
        current = self._registry.by_name(name)
        parent = current.parent if current is not None else None
        if parent is None:
            return None
        return self._replace_params(parent.path(), args)

    def _replace_params(self, path: str, args: Mapping[str, Any] | None) -> str:
        if self._config.strict_substitution:
            return replace_params_strict(path, args)
        return replace_params(path, args)
