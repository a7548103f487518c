"""Route tree node plus the Handler and ResolvedMatch value types."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from treeroute.config import ROUTE_NAME_KEY
from treeroute.http.uri import URI
from treeroute.routing.pattern import CompiledPattern, compile_pattern

logger = logging.getLogger("treeroute.routing")


@dataclass(frozen=True, slots=True)
class Handler:
    """What a route resolves to: a signal name and its static args."""

    signal: str
    args: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.args is None:
            object.__setattr__(self, "args", {})


@dataclass(frozen=True, slots=True)
class ResolvedMatch:
    """Result of handling a request URI with a matched route."""

    signal: str
    args: dict[str, Any]


class Route:
    """A node in the route tree.

    Holds a local path template, an optional name and a handler. The
    full path is the local template prefixed by every ancestor's path.
    The parent can be assigned once; later assignments are ignored.

    Usage::

        users = Route("/users", "users", Handler("listUsers"))
        user = Route("/:id", "user", Handler("showUser"))
        user.parent = users
        user.path()               # "/users/:id"
        user.matches("/users/7")  # True
    """

    __slots__ = ("_cache_patterns", "_compiled", "_handler", "_name", "_parent", "_url")

    def __init__(
        self,
        url: str,
        name: str | None,
        handler: Handler,
        *,
        cache_patterns: bool = True,
    ) -> None:
        self._url = url if url.startswith("/") else "/" + url
        self._name = name
        self._handler = handler
        self._parent: Route | None = None
        self._compiled: CompiledPattern | None = None
        self._cache_patterns = cache_patterns

    @property
    def url(self) -> str:
        """The local path template."""
        return self._url

    @property
    def name(self) -> str:
        """Explicit name, or the local template when none was given."""
        return self._name or self._url

    @property
    def handler(self) -> Handler:
        return self._handler

    @property
    def parent(self) -> "Route | None":
        return self._parent

    @parent.setter
    def parent(self, parent: "Route | None") -> None:
        if self._parent is not None or parent is None:
            return
        if parent is self or any(ancestor is self for ancestor in parent.ancestors()):
            logger.warning("Ignoring parent %s for %s: it would form a cycle", parent, self)
            return
        self._parent = parent
        self._compiled = None

    def path(self) -> str:
        """Return the full path template, joined through all parents."""
        full_path = self._url
        for ancestor in self.ancestors():
            prefix = ancestor.url
            if prefix.endswith("/"):
                prefix = prefix[:-1]
            full_path = prefix + full_path
        return full_path

    def _compiled_path(self) -> CompiledPattern:
        full_path = self.path()
        compiled = self._compiled
        if compiled is None or compiled.template != full_path:
            compiled = compile_pattern(full_path)
            if self._cache_patterns:
                self._compiled = compiled
        return compiled

    def matches(self, path: str) -> bool:
        """Return True if this route's full path matches *path*."""
        return self._compiled_path().test(path)

    def handle(self, uri: URI | str, *, name_key: str = ROUTE_NAME_KEY) -> ResolvedMatch:
        """Resolve *uri* into this route's signal and merged args.

        Args merge in increasing precedence: the route name under
        *name_key*, parameters extracted from *uri*, then the handler's
        static args.
        """
        uri_args = self._compiled_path().extract(uri)
        args: dict[str, Any] = {name_key: self.name, **uri_args, **self._handler.args}
        return ResolvedMatch(signal=self._handler.signal, args=args)

    def ancestors(self) -> list["Route"]:
        """Return parents from the nearest up to the root."""
        result: list[Route] = []
        current = self._parent
        while current is not None:
            result.append(current)
            current = current.parent
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return (
            self.name == other.name
            and self.path() == other.path()
            and self._handler == other._handler
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Route (name={self.name}, path={self.path()}, handler={self._handler.signal})"

    def __repr__(self) -> str:
        return f"<Route {self.name!r} {self.path()!r} {hex(id(self))}>"
