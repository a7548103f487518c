"""Registry import resolution — resolves ``"module:attribute"`` strings.

Shared utility used by every ``treeroute`` subcommand to locate a
RouteRegistry from a user-supplied import string.
"""

import argparse
import importlib
import sys

from treeroute.routing.registry import RouteRegistry


def resolve_registry(import_string: str) -> RouteRegistry:
    """Resolve an import string to a ``RouteRegistry``.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"registry"`` (e.g. ``"myapp.routes"``
    resolves to ``myapp.routes.registry``).

    Supports factory functions: if the resolved object is callable and
    not a registry, it is called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a ``RouteRegistry``.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "registry"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, RouteRegistry):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, RouteRegistry):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a RouteRegistry"
        raise TypeError(msg)

    return obj


def load_registry(args: argparse.Namespace) -> RouteRegistry:
    """Resolve ``args.registry`` or exit with status 1."""
    try:
        return resolve_registry(args.registry)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
