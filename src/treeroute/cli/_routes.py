"""``treeroute routes`` — list registered routes.

Prints every route with its name, full path and signal, in
registration (and therefore match) order.
"""

import argparse

from treeroute.cli._resolve import load_registry


def run_routes(args: argparse.Namespace) -> None:
    """Print a NAME / PATH / SIGNAL table for ``args.registry``."""
    registry = load_registry(args)

    routes = registry.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [(route.name, route.path(), route.handler.signal) for route in routes]

    # Column widths
    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_name}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("NAME", "PATH", "SIGNAL"))
    sep_len = max_name + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for name, path, signal_name in rows:
        print(fmt.format(name, path, signal_name))
