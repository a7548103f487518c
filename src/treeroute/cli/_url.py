"""``treeroute url`` — build the path of a named route."""

import argparse
import sys

from treeroute.cli._resolve import load_registry
from treeroute.config import RouterConfig
from treeroute.routing.service import TreeRouterService


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Turn ``["id=42", "tab=posts"]`` into ``{"id": "42", "tab": "posts"}``."""
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            print(f"Error: expected KEY=VALUE, got {pair!r}", file=sys.stderr)
            raise SystemExit(2)
        params[key] = value
    return params


def run_url(args: argparse.Namespace) -> None:
    """Print the reconstructed path, or exit 1 if there is none."""
    params = parse_params(args.params)
    registry = load_registry(args)

    service = TreeRouterService(registry, RouterConfig(strict_substitution=args.strict))
    if args.parent:
        path = service.parent(args.name, params)
    else:
        path = service.named(args.name, params)

    if path is None:
        target = "parent of route" if args.parent else "route"
        print(f"No {target} named {args.name!r}", file=sys.stderr)
        raise SystemExit(1)

    print(path)
