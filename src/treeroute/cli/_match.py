"""``treeroute match`` — resolve a URI the way a host would."""

import argparse
import json
import sys

from treeroute.cli._resolve import load_registry
from treeroute.integration import ArgsProvider


def run_match(args: argparse.Namespace) -> None:
    """Print the signal and args for ``args.uri`` as JSON.

    Exits with status 1 when no route matches.
    """
    registry = load_registry(args)

    resolved = ArgsProvider(registry).get_args_and_signal_by_uri(args.uri)
    if resolved is None:
        print(f"No route matches {args.uri!r}", file=sys.stderr)
        raise SystemExit(1)

    print(json.dumps({"signal": resolved.signal, "args": resolved.args}, indent=2, default=str))
