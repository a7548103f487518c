"""treeroute CLI — inspect a route tree from the command line.

Entry point registered as ``treeroute`` in ``pyproject.toml``::

    [project.scripts]
    treeroute = "treeroute.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``treeroute`` command."""
    parser = argparse.ArgumentParser(
        prog="treeroute",
        description="treeroute — hierarchical routing with reverse lookup by name.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging level for treeroute loggers",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- treeroute routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "registry",
        help="Import string (e.g. myapp.routes:registry)",
    )

    # -- treeroute match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a URI to a signal and args")
    match_parser.add_argument("registry", help="Import string (e.g. myapp.routes:registry)")
    match_parser.add_argument("uri", help="Request URI or path (e.g. /users/42?tab=posts)")

    # -- treeroute url ----------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Build the path of a named route")
    url_parser.add_argument("registry", help="Import string (e.g. myapp.routes:registry)")
    url_parser.add_argument("name", help="Route name")
    url_parser.add_argument(
        "params",
        nargs="*",
        metavar="KEY=VALUE",
        help="Parameter values to substitute",
    )
    url_parser.add_argument(
        "--parent",
        action="store_true",
        help="Build the path of the route's parent instead",
    )
    url_parser.add_argument(
        "--strict",
        action="store_true",
        help="Substitute whole :param tokens in a single pass",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from treeroute.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from treeroute.cli._match import run_match

        run_match(args)
    elif args.command == "url":
        from treeroute.cli._url import run_url

        run_url(args)
