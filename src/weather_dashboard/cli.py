"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import sys
from pathlib import Path

import jinja2

from weather_dashboard import __version__
from weather_dashboard.config import get_settings
from weather_dashboard.flows.build import build_all
from weather_dashboard.flows.fetch import fetch_report


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-dashboard",
        description="Static weather and news dashboard for e-ink readers",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    # 'refresh' command - fetch data and build site
    subparsers.add_parser("refresh", help="Fetch weather and news, then build the page")

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"City code: {settings.city_code}")
    print(f"Output: {settings.site_dir}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_refresh(args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch data then build site."""
    settings = get_settings()
    if getattr(args, "debug", False):
        print(f"Debug mode enabled. Settings: {settings}")

    print(f"Fetching data for city {settings.city_code}...")
    report = fetch_report()

    print("Building site...")
    try:
        result = build_all(report, Path(settings.site_dir))
    except (OSError, jinja2.TemplateError) as exc:
        print(f"Error: failed to build site: {exc}", file=sys.stderr)
        return 1

    print(f"Done. Output: {result['output']}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(settings.site_dir)

    if not site_dir.exists():
        print("No site directory found. Run 'weather-dashboard refresh' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "refresh": cmd_refresh,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
