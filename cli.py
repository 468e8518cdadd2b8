#!/usr/bin/env python3
"""
Command-line interface for the product notification manager.

Usage:
    python cli.py [command] [options]

Commands:
    serve       Start the API server
    demo        Render the sample templates for the sample customers
    test        Run the test suite

Examples:
    python cli.py serve --reload
    python cli.py demo
    python cli.py test -v
"""

import argparse
import subprocess
import sys
from typing import Optional

import uvicorn

from notify_core.config import get_settings


def run_server(host: str, port: int, reload: bool) -> None:
    """Start the API server."""
    print(f"Starting server at http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")
    uvicorn.run("api.main:app", host=host, port=port, reload=reload)


def run_demo() -> None:
    """Run the template demo."""
    from notify_core.demo import run_template_demo
    run_template_demo()


def run_tests(args: list[str]) -> int:
    """Run the test suite."""
    cmd = [sys.executable, "-m", "pytest"] + args
    return subprocess.run(cmd).returncode


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Product Notification Manager CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s serve --reload
  %(prog)s serve --host 0.0.0.0 --port 9000
  %(prog)s demo
  %(prog)s test -v
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default=settings.api_host, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=settings.api_port, help="Port to bind to")
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        default=settings.api_reload,
        help="Enable auto-reload",
    )

    # Demo command
    subparsers.add_parser("demo", help="Render the sample templates")

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        run_server(args.host, args.port, args.reload)
    elif args.command == "demo":
        run_demo()
    elif args.command == "test":
        return run_tests(args.pytest_args)
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
