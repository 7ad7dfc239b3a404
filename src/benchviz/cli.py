#!/usr/bin/env python3
"""
benchviz CLI tool
Command line interface for the terminal viewer and the JSON API server
"""

from __future__ import annotations

import argparse
import os
import socket

import uvicorn

from benchviz.config import get_source

DEFAULT_PORT = 3151


def find_available_port(start_port: int = DEFAULT_PORT, max_attempts: int = 100) -> int | None:
    """
    Find an available port number

    Args:
        start_port: Starting port number
        max_attempts: Maximum number of attempts

    Returns:
        Available port number, None if not found
    """
    for port in range(start_port, start_port + max_attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            # If connection fails, that port is available
            result = sock.connect_ex(("127.0.0.1", port))
            if result != 0:
                return port
    return None


def run_serve(host: str = "127.0.0.1", port: int | None = None, source: str | None = None, dev: bool = False) -> None:
    """
    Start the JSON API server

    Args:
        host: Host name
        port: Port number (first free port from 3151 if None)
        source: Base URL or directory of the JSON files
        dev: Enable development mode with auto-reload
    """
    from benchviz.logger import setup_logger

    setup_logger()

    if source is None:
        source = get_source()
    # The reloader starts a fresh process, so pass the source through the environment
    os.environ["BENCHVIZ_SOURCE"] = source
    if dev:
        os.environ["BENCHVIZ_DEV_MODE"] = "1"

    if port is None:
        port = find_available_port()
        if port is None:
            print("Error: No available port found!")
            return

    from benchviz.dashboard.router import configure_source

    configure_source(source)

    print("Starting benchviz API server...")
    print(f"API: http://{host}:{port}/api/tests")
    print(f"Source: {source}")
    if dev:
        print("Development mode: auto-reload enabled")

    uvicorn.run("benchviz.dashboard.main:app", host=host, port=port, reload=dev)


def run_tui(source: str | None = None) -> None:
    """
    Start the terminal viewer

    Args:
        source: Base URL or directory. Defaults to BENCHVIZ_SOURCE
    """
    if source is None:
        source = get_source()

    print("Starting benchviz TUI...")
    print(f"Source: {source}")

    from benchviz.tui import run_tui as _run_tui

    _run_tui(source=source)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Nightly benchmark history viewer")
    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    tui_parser = subparsers.add_parser("tui", help="Start the terminal viewer")
    tui_parser.add_argument("--source", default=None, help="Base URL or directory of the JSON files (default: BENCHVIZ_SOURCE)")

    serve_parser = subparsers.add_parser("serve", help="Start the JSON API server")
    serve_parser.add_argument("--source", default=None, help="Base URL or directory of the JSON files (default: BENCHVIZ_SOURCE)")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host name (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=None, help=f"Port number (default: first free port from {DEFAULT_PORT})")
    serve_parser.add_argument("--dev", action="store_true", help="Enable development mode with auto-reload")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI main entry point
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        run_serve(host=args.host, port=args.port, source=args.source, dev=args.dev)
    elif args.command == "tui":
        run_tui(source=args.source)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
