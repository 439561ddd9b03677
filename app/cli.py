"""
CLI entry point for the file server.

Usage:
    # Serve the latest iteration on port 8888
    python -m app.cli serve

    # Serve the second iteration from another directory
    python -m app.cli serve --iteration 2 --root /srv/files --port 9000
"""

import argparse
import logging
import sys

import uvicorn

from app.core.config import Settings
from app.main import create_app

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the file server. A failure to bind is fatal."""
    overrides = {
        key: value
        for key, value in {
            "host": args.host,
            "port": args.port,
            "iteration": args.iteration,
            "root_dir": args.root,
            "log_level": args.log_level,
        }.items()
        if value is not None
    }
    settings = Settings(**overrides)
    app = create_app(settings)

    logger.info(
        "file server listening, please visit: http://127.0.0.1:%d", settings.port
    )
    server = uvicorn.Server(
        uvicorn.Config(app, host=settings.host, port=settings.port, log_config=None)
    )
    server.run()
    if not server.started:
        logger.critical("Could not start server on %s:%d", settings.host, settings.port)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="FileList file server CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the file server")
    serve_parser.add_argument("--host", default=None, help="Interface to bind (default 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=None, help="TCP port (default 8888)")
    serve_parser.add_argument(
        "--iteration", type=int, choices=[1, 2, 3], default=None,
        help="Error-handling iteration to serve (default 3)",
    )
    serve_parser.add_argument(
        "--root", default=None,
        help="Directory request paths are resolved against (default: working directory)",
    )
    serve_parser.add_argument("--log-level", default=None, dest="log_level")
    serve_parser.set_defaults(func=cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
