"""Entry point for running the todo service."""

import argparse
import os

import uvicorn

from .config import load_settings
from .logging import setup_logging
from .main import create_app


def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    parser = argparse.ArgumentParser(
        description="Todo Service - in-memory task list over HTTP"
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to listen on (default: {settings.port})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Root log level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=settings.log_json,
        help="Emit one JSON object per log line",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload server on code changes (dev mode)",
    )
    return parser


def serve_app():
    """App factory used by uvicorn; configures logging in the serving process.

    With ``--reload`` uvicorn serves from a child process, so logging options
    reach it through ``TODO_LOG_LEVEL`` / ``TODO_LOG_JSON`` like every other
    setting.
    """
    settings = load_settings()
    setup_logging(settings.log_level, json_format=settings.log_json)
    return create_app(settings)


def main(argv=None):
    args = build_parser().parse_args(argv)

    os.environ["TODO_LOG_LEVEL"] = args.log_level.upper()
    os.environ["TODO_LOG_JSON"] = "true" if args.json_logs else "false"
    setup_logging(args.log_level, json_format=args.json_logs)

    uvicorn.run(
        "todo_service.__main__:serve_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
