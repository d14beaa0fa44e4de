"""dirbrowse entry point.

Usage:
  dirbrowse                         Serve the current directory on 0.0.0.0:8080
  dirbrowse --dir ~/Videos -p 9000  Serve ~/Videos on port 9000
  dirbrowse --dev                   Auto-reload on source changes
"""

import argparse
import logging
from importlib.metadata import version as get_version

from pydantic import ValidationError

from dirbrowse.config import Settings
from dirbrowse.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirbrowse",
        description="Browse a directory over HTTP.",
    )
    parser.add_argument(
        "--addr", type=str, default=None, help="Address to listen to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port", "-p", type=int, default=None, help="Port to listen to (default: 8080)"
    )
    parser.add_argument(
        "--dir", "-d", type=str, default=None, help="Directory to serve (default: .)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level: DEBUG, INFO, WARNING, ERROR (default: INFO)",
    )
    parser.add_argument("--dev", action="store_true", help="Development mode with auto-reload")
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {get_version('dirbrowse')}",
    )
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with any flags given on the command line applied on top."""
    overrides = {
        "addr": args.addr,
        "port": args.port,
        "dir": args.dir,
        "log_level": args.log_level,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args)
    except ValidationError as exc:
        parser.error(
            "; ".join(f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in exc.errors())
        )

    setup_logging(level=settings.log_level)

    from dirbrowse.server import run_server

    try:
        run_server(settings, dev=args.dev)
    except KeyboardInterrupt:
        logger.info("Stopped")


if __name__ == "__main__":
    main()
