"""CLI entry point for quicktodo."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="quicktodo",
        description="Command-line TODO list backed by SQLite or Google Tasks",
    )
    parser.add_argument(
        "--backend",
        choices=["sqlite", "google", "memory"],
        default=None,
        help="Storage backend (default: from quicktodo.yml, else sqlite)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to quicktodo.yml (default: ./quicktodo.yml)",
    )
    parser.add_argument(
        "--db-path",
        type=Path,
        default=None,
        help="SQLite database file (default: todo.db)",
    )
    parser.add_argument(
        "--credentials",
        type=Path,
        default=None,
        help="Google OAuth2 client secrets file (default: credentials.json)",
    )
    parser.add_argument(
        "--token-cache",
        type=Path,
        default=None,
        help="Google OAuth2 token cache file (default: tokencache.json)",
    )
    parser.add_argument(
        "--task-list",
        default=None,
        help="Google Tasks list title (default: 'My Tasks CLI')",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v INFO, -vv DEBUG, -vvv also HTTP/OAuth libraries)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings from CLI args; unset flags fall back to the environment."""
    settings_kwargs: dict = {}
    if args.config:
        settings_kwargs["config_file"] = args.config
    if args.backend:
        settings_kwargs["backend"] = args.backend
    if args.db_path:
        settings_kwargs["db_path"] = args.db_path
    if args.credentials:
        settings_kwargs["credentials_file"] = args.credentials
    if args.token_cache:
        settings_kwargs["token_cache"] = args.token_cache
    if args.task_list:
        settings_kwargs["task_list"] = args.task_list
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    settings = build_settings(parse_args(argv))

    setup_logging(settings.verbose, settings.log_file)

    # Import here so --help and --version stay fast
    from .app import run

    raise SystemExit(run(settings))


if __name__ == "__main__":
    main()
