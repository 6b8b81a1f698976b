"""Command-line entry point."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from typing import Optional, Sequence

import platformdirs

from termodoro.config import ConfigError, get_config
from termodoro.data import DataError, open_database_connection
from termodoro.tui.messages import MenuInput, View
from termodoro.tui.root import RootModel, ViewError
from termodoro.tui.runtime import Program


class LaunchError(Exception):
    """Raised when the application cannot start or ends with an error."""


def resolve_default_paths(config: str, db: str) -> tuple[str, str]:
    """Fill empty config and database paths with per-user defaults."""
    if not config:
        directory = platformdirs.user_config_path("termodoro", ensure_exists=True)
        config = str(directory / "config.toml")
    if not db:
        directory = platformdirs.user_data_path("termodoro", ensure_exists=True)
        db = str(directory / "termodoro.db")
    return config, db


def launch_root(db_path: str, config_path: str, starter_view: View, switch_in: object) -> None:
    """Open storage and configuration, then run the interface from ``starter_view``."""
    try:
        db = open_database_connection(db_path)
    except sqlite3.Error as exc:
        raise LaunchError(f"opening database: {exc}") from exc

    try:
        try:
            cfg = get_config(config_path)
        except ConfigError as exc:
            raise LaunchError(f"getting config: {exc}") from exc
        try:
            model = RootModel(starter_view, switch_in, db, cfg)
        except (ViewError, sqlite3.Error, DataError) as exc:
            raise LaunchError(f"creating starter model: {exc}") from exc
        try:
            exit_model = Program(model).run()
        except OSError as exc:
            raise LaunchError(f"failed to run program: {exc}") from exc

        if not isinstance(exit_model, RootModel):
            raise LaunchError("failed to assert exit model type")
        if exit_model.exit_error is not None:
            raise LaunchError(
                f"starter model exited with an error: {exit_model.exit_error}"
            ) from exit_model.exit_error
    finally:
        db.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and start the application; return the exit status."""
    parser = argparse.ArgumentParser(prog="termodoro", description="A pomodoro timer TUI")
    parser.add_argument("--config", default="", help="Path to config file (default: per-user config directory).")
    parser.add_argument("--db", default="", help="Path to the database file (default: per-user data directory).")
    parser.add_subparsers(dest="command", metavar="<command>").add_parser("menu", help="Start in the menu")
    args = parser.parse_args(argv)
    try:
        config_path, db_path = resolve_default_paths(args.config, args.db)
        launch_root(db_path, config_path, View.MENU, MenuInput())
    except (LaunchError, OSError) as exc:
        print(f"termodoro: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())