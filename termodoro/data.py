"""Persistent storage of timers in SQLite."""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = [
    "DataError",
    "Timer",
    "TimerRepository",
    "TimerRepositorySQLite",
    "open_database_connection",
    "ensure_tables_exist",
    "ensure_timer_table_exists",
]


class DataError(Exception):
    """Raised when stored data cannot be read into a model."""


@dataclass
class Timer:
    """A pomodoro timer definition."""

    id: int
    name: str
    description: str
    focus_duration: int
    rest_duration: int


class TimerRepository(ABC):
    """Source of stored timers."""

    @abstractmethod
    def get_all_timers(self) -> list[Timer]:
        """Return every stored timer."""


@dataclass
class TimerRepositorySQLite(TimerRepository):
    """Timer repository backed by an SQLite connection."""

    db: sqlite3.Connection

    def get_all_timers(self) -> list[Timer]:
        cursor = self.db.execute(
            "SELECT id, name, description, focus_duration, rest_duration FROM timers"
        )
        timers = []
        for row in cursor:
            if any(value is None for value in row):
                raise DataError("cannot read NULL column into timer")
            row_id, name, description, focus, rest = row
            timers.append(
                Timer(
                    id=int(row_id),
                    name=str(name),
                    description=str(description),
                    focus_duration=int(focus),
                    rest_duration=int(rest),
                )
            )
        return timers


def open_database_connection(data_source_name: str) -> sqlite3.Connection:
    """Open the database at ``data_source_name`` and create missing tables."""
    db = sqlite3.connect(data_source_name)
    try:
        ensure_tables_exist(db)
    except sqlite3.Error:
        db.close()
        raise
    return db


def ensure_tables_exist(db: sqlite3.Connection) -> None:
    """Create every table the application uses."""
    ensure_timer_table_exists(db)


def ensure_timer_table_exists(db: sqlite3.Connection) -> None:
    """Create the timers table if it does not exist."""
    with db:
        db.execute(
            """CREATE TABLE IF NOT EXISTS timers (
                id INTEGER PRIMARY KEY,
                name TEXT NOT NULL,
                description TEXT,
                focus_duration INTEGER,
                rest_duration INTEGER
            );"""
        )