import sqlite3

import pytest

from termodoro.data import (
    DataError,
    Timer,
    TimerRepository,
    TimerRepositorySQLite,
    ensure_tables_exist,
    ensure_timer_table_exists,
    open_database_connection,
)


@pytest.fixture
def db():
    conn = open_database_connection(":memory:")
    yield conn
    conn.close()


def _insert(conn, *rows):
    with conn:
        conn.executemany(
            "INSERT INTO timers (id, name, description, focus_duration, rest_duration)"
            " VALUES (?, ?, ?, ?, ?)",
            rows,
        )


def test_open_creates_timers_table(db):
    names = [r[0] for r in db.execute("SELECT name FROM sqlite_master WHERE type='table'")]
    assert "timers" in names


def test_empty_table_gives_empty_list(db):
    assert TimerRepositorySQLite(db).get_all_timers() == []


def test_rows_read_back(db):
    _insert(db, (1, "Work", "deep focus", 25, 5), (2, "Study", "reading", 50, 10))
    timers = TimerRepositorySQLite(db).get_all_timers()
    assert timers == [
        Timer(id=1, name="Work", description="deep focus", focus_duration=25, rest_duration=5),
        Timer(id=2, name="Study", description="reading", focus_duration=50, rest_duration=10),
    ]


def test_ensure_is_idempotent(db):
    _insert(db, (7, "Keep", "kept", 1, 2))
    ensure_tables_exist(db)
    ensure_timer_table_exists(db)
    assert [t.name for t in TimerRepositorySQLite(db).get_all_timers()] == ["Keep"]


def test_null_column_raises(db):
    _insert(db, (1, "Work", None, 25, 5))
    with pytest.raises(DataError):
        TimerRepositorySQLite(db).get_all_timers()


def test_name_is_required(db):
    with pytest.raises(sqlite3.IntegrityError):
        _insert(db, (1, None, "x", 1, 1))
    assert TimerRepositorySQLite(db).get_all_timers() == []


def test_file_database_persists(tmp_path):
    path = str(tmp_path / "t.db")
    conn = open_database_connection(path)
    _insert(conn, (3, "Saved", "on disk", 30, 6))
    conn.close()
    reopened = open_database_connection(path)
    try:
        timers = TimerRepositorySQLite(reopened).get_all_timers()
    finally:
        reopened.close()
    assert timers == [Timer(3, "Saved", "on disk", 30, 6)]


def test_repository_is_abstract():
    with pytest.raises(TypeError):
        TimerRepository()