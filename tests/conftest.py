"""
Shared test fixtures for the sleep tracker.
"""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from BackEnd.repos.kv_repo import SqliteKeyValueStore
from BackEnd.repos.log_repo import SleepEntry


class MemoryKeyValueStore:
    """Dict-backed stand-in for the persistent key-value store."""

    def __init__(self, data=None):
        self.data = dict(data or {})
        self.writes = []

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.writes.append(key)
        self.data[key] = value

    def delete(self, key):
        return self.data.pop(key, None) is not None


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Never touch the real per-user data dir."""
    data_dir = tmp_path / "data"
    monkeypatch.setenv("SLEEPTRACKER_DATA_DIR", str(data_dir))
    return data_dir


@pytest.fixture
def memory_kv():
    return MemoryKeyValueStore()


@pytest.fixture
def sqlite_kv(tmp_path):
    return SqliteKeyValueStore(tmp_path / "test_sleep.db")


@pytest.fixture(scope="session")
def qt_app():
    """Provide QApplication for GUI tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def make_entry(entry_id, duration=8.0, bed_time="22:00", wake_time="06:00"):
    return SleepEntry(
        id=entry_id,
        date="Oct 1",
        full_date="2026-10-01T06:00:00.000Z",
        bed_time=bed_time,
        wake_time=wake_time,
        duration=duration,
    )


@pytest.fixture
def entry_factory():
    return make_entry
