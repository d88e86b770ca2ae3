import logging
import sqlite3
from pathlib import Path
from BackEnd.core.paths import db_path
from BackEnd.core.clock import utc_now_iso

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schema.sql"


class SqliteKeyValueStore:
	"""Durable get/set over opaque string keys, one row per key."""

	def __init__(self, path=None):
		self.path = Path(path) if path is not None else db_path()

	def connect(self):
		"""Open SQLite connection and ensure schema is applied."""
		self.path.parent.mkdir(parents=True, exist_ok=True)
		conn = sqlite3.connect(self.path)
		conn.row_factory = sqlite3.Row
		try:
			with open(SCHEMA_PATH, encoding="utf-8") as f:
				conn.executescript(f.read())
		except sqlite3.Error:
			conn.close()
			raise
		return conn

	def get(self, key):
		"""Return the stored string for key, or None when absent or unreadable."""
		try:
			conn = self.connect()
			try:
				row = conn.execute("SELECT value FROM kv WHERE key=?", (key,)).fetchone()
			finally:
				conn.close()
		except (sqlite3.Error, OSError):
			logger.exception("Failed to read %r from %s", key, self.path)
			return None
		return row["value"] if row else None

	def set(self, key, value):
		"""Write-through; failures are logged, never raised."""
		try:
			conn = self.connect()
			try:
				with conn:
					conn.execute(
						"""
						INSERT INTO kv (key, value, updated_at) VALUES (?, ?, ?)
						ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at
						""",
						(key, str(value), utc_now_iso())
					)
			finally:
				conn.close()
		except (sqlite3.Error, OSError):
			logger.exception("Failed to write %r to %s", key, self.path)

	def delete(self, key):
		"""Remove key. Returns True if a row was deleted."""
		conn = self.connect()
		try:
			with conn:
				cur = conn.execute("DELETE FROM kv WHERE key=?", (key,))
				return cur.rowcount > 0
		finally:
			conn.close()

	def keys(self):
		conn = self.connect()
		try:
			return [row["key"] for row in conn.execute("SELECT key FROM kv ORDER BY key")]
		finally:
			conn.close()
