"""Sleep log entries and their persistence.

The log is kept newest-first and capped at ``MAX_LOGS`` entries. Every
mutation writes the whole collection through to the key-value store under
``sleep_logs`` as a JSON array of
``{id, date, fullDate, bedTime, wakeTime, duration}`` objects. The goal is
stored separately under ``sleep_goal`` as a numeric string.

Anything unreadable in the store is treated as absent, so a corrupt
database degrades to an empty log and the default goal.
"""

import json
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from BackEnd.core.clock import utc_now_iso, now_ms, calendar_label
from BackEnd.core.duration import compute_duration
from BackEnd.core.settings import (
	LOGS_KEY, GOAL_KEY, MAX_LOGS,
	DEFAULT_GOAL_HOURS, GOAL_MIN_HOURS, GOAL_MAX_HOURS, GOAL_STEP_HOURS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SleepEntry:
	id: int
	date: str
	full_date: str
	bed_time: str
	wake_time: str
	duration: float

	def to_record(self):
		"""JSON-compatible dict in the stored shape."""
		return {
			"id": self.id,
			"date": self.date,
			"fullDate": self.full_date,
			"bedTime": self.bed_time,
			"wakeTime": self.wake_time,
			"duration": self.duration,
		}

	@classmethod
	def from_record(cls, record):
		"""Build an entry from a stored dict. Raises ValueError/KeyError/TypeError if malformed."""
		if not isinstance(record, dict):
			raise TypeError(f"log entry must be an object, got {type(record).__name__}")
		entry_id = record["id"]
		duration = record["duration"]
		# bool is an int subclass; reject it explicitly
		if isinstance(entry_id, bool) or not isinstance(entry_id, (int, float)):
			raise TypeError("id must be a number")
		if isinstance(duration, bool) or not isinstance(duration, (int, float)):
			raise TypeError("duration must be a number")
		for field in ("date", "fullDate", "bedTime", "wakeTime"):
			if not isinstance(record[field], str):
				raise TypeError(f"{field} must be a string")
		return cls(
			id=int(entry_id),
			date=record["date"],
			full_date=record["fullDate"],
			bed_time=record["bedTime"],
			wake_time=record["wakeTime"],
			duration=float(duration),
		)


def new_entry(bed_time, wake_time, entry_id=None, now=None):
	"""Create an entry for a bed/wake pair; duration is derived here and nowhere else."""
	now = now or datetime.now(timezone.utc)
	return SleepEntry(
		id=entry_id if entry_id is not None else now_ms(),
		date=calendar_label(now.astimezone()),
		full_date=utc_now_iso(now),
		bed_time=bed_time,
		wake_time=wake_time,
		duration=compute_duration(bed_time, wake_time),
	)


class SleepLogStore:
	"""Newest-first, bounded collection of SleepEntry backed by a key-value store."""

	def __init__(self, kv, max_entries=MAX_LOGS):
		self.kv = kv
		self.max_entries = max_entries
		self._entries = []

	@property
	def entries(self):
		"""Copy of the current entries, newest first."""
		return list(self._entries)

	def __len__(self):
		return len(self._entries)

	def ids(self):
		return [e.id for e in self._entries]

	def next_id(self):
		"""Creation-time id, kept strictly above the current head."""
		candidate = now_ms()
		if self._entries and candidate <= self._entries[0].id:
			candidate = self._entries[0].id + 1
		return candidate

	def load_initial(self):
		"""Load persisted entries; absent or malformed data yields an empty log."""
		self._entries = load_logs(self.kv)
		return self.entries

	def append(self, entry):
		"""Insert at the head and drop the tail past the cap."""
		self._entries = [entry, *self._entries][:self.max_entries]
		self.save()
		return entry

	def remove(self, entry_id):
		"""Drop the entry with this id. Unknown ids are a no-op."""
		self._entries = [e for e in self._entries if e.id != entry_id]
		self.save()

	def save(self):
		self.kv.set(LOGS_KEY, json.dumps([e.to_record() for e in self._entries]))


def load_logs(kv):
	raw = kv.get(LOGS_KEY)
	if not raw:
		return []
	try:
		data = json.loads(raw)
		if not isinstance(data, list):
			raise TypeError(f"expected a list, got {type(data).__name__}")
		return [SleepEntry.from_record(r) for r in data]
	except (ValueError, KeyError, TypeError, OverflowError) as e:
		logger.warning("Ignoring malformed %s value: %s", LOGS_KEY, e)
		return []


def normalize_goal(hours):
	"""Clamp to the goal range and snap to the nearest half hour."""
	hours = min(max(float(hours), GOAL_MIN_HOURS), GOAL_MAX_HOURS)
	return math.floor(hours / GOAL_STEP_HOURS + 0.5) * GOAL_STEP_HOURS


def load_goal(kv):
	"""Stored goal, or the default when absent or not a finite number."""
	raw = kv.get(GOAL_KEY)
	if raw is None or not raw.strip():
		return DEFAULT_GOAL_HOURS
	try:
		value = float(raw)
	except ValueError:
		logger.warning("Ignoring malformed %s value: %r", GOAL_KEY, raw)
		return DEFAULT_GOAL_HOURS
	if not math.isfinite(value):
		logger.warning("Ignoring non-finite %s value: %r", GOAL_KEY, raw)
		return DEFAULT_GOAL_HOURS
	return normalize_goal(value)


def save_goal(kv, hours):
	kv.set(GOAL_KEY, f"{hours:g}")
