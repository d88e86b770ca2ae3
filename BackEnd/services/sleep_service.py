import logging
from dataclasses import dataclass
from PySide6.QtCore import QObject, Signal
from BackEnd.core.settings import DEFAULT_GOAL_HOURS
from BackEnd.repos.kv_repo import SqliteKeyValueStore
from BackEnd.repos.log_repo import SleepLogStore, new_entry, load_goal, save_goal, normalize_goal
from BackEnd.services import analytics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SleepSnapshot:
	"""Everything the window needs after a change."""
	entries: list
	goal_hours: float
	stats: analytics.SleepStats
	series: list
	insight: str

	@property
	def has_trend(self):
		return analytics.has_trend_data(self.series)


class SleepService(QObject):
	logs_changed = Signal(object)  # emits entries, newest first
	goal_changed = Signal(float)
	stats_changed = Signal(object)  # emits SleepSnapshot

	def __init__(self, kv=None):
		super().__init__()
		self.kv = kv if kv is not None else SqliteKeyValueStore()
		self.store = SleepLogStore(self.kv)
		self.goal_hours = DEFAULT_GOAL_HOURS

	def init(self):
		"""Load the log and goal, falling back to an empty log and the default goal."""
		self.store.load_initial()
		self.goal_hours = load_goal(self.kv)
		logger.info("Loaded %d sleep logs, goal %sh", len(self.store), self.goal_hours)
		self._publish(logs=True, goal=True)
		return self.snapshot()

	def add_log(self, bed_time, wake_time):
		entry = new_entry(bed_time, wake_time, entry_id=self.store.next_id())
		self.store.append(entry)
		logger.debug("Added sleep log %s (%sh)", entry.id, entry.duration)
		self._publish(logs=True)
		return entry

	def delete_log(self, entry_id):
		before = len(self.store)
		self.store.remove(entry_id)
		if len(self.store) == before:
			logger.debug("No sleep log with id %s", entry_id)
		self._publish(logs=True)

	def set_goal(self, hours):
		self.goal_hours = normalize_goal(hours)
		save_goal(self.kv, self.goal_hours)
		self._publish(goal=True)
		return self.goal_hours

	def snapshot(self):
		entries = self.store.entries
		stats = analytics.compute_stats(entries, self.goal_hours)
		return SleepSnapshot(
			entries=entries,
			goal_hours=self.goal_hours,
			stats=stats,
			series=analytics.build_series(entries),
			insight=analytics.insight_message(stats, self.goal_hours),
		)

	def _publish(self, logs=False, goal=False):
		snap = self.snapshot()
		if logs:
			self.logs_changed.emit(snap.entries)
		if goal:
			self.goal_changed.emit(snap.goal_hours)
		self.stats_changed.emit(snap)
