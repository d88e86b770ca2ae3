import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from BackEnd.core.settings import MIN_TREND_POINTS


@dataclass(frozen=True)
class SleepStats:
	average: float
	consistency_percent: int
	# As displayed: one decimal, or a bare '0' only for an empty log
	average_text: str = "0"


EMPTY_STATS = SleepStats(average=0.0, consistency_percent=0)


def meets_goal(entry, goal_hours):
	return entry.duration >= goal_hours


def round_tenths(value) -> str:
	"""One decimal, ties away from zero on the exact binary value (7.25 -> '7.3')."""
	return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def compute_stats(entries, goal_hours):
	"""Mean duration (1 decimal) and the percentage of entries at or above the goal."""
	if not entries:
		return EMPTY_STATS
	total = len(entries)
	avg = sum(e.duration for e in entries) / total
	met = sum(1 for e in entries if meets_goal(e, goal_hours))
	# Round halves up (12.5 -> 13)
	consistency = math.floor(met / total * 100 + 0.5)
	text = round_tenths(avg)
	return SleepStats(average=float(text), consistency_percent=consistency, average_text=text)


def build_series(entries):
	"""Oldest-first copy of a newest-first collection."""
	return list(reversed(entries))


def has_trend_data(series):
	return len(series) >= MIN_TREND_POINTS


def insight_message(stats, goal_hours):
	if stats.average >= goal_hours:
		return ("Great work! You are consistently hitting your sleep goal. "
			"Keep this rhythm to maintain high cognitive performance.")
	gap = abs(goal_hours - stats.average)
	return (f"You're currently averaging {stats.average_text}h, which is {round_tenths(gap)}h below "
		"your target. Try moving bedtime 15 mins earlier.")
