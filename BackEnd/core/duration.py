from BackEnd.core.settings import MINUTES_PER_DAY

def parse_hhmm(value: str) -> int:
	"""Convert 'HH:MM' to minutes past midnight. Raises ValueError on malformed input."""
	hours, minutes = value.split(":")
	h, m = int(hours), int(minutes)
	if not (0 <= h <= 23 and 0 <= m <= 59):
		raise ValueError(f"time of day out of range: {value!r}")
	return h * 60 + m

def compute_duration(start: str, end: str) -> float:
	"""Hours from start to end, wrapping past midnight when end is earlier.

	Equal times give 0.0, not 24.0.
	"""
	diff = parse_hhmm(end) - parse_hhmm(start)
	if diff < 0:
		# Overnight sleep
		diff += MINUTES_PER_DAY
	return round(diff / 60, 2)

def fmt_hours(hours) -> str:
	"""Format hours the way the log list shows them ('8h', '7.5h', '6.33h')."""
	return f"{float(hours):g}h"
