import time
from datetime import datetime, timezone

def utc_now_iso(now=None):
	"""Return UTC time as ISO8601 string with milliseconds and a 'Z' suffix."""
	now = now or datetime.now(timezone.utc)
	stamp = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
	return stamp.replace("+00:00", "Z")

def now_ms() -> int:
	"""Milliseconds since the epoch, used as entry ids."""
	return int(time.time() * 1000)

def calendar_label(now=None) -> str:
	"""Short local date like 'Oct 16'."""
	now = now or datetime.now()
	return f"{now:%b} {now.day}"
