# Fixed settings for the sleep tracker

LOGS_KEY = "sleep_logs"
GOAL_KEY = "sleep_goal"

# Keep last 30 days
MAX_LOGS = 30

DEFAULT_GOAL_HOURS = 8.0
GOAL_MIN_HOURS = 4.0
GOAL_MAX_HOURS = 12.0
GOAL_STEP_HOURS = 0.5
RECOMMENDED_TEXT = "Recommended: 7-9 hours"

DEFAULT_BED_TIME = "22:00"
DEFAULT_WAKE_TIME = "06:00"

MINUTES_PER_DAY = 24 * 60

# Trend chart needs at least this many points
MIN_TREND_POINTS = 2
