"""
Reset the sleep tracker by clearing the stored log and goal.
This deletes all sleep entries; the goal goes back to 8 hours.
"""

import logging
from BackEnd.core.settings import LOGS_KEY, GOAL_KEY
from BackEnd.repos.kv_repo import SqliteKeyValueStore

logger = logging.getLogger(__name__)

def reset_all(kv=None, ask=input):
	"""Delete stored logs (and optionally the goal) after confirmation."""
	kv = kv if kv is not None else SqliteKeyValueStore()

	if kv.get(LOGS_KEY) is None:
		print("No sleep logs found. Nothing to reset.")
	else:
		print(f"Found sleep logs in: {kv.path}")
		confirm = ask("Are you sure you want to delete all sleep logs? This cannot be undone. (yes/no): ")
		if confirm.lower() in ['yes', 'y']:
			kv.delete(LOGS_KEY)
			logger.info("Deleted %s", LOGS_KEY)
			print("✓ Sleep logs deleted successfully!")
		else:
			print("Reset cancelled.")

	if kv.get(GOAL_KEY) is not None:
		confirm_goal = ask("\nAlso reset your sleep goal to the default? (yes/no): ")
		if confirm_goal.lower() in ['yes', 'y']:
			kv.delete(GOAL_KEY)
			print("✓ Sleep goal reset!")

if __name__ == "__main__":
	print("=" * 50)
	print("Sleep Tracker - Reset Logs")
	print("=" * 50)
	reset_all()
	print("\nPress Enter to exit...")
	input()
