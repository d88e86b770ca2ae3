import logging
import os, sys
from PySide6.QtWidgets import QApplication
from FrontEnd.ui_main import MainWindow

def configure_logging():
	level = os.environ.get("SLEEPTRACKER_LOG_LEVEL", "INFO").upper()
	logging.basicConfig(
		level=getattr(logging, level, logging.INFO),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)

def main():
	configure_logging()
	app = QApplication(sys.argv)
	win = MainWindow()
	win.show()
	sys.exit(app.exec())

if __name__ == "__main__":
	main()
