import logging
from pathlib import Path
from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QGridLayout,
	QStackedWidget, QScrollArea, QSlider, QTimeEdit
)
from PySide6.QtCore import Qt, QTime
from BackEnd.core.settings import (
	DEFAULT_BED_TIME, DEFAULT_WAKE_TIME, GOAL_MIN_HOURS, GOAL_MAX_HOURS, GOAL_STEP_HOURS,
	RECOMMENDED_TEXT,
)
from BackEnd.core.duration import fmt_hours
from BackEnd.services.analytics import meets_goal
from BackEnd.services.sleep_service import SleepService
from FrontEnd.components.insight_footer import InsightFooter
from FrontEnd.components.log_item import LogItem
from FrontEnd.components.trend_chart import TrendChart
from FrontEnd.styles.design_tokens import COLORS

logger = logging.getLogger(__name__)

QSS_PATH = Path(__file__).parent / "styles" / "sleeptracker.qss"
TIME_FORMAT = "HH:mm"
EMPTY_LOG_TEXT = "No sleep data recorded yet."


class MainWindow(QMainWindow):
	def __init__(self, service=None):
		super().__init__()
		self.setWindowTitle("Sleep Catalyst")
		self.resize(1000, 700)

		try:
			with open(QSS_PATH, 'r', encoding='utf-8') as f:
				self.setStyleSheet(f.read())
		except OSError:
			logger.warning("Stylesheet not found at %s", QSS_PATH)

		self.service = service if service is not None else SleepService()

		# --- Header: title + tab switch ---
		header = QHBoxLayout()
		title_col = QVBoxLayout()
		title = QLabel("Sleep Catalyst")
		title.setObjectName("AppTitle")
		subtitle = QLabel("Optimize your recovery, daily.")
		subtitle.setObjectName("AppSubtitle")
		title_col.addWidget(title)
		title_col.addWidget(subtitle)
		header.addLayout(title_col)
		header.addStretch()

		self.log_tab_btn = QPushButton("Log Entry")
		self.analytics_tab_btn = QPushButton("Analytics")
		for btn in (self.log_tab_btn, self.analytics_tab_btn):
			btn.setObjectName("TabBtn")
			btn.setCheckable(True)
			btn.setCursor(Qt.PointingHandCursor)
			header.addWidget(btn)

		# --- Left column: input, goal, quick stats ---
		left = QVBoxLayout()
		left.setSpacing(24)
		left.addWidget(self._build_input_card())
		left.addWidget(self._build_goal_card())
		left.addWidget(self._build_stats_card())
		left.addStretch()

		# --- Right column: recent logs / analytics ---
		self.stack = QStackedWidget()
		self.log_tab = self._build_log_tab()
		self.analytics_tab = self._build_analytics_tab()
		self.stack.addWidget(self.log_tab)
		self.stack.addWidget(self.analytics_tab)

		body = QHBoxLayout()
		body.setSpacing(24)
		body.addLayout(left, 1)
		body.addWidget(self.stack, 2)

		main_layout = QVBoxLayout()
		main_layout.setContentsMargins(32, 32, 32, 32)
		main_layout.setSpacing(32)
		main_layout.addLayout(header)
		main_layout.addLayout(body)

		container = QWidget()
		container.setLayout(main_layout)
		self.setCentralWidget(container)

		self.log_tab_btn.clicked.connect(lambda: self._set_tab(0))
		self.analytics_tab_btn.clicked.connect(lambda: self._set_tab(1))
		self.add_btn.clicked.connect(self._add_log)
		self.goal_slider.valueChanged.connect(self._on_slider)

		self.service.logs_changed.connect(self._refresh_logs)
		self.service.goal_changed.connect(self._on_goal)
		self.service.stats_changed.connect(self._on_snapshot)
		self.service.init()
		self._set_tab(0)

	def _card(self, title):
		"""Card frame with an uppercase title; returns (card, body layout)."""
		card = QWidget()
		card.setObjectName("Card")
		card.setAttribute(Qt.WA_StyledBackground, True)
		lay = QVBoxLayout()
		lay.setContentsMargins(24, 24, 24, 24)
		lay.setSpacing(12)
		label = QLabel(title.upper())
		label.setObjectName("CardTitle")
		lay.addWidget(label)
		card.setLayout(lay)
		return card, lay

	def _build_input_card(self):
		card, lay = self._card("Input Sleep")
		self.bed_edit = QTimeEdit(QTime.fromString(DEFAULT_BED_TIME, TIME_FORMAT))
		self.wake_edit = QTimeEdit(QTime.fromString(DEFAULT_WAKE_TIME, TIME_FORMAT))
		for caption, edit in (("Bedtime", self.bed_edit), ("Wake up", self.wake_edit)):
			edit.setDisplayFormat(TIME_FORMAT)
			cap = QLabel(caption)
			cap.setObjectName("FieldCaption")
			lay.addWidget(cap)
			lay.addWidget(edit)
		self.add_btn = QPushButton("+  Add to Log")
		self.add_btn.setObjectName("AddBtn")
		self.add_btn.setMinimumHeight(44)
		self.add_btn.setCursor(Qt.PointingHandCursor)
		lay.addWidget(self.add_btn)
		return card

	def _build_goal_card(self):
		card, lay = self._card("Daily Goal")
		row = QHBoxLayout()
		self.goal_label = QLabel("")
		self.goal_label.setObjectName("GoalLabel")
		# Slider works in half-hour steps
		self.goal_slider = QSlider(Qt.Orientation.Horizontal)
		self.goal_slider.setRange(int(GOAL_MIN_HOURS / GOAL_STEP_HOURS), int(GOAL_MAX_HOURS / GOAL_STEP_HOURS))
		self.goal_slider.setSingleStep(1)
		self.goal_slider.setPageStep(2)
		row.addWidget(self.goal_label)
		row.addWidget(self.goal_slider, 2)
		lay.addLayout(row)
		hint = QLabel(RECOMMENDED_TEXT)
		hint.setObjectName("GoalHint")
		lay.addWidget(hint)
		return card

	def _build_stats_card(self):
		card, lay = self._card("Quick Stats")
		grid = QGridLayout()
		avg_caption = QLabel("Average")
		met_caption = QLabel("Goal Met")
		for cap in (avg_caption, met_caption):
			cap.setObjectName("FieldCaption")
		self.avg_label = QLabel("0h")
		self.avg_label.setObjectName("AvgLabel")
		self.consistency_label = QLabel("0%")
		self.consistency_label.setObjectName("ConsistencyLabel")
		grid.addWidget(avg_caption, 0, 0)
		grid.addWidget(met_caption, 0, 1)
		grid.addWidget(self.avg_label, 1, 0)
		grid.addWidget(self.consistency_label, 1, 1)
		lay.addLayout(grid)
		return card

	def _build_log_tab(self):
		card, lay = self._card("Recent Logs")
		scroll = QScrollArea()
		scroll.setObjectName("LogScrollArea")
		scroll.setWidgetResizable(True)
		scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		scroll.setFrameShape(QScrollArea.NoFrame)
		content = QWidget()
		self.log_layout = QVBoxLayout()
		self.log_layout.setContentsMargins(0, 0, 0, 0)
		self.log_layout.setSpacing(8)
		self.log_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
		content.setLayout(self.log_layout)
		scroll.setWidget(content)
		lay.addWidget(scroll)
		self.log_items = []
		self.empty_label = QLabel(EMPTY_LOG_TEXT)
		self.empty_label.setObjectName("EmptyLabel")
		self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		lay.addWidget(self.empty_label)
		return card

	def _build_analytics_tab(self):
		w = QWidget()
		layout = QVBoxLayout()
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(24)
		card, lay = self._card("Sleep Trends")
		self.trend_chart = TrendChart()
		lay.addWidget(self.trend_chart)
		layout.addWidget(card)
		self.insight = InsightFooter()
		layout.addWidget(self.insight)
		layout.addStretch()
		w.setLayout(layout)
		return w

	def _set_tab(self, index):
		self.stack.setCurrentIndex(index)
		self.log_tab_btn.setChecked(index == 0)
		self.analytics_tab_btn.setChecked(index == 1)

	def _add_log(self):
		self.service.add_log(
			self.bed_edit.time().toString(TIME_FORMAT),
			self.wake_edit.time().toString(TIME_FORMAT),
		)

	def _on_slider(self, value):
		goal = value * GOAL_STEP_HOURS
		if goal != self.service.goal_hours:
			self.service.set_goal(goal)

	def _on_goal(self, goal):
		self.goal_label.setText(fmt_hours(goal))
		value = int(round(goal / GOAL_STEP_HOURS))
		if self.goal_slider.value() != value:
			self.goal_slider.blockSignals(True)
			self.goal_slider.setValue(value)
			self.goal_slider.blockSignals(False)
		# Goal-met badges depend on the goal
		self._refresh_logs(self.service.store.entries)

	def _refresh_logs(self, entries):
		for item in self.log_items:
			self.log_layout.removeWidget(item)
			item.deleteLater()
		self.log_items = []
		goal = self.service.goal_hours
		for entry in entries:
			item = LogItem(entry, meets_goal(entry, goal))
			item.delete_requested.connect(self.service.delete_log)
			self.log_layout.addWidget(item)
			self.log_items.append(item)
		self.empty_label.setVisible(not entries)

	def _on_snapshot(self, snap):
		self.avg_label.setText(f"{snap.stats.average_text}h")
		self.avg_label.setStyleSheet(f"color: {COLORS['accent']};")
		self.consistency_label.setText(f"{snap.stats.consistency_percent}%")
		self.trend_chart.set_series(snap.series, snap.goal_hours)
		self.insight.set_insight(snap.insight)
