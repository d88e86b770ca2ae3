from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton
from BackEnd.core.duration import fmt_hours
from FrontEnd.styles.design_tokens import COLORS, FONTS


class LogItem(QWidget):
    """One row in Recent Logs. Emits the entry id when the trash button is clicked."""
    delete_requested = Signal(object)  # ids exceed 32-bit int

    def __init__(self, entry, met_goal):
        super().__init__()
        self.entry = entry
        self.setObjectName("LogItem")
        self.setFixedHeight(64)

        lay = QHBoxLayout()
        lay.setContentsMargins(16, 0, 12, 0)
        lay.setSpacing(12)

        # Sun when the goal was met, alert otherwise
        self.badge = QLabel("☀" if met_goal else "!")
        self.badge.setObjectName("GoalBadge")
        self.badge.setFixedSize(32, 32)
        self.badge.setAlignment(Qt.AlignmentFlag.AlignCenter)
        color = COLORS['goal_met'] if met_goal else COLORS['goal_missed']
        self.badge.setStyleSheet(f"color: {color}; border: 1px solid {color}; border-radius: 16px;")
        lay.addWidget(self.badge)

        text_col = QVBoxLayout()
        text_col.setSpacing(2)
        self.date_label = QLabel(entry.date)
        self.date_label.setObjectName("LogDate")
        self.times_label = QLabel(f"{entry.bed_time} — {entry.wake_time}")
        self.times_label.setObjectName("LogTimes")
        self.times_label.setStyleSheet(f"color: {COLORS['text_muted']}; font-size: {FONTS['small']}px;")
        text_col.addWidget(self.date_label)
        text_col.addWidget(self.times_label)
        lay.addLayout(text_col)
        lay.addStretch()

        self.duration_label = QLabel(fmt_hours(entry.duration))
        self.duration_label.setObjectName("LogDuration")
        lay.addWidget(self.duration_label)

        self.delete_btn = QPushButton("\U0001F5D1")
        self.delete_btn.setObjectName("DeleteBtn")
        self.delete_btn.setFixedSize(32, 32)
        self.delete_btn.setCursor(Qt.PointingHandCursor)
        self.delete_btn.setToolTip("Delete entry")
        self.delete_btn.clicked.connect(lambda: self.delete_requested.emit(self.entry.id))
        lay.addWidget(self.delete_btn)

        self.setLayout(lay)
