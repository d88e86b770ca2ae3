from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QStackedWidget
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from BackEnd.services.analytics import has_trend_data
from FrontEnd.styles.design_tokens import COLORS

INSUFFICIENT_DATA_TEXT = "Log at least 2 entries to view trends."


class TrendChart(QWidget):
    """Sleep duration over time with the goal as a dashed reference line."""

    def __init__(self):
        super().__init__()
        self.figure = Figure(figsize=(5, 3))
        self.canvas = FigureCanvas(self.figure)
        self.empty_label = QLabel(INSUFFICIENT_DATA_TEXT)
        self.empty_label.setObjectName("TrendEmptyLabel")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setStyleSheet(f"color: {COLORS['text_muted']}; font-style: italic;")

        self.pages = QStackedWidget()
        self.pages.addWidget(self.empty_label)
        self.pages.addWidget(self.canvas)
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.pages)
        self.setLayout(layout)
        self.setMinimumHeight(300)

    @property
    def showing_chart(self):
        return self.pages.currentWidget() is self.canvas

    def set_series(self, series, goal_hours):
        if not has_trend_data(series):
            self.pages.setCurrentWidget(self.empty_label)
            return
        self.pages.setCurrentWidget(self.canvas)

        x = list(range(len(series)))
        y = [e.duration for e in series]
        labels = [e.date for e in series]

        self.figure.clear()
        self.figure.patch.set_facecolor(COLORS['surface'])
        ax = self.figure.add_subplot(111)
        ax.set_facecolor(COLORS['surface'])

        ax.plot(x, y, color=COLORS['primary_hover'], linewidth=3)
        ax.fill_between(x, y, 0, color=COLORS['primary_hover'], alpha=0.2)
        # Goal line
        ax.axhline(goal_hours, color=COLORS['goal_line'], linestyle='--', linewidth=1.5, label=f"Goal {goal_hours:g}h")

        ax.set_xticks(x)
        ax.set_xticklabels(labels)
        ax.set_ylim(bottom=0)
        ax.grid(True, axis='y', alpha=0.25, linestyle='--', linewidth=0.8, color=COLORS['surface_alt'])
        ax.set_axisbelow(True)
        ax.tick_params(axis='both', colors=COLORS['text_muted'], labelsize=10, length=0)
        for spine in ax.spines.values():
            spine.set_visible(False)
        if len(x) > 15:
            ax.tick_params(axis='x', rotation=45)

        self.figure.tight_layout()
        self.canvas.draw()
