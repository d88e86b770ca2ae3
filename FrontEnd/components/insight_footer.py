from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from FrontEnd.styles.design_tokens import COLORS, FONTS

class InsightFooter(QWidget):
    def __init__(self, text=""):
        super().__init__()
        layout = QVBoxLayout()
        title = QLabel("Insight")
        title.setObjectName("InsightTitle")
        self.label = QLabel(text)
        self.label.setObjectName("InsightLabel")
        self.label.setWordWrap(True)
        layout.addWidget(title)
        layout.addWidget(self.label)
        self.setLayout(layout)
        self.setStyleSheet(f"background: {COLORS['insight_bg']}; border-radius: 16px; padding: 8px 16px; color: {COLORS['insight_text']}; font-size: {FONTS['text']}px;")
    def set_insight(self, text):
        self.label.setText(text)
