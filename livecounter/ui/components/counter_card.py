"""Counter display card."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout


class CounterCard(QFrame):
    """Card showing the current count prominently."""

    def __init__(self, parent=None):
        """Initialize the counter card.

        Args:
            parent: Parent widget
        """
        super().__init__(parent)
        self.setObjectName("counter_card")
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(8)

        self.title_label = QLabel("Current count:")
        self.title_label.setObjectName("counter_card_title")
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.value_label = QLabel("0")
        self.value_label.setObjectName("counter_card_value")
        self.value_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.value_label)

        self.setStyleSheet("""
            #counter_card {
                background: #eaddff;
                border-radius: 12px;
            }
            #counter_card_title {
                font-size: 24px;
                color: #6750a4;
            }
            #counter_card_value {
                font-size: 64px;
                color: #6750a4;
            }
        """)

    def set_count(self, count: int) -> None:
        """Update the displayed count."""
        self.value_label.setText(str(count))

    @property
    def count_text(self) -> str:
        return self.value_label.text()
