"""Main application window with the counter screen."""

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

if TYPE_CHECKING:
    from livecounter.app import ApplicationContext

from livecounter.ui.binding import bind
from livecounter.ui.components.counter_card import CounterCard

FEATURES_TEXT = (
    "• Main thread update: press +/-\n"
    "• Delayed update: simulate network request\n"
    "• Worker thread update: deferred write\n"
    "• Lifecycle-bound observers: close the window"
)


class MainWindow(QMainWindow):
    """Main application window.

    Renders the controller's counter and status message and forwards
    button presses to the controller. Closing the window shuts down the
    application context, which cancels any pending delayed update.
    """

    def __init__(self, context: "ApplicationContext"):
        """Initialize main window.

        Args:
            context: Application context providing dependencies
        """
        super().__init__()
        self._ctx = context
        self._controller = context.controller

        window = context.settings.window
        self.setWindowTitle(window.title)
        self.resize(window.width, window.height)

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self) -> None:
        """Set up the UI."""
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.title_label = QLabel("LiveData Demo")
        self.title_label.setObjectName("title_label")
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.counter_card = CounterCard()
        layout.addWidget(self.counter_card)

        # Status message (hidden while empty)
        self.message_label = QLabel("")
        self.message_label.setObjectName("message_label")
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        self.message_label.hide()
        layout.addWidget(self.message_label)

        layout.addSpacing(8)

        # Decrement / increment row
        row = QHBoxLayout()
        row.setSpacing(12)
        self.decrement_btn = QPushButton("Decrease")
        self.decrement_btn.setObjectName("decrement_btn")
        row.addWidget(self.decrement_btn)
        self.increment_btn = QPushButton("Increase")
        self.increment_btn.setObjectName("increment_btn")
        row.addWidget(self.increment_btn)
        layout.addLayout(row)

        self.reset_btn = QPushButton("Reset to 0")
        self.reset_btn.setObjectName("reset_btn")
        layout.addWidget(self.reset_btn)

        timing = self._ctx.settings.timing
        self.fetch_btn = QPushButton(
            f"Simulate network request ({timing.fetch_delay_ms / 1000:g}s)"
        )
        self.fetch_btn.setObjectName("fetch_btn")
        layout.addWidget(self.fetch_btn)

        self.background_btn = QPushButton(
            f"Update from background thread ({timing.background_delay_ms / 1000:g}s)"
        )
        self.background_btn.setObjectName("background_btn")
        layout.addWidget(self.background_btn)

        layout.addSpacing(32)

        # Feature summary card
        info_card = QFrame()
        info_card.setObjectName("info_card")
        info_layout = QVBoxLayout(info_card)
        info_layout.setContentsMargins(16, 16, 16, 16)
        info_title = QLabel("Features demonstrated")
        info_title.setObjectName("info_title")
        info_layout.addWidget(info_title)
        info_text = QLabel(FEATURES_TEXT)
        info_text.setObjectName("info_text")
        info_layout.addWidget(info_text)
        layout.addWidget(info_card)

        layout.addStretch()
        self.setCentralWidget(central)

        self.setStyleSheet("""
            #title_label {
                font-size: 24px;
                color: #6750a4;
            }
            #message_label {
                font-size: 16px;
                color: #625b71;
            }
            #info_card {
                background: #e7e0ec;
                border-radius: 12px;
            }
            #info_title {
                font-size: 16px;
                color: #6750a4;
            }
            #info_text {
                font-size: 14px;
                color: #49454f;
            }
        """)

    def _connect_signals(self) -> None:
        """Connect buttons and state subscriptions."""
        self.decrement_btn.clicked.connect(self._controller.decrement)
        self.increment_btn.clicked.connect(self._controller.increment)
        self.reset_btn.clicked.connect(self._controller.reset)
        self.fetch_btn.clicked.connect(self._controller.fetch_data)
        self.background_btn.clicked.connect(self._controller.update_from_background)

        bind(self, self._controller.counter, self.counter_card.set_count, fallback=0)
        bind(self, self._controller.message, self._on_message_changed, fallback="")

    def _on_message_changed(self, message: str) -> None:
        """Show the status message, hiding the label while it is empty."""
        self.message_label.setText(message)
        self.message_label.setVisible(bool(message))

    def closeEvent(self, event) -> None:
        """Handle window close event by shutting the context down."""
        self._ctx.shutdown()
        event.accept()
