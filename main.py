#!/usr/bin/env python
"""LiveCounter application entry point.

This module initializes the Qt application with qasync event loop integration
and launches the main window.
"""

import asyncio
import logging
import sys
from pathlib import Path

import qasync
from PySide6.QtWidgets import QApplication

from livecounter.app import ApplicationContext, configure_logging
from livecounter.state.persistence import SettingsStore
from livecounter.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def run() -> None:
    """Run the application with qasync event loop."""
    app = QApplication(sys.argv)
    app.setApplicationName("LiveCounter")
    app.setOrganizationName("LiveCounter")

    # Optional command line argument: path to a settings file
    settings_store = SettingsStore(Path(sys.argv[1])) if len(sys.argv) > 1 else SettingsStore()

    context = ApplicationContext(settings_store)
    configure_logging(context.settings)
    if not settings_store.exists():
        settings_store.save(context.settings)
        logger.info(f"Wrote default settings to {settings_store.path}")

    loop = qasync.QEventLoop(app)
    asyncio.set_event_loop(loop)

    window = MainWindow(context)
    app.lastWindowClosed.connect(loop.stop)

    with loop:
        try:
            window.show()
            loop.run_forever()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
        finally:
            context.shutdown()


if __name__ == "__main__":
    run()
