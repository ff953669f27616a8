"""Application context and dependency injection.

The ApplicationContext wires together settings, the dispatcher and the
counter controller and provides them to the UI layer.
"""

import logging
from typing import Optional

from livecounter.domain.settings import AppSettings
from livecounter.services.counter import CounterController
from livecounter.services.dispatcher import Dispatcher, QtDispatcher
from livecounter.state.persistence import SettingsStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"


def configure_logging(settings: AppSettings) -> None:
    """Configure the root logger from settings.

    Args:
        settings: Application settings
    """
    logging.basicConfig(level=settings.logging.level, format=LOG_FORMAT, force=True)


class ApplicationContext:
    """Application context providing dependency injection.

    Example:
        >>> ctx = ApplicationContext()
        >>> ctx.controller.increment()
        >>> ctx.shutdown()
    """

    def __init__(
        self,
        settings_store: Optional[SettingsStore] = None,
        dispatcher: Optional[Dispatcher] = None,
    ):
        """Initialize application context.

        Args:
            settings_store: Optional settings store.
                            Defaults to ~/.livecounter_settings.json
            dispatcher: Optional dispatcher. Defaults to a QtDispatcher
                        bound to the calling (GUI) thread.
        """
        self.settings_store = settings_store or SettingsStore()
        self.settings: AppSettings = self.settings_store.load()

        self.dispatcher = dispatcher or QtDispatcher()
        self.controller = CounterController(self.dispatcher, self.settings.timing)
        self._shut_down = False

    @property
    def is_shut_down(self) -> bool:
        return self._shut_down

    def shutdown(self) -> None:
        """Close the controller (safe to call multiple times)."""
        if self._shut_down:
            return
        self._shut_down = True
        self.controller.close()
        logger.info("Application context shut down")
