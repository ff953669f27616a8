"""Tests for ApplicationContext wiring."""

import logging

from livecounter.app import ApplicationContext, configure_logging
from livecounter.domain.settings import AppSettings
from livecounter.state.persistence import SettingsStore


class TestApplicationContext:
    """Tests for ApplicationContext."""

    def test_uses_settings_timing(self, tmp_path, dispatcher):
        """Controller delays come from the settings file."""
        store = SettingsStore(tmp_path / "settings.json")
        settings = AppSettings()
        settings.timing.fetch_delay_ms = 10
        store.save(settings)

        ctx = ApplicationContext(store, dispatcher)
        ctx.controller.fetch_data()
        dispatcher.advance(10)

        assert ctx.controller.counter.value == 100
        ctx.shutdown()

    def test_shutdown_closes_controller(self, context):
        """shutdown() closes the controller once."""
        context.shutdown()
        context.shutdown()

        assert context.is_shut_down
        assert context.controller.is_closed

    def test_configure_logging_sets_level(self):
        """Root logger level follows settings."""
        settings = AppSettings()
        settings.logging.level = "WARNING"
        root = logging.getLogger()
        previous_level = root.level
        previous_handlers = root.handlers[:]

        configure_logging(settings)
        try:
            assert root.level == logging.WARNING
        finally:
            root.handlers[:] = previous_handlers
            root.setLevel(previous_level)
