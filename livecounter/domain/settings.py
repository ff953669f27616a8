"""Application settings with Pydantic validation.

Settings are stored as JSON and validated using Pydantic models.
"""

from pydantic import BaseModel, Field


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    model_config = {"validate_assignment": True}


class TimingSettings(BaseModel):
    """Delays used by the simulated asynchronous operations."""

    fetch_delay_ms: int = Field(default=2000, ge=0, le=60000)  # Simulated network request
    background_delay_ms: int = Field(default=1000, ge=0, le=60000)  # Worker thread update

    model_config = {"validate_assignment": True}


class WindowSettings(BaseModel):
    """Main window configuration."""

    title: str = Field(default="LiveData Demo", min_length=1)
    width: int = Field(default=420, ge=320, le=3840)
    height: int = Field(default=640, ge=480, le=2160)

    model_config = {"validate_assignment": True}


class AppSettings(BaseModel):
    """Application settings with validation.

    Invalid values raise validation errors both when loading from JSON
    and when assigning attributes.

    Example:
        >>> settings = AppSettings()
        >>> settings.timing.fetch_delay_ms = 500
        >>> settings.logging.level = "DEBUG"
    """

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    timing: TimingSettings = Field(default_factory=TimingSettings)
    window: WindowSettings = Field(default_factory=WindowSettings)

    model_config = {
        "validate_assignment": True,  # Validate on attribute assignment
        "extra": "forbid",  # Forbid extra fields
    }
