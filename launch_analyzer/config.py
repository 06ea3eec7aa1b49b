"""Configuration module for the launch analyzer."""

# Standard library imports
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Optional

# Third-party library imports
from dotenv import load_dotenv

from launch_analyzer.constants import SIMILARITY_WINDOW
from launch_analyzer.utils.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

ENV_PREFIX = "LAUNCH_ANALYZER_"


def get_env_var(key: str, default: Any = None, required: bool = False,
                validator: Optional[Callable[[str], Any]] = None) -> Any:
    """Get and validate environment variable.

    Args:
        key: Environment variable name
        default: Default value if not present
        required: If True, raises ConfigurationError when not found
        validator: Optional validation function

    Returns:
        The environment variable value or default

    Raises:
        ConfigurationError: If required and not found, or fails validation
    """
    value = os.environ.get(key)

    if value is None:
        if required:
            raise ConfigurationError(
                f"Required environment variable '{key}' not found",
                details={"setting": key}
            )
        return default

    if validator:
        try:
            return validator(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for environment variable '{key}': {e}",
                details={"setting": key, "value": value}
            ) from e

    return value


def bool_validator(value: str) -> bool:
    """Validate and convert string to boolean.

    Args:
        value: String value to convert

    Returns:
        Boolean value
    """
    return value.lower() in ("true", "1", "yes", "y", "on")


def float_validator(value: str) -> float:
    """Validate and convert string to float.

    Raises:
        ValueError: If not a valid number
    """
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid number")


def log_level_validator(value: str) -> str:
    """Validate log level.

    Args:
        value: Log level to validate

    Returns:
        The validated log level

    Raises:
        ValueError: If not a valid log level
    """
    valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    upper_value = value.upper()
    if upper_value not in valid_levels:
        raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
    return upper_value


@dataclass
class AnalyzerSettings:
    """Runtime settings for the analyzer and its CLI."""

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Optional[str] = None
    STRUCTURED_LOGGING: bool = False

    # Maximum score distance for a historical launch to count as similar
    SIMILARITY_WINDOW: float = SIMILARITY_WINDOW

    # Investment amount used by the CLI when none is given
    DEFAULT_INVESTMENT: float = 1000.0

    def validate(self) -> None:
        """Validate analyzer settings.

        Raises:
            ConfigurationError: If settings are invalid
        """
        if self.SIMILARITY_WINDOW <= 0:
            raise ConfigurationError(
                "Similarity window must be positive",
                details={"setting": "SIMILARITY_WINDOW", "value": self.SIMILARITY_WINDOW}
            )

        if self.DEFAULT_INVESTMENT < 0:
            raise ConfigurationError(
                "Default investment must be non-negative",
                details={"setting": "DEFAULT_INVESTMENT", "value": self.DEFAULT_INVESTMENT}
            )


@lru_cache()
def get_settings() -> AnalyzerSettings:
    """Get analyzer settings from environment variables.

    Uses cached values for efficiency.

    Returns:
        AnalyzerSettings instance

    Raises:
        ConfigurationError: If environment variables fail validation
    """
    settings = AnalyzerSettings(
        LOG_LEVEL=get_env_var(f"{ENV_PREFIX}LOG_LEVEL", "INFO", validator=log_level_validator),
        LOG_FORMAT=get_env_var(f"{ENV_PREFIX}LOG_FORMAT"),
        STRUCTURED_LOGGING=get_env_var(f"{ENV_PREFIX}STRUCTURED_LOGGING", False,
                                       validator=bool_validator),
        SIMILARITY_WINDOW=get_env_var(f"{ENV_PREFIX}SIMILARITY_WINDOW", SIMILARITY_WINDOW,
                                      validator=float_validator),
        DEFAULT_INVESTMENT=get_env_var(f"{ENV_PREFIX}DEFAULT_INVESTMENT", 1000.0,
                                       validator=float_validator),
    )
    settings.validate()
    return settings
