"""
Configuration validation utilities.

Reads environment values and checks resolver settings before use.
"""
import os
import warnings
from typing import Optional
from .config import ResolverConfig
from .choices import GiveawayStrategy
from .exceptions import ConfigurationError


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def get_int_env(key: str, default: int) -> int:
    """
    Get an integer environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Parsed integer
    :raises: ConfigurationError if the value is not an integer
    """
    raw = get_optional_env(key, str(default))
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}")


def validate_hour(hour: int, name: str) -> int:
    """
    Validate an hour of the day.

    :param hour: Hour to validate
    :param name: Setting name (for error messages)
    :return: Validated hour
    :raises: ConfigurationError if outside 0..23
    """
    if not 0 <= hour <= 23:
        raise ConfigurationError(f"{name} must be between 0 and 23, got {hour}")
    return hour


def validate_config(config: ResolverConfig) -> ResolverConfig:
    """
    Validate a full resolver configuration.

    :param config: Configuration to check
    :return: The same configuration
    :raises: ConfigurationError on the first invalid setting
    """
    known = {strategy.value for strategy in GiveawayStrategy}
    if config.giveaway_strategy not in known:
        raise ConfigurationError(
            f"Unknown giveaway strategy: {config.giveaway_strategy!r}. "
            f"Expected one of: {', '.join(sorted(known))}"
        )

    validate_hour(config.day_start_hour, "DAY_START_HOUR")
    validate_hour(config.night_start_hour, "NIGHT_START_HOUR")

    if config.day_start_hour == config.night_start_hour:
        raise ConfigurationError(
            "DAY_START_HOUR and NIGHT_START_HOUR must differ, "
            f"both are {config.day_start_hour}"
        )

    return config


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "placeholder",
        "replace",
        "todo",
    ]

    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)
