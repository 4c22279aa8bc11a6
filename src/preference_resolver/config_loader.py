"""
Configuration loader with validation.
"""
from dotenv import load_dotenv
from .config import ResolverConfig
from .config_validator import get_optional_env, get_int_env, validate_config, validate_hour
from .exceptions import ConfigurationError


def load_config_from_env() -> ResolverConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        configure_logging(config.log_level)

    :return: Validated ResolverConfig instance
    :raises: ConfigurationError if a value is invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv()

    config = ResolverConfig(
        giveaway_strategy=get_optional_env(
            "GIVEAWAY_STRATEGY", default="most_stocked"
        ).lower(),
        day_start_hour=get_int_env("DAY_START_HOUR", 6),
        night_start_hour=get_int_env("NIGHT_START_HOUR", 18),
        log_level=get_optional_env("LOG_LEVEL", default="WARNING").upper(),
    )

    return validate_config(config)


def load_day_window_from_env() -> ResolverConfig:
    """
    Load only the display hours from the process environment.

    Does not read .env files or validate unrelated settings.

    :return: ResolverConfig with day/night hours set, other fields default
    :raises: ConfigurationError if an hour is invalid
    """
    day_start_hour = validate_hour(get_int_env("DAY_START_HOUR", 6), "DAY_START_HOUR")
    night_start_hour = validate_hour(get_int_env("NIGHT_START_HOUR", 18), "NIGHT_START_HOUR")

    if day_start_hour == night_start_hour:
        raise ConfigurationError(
            "DAY_START_HOUR and NIGHT_START_HOUR must differ, "
            f"both are {day_start_hour}"
        )

    return ResolverConfig(day_start_hour=day_start_hour, night_start_hour=night_start_hour)
