"""
Logging setup for applications embedding the resolver.

Library modules only create loggers; handlers are installed here.
"""
import logging


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """
    Configure root logging for the resolver.

    :param level: Level name (e.g. "DEBUG", "INFO")
    :raises: ValueError if the level name is unknown
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug(f"Logging configured at {level.upper()}")
