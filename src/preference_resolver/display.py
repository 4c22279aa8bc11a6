"""
Display mode resolution.

A user's display preference wins; otherwise the mode follows the time of day.
"""
import logging
from datetime import datetime
from typing import Callable, Optional
from .choices import DisplayMode, TimeOfDay
from .config import ResolverConfig
from .config_loader import load_day_window_from_env
from .resolution import ContextDerivedStrategy, PreferenceResolver

logger = logging.getLogger(__name__)

MODE_BY_TIME_OF_DAY = {
    TimeOfDay.DAY: DisplayMode.LIGHT,
    TimeOfDay.NIGHT: DisplayMode.DARK,
}


def mode_for_time_of_day(signal: TimeOfDay) -> DisplayMode:
    """Map a time of day to its default display mode."""
    return MODE_BY_TIME_OF_DAY[signal]


class SystemClockTimeOfDay:
    """
    Time-of-day provider backed by a clock.

    DAY covers [day_start_hour, night_start_hour) on a 24h clock, wrapping
    past midnight when day_start_hour > night_start_hour.
    """

    def __init__(
        self,
        day_start_hour: int = 6,
        night_start_hour: int = 18,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.day_start_hour = day_start_hour
        self.night_start_hour = night_start_hour
        self._clock = clock or datetime.now

    @classmethod
    def from_config(cls, config: ResolverConfig, clock: Optional[Callable[[], datetime]] = None) -> "SystemClockTimeOfDay":
        return cls(config.day_start_hour, config.night_start_hour, clock=clock)

    def __call__(self) -> TimeOfDay:
        hour = self._clock().hour

        if self.day_start_hour < self.night_start_hour:
            is_day = self.day_start_hour <= hour < self.night_start_hour
        else:
            is_day = hour >= self.day_start_hour or hour < self.night_start_hour

        return TimeOfDay.DAY if is_day else TimeOfDay.NIGHT


def _configured_time_of_day() -> TimeOfDay:
    # Hours are read per call so the provider is only built when needed
    return SystemClockTimeOfDay.from_config(load_day_window_from_env())()


def resolve_display_mode(
    preference: Optional[DisplayMode] = None,
    context_provider: Optional[Callable[[], TimeOfDay]] = None,
) -> DisplayMode:
    """
    Resolve the display mode.

    :param preference: User's preferred mode, or None
    :param context_provider: Returns the current TimeOfDay; called only when preference is None.
        Defaults to the system clock with DAY_START_HOUR/NIGHT_START_HOUR from the environment.
    :return: Chosen display mode
    """
    provider = context_provider if context_provider is not None else _configured_time_of_day
    resolver = PreferenceResolver(ContextDerivedStrategy(provider, MODE_BY_TIME_OF_DAY))
    mode = resolver.resolve(preference)
    logger.debug(f"Display mode: {mode}")
    return mode
