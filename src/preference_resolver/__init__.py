"""
Preference resolver.

Chooses a value from an explicit preference when present, falling back to a
computed default when absent.
"""
from .choices import DisplayMode, GiveawayStrategy, ShirtColor, TimeOfDay
from .config import ResolverConfig
from .config_loader import load_config_from_env
from .display import SystemClockTimeOfDay, mode_for_time_of_day, resolve_display_mode
from .exceptions import ConfigurationError, EmptyCollectionError, PreferenceResolverError
from .inventory import Inventory, resolve_giveaway
from .logging_config import configure_logging
from .resolution import (
    ContextDerivedStrategy,
    FallbackStrategy,
    MostFrequentStrategy,
    MostRecentStrategy,
    PreferenceResolver,
    ResolutionResult,
    StrategyKind,
    create_resolver,
    resolve_preference,
)

__all__ = [
    "DisplayMode",
    "GiveawayStrategy",
    "ShirtColor",
    "TimeOfDay",
    "ResolverConfig",
    "load_config_from_env",
    "SystemClockTimeOfDay",
    "mode_for_time_of_day",
    "resolve_display_mode",
    "ConfigurationError",
    "EmptyCollectionError",
    "PreferenceResolverError",
    "Inventory",
    "resolve_giveaway",
    "configure_logging",
    "ContextDerivedStrategy",
    "FallbackStrategy",
    "MostFrequentStrategy",
    "MostRecentStrategy",
    "PreferenceResolver",
    "ResolutionResult",
    "StrategyKind",
    "create_resolver",
    "resolve_preference",
]
