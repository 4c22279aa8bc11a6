"""
Factory for creating preference resolvers.
"""
from enum import Enum
from typing import Callable, Iterable, Mapping, Optional
from .context_derived import ContextDerivedStrategy
from .most_frequent import MostFrequentStrategy
from .most_recent import MostRecentStrategy
from .resolution_policy import PreferenceResolver


class StrategyKind(Enum):
    """Available fallback strategies."""
    MOST_FREQUENT = "most_frequent"
    MOST_RECENT = "most_recent"
    CONTEXT_DERIVED = "context_derived"


def create_resolver(
    kind: StrategyKind,
    *,
    collection: Optional[Iterable[Enum]] = None,
    variants: Optional[type] = None,
    tie_default: Optional[Enum] = None,
    context_provider: Optional[Callable[[], Enum]] = None,
    mapping: Optional[Mapping[Enum, Enum]] = None,
) -> PreferenceResolver:
    """
    Factory function to create a PreferenceResolver.

    :param kind: Which fallback strategy to use
    :param collection: Observed choices (frequency and recency strategies)
    :param variants: Enum class to count over (most-frequent only)
    :param tie_default: Variant winning ties (most-frequent only)
    :param context_provider: Signal provider (context-derived only)
    :param mapping: Signal -> choice mapping (context-derived only)
    :return: Configured PreferenceResolver
    :raises: ValueError if an input required by the strategy is missing
    """
    if kind is StrategyKind.MOST_FREQUENT:
        if collection is None:
            raise ValueError("collection is required for the most_frequent strategy")
        strategy = MostFrequentStrategy(collection, variants=variants, tie_default=tie_default)

    elif kind is StrategyKind.MOST_RECENT:
        if collection is None:
            raise ValueError("collection is required for the most_recent strategy")
        strategy = MostRecentStrategy(collection)

    elif kind is StrategyKind.CONTEXT_DERIVED:
        if context_provider is None or mapping is None:
            raise ValueError("context_provider and mapping are required for the context_derived strategy")
        strategy = ContextDerivedStrategy(context_provider, mapping)

    else:
        raise ValueError(f"Unknown strategy kind: {kind}")

    return PreferenceResolver(strategy)
