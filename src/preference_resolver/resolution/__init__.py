"""
Preference resolution layer.

Picks an explicit preference when present, otherwise a default from a
fallback strategy.

Key components:
- FallbackStrategy: Protocol for default-picking strategies
- ResolutionResult: Immutable result recording how a value was chosen
- Strategies: MostFrequent, MostRecent, ContextDerived
- PreferenceResolver: Explicit-then-fallback policy
"""
from .fallback_strategy import FallbackStrategy, ResolutionResult
from .most_frequent import MostFrequentStrategy
from .most_recent import MostRecentStrategy
from .context_derived import ContextDerivedStrategy
from .resolution_policy import PreferenceResolver, resolve_preference
from .resolver_factory import StrategyKind, create_resolver

__all__ = [
    "FallbackStrategy",
    "ResolutionResult",
    "MostFrequentStrategy",
    "MostRecentStrategy",
    "ContextDerivedStrategy",
    "PreferenceResolver",
    "resolve_preference",
    "StrategyKind",
    "create_resolver",
]
