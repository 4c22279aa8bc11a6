"""
Preference resolution policy.

Explicit preference first, fallback strategy second.
"""
import logging
from enum import Enum
from typing import Callable, Optional, TypeVar
from .fallback_strategy import FallbackStrategy, ResolutionResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def resolve_preference(explicit: Optional[T], fallback: Callable[[], T]) -> T:
    """
    Return the explicit value if present, else the fallback's value.

    :param explicit: Caller's preference, or None
    :param fallback: Thunk invoked only when explicit is None
    :return: Resolved value
    """
    if explicit is not None:
        return explicit
    return fallback()


class PreferenceResolver:
    """
    Resolves an optional preference against a single fallback strategy.

    Stateless across calls: nothing is cached, every call recomputes from
    the strategy's current inputs.
    """

    def __init__(self, strategy: FallbackStrategy):
        """
        Initialize resolver.

        :param strategy: Fallback strategy used when no preference is given
        """
        if strategy is None:
            raise ValueError("A fallback strategy must be provided")

        self.strategy = strategy

    def resolve(self, explicit: Optional[Enum] = None) -> Enum:
        """
        Resolve a preference.

        An explicit value is returned unchanged, without validation.

        :param explicit: Caller's preference, or None
        :return: Resolved choice
        :raises: EmptyCollectionError if the most-recent strategy has nothing to pick
        """
        return self.resolve_with_metadata(explicit).value

    def resolve_with_metadata(self, explicit: Optional[Enum] = None) -> ResolutionResult:
        """
        Resolve a preference and report how the value was chosen.

        :param explicit: Caller's preference, or None
        :return: ResolutionResult
        """
        if explicit is not None:
            logger.debug(f"Resolved explicit preference {explicit}")
            return ResolutionResult(value=explicit, strategy_used="explicit", explicit=True)

        value = self.strategy.compute_default()
        logger.debug(f"Resolved {value} via {self.strategy.name} fallback")
        return ResolutionResult(value=value, strategy_used=self.strategy.name, explicit=False)
