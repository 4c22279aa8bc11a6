"""
Shirt inventory with giveaway selection.

A customer's preferred color always wins; otherwise the inventory's
configured strategy picks one.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple
from .choices import GiveawayStrategy, ShirtColor
from .config import ResolverConfig
from .resolution import (
    FallbackStrategy,
    MostFrequentStrategy,
    MostRecentStrategy,
    PreferenceResolver,
    ResolutionResult,
)

logger = logging.getLogger(__name__)


@dataclass
class Inventory:
    """Shirts in stock, oldest first."""
    shirts: Tuple[ShirtColor, ...] = field(default_factory=tuple)
    strategy: GiveawayStrategy = GiveawayStrategy.MOST_STOCKED

    def __post_init__(self):
        self.shirts = tuple(self.shirts)
        if isinstance(self.strategy, str):
            self.strategy = GiveawayStrategy(self.strategy)

    @classmethod
    def from_config(cls, shirts: Iterable[ShirtColor], config: ResolverConfig) -> "Inventory":
        """Build an inventory using the configured giveaway strategy."""
        return cls(shirts=tuple(shirts), strategy=GiveawayStrategy(config.giveaway_strategy))

    def giveaway(self, user_preference: Optional[ShirtColor] = None) -> ShirtColor:
        """
        Pick the shirt to give away.

        :param user_preference: Customer's preferred color, or None
        :return: The customer's preference if given, else the strategy's pick
        :raises: EmptyCollectionError with MOST_RECENT and no shirts
        """
        return self.giveaway_with_metadata(user_preference).value

    def giveaway_with_metadata(self, user_preference: Optional[ShirtColor] = None) -> ResolutionResult:
        """Pick the shirt to give away and report how it was chosen."""
        resolver = PreferenceResolver(self._fallback())
        result = resolver.resolve_with_metadata(user_preference)
        logger.debug(f"Giveaway: {result.value} ({result.strategy_used})")
        return result

    def most_stocked(self) -> ShirtColor:
        """Most stocked color; BLUE on a tie or an empty inventory."""
        return MostFrequentStrategy(self.shirts, variants=ShirtColor).compute_default()

    def most_recent(self) -> ShirtColor:
        """Most recently stocked shirt."""
        return MostRecentStrategy(self.shirts).compute_default()

    def _fallback(self) -> FallbackStrategy:
        if self.strategy is GiveawayStrategy.MOST_RECENT:
            return MostRecentStrategy(self.shirts)
        return MostFrequentStrategy(self.shirts, variants=ShirtColor)


def resolve_giveaway(
    collection: Iterable[ShirtColor],
    preference: Optional[ShirtColor] = None,
    strategy: GiveawayStrategy = GiveawayStrategy.MOST_STOCKED,
) -> ShirtColor:
    """
    Resolve a giveaway against a collection of shirts.

    :param collection: Shirts in stock, oldest first
    :param preference: Customer's preferred color, or None
    :param strategy: Fallback used when preference is None
    :return: Chosen shirt color
    """
    return Inventory(shirts=tuple(collection), strategy=strategy).giveaway(preference)
