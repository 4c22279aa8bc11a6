"""
Most-frequent fallback strategy.

Tallies a collection and picks the variant with the strictly highest count.
"""
import logging
from collections import Counter
from typing import Iterable, Optional, Sequence, Type
from enum import Enum
from .fallback_strategy import FallbackStrategy

logger = logging.getLogger(__name__)


class MostFrequentStrategy(FallbackStrategy):
    """
    Pick the most frequent variant in a collection.

    Tie rule: when no variant has a strictly greater count than all the
    others (including an empty collection), ``tie_default`` wins. It defaults
    to the second-declared variant, so RED/BLUE ties go to BLUE.
    """

    name = "most_frequent"

    def __init__(
        self,
        collection: Iterable[Enum],
        variants: Optional[Type[Enum]] = None,
        tie_default: Optional[Enum] = None,
    ):
        """
        Initialize strategy.

        :param collection: Observed choices (snapshotted, never mutated)
        :param variants: Enum class to count over; inferred from the collection or tie_default if omitted
        :param tie_default: Variant returned on ties
        """
        self._collection = tuple(collection)

        if variants is None:
            if tie_default is not None:
                variants = type(tie_default)
            elif self._collection:
                variants = type(self._collection[0])
            else:
                raise ValueError(
                    "variants or tie_default is required for an empty collection"
                )

        members: Sequence[Enum] = list(variants)
        if not members:
            raise ValueError(f"{variants.__name__} has no members")

        if tie_default is None:
            tie_default = members[1] if len(members) > 1 else members[0]

        self._variants = members
        self.tie_default = tie_default

    def compute_default(self) -> Enum:
        counts = Counter(self._collection)
        ranked = sorted(self._variants, key=lambda v: counts[v], reverse=True)

        if len(ranked) == 1 or counts[ranked[0]] > counts[ranked[1]]:
            logger.debug(f"Most frequent: {ranked[0]} ({counts[ranked[0]]} of {len(self._collection)})")
            return ranked[0]

        logger.debug(f"Most frequent: tie at {counts[ranked[0]]}, using default {self.tie_default}")
        return self.tie_default
