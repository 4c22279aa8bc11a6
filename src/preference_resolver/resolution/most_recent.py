"""
Most-recent fallback strategy.
"""
import logging
from enum import Enum
from typing import Iterable
from .fallback_strategy import FallbackStrategy
from ..exceptions import EmptyCollectionError

logger = logging.getLogger(__name__)


class MostRecentStrategy(FallbackStrategy):
    """
    Pick the last element of a collection.

    An empty collection is a caller bug: EmptyCollectionError propagates
    and is never retried.
    """

    name = "most_recent"

    def __init__(self, collection: Iterable[Enum]):
        self._collection = tuple(collection)

    def compute_default(self) -> Enum:
        if not self._collection:
            logger.warning("Most recent requested from an empty collection")
            raise EmptyCollectionError("Cannot pick the most recent element of an empty collection")

        return self._collection[-1]
