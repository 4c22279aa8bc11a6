"""
Context-derived fallback strategy.

Queries an external signal and maps it through a fixed total function.
"""
import logging
from enum import Enum
from typing import Callable, Mapping
from .fallback_strategy import FallbackStrategy

logger = logging.getLogger(__name__)


class ContextDerivedStrategy(FallbackStrategy):
    """
    Pick a default from the current context signal.

    The provider is called exactly once per compute_default() call and
    never otherwise.
    """

    name = "context_derived"

    def __init__(
        self,
        context_provider: Callable[[], Enum],
        mapping: Mapping[Enum, Enum],
    ):
        """
        Initialize strategy.

        :param context_provider: Zero-argument callable returning the current signal
        :param mapping: Signal -> choice; must cover every member of the signal enum
        """
        if not mapping:
            raise ValueError("Mapping must not be empty")

        signal_type = type(next(iter(mapping)))
        if not issubclass(signal_type, Enum):
            raise ValueError(
                f"Mapping keys must be enum members, got {signal_type.__name__}"
            )

        missing = [signal for signal in signal_type if signal not in mapping]
        if missing:
            raise ValueError(
                f"Mapping is not total over {signal_type.__name__}, missing: "
                f"{', '.join(signal.name for signal in missing)}"
            )

        self._context_provider = context_provider
        self._mapping = dict(mapping)

    def compute_default(self) -> Enum:
        signal = self._context_provider()
        choice = self._mapping[signal]
        logger.debug(f"Context derived: {signal} -> {choice}")
        return choice
