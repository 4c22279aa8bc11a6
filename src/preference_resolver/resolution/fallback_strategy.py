"""
Core abstractions for preference resolution.

Defines the fallback strategy protocol and the result type.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ResolutionResult:
    """
    Immutable result of preference resolution.

    Attributes:
        value: The chosen value
        strategy_used: "explicit" or the name of the fallback strategy that ran
        explicit: Whether the caller's preference was used
    """
    value: Enum
    strategy_used: str
    explicit: bool


class FallbackStrategy(ABC):
    """
    Protocol for default-picking strategies.

    A strategy is consulted only when the caller supplies no preference.
    Implementations must not mutate the state they read.
    """

    name: str = "fallback"

    @abstractmethod
    def compute_default(self) -> Enum:
        """
        Compute the default choice from current state.

        :return: The chosen enum member
        """
        pass
