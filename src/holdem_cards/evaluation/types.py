"""Common types for poker evaluation."""
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from holdem_cards.core.card import Card


class HandRank(IntEnum):
    """Texas Hold'em hand categories. Higher values are stronger."""
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    def __str__(self) -> str:
        return self.display_name

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. 'Four of a Kind'."""
        words = self.name.lower().split('_')
        return ' '.join(w if w in ('of', 'a') else w.capitalize() for w in words)


@dataclass(frozen=True)
class Hand:
    """
    Result of hand classification.

    Attributes:
        rank: Category of the best hand found
        score: Sum of the values of the cards defining the rank
        kicker: Highest card not part of the rank, if any remain
        cards_used: Input cards realising the rank, highest first
    """
    rank: HandRank = HandRank.HIGH_CARD
    score: int = 0
    kicker: Optional[Card] = None
    cards_used: Tuple[Card, ...] = ()

    def __str__(self) -> str:
        kicker = str(self.kicker) if self.kicker else '-'
        return f"{self.rank.display_name} ({self.score}, kicker {kicker})"
