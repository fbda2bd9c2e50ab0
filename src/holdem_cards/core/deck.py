"""Deck implementation."""
import logging
import random
import time
from typing import List, Optional

from .card import Card, Suit, Value

logger = logging.getLogger(__name__)


class NotEnoughCardsError(ValueError):
    """Raised when more cards are requested than the deck holds."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot take {requested} cards, only {available} remaining"
        )


class Deck:
    """
    A deck of 52 playing cards.

    The top of the deck is the end of ``cards``; drawing pops from there.

    Attributes:
        cards: List of cards remaining in the deck
    """

    def __init__(self):
        """Initialize a full, unshuffled deck."""
        self.cards: List[Card] = []
        self.reset()

    def reset(self) -> None:
        """Return all 52 cards to the deck in their initial order."""
        self.cards = [
            Card(suit=suit, value=value)
            for suit in Suit
            for value in Value
        ]

    def shuffle(self, seed: Optional[int] = None) -> None:
        """
        Shuffle the cards remaining in the deck.

        Args:
            seed: Seed for the random number generator. A time-derived
                  seed is used when omitted.
        """
        if seed is None:
            seed = time.time_ns()
        logger.debug(f"Shuffling {self.size} cards with seed {seed}")
        self.shuffle_with_rng(random.Random(seed))

    def shuffle_with_rng(self, rng: random.Random) -> None:
        """Shuffle the remaining cards using the given random number generator."""
        # random.Random.shuffle is an in-place Fisher-Yates shuffle
        rng.shuffle(self.cards)

    def take(self) -> Optional[Card]:
        """
        Remove and return the top card of the deck.

        Returns:
            Card or None if deck is empty
        """
        if not self.cards:
            return None
        return self.cards.pop()

    def take_slice(self, count: int) -> List[Card]:
        """
        Remove and return exactly ``count`` cards from the top of the deck.

        Args:
            count: Number of cards to take

        Returns:
            List of cards, the former top card first

        Raises:
            NotEnoughCardsError: If fewer than ``count`` cards remain. The
                deck is left untouched.
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"Cannot take a negative number of cards: {count}")
        if count > len(self.cards):
            raise NotEnoughCardsError(count, len(self.cards))

        taken = self.cards[len(self.cards) - count:]
        del self.cards[len(self.cards) - count:]
        taken.reverse()
        return taken

    def get_cards(self) -> List[Card]:
        """Get a copy of the cards remaining in the deck."""
        return self.cards.copy()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)
