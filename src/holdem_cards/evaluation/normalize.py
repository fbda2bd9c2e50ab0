"""Canonical card ordering shared by the detectors and kicker lookup."""
from typing import Iterable, List, Tuple

from holdem_cards.core.card import Card
from holdem_cards.evaluation.constants import SUIT_ORDER


def sort_key(card: Card) -> Tuple[int, int]:
    """Value descending, then suit ascending."""
    return (-card.value, SUIT_ORDER[card.suit])


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """
    Return a new list of the cards in canonical order.

    Cards are ordered by value, highest first, and by suit (clubs,
    diamonds, hearts, spades) when values tie. Duplicate cards end up
    next to each other.
    """
    return sorted(cards, key=sort_key)
