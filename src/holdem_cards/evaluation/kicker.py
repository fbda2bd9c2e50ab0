"""Kicker lookup shared by every hand category."""
from typing import Optional, Sequence

from holdem_cards.core.card import Card
from holdem_cards.evaluation.detectors import Exclusion


def find_kicker(cards: Sequence[Card], exclusion: Exclusion) -> Optional[Card]:
    """
    Return the highest card not consumed by the matched rank.

    Args:
        cards: Cards in canonical order
        exclusion: Cards or values used by the rank

    Returns:
        The first card in ``cards`` the exclusion does not cover, or None
        if the rank used every card.
    """
    for card in cards:
        if not exclusion.covers(card):
            return card
    return None
