"""Human-readable descriptions of classified hands."""
from collections import Counter
from typing import List, Optional, Sequence, Union

from holdem_cards.core.card import Card, Value
from holdem_cards.evaluation.constants import WHEEL_SCORE
from holdem_cards.evaluation.evaluator import HandEvaluator, evaluator
from holdem_cards.evaluation.types import Hand, HandRank


class HandDescriber:
    """Generates human-readable descriptions for poker hands."""

    def __init__(self, hand_evaluator: Optional[HandEvaluator] = None):
        self.evaluator = hand_evaluator or evaluator

    def describe_hand(self, hand: Union[Hand, Sequence[Card]]) -> str:
        """Get a basic description of the hand, e.g. 'Full House'."""
        hand = self._as_hand(hand)
        if not hand.cards_used:
            return "No Cards"
        return hand.rank.display_name

    def describe_hand_detailed(self, hand: Union[Hand, Sequence[Card]]) -> str:
        """Get a detailed description, e.g. 'Full House, Twos over Aces'."""
        hand = self._as_hand(hand)
        cards = list(hand.cards_used)
        if not cards:
            return "No Cards"

        if hand.rank == HandRank.ROYAL_FLUSH:
            return "Royal Flush"
        elif hand.rank == HandRank.STRAIGHT_FLUSH:
            return f"{self._straight_high(hand).full_name}-high Straight Flush"
        elif hand.rank == HandRank.FOUR_OF_A_KIND:
            return f"Four {cards[0].value.plural_name}"
        elif hand.rank == HandRank.FULL_HOUSE:
            return self._describe_full_house(cards)
        elif hand.rank == HandRank.FLUSH:
            return f"{cards[0].value.full_name}-high Flush"
        elif hand.rank == HandRank.STRAIGHT:
            return f"{self._straight_high(hand).full_name}-high Straight"
        elif hand.rank == HandRank.THREE_OF_A_KIND:
            return f"Three {cards[0].value.plural_name}"
        elif hand.rank == HandRank.TWO_PAIR:
            high, low = self._grouped_values(cards)
            return f"Two Pair, {high.plural_name} and {low.plural_name}"
        elif hand.rank == HandRank.PAIR:
            return f"Pair of {cards[0].value.plural_name}"
        return f"{cards[0].value.full_name} High"

    def _as_hand(self, hand: Union[Hand, Sequence[Card]]) -> Hand:
        if isinstance(hand, Hand):
            return hand
        return self.evaluator.classify(hand)

    @staticmethod
    def _straight_high(hand: Hand) -> Value:
        # The ace of a wheel plays low
        if hand.score == WHEEL_SCORE:
            return Value.FIVE
        return hand.cards_used[0].value

    @staticmethod
    def _grouped_values(cards: List[Card]) -> List[Value]:
        """Distinct values, highest first."""
        return sorted(Counter(c.value for c in cards), reverse=True)

    def _describe_full_house(self, cards: List[Card]) -> str:
        counts = Counter(c.value for c in cards)
        # The trips are the highest value held three or more times
        trips = max(v for v, n in counts.items() if n >= 3)
        pair = max(v for v in counts if v != trips)
        return f"Full House, {trips.plural_name} over {pair.plural_name}"
