"""
Hand category detectors.

Every detector takes cards already in canonical order (see
:func:`holdem_cards.evaluation.normalize.sort_cards`) and returns a
:class:`Match` when the cards contain its category, or None. Because the
input is sorted highest first, scanning it front to back finds the
highest qualifying combination.

``DETECTORS`` lists them strongest first; the evaluator stops at the
first match.
"""
from collections import Counter
from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional, Sequence, Tuple

from holdem_cards.core.card import Card, Suit, Value
from holdem_cards.evaluation.constants import (
    DEFAULT_FLUSH_SIZE, FLUSH_SCORING_ALL_SUITED, FLUSH_SCORING_MODES,
    FLUSH_SCORING_TOP_FIVE, ROYAL_VALUES, STRAIGHT_LENGTH, WHEEL_SCORE, WHEEL_VALUES,
)
from holdem_cards.evaluation.types import HandRank


@dataclass(frozen=True)
class Exclusion:
    """
    Cards a matched rank has consumed, which can't be the kicker.

    Flushes, straights and high cards consume specific cards. Pairs, trips,
    quads and full houses consume whole values: every suit of the value
    is excluded, whether or not it was dealt.
    """
    cards: FrozenSet[Card] = frozenset()
    values: FrozenSet[Value] = frozenset()

    def covers(self, card: Card) -> bool:
        return card in self.cards or card.value in self.values


@dataclass(frozen=True)
class Match:
    """A detector hit: category, score and the cards that define it."""
    rank: HandRank
    score: int
    cards_used: Tuple[Card, ...]
    exclusion: Exclusion


Detector = Callable[[Sequence[Card]], Optional[Match]]


def _find(cards: Sequence[Card], value: int, suit: Optional[Suit] = None) -> Optional[Card]:
    """First card with the given value (and suit, if given)."""
    for card in cards:
        if card.value == value and (suit is None or card.suit == suit):
            return card
    return None


def _card_match(rank: HandRank, score: int, used: Sequence[Card]) -> Match:
    used = tuple(used)
    return Match(rank, score, used, Exclusion(cards=frozenset(used)))


def _value_match(rank: HandRank, score: int, cards: Sequence[Card], *values: Value) -> Match:
    used = tuple(c for c in cards if c.value in values)
    return Match(rank, score, used, Exclusion(values=frozenset(values)))


def _run_below(cards: Sequence[Card], top: Card, suit: Optional[Suit]) -> Optional[List[Card]]:
    """Cards forming a run of five downwards from ``top``, or None."""
    run = [top]
    for step in range(1, STRAIGHT_LENGTH):
        card = _find(cards, top.value - step, suit)
        if card is None:
            return None
        run.append(card)
    return run


def _wheel(cards: Sequence[Card], suit: Optional[Suit]) -> Optional[List[Card]]:
    run = [_find(cards, value, suit) for value in WHEEL_VALUES]
    if any(card is None for card in run):
        return None
    return run


def _straight(cards: Sequence[Card], suited: bool) -> Optional[Tuple[int, List[Card]]]:
    # Any regular run outranks the wheel, so the wheel is only tried after.
    for card in cards:
        run = _run_below(cards, card, card.suit if suited else None)
        if run:
            return sum(c.value for c in run), run

    for ace in cards:
        if ace.value != Value.ACE:
            break
        run = _wheel(cards, ace.suit if suited else None)
        if run:
            return WHEEL_SCORE, run
        if not suited:
            break
    return None


def detect_royal_flush(cards: Sequence[Card]) -> Optional[Match]:
    for card in cards:
        used = [_find(cards, value, card.suit) for value in ROYAL_VALUES]
        if all(used):
            return _card_match(HandRank.ROYAL_FLUSH, sum(ROYAL_VALUES), used)
    return None


def detect_straight_flush(cards: Sequence[Card]) -> Optional[Match]:
    found = _straight(cards, suited=True)
    if found:
        score, run = found
        return _card_match(HandRank.STRAIGHT_FLUSH, score, run)
    return None


def detect_four_of_a_kind(cards: Sequence[Card]) -> Optional[Match]:
    counts = Counter(c.value for c in cards)
    for card in cards:
        if counts[card.value] == 4:
            return _value_match(HandRank.FOUR_OF_A_KIND, card.value * 4, cards, card.value)
    return None


def detect_full_house(cards: Sequence[Card]) -> Optional[Match]:
    counts = Counter(c.value for c in cards)
    for trips in cards:
        if counts[trips.value] < 3:
            continue
        for pair in cards:
            if pair.value == trips.value or counts[pair.value] < 2:
                continue
            score = trips.value * 3 + pair.value * 2
            return _value_match(HandRank.FULL_HOUSE, score, cards, trips.value, pair.value)
    return None


def detect_flush(
    cards: Sequence[Card],
    flush_size: int = DEFAULT_FLUSH_SIZE,
    scoring: str = FLUSH_SCORING_TOP_FIVE,
) -> Optional[Match]:
    """
    Detect a flush.

    Args:
        cards: Sorted cards
        flush_size: Number of same-suit cards needed
        scoring: 'top_five' scores the highest ``flush_size`` cards of the
            suit (five unless flush_size says otherwise); 'all_suited'
            scores every card of the suit.
    """
    if scoring not in FLUSH_SCORING_MODES:
        raise ValueError(f"Unknown flush scoring mode: {scoring}")

    for card in cards:
        suited = [c for c in cards if c.suit == card.suit]
        if len(suited) < flush_size:
            continue
        if scoring != FLUSH_SCORING_ALL_SUITED:
            suited = suited[:flush_size]
        return _card_match(HandRank.FLUSH, sum(c.value for c in suited), suited)
    return None


def detect_straight(cards: Sequence[Card]) -> Optional[Match]:
    found = _straight(cards, suited=False)
    if found:
        score, run = found
        return _card_match(HandRank.STRAIGHT, score, run)
    return None


def detect_three_of_a_kind(cards: Sequence[Card]) -> Optional[Match]:
    counts = Counter(c.value for c in cards)
    for card in cards:
        if counts[card.value] == 3:
            return _value_match(HandRank.THREE_OF_A_KIND, card.value * 3, cards, card.value)
    return None


def detect_two_pair(cards: Sequence[Card]) -> Optional[Match]:
    counts = Counter(c.value for c in cards)
    for high in cards:
        if counts[high.value] != 2:
            continue
        for low in cards:
            if low.value == high.value or counts[low.value] != 2:
                continue
            score = high.value * 2 + low.value * 2
            return _value_match(HandRank.TWO_PAIR, score, cards, high.value, low.value)
    return None


def detect_pair(cards: Sequence[Card]) -> Optional[Match]:
    counts = Counter(c.value for c in cards)
    for card in cards:
        if counts[card.value] == 2:
            return _value_match(HandRank.PAIR, card.value * 2, cards, card.value)
    return None


def detect_high_card(cards: Sequence[Card]) -> Match:
    """Always matches; an empty hand scores 0."""
    if not cards:
        return Match(HandRank.HIGH_CARD, 0, (), Exclusion())
    return _card_match(HandRank.HIGH_CARD, int(cards[0].value), cards[:1])


# Strongest first
DETECTORS: Tuple[Detector, ...] = (
    detect_royal_flush,
    detect_straight_flush,
    detect_four_of_a_kind,
    detect_full_house,
    detect_flush,
    detect_straight,
    detect_three_of_a_kind,
    detect_two_pair,
    detect_pair,
    detect_high_card,
)
