"""Tests for Texas Hold'em hand classification."""
import itertools
import logging
import random
import sys

import pytest

from holdem_cards.core.card import Card, Suit, Value, parse_cards
from holdem_cards.core.deck import Deck
from holdem_cards.evaluation.evaluation_config import EvaluationConfig
from holdem_cards.evaluation.evaluator import HandEvaluator, classify
from holdem_cards.evaluation.types import Hand, HandRank


@pytest.fixture(autouse=True)
def setup_logging():
    """Set up logging for all tests."""
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )


@pytest.fixture
def evaluator():
    """Create a hand evaluator instance."""
    return HandEvaluator()


def card(text):
    return Card.from_string(text)


def test_empty_hand(evaluator):
    hand = evaluator.classify([])
    assert hand == Hand(rank=HandRank.HIGH_CARD, score=0, kicker=None)


@pytest.mark.parametrize("cards,score", [
    ("♣2", 2),
    ("♣7", 7),
    ("♠A", 14),
])
def test_single_card(evaluator, cards, score):
    hand = evaluator.classify(parse_cards(cards))
    assert hand.rank == HandRank.HIGH_CARD
    assert hand.score == score
    assert hand.kicker is None


def test_high_card_with_kicker(evaluator):
    hand = evaluator.classify(parse_cards("♣7 ♦5"))
    assert hand.rank == HandRank.HIGH_CARD
    assert hand.score == 7
    assert hand.kicker == card("♦5")


@pytest.mark.parametrize("cards,rank,score,kicker", [
    # Royal flush
    ("♦10 ♦J ♦Q ♦K ♦A", HandRank.ROYAL_FLUSH, 60, None),
    ("♦K ♦J ♦10 ♦A ♦Q", HandRank.ROYAL_FLUSH, 60, None),
    ("♦A ♦3 ♦Q ♦10 ♣10 ♦K ♦J", HandRank.ROYAL_FLUSH, 60, "♣10"),
    # Straight flush
    ("♣J ♦5 ♦6 ♦4 ♦Q ♦7 ♦3", HandRank.STRAIGHT_FLUSH, 25, "♦Q"),
    ("♣J ♦5 ♦2 ♦4 ♦Q ♦A ♦3", HandRank.STRAIGHT_FLUSH, 15, "♦Q"),
    ("♦A ♦2 ♦3 ♦4 ♦5", HandRank.STRAIGHT_FLUSH, 15, None),
    ("♠K ♠Q ♠J ♠10 ♠9 ♥A", HandRank.STRAIGHT_FLUSH, 55, "♥A"),
    # Four of a kind
    ("♣J ♦6 ♣6 ♠4 ♣Q ♥6 ♦6", HandRank.FOUR_OF_A_KIND, 24, "♣Q"),
    ("♣6 ♦6 ♥6 ♠6", HandRank.FOUR_OF_A_KIND, 24, None),
    # Full house
    ("♣2 ♦4 ♥A ♠2 ♣A ♦3 ♥2", HandRank.FULL_HOUSE, 34, "♦4"),
    ("♣K ♦K ♥K ♣7 ♦7 ♥7 ♠2", HandRank.FULL_HOUSE, 53, "♠2"),
    # Flush
    ("♣J ♦4 ♣6 ♠4 ♣Q ♣3 ♣7", HandRank.FLUSH, 39, "♦4"),
    # Straight
    ("♣J ♦5 ♣6 ♠4 ♣Q ♥7 ♦3", HandRank.STRAIGHT, 25, "♣Q"),
    ("♣J ♦5 ♣A ♠4 ♣Q ♥2 ♦3", HandRank.STRAIGHT, 15, "♣Q"),
    ("♣A ♦K ♥Q ♠J ♣10", HandRank.STRAIGHT, 60, None),
    # Three of a kind
    ("♣J ♦2 ♣6 ♠4 ♣Q ♥6 ♦6", HandRank.THREE_OF_A_KIND, 18, "♣Q"),
    # Two pair
    ("♣J ♦2 ♣A ♠2 ♥Q ♥6 ♦6", HandRank.TWO_PAIR, 16, "♣A"),
    ("♣K ♦K ♣9 ♠9 ♥4 ♦4 ♠3", HandRank.TWO_PAIR, 44, "♦4"),
    # Pair
    ("♣J ♥6 ♦2 ♣A ♠4 ♣Q ♦6", HandRank.PAIR, 12, "♣A"),
    ("♠9 ♦9", HandRank.PAIR, 18, None),
    # High card
    ("♣J ♥6 ♦2 ♣A ♠4 ♣Q ♦9", HandRank.HIGH_CARD, 14, "♣Q"),
])
def test_classification(evaluator, cards, rank, score, kicker):
    hand = evaluator.classify(parse_cards(cards))
    assert hand.rank == rank
    assert hand.score == score
    if kicker is None:
        assert hand.kicker is None
    else:
        assert hand.kicker == card(kicker)


def test_six_high_straight_beats_wheel(evaluator):
    hand = evaluator.classify(parse_cards("♥A ♣2 ♦3 ♠4 ♣5 ♥6"))
    assert hand.rank == HandRank.STRAIGHT
    assert hand.score == 20
    assert hand.kicker == card("♥A")


def test_six_high_straight_flush_beats_wheel(evaluator):
    hand = evaluator.classify(parse_cards("♦A ♦2 ♦3 ♦4 ♦5 ♦6"))
    assert hand.rank == HandRank.STRAIGHT_FLUSH
    assert hand.score == 20
    assert hand.kicker == card("♦A")


def test_straight_flush_preempts_flush_and_straight(evaluator):
    hand = evaluator.classify(parse_cards("♥9 ♥8 ♥7 ♥6 ♥5 ♥2 ♣10"))
    assert hand.rank == HandRank.STRAIGHT_FLUSH
    assert hand.score == 35


def test_four_of_a_kind_preempts_full_house(evaluator):
    hand = evaluator.classify(parse_cards("♣8 ♦8 ♥8 ♠8 ♣3 ♦3 ♥3"))
    assert hand.rank == HandRank.FOUR_OF_A_KIND
    assert hand.score == 32
    assert hand.kicker == card("♣3")


def test_full_house_preempts_flush(evaluator):
    hand = evaluator.classify(parse_cards("♥K ♥9 ♥4 ♥3 ♥2 ♣K ♦K ♣9"))
    assert hand.rank == HandRank.FULL_HOUSE
    assert hand.score == 39 + 18


def test_flush_preempts_straight(evaluator):
    hand = evaluator.classify(parse_cards("♠10 ♠8 ♠6 ♠4 ♠2 ♥9 ♦7"))
    assert hand.rank == HandRank.FLUSH
    assert hand.score == 30
    assert hand.kicker == card("♥9")


def test_flush_scores_top_five(evaluator):
    hand = evaluator.classify(parse_cards("♣A ♣K ♣9 ♣7 ♣4 ♣2 ♦3"))
    assert hand.rank == HandRank.FLUSH
    assert hand.score == 14 + 13 + 9 + 7 + 4
    assert hand.kicker == card("♦3")
    assert len(hand.cards_used) == 5


def test_flush_uncapped_scoring():
    evaluator = HandEvaluator(EvaluationConfig(id="test", flush_scoring="all_suited"))
    hand = evaluator.classify(parse_cards("♣A ♣K ♣9 ♣7 ♣4 ♣2 ♦3"))
    assert hand.rank == HandRank.FLUSH
    assert hand.score == 14 + 13 + 9 + 7 + 4 + 2
    assert hand.kicker == card("♦3")
    assert len(hand.cards_used) == 6


def test_three_pairs_pick_highest(evaluator):
    hand = evaluator.classify(parse_cards("♣2 ♦2 ♣Q ♦Q ♣7 ♦7 ♠3"))
    assert hand.rank == HandRank.TWO_PAIR
    assert hand.score == 24 + 14
    # The lowest pair is not excluded
    assert hand.kicker == card("♠3")


def test_value_exclusion_skips_duplicates(evaluator):
    """A duplicated paired card must never come back as the kicker."""
    hand = evaluator.classify(parse_cards("♣9 ♦9 ♣9 ♠2"))
    assert hand.rank == HandRank.THREE_OF_A_KIND
    assert hand.kicker == card("♠2")


def test_duplicate_cards_do_not_crash(evaluator):
    hand = evaluator.classify(parse_cards("♣5 ♣5"))
    assert hand.rank == HandRank.PAIR
    assert hand.score == 10
    assert hand.kicker is None


def test_cards_used(evaluator):
    hand = evaluator.classify(parse_cards("♣J ♦6 ♣6 ♠4 ♣Q ♥6 ♦6"))
    # Input holds the diamond six twice, both are part of the quads
    assert [str(c) for c in hand.cards_used] == ["♣6", "♦6", "♦6", "♥6"]


def test_input_is_not_modified(evaluator):
    cards = parse_cards("♣2 ♦4 ♥A ♠2 ♣A ♦3 ♥2")
    original = list(cards)
    evaluator.classify(cards)
    assert cards == original


def test_accepts_any_iterable(evaluator):
    cards = parse_cards("♦10 ♦J ♦Q ♦K ♦A")
    assert evaluator.classify(iter(cards)).rank == HandRank.ROYAL_FLUSH
    assert evaluator.classify(tuple(cards)).rank == HandRank.ROYAL_FLUSH


def test_permutations_give_identical_hand(evaluator):
    cards = parse_cards("♣2 ♦4 ♥A ♠2 ♣A ♦3 ♥2")
    expected = evaluator.classify(cards)
    rng = random.Random(0)
    for _ in range(50):
        shuffled = cards[:]
        rng.shuffle(shuffled)
        assert evaluator.classify(shuffled) == expected


def test_module_level_classify():
    hand = classify(parse_cards("♦10 ♦J ♦Q ♦K ♦A"))
    assert hand.rank == HandRank.ROYAL_FLUSH
    assert hand.score == 60


def test_random_deals_are_consistent(evaluator):
    """Every deal of 0-7 cards classifies without error and obeys the kicker rule."""
    deck = Deck()
    for seed in range(200):
        deck.reset()
        deck.shuffle(seed=seed)
        cards = deck.take_slice(seed % 8)
        hand = evaluator.classify(cards)

        assert isinstance(hand.rank, HandRank)
        assert hand.cards_used or not cards
        if hand.kicker is not None:
            assert hand.kicker in cards
            assert hand.kicker not in hand.cards_used
            remaining = [c for c in cards if c not in hand.cards_used]
            assert hand.kicker.value == max(c.value for c in remaining)


def test_all_five_card_hands_of_a_suit_slice():
    """Every five-card hand from a 10 card slice gets exactly one rank."""
    cards = [Card(Suit.HEARTS, v) for v in (Value.ACE, Value.KING, Value.QUEEN, Value.JACK, Value.TEN)]
    cards += [Card(Suit.SPADES, v) for v in (Value.ACE, Value.KING, Value.TWO, Value.THREE, Value.FOUR)]
    for combo in itertools.combinations(cards, 5):
        hand = classify(combo)
        assert hand.rank in set(HandRank)
