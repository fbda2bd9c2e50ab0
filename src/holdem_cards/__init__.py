"""Texas Hold'em card and hand classification package."""

from holdem_cards.core.card import Card, Suit, Value, parse_cards
from holdem_cards.core.deck import Deck, NotEnoughCardsError
from holdem_cards.evaluation.evaluation_config import EvaluationConfig, EvaluationConfigLoader
from holdem_cards.evaluation.evaluator import HandEvaluator, classify
from holdem_cards.evaluation.hand_description import HandDescriber
from holdem_cards.evaluation.types import Hand, HandRank

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Suit",
    "Value",
    "parse_cards",
    "Deck",
    "NotEnoughCardsError",
    "EvaluationConfig",
    "EvaluationConfigLoader",
    "HandEvaluator",
    "classify",
    "HandDescriber",
    "Hand",
    "HandRank",
]
