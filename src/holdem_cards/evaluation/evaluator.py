"""Main poker hand evaluation interface."""
from functools import partial
from typing import Iterable, List, Optional, Tuple
import logging

from holdem_cards.core.card import Card
from holdem_cards.evaluation.constants import DEFAULT_EVALUATION
from holdem_cards.evaluation.detectors import DETECTORS, Detector, Match, detect_flush
from holdem_cards.evaluation.evaluation_config import (
    EvaluationConfig, EvaluationConfigLoader, evaluation_config_loader,
)
from holdem_cards.evaluation.kicker import find_kicker
from holdem_cards.evaluation.normalize import sort_cards
from holdem_cards.evaluation.types import Hand

logger = logging.getLogger(__name__)


class HandEvaluator:
    """
    Classifies a set of cards into its best Texas Hold'em hand.

    The evaluator keeps no state between calls and can be shared across
    threads.
    """

    def __init__(self, config: Optional[EvaluationConfig] = None):
        """
        Initialize evaluator.

        Args:
            config: Evaluation rules. Defaults to canonical hold'em scoring.
        """
        self.config = config or EvaluationConfig(id=DEFAULT_EVALUATION)
        self.detectors = self._build_detectors(self.config)

    @classmethod
    def from_config_name(
        cls,
        eval_type: str,
        loader: Optional[EvaluationConfigLoader] = None,
    ) -> 'HandEvaluator':
        """
        Create an evaluator from a named JSON configuration.

        Raises:
            ValueError: If no configuration exists for eval_type
        """
        loader = loader or evaluation_config_loader
        config = loader.get_config(eval_type)
        if config is None:
            raise ValueError(f"No configuration found for evaluation type: {eval_type}")
        return cls(config)

    @staticmethod
    def _build_detectors(config: EvaluationConfig) -> Tuple[Detector, ...]:
        """Detector chain with the flush detector bound to the config."""
        flush = partial(
            detect_flush,
            flush_size=config.flush_size,
            scoring=config.flush_scoring,
        )
        return tuple(flush if d is detect_flush else d for d in DETECTORS)

    def _first_match(self, cards: List[Card]) -> Match:
        for detector in self.detectors:
            match = detector(cards)
            if match is not None:
                return match
        # detect_high_card always matches, so this is unreachable
        raise AssertionError("no detector matched")

    def classify(self, cards: Iterable[Card]) -> Hand:
        """
        Classify a set of cards.

        Args:
            cards: Any number of cards, in any order. The input is not
                modified.

        Returns:
            Hand with the best rank, its score and the kicker
        """
        sorted_cards = sort_cards(cards)
        match = self._first_match(sorted_cards)
        kicker = find_kicker(sorted_cards, match.exclusion)

        logger.debug(
            f"Classified {' '.join(str(c) for c in sorted_cards) or '(no cards)'} "
            f"as {match.rank.display_name} score={match.score} kicker={kicker}"
        )
        return Hand(
            rank=match.rank,
            score=match.score,
            kicker=kicker,
            cards_used=match.cards_used,
        )


# Global evaluator instance
evaluator = HandEvaluator()


def classify(cards: Iterable[Card]) -> Hand:
    """Classify cards with the default evaluator."""
    return evaluator.classify(cards)
