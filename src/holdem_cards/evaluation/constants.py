"""Constants for poker hand evaluation."""
from holdem_cards.core.card import Suit, Value

# Suit ordering used to break ties between cards of equal value
SUIT_ORDER = {
    Suit.CLUBS: 0,
    Suit.DIAMONDS: 1,
    Suit.HEARTS: 2,
    Suit.SPADES: 3,
}

# Values making up a royal flush, highest first
ROYAL_VALUES = (Value.ACE, Value.KING, Value.QUEEN, Value.JACK, Value.TEN)

# A-2-3-4-5: the ace plays low and scores 1
WHEEL_VALUES = (Value.FIVE, Value.FOUR, Value.THREE, Value.TWO, Value.ACE)
WHEEL_SCORE = 1 + 2 + 3 + 4 + 5

# Number of consecutive values in a straight
STRAIGHT_LENGTH = 5

# Cards counted by a flush, and the ways its score can be computed.
# 'top_five' keeps only the highest DEFAULT_FLUSH_SIZE (or configured) cards.
DEFAULT_FLUSH_SIZE = 5
FLUSH_SCORING_TOP_FIVE = 'top_five'
FLUSH_SCORING_ALL_SUITED = 'all_suited'
FLUSH_SCORING_MODES = (FLUSH_SCORING_TOP_FIVE, FLUSH_SCORING_ALL_SUITED)

DEFAULT_EVALUATION = 'holdem'
