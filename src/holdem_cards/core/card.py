"""Card related classes and utilities."""
import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """Card suits."""
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Display symbol, e.g. '♣' for clubs."""
        return SUIT_SYMBOLS[self]


class Value(IntEnum):
    """Card values. Aces are high (14)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """Display symbol ('2'..'10', 'J', 'Q', 'K', 'A')."""
        return VALUE_SYMBOLS[self]

    @property
    def letter(self) -> str:
        """Single character used by the two-letter card format ('T' for ten)."""
        return 'T' if self == Value.TEN else self.symbol

    @property
    def full_name(self) -> str:
        return self.name.capitalize()

    @property
    def plural_name(self) -> str:
        if self == Value.SIX:
            return 'Sixes'
        return f"{self.full_name}s"


SUIT_SYMBOLS = {
    Suit.CLUBS: '♣',
    Suit.DIAMONDS: '♦',
    Suit.HEARTS: '♥',
    Suit.SPADES: '♠',
}

VALUE_SYMBOLS = {
    value: str(int(value)) for value in Value if value < Value.JACK
}
VALUE_SYMBOLS.update({
    Value.JACK: 'J',
    Value.QUEEN: 'Q',
    Value.KING: 'K',
    Value.ACE: 'A',
})

# Display names for every card, keyed by (suit, value).
CARD_NAMES = {
    (suit, value): f"{SUIT_SYMBOLS[suit]}{VALUE_SYMBOLS[value]}"
    for suit in Suit
    for value in Value
}

_SYMBOL_SUITS = {symbol: suit for suit, symbol in SUIT_SYMBOLS.items()}
_LETTER_VALUES = {value.letter: value for value in Value}
_SYMBOL_VALUES = {symbol: value for value, symbol in VALUE_SYMBOLS.items()}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable and compare equal when suit and value match.

    Attributes:
        suit: Card suit (clubs, diamonds, hearts, spades)
        value: Card value, 2-14 with the ace as 14
    """
    suit: Suit
    value: Value

    def __post_init__(self):
        # Accept plain ints for the value and normalize them to the enum.
        if not isinstance(self.value, Value):
            try:
                object.__setattr__(self, 'value', Value(self.value))
            except ValueError:
                raise ValueError(f"Invalid card value: {self.value!r}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid card suit: {self.suit!r}")

    def __str__(self) -> str:
        """String representation in format '♠A' for Ace of spades."""
        return CARD_NAMES[(self.suit, self.value)]

    def __repr__(self) -> str:
        return f"Card({self})"

    @property
    def short(self) -> str:
        """Two-letter form, e.g. 'As' or 'Td'."""
        return f"{self.value.letter}{self.suit.value}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: Either the two-letter form ('As', 'Td', '2c'; case
                     insensitive) or the display form ('♠A', '♦10').

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        text = card_str.strip() if isinstance(card_str, str) else ''
        if not text:
            raise ValueError(f"Invalid card string: {card_str!r}")

        # Display form: suit symbol first
        if text[0] in _SYMBOL_SUITS:
            value = _SYMBOL_VALUES.get(text[1:].upper())
            if value is None:
                raise ValueError(f"Invalid rank or suit in: {card_str}")
            return cls(suit=_SYMBOL_SUITS[text[0]], value=value)

        if len(text) == 3 and text.startswith('10'):
            text = 'T' + text[2]
        if len(text) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = text[0], text[1]
        value = _LETTER_VALUES.get(rank_str.upper())
        suit = next((s for s in Suit if s.value == suit_str.lower()), None)
        if value is None or suit is None:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(suit=suit, value=value)


_SEPARATORS = re.compile(r'[\s,]+')


def parse_cards(text: str) -> List[Card]:
    """
    Parse a list of cards.

    Accepts whitespace or comma separated cards in either format
    ("As Kd ♣10") or a run of concatenated two-letter cards ("AsKsQsJsTs").

    Raises:
        ValueError: If any card is invalid
    """
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]

    # A single concatenated token in the two-letter format
    if len(tokens) == 1 and len(tokens[0]) > 3 and tokens[0][0] not in _SYMBOL_SUITS:
        run = tokens[0]
        if len(run) % 2 != 0:
            raise ValueError(f"Invalid hand string length: {text} (must be multiple of 2)")
        tokens = [run[i:i + 2] for i in range(0, len(run), 2)]

    cards = []
    for i, token in enumerate(tokens):
        try:
            cards.append(Card.from_string(token))
        except ValueError as e:
            raise ValueError(f"Invalid card at position {i + 1} in '{text}': {e}")
    return cards
