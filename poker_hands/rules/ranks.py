"""Card rank definitions and token parsing.

Rank order (low to high): 1 < 2 < 3 < 4 < 5 < 6 < 7 < 8 < 9 < T < J < Q < K < A

This module provides:
- Rank label ordering
- Suit definitions
- Card representation
- Token parsing (e.g. 'TH', '7d', '10S')
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


# Rank labels in ascending strength order. Index in this tuple is the
# numeric rank used for comparisons and runs.
RANK_LABELS: Tuple[str, ...] = (
    "1",
    "2",
    "3",
    "4",
    "5",
    "6",
    "7",
    "8",
    "9",
    "T",
    "J",
    "Q",
    "K",
    "A",
)

RANK_INDEX: Dict[str, int] = {label: i for i, label in enumerate(RANK_LABELS)}

# Two-character rank labels accepted on input
RANK_ALIASES: Dict[str, str] = {"10": "T"}

# Number of top ranks that make up a royal flush (T J Q K A)
ROYAL_RANK_COUNT = 5
ROYAL_RANKS = frozenset(range(len(RANK_LABELS) - ROYAL_RANK_COUNT, len(RANK_LABELS)))


class Suit(Enum):
    """Card suits. Only compared for equality."""

    HEART = "H"
    DIAMOND = "D"
    CLUB = "C"
    SPADE = "S"

    def __str__(self) -> str:
        return self.value


SUIT_SYMBOLS = frozenset(s.value for s in Suit)


class CardParseError(ValueError):
    """Raised when a card token cannot be parsed."""

    pass


class InvalidCardToken(CardParseError):
    """Raised when a token has the wrong shape (length, empty, etc.)."""

    pass


class InvalidRank(CardParseError):
    """Raised when a token's rank is not one of RANK_LABELS."""

    pass


class InvalidSuit(CardParseError):
    """Raised when a token's suit is not one of SUIT_SYMBOLS."""

    pass


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit.

    Immutable and hashable. ``rank`` is the canonical label from RANK_LABELS;
    ``suit`` may be given as a symbol ("H") and is stored as a Suit.
    """

    rank: str
    suit: Suit

    def __post_init__(self) -> None:
        if self.rank not in RANK_INDEX:
            raise InvalidRank(f"Invalid rank: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            symbol = self.suit.upper() if isinstance(self.suit, str) else None
            if symbol not in SUIT_SYMBOLS:
                raise InvalidSuit(f"Invalid suit: {self.suit!r}")
            object.__setattr__(self, "suit", Suit(symbol))

    @property
    def rank_index(self) -> int:
        """Position of the rank in RANK_LABELS (0 = lowest)."""
        return RANK_INDEX[self.rank]

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank}{self.suit})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a token like 'TH', '7d' or '10S'.

        Args:
            s: Card token in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            InvalidCardToken: If the token has the wrong length
            InvalidRank: If the rank is not a known label
            InvalidSuit: If the suit is not a known symbol
        """
        token = s.strip().upper() if isinstance(s, str) else ""
        if len(token) not in (2, 3):
            raise InvalidCardToken(f"Invalid card token: {s!r}")

        suit_char = token[-1]
        rank_str = token[:-1]

        # Only an explicit alias may use two characters
        if len(rank_str) == 2:
            if rank_str not in RANK_ALIASES:
                raise InvalidRank(f"Invalid rank {rank_str!r} in card token {s!r}")
            rank_str = RANK_ALIASES[rank_str]

        if rank_str not in RANK_INDEX:
            raise InvalidRank(f"Invalid rank {rank_str!r} in card token {s!r}")
        if suit_char not in SUIT_SYMBOLS:
            raise InvalidSuit(f"Invalid suit {suit_char!r} in card token {s!r}")

        return cls(rank=rank_str, suit=Suit(suit_char))


def parse_card(token: str) -> Card:
    """Parse a single card token. See Card.from_string."""
    return Card.from_string(token)


def rank_label(index: int) -> str:
    """Get the rank label for a numeric rank index."""
    return RANK_LABELS[index]


def compare_ranks(rank1: str, rank2: str) -> int:
    """Compare two rank labels.

    Returns:
        Positive if rank1 > rank2, negative if rank1 < rank2, zero if equal
    """
    return RANK_INDEX[rank1] - RANK_INDEX[rank2]
