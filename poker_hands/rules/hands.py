"""Hand category detection.

Categories, strongest first:
- Royal flush: T J Q K A, one suit
- Straight flush: five consecutive ranks, one suit
- Four of a kind: four cards of the same rank
- Full house: three of one rank + two of another
- Flush: one suit, not a straight/royal flush
- Straight: five consecutive ranks, mixed suits
- Three of a kind: three of one rank, no pair alongside
- Two pair / one pair
- High card: everything else

Detection rules:
- Predicates are checked in the order above; the first match wins
- Ranks are consecutive only by position in RANK_LABELS (no A-2-3-4-5 wheel)
- Pair-based predicates use exact group sizes, so a triple is never a pair
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Sequence, Tuple, Union

from .ranks import (
    Card,
    InvalidCardToken,
    Suit,
    RANK_LABELS,
    ROYAL_RANKS,
    parse_card,
)

logger = logging.getLogger(__name__)

HAND_SIZE = 5


class HandCategory(Enum):
    """Hand categories, ordered strongest to weakest."""

    ROYAL_FLUSH = "royal_flush"
    STRAIGHT_FLUSH = "straight_flush"
    FOUR_OF_A_KIND = "four_of_a_kind"
    FULL_HOUSE = "full_house"
    FLUSH = "flush"
    STRAIGHT = "straight"
    THREE_OF_A_KIND = "three_of_a_kind"
    TWO_PAIR = "two_pair"
    ONE_PAIR = "one_pair"
    HIGH_CARD = "high_card"

    def __str__(self) -> str:
        return self.value


class HandSizeError(ValueError):
    """Raised when a hand does not hold exactly HAND_SIZE cards."""

    pass


@dataclass(frozen=True)
class Hand:
    """Exactly five cards, in the order they were given."""

    cards: Tuple[Card, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "cards", tuple(self.cards))
        if len(self.cards) != HAND_SIZE:
            raise HandSizeError(
                f"A hand must have exactly {HAND_SIZE} cards, got {len(self.cards)}"
            )
        for card in self.cards:
            if not isinstance(card, Card):
                raise InvalidCardToken(f"Expected a Card, got {card!r}")

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "Hand":
        return cls(cards=tuple(parse_card(t) for t in tokens))


HandLike = Union[Hand, str, Sequence[str], Sequence[Card]]


def parse_hand_tokens(hand: HandLike) -> Hand:
    """Build a Hand from any accepted input form.

    Args:
        hand: A Hand, a sequence of Card objects, a sequence of tokens,
              or one string of tokens separated by spaces or commas

    Returns:
        Hand object

    Raises:
        CardParseError: If any token is malformed
        HandSizeError: If the hand does not have exactly 5 cards
    """
    if isinstance(hand, Hand):
        return hand
    if isinstance(hand, str):
        hand = hand.replace(",", " ").split()
    return Hand(
        cards=tuple(item if isinstance(item, Card) else parse_card(item) for item in hand)
    )


@dataclass(frozen=True)
class HandFacts:
    """Facts about a hand that the category predicates are built from.

    Attributes:
        numeric_ranks: Rank indices, sorted ascending, duplicates kept
        suits: Suit of each card, in hand order
        unique_suit_count: Number of distinct suits
        rank_groups: (rank index, number of cards) pairs, by rank index
        is_sequential: Five distinct, strictly consecutive rank indices
        is_one_suit: All cards share a suit
        is_royal_flush_ranks: Every rank is one of the top five labels
    """

    numeric_ranks: Tuple[int, ...]
    suits: Tuple[Suit, ...]
    unique_suit_count: int
    rank_groups: Tuple[Tuple[int, int], ...]
    is_sequential: bool
    is_one_suit: bool
    is_royal_flush_ranks: bool

    def has_group_of(self, size: int) -> bool:
        """True if some rank appears exactly ``size`` times."""
        return any(count == size for _, count in self.rank_groups)

    def groups_of(self, size: int) -> int:
        """Number of ranks that appear exactly ``size`` times."""
        return sum(1 for _, count in self.rank_groups if count == size)


def _is_sequential(numeric_ranks: Sequence[int]) -> bool:
    if len(set(numeric_ranks)) != len(numeric_ranks):
        return False
    return numeric_ranks[-1] - numeric_ranks[0] == len(numeric_ranks) - 1


def derive_facts(hand: HandLike) -> HandFacts:
    """Compute the HandFacts for a hand."""
    hand = parse_hand_tokens(hand)

    numeric_ranks = tuple(sorted(card.rank_index for card in hand))
    suits = tuple(card.suit for card in hand)
    unique_suit_count = len(set(suits))

    return HandFacts(
        numeric_ranks=numeric_ranks,
        suits=suits,
        unique_suit_count=unique_suit_count,
        rank_groups=tuple(sorted(Counter(numeric_ranks).items())),
        is_sequential=_is_sequential(numeric_ranks),
        is_one_suit=unique_suit_count == 1,
        is_royal_flush_ranks=all(r in ROYAL_RANKS for r in numeric_ranks),
    )


# =============================================================================
# Predicates over derived facts
# =============================================================================


def _royal_flush(facts: HandFacts) -> bool:
    return facts.is_royal_flush_ranks and facts.is_one_suit


def _straight_flush(facts: HandFacts) -> bool:
    return facts.is_sequential and facts.is_one_suit and not facts.is_royal_flush_ranks


def _four_of_a_kind(facts: HandFacts) -> bool:
    return facts.has_group_of(4)


def _full_house(facts: HandFacts) -> bool:
    return facts.has_group_of(3) and facts.has_group_of(2)


def _flush(facts: HandFacts) -> bool:
    if _straight_flush(facts) or _royal_flush(facts):
        return False
    return facts.is_one_suit


def _straight(facts: HandFacts) -> bool:
    return facts.is_sequential and not facts.is_one_suit


def _three_of_a_kind(facts: HandFacts) -> bool:
    # A pair alongside the triple makes it a full house
    return facts.has_group_of(3) and not facts.has_group_of(2)


def _two_pair(facts: HandFacts) -> bool:
    return facts.groups_of(2) == 2


def _one_pair(facts: HandFacts) -> bool:
    return facts.groups_of(2) == 1


# Checked in order; HIGH_CARD is the fallback and has no predicate
CATEGORY_PREDICATES: Tuple[Tuple[HandCategory, Callable[[HandFacts], bool]], ...] = (
    (HandCategory.ROYAL_FLUSH, _royal_flush),
    (HandCategory.STRAIGHT_FLUSH, _straight_flush),
    (HandCategory.FOUR_OF_A_KIND, _four_of_a_kind),
    (HandCategory.FULL_HOUSE, _full_house),
    (HandCategory.FLUSH, _flush),
    (HandCategory.STRAIGHT, _straight),
    (HandCategory.THREE_OF_A_KIND, _three_of_a_kind),
    (HandCategory.TWO_PAIR, _two_pair),
    (HandCategory.ONE_PAIR, _one_pair),
)


def categorize_facts(facts: HandFacts) -> HandCategory:
    """Return the first category whose predicate holds for the facts."""
    for category, predicate in CATEGORY_PREDICATES:
        if predicate(facts):
            return category
    return HandCategory.HIGH_CARD


# =============================================================================
# Public API
# =============================================================================


def is_royal_flush(hand: HandLike) -> bool:
    return _royal_flush(derive_facts(hand))


def is_straight_flush(hand: HandLike) -> bool:
    return _straight_flush(derive_facts(hand))


def is_four_of_a_kind(hand: HandLike) -> bool:
    return _four_of_a_kind(derive_facts(hand))


def is_full_house(hand: HandLike) -> bool:
    return _full_house(derive_facts(hand))


def is_flush(hand: HandLike) -> bool:
    return _flush(derive_facts(hand))


def is_straight(hand: HandLike) -> bool:
    return _straight(derive_facts(hand))


def is_three_of_a_kind(hand: HandLike) -> bool:
    return _three_of_a_kind(derive_facts(hand))


def is_two_pair(hand: HandLike) -> bool:
    return _two_pair(derive_facts(hand))


def is_one_pair(hand: HandLike) -> bool:
    return _one_pair(derive_facts(hand))


def high_card(hand: HandLike) -> str:
    """Get the label of the highest rank in the hand (e.g. 'A')."""
    return RANK_LABELS[derive_facts(hand).numeric_ranks[-1]]


def classify(hand: HandLike) -> HandCategory:
    """Classify a 5-card hand into its HandCategory.

    Args:
        hand: A Hand, Cards, tokens, or a string of tokens

    Returns:
        The strongest category the hand satisfies

    Raises:
        CardParseError: If any token is malformed
        HandSizeError: If the hand does not have exactly 5 cards
    """
    hand = parse_hand_tokens(hand)
    category = categorize_facts(derive_facts(hand))
    logger.debug("Classified %s as %s", hand, category)
    return category


@dataclass(frozen=True)
class Classification:
    """A hand together with its category and highest rank label."""

    hand: Hand
    category: HandCategory
    high_card: str

    def to_dict(self) -> dict:
        return {
            "hand": [str(c) for c in self.hand],
            "category": self.category.value,
            "high_card": self.high_card,
        }


def describe_hand(hand: HandLike) -> Classification:
    """Classify a hand and report its highest rank label alongside."""
    hand = parse_hand_tokens(hand)
    facts = derive_facts(hand)
    return Classification(
        hand=hand,
        category=categorize_facts(facts),
        high_card=RANK_LABELS[facts.numeric_ranks[-1]],
    )
