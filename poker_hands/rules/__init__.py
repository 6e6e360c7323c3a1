"""Poker hand classification rules.

This module provides:
- Card and rank definitions, token parsing (ranks.py)
- Hand facts, category predicates and classification (hands.py)
- Vectorized classification for many hands (batch.py)
"""

from .ranks import (
    Suit,
    Card,
    RANK_LABELS,
    RANK_INDEX,
    RANK_ALIASES,
    ROYAL_RANK_COUNT,
    ROYAL_RANKS,
    SUIT_SYMBOLS,
    CardParseError,
    InvalidCardToken,
    InvalidRank,
    InvalidSuit,
    parse_card,
    rank_label,
    compare_ranks,
)

from .hands import (
    HAND_SIZE,
    HandCategory,
    Hand,
    HandFacts,
    HandSizeError,
    Classification,
    CATEGORY_PREDICATES,
    parse_hand_tokens,
    derive_facts,
    categorize_facts,
    is_royal_flush,
    is_straight_flush,
    is_four_of_a_kind,
    is_full_house,
    is_flush,
    is_straight,
    is_three_of_a_kind,
    is_two_pair,
    is_one_pair,
    high_card,
    classify,
    describe_hand,
)

from .batch import (
    CATEGORY_ORDER,
    CATEGORY_CODES,
    encode_hands,
    compute_category_codes,
    classify_batch,
    decode_categories,
)

__all__ = [
    # Ranks
    "Suit",
    "Card",
    "RANK_LABELS",
    "RANK_INDEX",
    "RANK_ALIASES",
    "ROYAL_RANK_COUNT",
    "ROYAL_RANKS",
    "SUIT_SYMBOLS",
    "CardParseError",
    "InvalidCardToken",
    "InvalidRank",
    "InvalidSuit",
    "parse_card",
    "rank_label",
    "compare_ranks",
    # Hands
    "HAND_SIZE",
    "HandCategory",
    "Hand",
    "HandFacts",
    "HandSizeError",
    "Classification",
    "CATEGORY_PREDICATES",
    "parse_hand_tokens",
    "derive_facts",
    "categorize_facts",
    "is_royal_flush",
    "is_straight_flush",
    "is_four_of_a_kind",
    "is_full_house",
    "is_flush",
    "is_straight",
    "is_three_of_a_kind",
    "is_two_pair",
    "is_one_pair",
    "high_card",
    "classify",
    "describe_hand",
    # Batch
    "CATEGORY_ORDER",
    "CATEGORY_CODES",
    "encode_hands",
    "compute_category_codes",
    "classify_batch",
    "decode_categories",
]
