"""Vectorized hand classification with NumPy.

This module provides:
- Hand encoding to fixed-shape rank/suit arrays
- Batched category computation (one code per hand)
- Code-to-category decoding

Key insight: every predicate only needs the sorted ranks, the suits and the
per-rank counts, so all of them can be evaluated column-wise for N hands at
once and resolved with a single np.select in priority order.

Category codes are positions in CATEGORY_ORDER (0 = ROYAL_FLUSH,
9 = HIGH_CARD).
"""

from typing import Iterable, List, Tuple

import numpy as np

from .hands import HAND_SIZE, HandCategory, HandLike, parse_hand_tokens
from .ranks import RANK_LABELS, ROYAL_RANK_COUNT, Suit


CATEGORY_ORDER: Tuple[HandCategory, ...] = tuple(HandCategory)
CATEGORY_CODES = {category: code for code, category in enumerate(CATEGORY_ORDER)}

NUM_RANKS = len(RANK_LABELS)
SUIT_CODES = {suit: code for code, suit in enumerate(Suit)}


def encode_hands(hands: Iterable[HandLike]) -> Tuple[np.ndarray, np.ndarray]:
    """Encode hands as (N, 5) rank-index and suit-code arrays.

    Args:
        hands: Iterable of anything parse_hand_tokens accepts

    Returns:
        (ranks, suits) int8 arrays, both of shape (N, HAND_SIZE)

    Raises:
        CardParseError: If any token is malformed
        HandSizeError: If any hand does not have exactly 5 cards
    """
    rank_rows = []
    suit_rows = []
    for hand in hands:
        parsed = parse_hand_tokens(hand)
        rank_rows.append([card.rank_index for card in parsed])
        suit_rows.append([SUIT_CODES[card.suit] for card in parsed])

    if not rank_rows:
        empty = np.zeros((0, HAND_SIZE), dtype=np.int8)
        return empty, empty.copy()

    return np.asarray(rank_rows, dtype=np.int8), np.asarray(suit_rows, dtype=np.int8)


def compute_category_codes(ranks: np.ndarray, suits: np.ndarray) -> np.ndarray:
    """Compute category codes for encoded hands.

    Args:
        ranks: (N, 5) rank indices into RANK_LABELS
        suits: (N, 5) suit codes

    Returns:
        (N,) int8 array of category codes
    """
    ranks = np.asarray(ranks)
    suits = np.asarray(suits)
    if ranks.ndim != 2 or ranks.shape[1] != HAND_SIZE or ranks.shape != suits.shape:
        raise ValueError(
            f"Expected matching (N, {HAND_SIZE}) arrays, got {ranks.shape} and {suits.shape}"
        )

    sorted_ranks = np.sort(ranks, axis=1)

    # Per-rank counts: (N, NUM_RANKS)
    counts = (ranks[:, :, None] == np.arange(NUM_RANKS)[None, None, :]).sum(axis=1)
    has_four = (counts == 4).any(axis=1)
    has_three = (counts == 3).any(axis=1)
    num_pairs = (counts == 2).sum(axis=1)

    one_suit = (suits == suits[:, :1]).all(axis=1)
    distinct = (np.diff(sorted_ranks, axis=1) != 0).all(axis=1)
    sequential = distinct & (sorted_ranks[:, -1] - sorted_ranks[:, 0] == HAND_SIZE - 1)
    royal_ranks = (ranks >= NUM_RANKS - ROYAL_RANK_COUNT).all(axis=1)

    royal_flush = royal_ranks & one_suit
    straight_flush = sequential & one_suit & ~royal_ranks

    conditions = [
        royal_flush,
        straight_flush,
        has_four,
        has_three & (num_pairs > 0),
        one_suit & ~straight_flush & ~royal_flush,
        sequential & ~one_suit,
        has_three & (num_pairs == 0),
        num_pairs == 2,
        num_pairs == 1,
    ]
    choices = [CATEGORY_CODES[category] for category in CATEGORY_ORDER[:-1]]

    return np.select(
        conditions, choices, default=CATEGORY_CODES[HandCategory.HIGH_CARD]
    ).astype(np.int8)


def classify_batch(hands: Iterable[HandLike]) -> np.ndarray:
    """Classify many hands at once.

    Returns:
        (N,) int8 array of category codes; see decode_categories
    """
    ranks, suits = encode_hands(hands)
    return compute_category_codes(ranks, suits)


def decode_categories(codes: Iterable[int]) -> List[HandCategory]:
    """Convert category codes back to HandCategory members."""
    return [CATEGORY_ORDER[int(code)] for code in codes]
