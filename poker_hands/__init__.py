"""Poker Hands - five-card poker hand classification.

Classifies a 5-card hand into one of ten categories, from royal flush
down to high card.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.rules import HandCategory, classify, describe_hand, high_card

__all__ = ["__version__", "HandCategory", "classify", "describe_hand", "high_card"]
