#!/usr/bin/env python3
"""Classify poker hands from the command line.

Each hand is five card tokens (rank + suit), separated by spaces or commas.
Ranks: 1 2 3 4 5 6 7 8 9 T J Q K A ('10' is accepted for T).
Suits: H D C S.

Usage:
    python -m poker_hands.scripts.classify "TH QH JH AH KH"
    python -m poker_hands.scripts.classify "1S 2S 3S 4S 5S" "AS KH 7D 1C 5H" --json
    python -m poker_hands.scripts.classify --file hands.txt --batch
"""

import argparse
import json
import logging
import sys
from typing import Iterable, List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from poker_hands.rules import (
    CardParseError,
    Classification,
    Hand,
    HandSizeError,
    classify_batch,
    decode_categories,
    describe_hand,
    high_card,
    parse_hand_tokens,
)

logger = logging.getLogger(__name__)


def read_hands(path: str) -> List[str]:
    """Read one hand per line, skipping blanks and '#' comments."""
    hands = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.split("#", 1)[0].strip()
            if line:
                hands.append(line)
    return hands


def parse_inputs(raw_hands: Iterable[str]) -> Tuple[List[Hand], List[Tuple[str, str]]]:
    """Parse raw hand strings, collecting failures instead of stopping.

    Returns:
        (parsed hands, list of (raw input, error message))
    """
    hands = []
    errors = []
    for raw in raw_hands:
        try:
            hands.append(parse_hand_tokens(raw))
        except (CardParseError, HandSizeError) as e:
            logger.error("Could not parse hand %r: %s", raw, e)
            errors.append((raw, str(e)))
    return hands, errors


def classify_hands(hands: List[Hand], batch: bool = False) -> List[Classification]:
    """Classify parsed hands, optionally through the vectorized path."""
    if not batch:
        return [describe_hand(hand) for hand in hands]

    categories = decode_categories(classify_batch(hands))
    return [
        Classification(hand=hand, category=category, high_card=high_card(hand))
        for hand, category in zip(hands, categories)
    ]


def render_table(results: List[Classification], errors: List[Tuple[str, str]], console: Console) -> None:
    table = Table(title="Hand Categories", box=box.SIMPLE_HEAVY)
    table.add_column("Hand", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("High card", justify="center")

    for result in results:
        table.add_row(str(result.hand), result.category.value, result.high_card)
    for raw, message in errors:
        table.add_row(escape(raw), f"[red]error: {escape(message)}[/red]", "-")

    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the classify script."""
    parser = argparse.ArgumentParser(
        description="Classify five-card poker hands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m poker_hands.scripts.classify "TH QH JH AH KH"
  python -m poker_hands.scripts.classify "KH KS KC 2H 2D" "3H 3D 3C 4D 5D" --json
  python -m poker_hands.scripts.classify --file hands.txt --batch
        """,
    )

    parser.add_argument(
        "hands",
        nargs="*",
        help="Hands to classify, each a quoted string of five card tokens",
    )

    parser.add_argument(
        "--file",
        "-f",
        type=str,
        default=None,
        help="Read additional hands from a file (one hand per line)",
    )

    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON instead of a table"
    )

    parser.add_argument(
        "--batch",
        "-b",
        action="store_true",
        help="Classify with the vectorized NumPy path",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    raw_hands = list(args.hands)
    if args.file is not None:
        try:
            raw_hands.extend(read_hands(args.file))
        except OSError as e:
            logger.error("Could not read %s: %s", args.file, e)
            return 1

    if not raw_hands:
        parser.error("no hands given (pass hands as arguments or use --file)")

    hands, errors = parse_inputs(raw_hands)
    results = classify_hands(hands, batch=args.batch)

    if args.json:
        payload = {
            "results": [r.to_dict() for r in results],
            "errors": [{"hand": raw, "error": message} for raw, message in errors],
        }
        print(json.dumps(payload, indent=2))
    else:
        render_table(results, errors, Console())

    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
