"""
main_runner – Command-line access to the catalog tools.

Subcommands:
  chain NAME     print the evolution line NAME belongs to
  moves ...      filter the move catalog
  theme IMAGE    compute the color theme of an image

Catalogs are read from ``--data-dir`` (default: ``data/`` at the project
root), as exported by the wiki's data extraction step.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wikidex.catalog import load_creatures, load_moves
from wikidex.color_theme import extract_theme
from wikidex.config import (
    CREATURES_FILE,
    DATA_DIR,
    MOVE_ACCURACY_BOUNDS,
    MOVE_EFFECT_TOGGLES,
    MOVE_POWER_BOUNDS,
    MOVE_PRIORITY_BOUNDS,
    MOVES_FILE,
)
from wikidex.evolution_chain import build_evolution_chain, get_creature_by_name
from wikidex.move_filters import (
    EffectToggles,
    MoveFilters,
    StatRange,
    apply_filters,
    get_active_filter_count,
)

logger = logging.getLogger(__name__)

# "--effect multi_hit" → EffectToggles.has_multi_hit
EFFECT_CHOICES = tuple(name[len("has_"):] for name in MOVE_EFFECT_TOGGLES)


# ── Subcommands ──────────────────────────────────────────────────────────────

def cmd_chain(args: argparse.Namespace) -> int:
    creatures = load_creatures(args.data_dir / CREATURES_FILE)
    creature = get_creature_by_name(args.name, creatures)
    name = creature.name if creature else args.name

    chain = build_evolution_chain(name, creatures)
    if not chain:
        print(f"{name}: no evolution line")
        return 0

    parts = []
    for c in chain:
        label = f"[{c.name}]" if c.name == name else c.name
        if c.evolution_level:
            label += f" (Lv {c.evolution_level})"
        parts.append(label)
    print(" -> ".join(parts))
    return 0


def build_move_filters(args: argparse.Namespace) -> MoveFilters:
    return MoveFilters(
        search=args.search or "",
        types=args.type or (),
        categories=args.category or (),
        power=StatRange(args.min_power, args.max_power),
        accuracy=StatRange(args.min_accuracy, args.max_accuracy),
        priority=StatRange(args.min_priority, args.max_priority),
        effects=EffectToggles(**{f"has_{e}": True for e in args.effect or ()}),
    )


def cmd_moves(args: argparse.Namespace) -> int:
    moves = load_moves(args.data_dir / MOVES_FILE)
    filters = build_move_filters(args)
    matched = apply_filters(moves, filters)

    for move in matched:
        power = move.base_power if move.base_power is not None else "-"
        print(f"  {move.name:<24} {move.type:<10} {move.category:<10} {power}")
    print(
        f"{len(matched)} of {len(moves)} moves "
        f"({get_active_filter_count(filters)} filters active)"
    )
    return 0


def cmd_theme(args: argparse.Namespace) -> int:
    result = asyncio.run(extract_theme(args.image))
    out = result.theme.to_dict()
    out["source"] = result.source
    if result.reason:
        out["reason"] = result.reason
    print(json.dumps(out, indent=2))
    return 0


# ── CLI entry point ──────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikidex",
        description="Creature catalog tools – evolution lines, move search, image themes",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help=f"Directory holding {CREATURES_FILE} and {MOVES_FILE} (default: {DATA_DIR})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_chain = sub.add_parser("chain", help="Show the evolution line of a creature")
    p_chain.add_argument("name")
    p_chain.set_defaults(func=cmd_chain)

    p_moves = sub.add_parser("moves", help="Filter the move catalog")
    p_moves.add_argument("--search", "-s", default="", help="Text in name or description")
    p_moves.add_argument("--type", "-t", action="append", help="Move type (repeatable)")
    p_moves.add_argument("--category", "-c", action="append", help="Move category (repeatable)")
    p_moves.add_argument("--min-power", type=float, default=MOVE_POWER_BOUNDS[0])
    p_moves.add_argument("--max-power", type=float, default=MOVE_POWER_BOUNDS[1])
    p_moves.add_argument("--min-accuracy", type=float, default=MOVE_ACCURACY_BOUNDS[0])
    p_moves.add_argument("--max-accuracy", type=float, default=MOVE_ACCURACY_BOUNDS[1])
    p_moves.add_argument("--min-priority", type=float, default=MOVE_PRIORITY_BOUNDS[0])
    p_moves.add_argument("--max-priority", type=float, default=MOVE_PRIORITY_BOUNDS[1])
    p_moves.add_argument(
        "--effect", "-e",
        action="append",
        choices=EFFECT_CHOICES,
        help="Require an effect (repeatable)",
    )
    p_moves.set_defaults(func=cmd_moves)

    p_theme = sub.add_parser("theme", help="Compute the color theme of an image")
    p_theme.add_argument("image", help="Path to a PNG/JPEG/WebP image")
    p_theme.set_defaults(func=cmd_theme)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Could not load catalog: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
