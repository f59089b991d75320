"""
Command line entry point for fogbound-content.
Usage: python -m fogbound_content [--unlock-level N] [--seed S] [--rolls K]
"""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .content import ConfigError, ContentLoadError, ContentRegistry, ContentService
from .content.models import GoldLoot, LootResult
from .content.merger import ResolvedContent
from .settings import AppSettings
from .spawning.picker import ContentPicker
from .utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fogbound-content",
        description="Resolve Fogbound content for an unlock level and show sample spawns.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--unlock-level", type=int, default=0, help="Powergate unlock level (default: 0)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for sample rolls")
    parser.add_argument("--rolls", type=int, default=5, help="Number of sample rolls (default: 5)")
    parser.add_argument(
        "--packs", type=Path, default=None, help="Content pack directory (overrides settings)"
    )
    parser.add_argument("--profile", default="default", help="Settings profile name")
    return parser


def describe_loot(loot: LootResult) -> str:
    if isinstance(loot, GoldLoot):
        return f"{loot.amount} gold"
    return f"{loot.item.emoji} {loot.item.name}".strip()


def print_summary(content: ResolvedContent, picker: ContentPicker, rolls: int) -> None:
    """Print category counts and sample rolls for a resolved snapshot."""
    print(f"Unlock level {content.unlock_level} -> active tier {content.active_tier}")
    print(
        f"  tiles: {len(content.tiles)}  cave tiles: {len(content.cave_tiles)}  "
        f"monsters: {len(content.monsters)}  items: {len(content.items)}  "
        f"treasures: {len(content.treasures)}  quests: {len(content.quests)}"
    )

    for roll in range(1, rolls + 1):
        terrain_id = picker.pick_overworld_terrain()
        if terrain_id is None:
            print(f"  #{roll}: no terrain available")
            continue
        monster = picker.pick_monster_for_terrain(terrain_id)
        loot = picker.pick_loot_for_terrain(terrain_id)
        monster_text = monster.name if monster else "-"
        print(f"  #{roll}: {terrain_id:<12} monster: {monster_text:<16} loot: {describe_loot(loot)}")

    stock = picker.pick_shop_stock()
    print(f"  shop: {', '.join(item.name for item in stock) or '-'}")


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    try:
        settings = AppSettings(profile=args.profile)
        setup_logging(settings)
        logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

        validation = settings.validate()
        for warning in validation.warnings:
            logger.warning(f"  {warning}")
        if not validation.is_valid:
            for error in validation.errors:
                logger.error(f"  {error}")
            print("Configuration validation failed:\n  " + "\n  ".join(validation.errors), file=sys.stderr)
            return 1

        registry = None
        if args.packs is not None:
            registry = ContentRegistry.load(
                directory=args.packs, powergates_file=settings.powergates_file
            )

        service = ContentService(registry=registry, settings=settings)
        rng = random.Random(args.seed).random
        print_summary(
            service.content_for(args.unlock_level),
            service.picker_for(args.unlock_level, rng),
            max(0, args.rolls),
        )
    except (ConfigError, ContentLoadError) as e:
        logger.error(f"Failed to load content: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
