"""Command-line demonstration of a kingdom and its structures."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from kingdom.config import get_settings
from kingdom.domain.kingdom_config import TEMPLATE_NAMES, KingdomConfig
from kingdom.domain.models import DragonLair, EnchantedCastle, MysticLibrary, WizardTower
from kingdom.report import build_report, render_text
from kingdom.services.kingdom_manager import KingdomManager

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str) -> None:
    """Configure root logging for the demo."""
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)


@dataclass(slots=True)
class DemoStructures:
    """One structure of each archetype, as registered by the demo."""

    tower: WizardTower
    castle: EnchantedCastle
    library: MysticLibrary
    lair: DragonLair


def build_demo_kingdom(config: KingdomConfig) -> tuple[KingdomManager, DemoStructures]:
    """Create a manager holding one structure of each archetype."""

    manager = KingdomManager(config)
    tower = WizardTower("Merlin's Tower", "Highlands")
    castle = EnchantedCastle("IronKeep", "Valley", "Royal")
    library = MysticLibrary(
        "Arcane Library", "City", {"Spellbook1": "Fireball", "Tome2": "Healing"}
    )
    lair = DragonLair("Smaug's Lair", "Mountain", "Fire Dragon", 10000)

    for structure in (tower, castle, library, lair):
        manager.add_structure(structure)

    return manager, DemoStructures(tower, castle, library, lair)


def _default_template(template: str) -> str:
    template = template.strip().lower()
    return template if template in TEMPLATE_NAMES else "default"


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the kingdom demonstration")
    parser.add_argument(
        "--template",
        choices=TEMPLATE_NAMES,
        default=_default_template(settings.template),
        help="Kingdom preset to build",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=settings.log_level,
        help="Logging verbosity",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    config = KingdomConfig.from_template(args.template)
    logger.info("Building demo kingdom %s", config)

    manager, demo = build_demo_kingdom(config)
    report = build_report(
        manager,
        interaction=(demo.tower, demo.library),
        battle=(demo.tower, demo.lair),
    )

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        for line in render_text(manager, report):
            print(line)
    return 0
