"""Kingdom manager: the registry of structures for a single kingdom."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from kingdom.domain import rules
from kingdom.domain.errors import StructureTypeError
from kingdom.domain.kingdom_config import KingdomConfig
from kingdom.domain.models import Structure, is_structure
from kingdom.domain.rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)


class KingdomManager:
    """Owns a kingdom's config and the structures built within it.

    Structures are kept in insertion order. There is no removal: a kingdom
    session only ever grows.
    """

    def __init__(self, config: KingdomConfig, *, rules_config: RulesConfig = DEFAULT_RULES):
        self.config = config
        self.rules_config = rules_config
        self._structures: list[Structure] = []

    @property
    def structures(self) -> tuple[Structure, ...]:
        return tuple(self._structures)

    def __len__(self) -> int:
        return len(self._structures)

    def add_structure(self, structure: Structure) -> None:
        """Register a structure.

        Raises:
            StructureTypeError: If ``structure`` is not one of the four variants
        """
        if not is_structure(structure):
            raise StructureTypeError(
                f"Expected a structure variant, got {type(structure).__name__}"
            )

        category = rules.determine_structure_category(structure)
        if not self.config.allows(category):
            logger.warning(
                "%s '%s' is not an allowed structure type in %s",
                category,
                structure.name,
                self.config.kingdom_name,
            )
        self._structures.append(structure)
        logger.debug("Registered %s '%s' (%s)", category, structure.name, structure.id)

    def total_power(self) -> int:
        """Kingdom power over the registered structures."""
        return rules.calculate_kingdom_power(self._structures, rules=self.rules_config)

    def census(self) -> dict[str, int]:
        """Count registered structures per category, in first-seen order."""
        return dict(Counter(rules.determine_structure_category(s) for s in self._structures))

    @staticmethod
    def can_structures_interact(first: object, second: object) -> bool:
        return rules.can_structures_interact(first, second)

    @staticmethod
    def perform_magic_battle(attacker: object, defender: object) -> str:
        return rules.perform_magic_battle(attacker, defender)

    @staticmethod
    def calculate_kingdom_power(structures: Iterable[object]) -> int:
        return rules.calculate_kingdom_power(structures)

    @staticmethod
    def determine_structure_category(structure: object) -> str:
        return rules.determine_structure_category(structure)
