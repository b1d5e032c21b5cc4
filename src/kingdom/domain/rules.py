"""Interaction, battle and scoring rules between structures.

All functions here are pure: they look only at the archetype tag of each
argument, never at collection membership or live power.
"""

from __future__ import annotations

from collections.abc import Iterable

from kingdom.domain.enums import UNKNOWN_CATEGORY, Archetype
from kingdom.domain.models import is_structure
from kingdom.domain.rules_config import DEFAULT_RULES, RulesConfig

WIZARD_VS_DRAGON = "Wizard Tower casts spells against the Dragon!"
DRAGON_VS_CASTLE = "Dragon attacks the Castle!"
NO_BATTLE = "No significant battle occurred."

_BATTLE_NARRATIVES: dict[tuple[Archetype, Archetype], str] = {
    (Archetype.WIZARD_TOWER, Archetype.DRAGON_LAIR): WIZARD_VS_DRAGON,
    (Archetype.DRAGON_LAIR, Archetype.ENCHANTED_CASTLE): DRAGON_VS_CASTLE,
}


def archetype_of(value: object) -> Archetype | None:
    """Return the archetype tag of a structure, or ``None`` for anything else."""
    if not is_structure(value):
        return None
    return value.archetype  # type: ignore[attr-defined]


def can_structures_interact(first: object, second: object) -> bool:
    """Whether ``first`` can interact with ``second``; the order matters."""

    match (archetype_of(first), archetype_of(second)):
        case (Archetype.WIZARD_TOWER, Archetype.MYSTIC_LIBRARY):
            return True
        case (Archetype.ENCHANTED_CASTLE, Archetype.DRAGON_LAIR):
            return True
        case _:
            return False


def perform_magic_battle(attacker: object, defender: object) -> str:
    """Narrate a battle between two structures."""

    key = (archetype_of(attacker), archetype_of(defender))
    return _BATTLE_NARRATIVES.get(key, NO_BATTLE)  # type: ignore[arg-type]


def calculate_kingdom_power(
    structures: Iterable[object],
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> int:
    """Sum the fixed archetype weight of every structure.

    Each structure's current power is deliberately not consulted, so a
    tower drained to zero still scores its full weight. Values that are not
    structures contribute nothing.
    """

    return sum(rules.scoring.weight_of(archetype_of(item)) for item in structures)


def determine_structure_category(value: object) -> str:
    archetype = archetype_of(value)
    if archetype is None:
        return UNKNOWN_CATEGORY
    return archetype.value
