"""Declarative rule configuration for structures and scoring."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .enums import Archetype


@dataclass(frozen=True, slots=True)
class PowerRules:
    """Bounds and defaults for a structure's magic power."""

    minimum: int = 0
    maximum: int = 1000
    default: int = 100

    def in_range(self, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return self.minimum <= value <= self.maximum


@dataclass(frozen=True, slots=True)
class ArchetypeRules:
    """Per-archetype construction defaults."""

    wizard_tower_power: int = 200
    enchanted_castle_power: int = 300
    mystic_library_power: int = 150
    dragon_lair_power: int = 500
    spell_capacity: int = 10
    starter_spells: tuple[str, ...] = ("Light", "Shield")
    castle_defense_rating: int = 100
    lair_territorial_radius: int = 50
    knowledge_per_book: int = 10
    unassigned: str = "Unknown"


def _default_weights() -> dict[Archetype, int]:
    return {
        Archetype.WIZARD_TOWER: 200,
        Archetype.ENCHANTED_CASTLE: 300,
        Archetype.MYSTIC_LIBRARY: 150,
        Archetype.DRAGON_LAIR: 500,
    }


@dataclass(frozen=True, slots=True)
class ScoringRules:
    """Fixed weights summed by the kingdom power calculation.

    The weights are independent of each structure's live power.
    """

    weights: Mapping[Archetype, int] = field(default_factory=_default_weights)

    def __post_init__(self) -> None:
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))

    def __hash__(self) -> int:
        return hash(frozenset(self.weights.items()))

    def weight_of(self, archetype: Archetype | None) -> int:
        if archetype is None:
            return 0
        return self.weights.get(archetype, 0)


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all structure rules."""

    power: PowerRules = PowerRules()
    archetypes: ArchetypeRules = ArchetypeRules()
    scoring: ScoringRules = field(default_factory=ScoringRules)


DEFAULT_RULES = RulesConfig()
