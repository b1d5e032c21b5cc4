"""Structure entities of the kingdom.

Every archetype composes a single :class:`StructureCore` that carries the
shared identity and mutable state (power, activity, maintainer). The four
variants add their own attributes on top and are tagged with a class-level
:class:`~kingdom.domain.enums.Archetype`, which the rule tables dispatch on.

The set of variants is closed: :data:`Structure` is the union of exactly
the four classes below and :data:`STRUCTURE_TYPES` is its runtime twin.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from types import MappingProxyType
from typing import ClassVar, TypeAlias

from kingdom.utils.identity import DEFAULT_IDENTITY, IdentitySource

from .enums import Archetype
from .errors import ValidationError
from .rules_config import DEFAULT_RULES

logger = logging.getLogger(__name__)

MIN_MAGIC_POWER = DEFAULT_RULES.power.minimum
MAX_MAGIC_POWER = DEFAULT_RULES.power.maximum
DEFAULT_MAGIC_POWER = DEFAULT_RULES.power.default
UNASSIGNED = DEFAULT_RULES.archetypes.unassigned


def _require_text(value: object, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} cannot be empty")
    return value


class StructureCore:
    """Identity and shared state embedded in every structure.

    ``name``, ``location``, ``id`` and ``created_at`` are fixed at
    construction. ``power`` is validated strictly here, but later updates
    through :meth:`set_power` drop out-of-range values without raising.
    """

    __slots__ = ("_id", "_created_at", "_name", "_location", "_power", "active", "maintainer")

    def __init__(
        self,
        name: str,
        location: str,
        power: int = DEFAULT_MAGIC_POWER,
        active: bool = True,
        *,
        identity: IdentitySource | None = None,
    ):
        _require_text(name, "Name")
        _require_text(location, "Location")
        if not DEFAULT_RULES.power.in_range(power):
            raise ValidationError(
                f"Invalid magic power {power!r}: must be between "
                f"{MIN_MAGIC_POWER} and {MAX_MAGIC_POWER}"
            )

        identity = identity or DEFAULT_IDENTITY
        self._id = identity.next_id()
        self._created_at = identity.now()
        self._name = name
        self._location = location
        self._power = power
        self.active = active
        self.maintainer = UNASSIGNED

    @property
    def id(self) -> str:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def name(self) -> str:
        return self._name

    @property
    def location(self) -> str:
        return self._location

    @property
    def power(self) -> int:
        return self._power

    def set_power(self, power: int) -> None:
        """Update power; values outside the allowed range are ignored."""
        if not DEFAULT_RULES.power.in_range(power):
            logger.debug("Ignoring out-of-range power %r for %s", power, self._id)
            return
        self._power = power

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructureCore):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"StructureCore(id={self._id!r}, name={self._name!r}, "
            f"location={self._location!r}, power={self._power}, active={self.active})"
        )

    def __str__(self) -> str:
        return f"{self._name} at {self._location} (Power={self._power}, Active={self.active})"


class _StructureBase:
    """Read-only access to the embedded core, shared by all variants."""

    __slots__ = ("core",)

    archetype: ClassVar[Archetype]
    base_power: ClassVar[int]

    core: StructureCore

    @property
    def id(self) -> str:
        return self.core.id

    @property
    def name(self) -> str:
        return self.core.name

    @property
    def location(self) -> str:
        return self.core.location

    @property
    def power(self) -> int:
        return self.core.power


class WizardTower(_StructureBase):
    """Tower housing a wizard and a bounded repertoire of spells."""

    __slots__ = ("max_spell_capacity", "known_spells", "current_wizard")

    archetype = Archetype.WIZARD_TOWER
    base_power = DEFAULT_RULES.archetypes.wizard_tower_power

    def __init__(
        self,
        name: str,
        location: str,
        power: int = base_power,
        max_spell_capacity: int = DEFAULT_RULES.archetypes.spell_capacity,
        known_spells: Iterable[str] | None = None,
        current_wizard: str = UNASSIGNED,
        *,
        identity: IdentitySource | None = None,
    ):
        if known_spells is None:
            known_spells = DEFAULT_RULES.archetypes.starter_spells
        elif isinstance(known_spells, str):
            raise ValidationError("Known spells must be a collection of spell names")
        self.core = StructureCore(name, location, power, True, identity=identity)
        self.max_spell_capacity = max_spell_capacity
        self.known_spells = list(known_spells)
        self.current_wizard = current_wizard

    def __str__(self) -> str:
        return (
            f"WizardTower{{capacity={self.max_spell_capacity}, "
            f"spells={self.known_spells}, "
            f"wizard='{self.current_wizard}', "
            f"core={self.core}}}"
        )


class EnchantedCastle(_StructureBase):
    __slots__ = ("castle_type", "defense_rating", "has_drawbridge")

    archetype = Archetype.ENCHANTED_CASTLE
    base_power = DEFAULT_RULES.archetypes.enchanted_castle_power

    def __init__(
        self,
        name: str,
        location: str,
        castle_type: str,
        *,
        defense_rating: int = DEFAULT_RULES.archetypes.castle_defense_rating,
        has_drawbridge: bool = True,
        identity: IdentitySource | None = None,
    ):
        self.core = StructureCore(name, location, self.base_power, True, identity=identity)
        self.castle_type = castle_type
        self.defense_rating = defense_rating
        self.has_drawbridge = has_drawbridge

    def __str__(self) -> str:
        return (
            f"EnchantedCastle{{type={self.castle_type}, "
            f"defense={self.defense_rating}, "
            f"drawbridge={self.has_drawbridge}, "
            f"core={self.core}}}"
        )


class MysticLibrary(_StructureBase):
    """Library of books keyed by title; knowledge grows with the collection."""

    __slots__ = ("_books",)

    archetype = Archetype.MYSTIC_LIBRARY
    base_power = DEFAULT_RULES.archetypes.mystic_library_power

    def __init__(
        self,
        name: str,
        location: str,
        books: Mapping[str, str],
        *,
        identity: IdentitySource | None = None,
    ):
        self.core = StructureCore(name, location, self.base_power, True, identity=identity)
        self._books = dict(books)

    @property
    def books(self) -> Mapping[str, str]:
        return MappingProxyType(self._books)

    @property
    def knowledge_level(self) -> int:
        return len(self._books) * DEFAULT_RULES.archetypes.knowledge_per_book

    def __str__(self) -> str:
        return (
            f"MysticLibrary{{books={len(self._books)}, "
            f"knowledgeLevel={self.knowledge_level}, "
            f"core={self.core}}}"
        )


class DragonLair(_StructureBase):
    __slots__ = ("dragon_type", "treasure_value", "territorial_radius")

    archetype = Archetype.DRAGON_LAIR
    base_power = DEFAULT_RULES.archetypes.dragon_lair_power

    def __init__(
        self,
        name: str,
        location: str,
        dragon_type: str,
        treasure_value: int,
        *,
        territorial_radius: int = DEFAULT_RULES.archetypes.lair_territorial_radius,
        identity: IdentitySource | None = None,
    ):
        self.core = StructureCore(name, location, self.base_power, True, identity=identity)
        self.dragon_type = dragon_type
        self.treasure_value = treasure_value
        self.territorial_radius = territorial_radius

    def __str__(self) -> str:
        return (
            f"DragonLair{{dragonType='{self.dragon_type}', "
            f"treasure={self.treasure_value}, "
            f"radius={self.territorial_radius}, "
            f"core={self.core}}}"
        )


Structure: TypeAlias = WizardTower | EnchantedCastle | MysticLibrary | DragonLair

STRUCTURE_TYPES: tuple[type[_StructureBase], ...] = (
    WizardTower,
    EnchantedCastle,
    MysticLibrary,
    DragonLair,
)


def is_structure(value: object) -> bool:
    return isinstance(value, STRUCTURE_TYPES)
