"""Immutable kingdom-wide configuration."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .enums import Archetype
from .errors import ValidationError


@dataclass(frozen=True, slots=True)
class KingdomConfig:
    """Validated description of a kingdom.

    ``allowed_structure_types`` is normalised to a frozenset and
    ``resource_limits`` to a read-only copy of the given mapping, so two
    configs built from the same values compare equal and hash identically.
    """

    kingdom_name: str
    founding_year: int
    allowed_structure_types: frozenset[str]
    resource_limits: Mapping[str, int]

    def __post_init__(self) -> None:
        if not isinstance(self.kingdom_name, str) or not self.kingdom_name.strip():
            raise ValidationError("Kingdom name cannot be empty")
        if (
            isinstance(self.founding_year, bool)
            or not isinstance(self.founding_year, int)
            or self.founding_year <= 0
        ):
            raise ValidationError("Founding year must be positive")

        if isinstance(self.allowed_structure_types, str):
            raise ValidationError("Allowed structure types must be a collection of names")
        allowed = frozenset(self.allowed_structure_types or ())
        if not allowed:
            raise ValidationError("Must allow at least one structure type")
        limits = dict(self.resource_limits or {})
        if not limits:
            raise ValidationError("Resource limits cannot be empty")
        for resource, limit in limits.items():
            if isinstance(limit, bool) or not isinstance(limit, int):
                raise ValidationError(f"Limit for {resource!r} must be an integer, got {limit!r}")

        object.__setattr__(self, "allowed_structure_types", allowed)
        object.__setattr__(self, "resource_limits", MappingProxyType(limits))

    def __hash__(self) -> int:
        return hash(
            (
                self.kingdom_name,
                self.founding_year,
                self.allowed_structure_types,
                frozenset(self.resource_limits.items()),
            )
        )

    def __str__(self) -> str:
        return f"{self.kingdom_name} (Founded: {self.founding_year})"

    def allows(self, archetype: Archetype | str) -> bool:
        """Whether structures of ``archetype`` are permitted in this kingdom."""
        return str(archetype) in self.allowed_structure_types

    @classmethod
    def create(
        cls,
        kingdom_name: str,
        founding_year: int,
        allowed_structure_types: Iterable[str],
        resource_limits: Mapping[str, int],
    ) -> KingdomConfig:
        if isinstance(allowed_structure_types, str):
            raise ValidationError("Allowed structure types must be a collection of names")
        return cls(
            kingdom_name,
            founding_year,
            frozenset(allowed_structure_types),
            resource_limits,
        )

    @classmethod
    def default(cls) -> KingdomConfig:
        return cls.create(
            "Avaloria",
            1000,
            [archetype.value for archetype in Archetype],
            {"Gold": 10000, "Mana": 5000},
        )

    @classmethod
    def from_template(cls, template: str) -> KingdomConfig:
        """Build a preset config; unknown template names fall back to the default."""

        builder = _TEMPLATES.get(template.strip().lower())
        if builder is None:
            return cls.default()
        return builder()


def _magic_kingdom() -> KingdomConfig:
    return KingdomConfig.create(
        "Mystara",
        1200,
        [Archetype.WIZARD_TOWER.value, Archetype.MYSTIC_LIBRARY.value],
        {"Mana": 10000},
    )


def _military_kingdom() -> KingdomConfig:
    return KingdomConfig.create(
        "Ironhold",
        800,
        [Archetype.ENCHANTED_CASTLE.value, Archetype.DRAGON_LAIR.value],
        {"Gold": 20000},
    )


_TEMPLATES = {
    "magic": _magic_kingdom,
    "military": _military_kingdom,
}

TEMPLATE_NAMES = ("default", *_TEMPLATES)
