"""Enumerations for the kingdom domain."""

from __future__ import annotations

from enum import StrEnum


class Archetype(StrEnum):
    """The four fixed structure kinds a kingdom can hold."""

    WIZARD_TOWER = "WizardTower"
    ENCHANTED_CASTLE = "EnchantedCastle"
    MYSTIC_LIBRARY = "MysticLibrary"
    DRAGON_LAIR = "DragonLair"


UNKNOWN_CATEGORY = "Unknown"
