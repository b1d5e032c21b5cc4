"""Domain model for the kingdom.

This package hosts everything the rules need and nothing else:

* Structure entities and their shared core (see :mod:`models`).
* The archetype enumeration (see :mod:`enums`).
* The kingdom configuration value object (see :mod:`kingdom_config`).
* Rule constants (see :mod:`rules_config`) and pure rule functions
  (see :mod:`rules`).

Nothing in here performs I/O.
"""

from . import enums, errors, kingdom_config, models, rules, rules_config

__all__ = [
    "enums",
    "errors",
    "kingdom_config",
    "models",
    "rules",
    "rules_config",
]
