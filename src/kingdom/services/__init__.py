"""Service layer coordinating structures within a kingdom."""

from kingdom.services.kingdom_manager import KingdomManager

__all__ = ["KingdomManager"]
