"""Structured snapshots of a kingdom for display or export."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kingdom.domain.kingdom_config import KingdomConfig
from kingdom.domain.models import Structure
from kingdom.domain.rules import determine_structure_category
from kingdom.services.kingdom_manager import KingdomManager


class KingdomSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    founding_year: int = Field(..., gt=0)
    allowed_structure_types: list[str]
    resource_limits: dict[str, int]

    @classmethod
    def from_config(cls, config: KingdomConfig) -> KingdomSummary:
        return cls(
            name=config.kingdom_name,
            founding_year=config.founding_year,
            allowed_structure_types=sorted(config.allowed_structure_types),
            resource_limits=dict(config.resource_limits),
        )


class StructureSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: str
    name: str
    location: str
    power: int = Field(..., ge=0, le=1000)
    active: bool
    maintainer: str
    description: str = Field(..., description="Human-readable rendering of the structure")

    @classmethod
    def from_structure(cls, structure: Structure) -> StructureSummary:
        core = structure.core
        return cls(
            id=core.id,
            category=determine_structure_category(structure),
            name=core.name,
            location=core.location,
            power=core.power,
            active=core.active,
            maintainer=core.maintainer,
            description=str(structure),
        )


class KingdomReport(BaseModel):
    """Observable output of a kingdom run."""

    kingdom: KingdomSummary
    structures: list[StructureSummary]
    can_interact: bool
    battle: str
    kingdom_power: int


def build_report(
    manager: KingdomManager,
    *,
    interaction: tuple[Structure, Structure],
    battle: tuple[Structure, Structure],
) -> KingdomReport:
    """Evaluate the manager queries for the given pairs and collect the results."""

    return KingdomReport(
        kingdom=KingdomSummary.from_config(manager.config),
        structures=[StructureSummary.from_structure(s) for s in manager.structures],
        can_interact=manager.can_structures_interact(*interaction),
        battle=manager.perform_magic_battle(*battle),
        kingdom_power=manager.total_power(),
    )


def render_text(manager: KingdomManager, report: KingdomReport) -> list[str]:
    """Plain-text lines in the order the demo prints them."""

    lines = [str(manager.config)]
    lines.extend(str(structure) for structure in manager.structures)
    lines.append(f"Can interact? {report.can_interact}")
    lines.append(f"Battle: {report.battle}")
    lines.append(f"Kingdom Power = {report.kingdom_power}")
    return lines
