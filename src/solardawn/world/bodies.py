"""Astronomical body records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from solardawn.core.hex import Position
from solardawn.core.identity import EntityId

MAX_ABUNDANCE = 6


@dataclass(frozen=True, slots=True)
class MajorBody:
    """A gravity-bearing body; cannot be landed on.

    Attributes:
        name: Display name.
        id: Entity id.
        position: Lattice cell the body occupies.
        radius: Body radius in hexes, for rendering and collision.
        colour: Display colour as a ``#rrggbb`` string.
    """

    name: str
    id: EntityId
    position: Position
    radius: float
    colour: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "name": self.name,
            "id": self.id.value,
            "position": {"q": self.position.q, "r": self.position.r},
            "radius": self.radius,
            "colour": self.colour,
        }


@dataclass(frozen=True, slots=True)
class MinorBody:
    """A landable body without gravity, mined for ice and ore.

    Abundances are in [0, 6] and never both zero.
    """

    name: str
    id: EntityId
    position: Position
    radius: float
    ice_abundance: int
    ore_abundance: int

    def __post_init__(self) -> None:
        for label, value in (("ice", self.ice_abundance), ("ore", self.ore_abundance)):
            if not 0 <= value <= MAX_ABUNDANCE:
                raise ValueError(f"{label} abundance must be in [0, {MAX_ABUNDANCE}], got {value}")
        if self.ice_abundance == 0 and self.ore_abundance == 0:
            raise ValueError(f"minor body {self.name!r} has nothing to mine")

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "name": self.name,
            "id": self.id.value,
            "position": {"q": self.position.q, "r": self.position.r},
            "radius": self.radius,
            "ice_abundance": self.ice_abundance,
            "ore_abundance": self.ore_abundance,
        }
