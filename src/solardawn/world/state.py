"""Game state snapshot and turn phases.

A turn is split into four phases. Orders are collected from all players before
each phase and resolved simultaneously:

1. Economic: production, cargo/fuel/stack transfer, reload and repair.
2. Ordnance: warhead launching and arming.
3. Combat: direct-fire weapons.
4. Movement: burns and ballistic motion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from solardawn.core.identity import EntityId
from solardawn.world.bodies import MajorBody, MinorBody
from solardawn.world.stack import Stack, Warhead


class Phase(Enum):
    """Current phase within the turn."""

    ECONOMIC = "economic"
    ORDNANCE = "ordnance"
    COMBAT = "combat"
    MOVEMENT = "movement"

    def next(self) -> Phase:
        """Phase that follows this one; movement wraps to the next turn's economic phase."""
        phases = list(Phase)
        return phases[(phases.index(self) + 1) % len(phases)]


@dataclass(slots=True)
class GameState:
    """Complete world snapshot.

    Every collection is keyed by entity id and kept in allocation order, so two
    snapshots built from the same seed compare equal element by element.
    """

    major_bodies: dict[EntityId, MajorBody] = field(default_factory=dict)
    minor_bodies: dict[EntityId, MinorBody] = field(default_factory=dict)
    stacks: dict[EntityId, Stack] = field(default_factory=dict)
    warheads: dict[EntityId, Warhead] = field(default_factory=dict)
    phase: Phase = Phase.ECONOMIC

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary of plain records."""
        return {
            "major_bodies": [body.to_dict() for body in self.major_bodies.values()],
            "minor_bodies": [body.to_dict() for body in self.minor_bodies.values()],
            "stacks": [stack.to_dict() for stack in self.stacks.values()],
            "warheads": [warhead.to_dict() for warhead in self.warheads.values()],
            "phase": self.phase.value,
        }
