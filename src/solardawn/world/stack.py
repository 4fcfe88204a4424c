"""Player-controlled stacks and in-flight warheads.

A stack is anything that is neither an astronomical body nor a warhead: ships,
stations, and anything else assembled from components.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from solardawn.core.component import CargoList, ClampState, Component, ComponentKind, Crew, FuelLoad
from solardawn.core.hex import Displacement, Position
from solardawn.core.identity import EntityId, PlayerId
from solardawn.storage.allocator import EntityIdGenerator

_COLLECTIONS: dict[ComponentKind, str] = {
    ComponentKind.FUEL_TANK: "fuel_tanks",
    ComponentKind.CARGO_HOLD: "cargo_holds",
    ComponentKind.ENGINE: "engines",
    ComponentKind.GUN: "guns",
    ComponentKind.LAUNCH_CLAMP: "launch_clamps",
    ComponentKind.HABITAT: "habitats",
    ComponentKind.MINER: "miners",
    ComponentKind.FACTORY: "factories",
    ComponentKind.ARMOUR_PLATE: "armour_plates",
}


def _payload_dict(component: Component) -> dict[str, Any] | None:
    payload = component.payload
    match payload:
        case FuelLoad(fuel=fuel):
            return {"fuel": fuel}
        case CargoList():
            return {
                "ice": payload.ice,
                "ore": payload.ore,
                "materials": payload.materials,
                "warheads": payload.warheads,
            }
        case ClampState(loaded=loaded):
            return {"loaded": loaded}
        case Crew(owner=owner):
            return {"owner": owner.value}
        case _:
            return None


@dataclass(slots=True)
class Stack:
    """Mutable aggregate of components sharing one position and velocity.

    Each component collection is keyed by the component's own EntityId and only
    holds components of the matching kind.
    """

    name: str
    id: EntityId
    position: Position
    velocity: Displacement
    owner: PlayerId

    fuel_tanks: dict[EntityId, Component] = field(default_factory=dict)
    cargo_holds: dict[EntityId, Component] = field(default_factory=dict)
    engines: dict[EntityId, Component] = field(default_factory=dict)
    guns: dict[EntityId, Component] = field(default_factory=dict)
    launch_clamps: dict[EntityId, Component] = field(default_factory=dict)
    habitats: dict[EntityId, Component] = field(default_factory=dict)
    miners: dict[EntityId, Component] = field(default_factory=dict)
    factories: dict[EntityId, Component] = field(default_factory=dict)
    armour_plates: dict[EntityId, Component] = field(default_factory=dict)

    @classmethod
    def new(
        cls,
        name: str,
        id_generator: EntityIdGenerator,
        position: Position,
        velocity: Displacement,
        owner: PlayerId,
    ) -> Stack:
        """Create an empty stack, drawing its id from the generator."""
        return cls(
            name=name,
            id=id_generator.allocate(),
            position=position,
            velocity=velocity,
            owner=owner,
        )

    def components(self, kind: ComponentKind) -> dict[EntityId, Component]:
        """Collection holding components of the given kind."""
        return getattr(self, _COLLECTIONS[kind])

    def all_components(self) -> list[Component]:
        return [c for kind in ComponentKind for c in self.components(kind).values()]

    def add_component(self, component: Component) -> None:
        """Insert a component into the collection for its kind.

        Raises:
            ValueError: If a component with the same id is already on this stack.
        """
        if any(component.id in self.components(kind) for kind in ComponentKind):
            raise ValueError(f"component {component.id} already on stack {self.name!r}")
        self.components(component.kind)[component.id] = component

    def dry_mass(self) -> int:
        """Sum of component masses, excluding fuel and cargo."""
        return sum(c.mass for c in self.all_components())

    def fuel(self) -> int:
        return sum(tank.payload.fuel for tank in self.fuel_tanks.values())

    def cargo(self) -> CargoList:
        """Total contents of every cargo hold on the stack."""
        total = CargoList()
        for hold in self.cargo_holds.values():
            total = total.plus(hold.payload)
        return total

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "name": self.name,
            "id": self.id.value,
            "position": {"q": self.position.q, "r": self.position.r},
            "velocity": {"q": self.velocity.q, "r": self.velocity.r},
            "owner": self.owner.value,
        }
        for kind, attribute in _COLLECTIONS.items():
            result[attribute] = [
                {"id": c.id.value, "damaged": c.damaged, "payload": _payload_dict(c)}
                for c in self.components(kind).values()
            ]
        return result


@dataclass(slots=True)
class Warhead:
    """A launched warhead; deals 5 points of damage on impact."""

    id: EntityId
    position: Position
    velocity: Displacement
    owner: PlayerId

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "id": self.id.value,
            "position": {"q": self.position.q, "r": self.position.r},
            "velocity": {"q": self.velocity.q, "r": self.velocity.r},
            "owner": self.owner.value,
        }
