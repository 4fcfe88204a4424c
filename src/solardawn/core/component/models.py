"""Stack component models: kinds, payloads and mass table.

All component kinds share one record shape (id, damaged flag, mass). The kind
set is closed; type-specific data lives in a per-kind payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias
from enum import Enum, auto

from solardawn.core.identity import EntityId, PlayerId

FUEL_TANK_CAPACITY = 20
CARGO_HOLD_CAPACITY = 20


class ComponentKind(Enum):
    """Closed set of component kinds a stack may carry."""

    FUEL_TANK = auto()  # holds up to 20 fuel
    CARGO_HOLD = auto()  # holds up to 20 points of non-fuel items
    ENGINE = auto()
    GUN = auto()  # direct fire, combat phase
    LAUNCH_CLAMP = auto()  # holds one warhead for the ordnance phase
    HABITAT = auto()  # source of control; repairs one item per economic phase
    MINER = auto()
    FACTORY = auto()
    ARMOUR_PLATE = auto()  # always damaged first


COMPONENT_MASS: dict[ComponentKind, int] = {
    ComponentKind.FUEL_TANK: 1,
    ComponentKind.CARGO_HOLD: 1,
    ComponentKind.ENGINE: 5,
    ComponentKind.GUN: 5,
    ComponentKind.LAUNCH_CLAMP: 1,
    ComponentKind.HABITAT: 10,
    ComponentKind.MINER: 10,
    ComponentKind.FACTORY: 50,
    ComponentKind.ARMOUR_PLATE: 5,
}


@dataclass(slots=True)
class FuelLoad:
    """Fuel tank contents."""

    fuel: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.fuel <= FUEL_TANK_CAPACITY:
            raise ValueError(f"fuel must be in [0, {FUEL_TANK_CAPACITY}], got {self.fuel}")


@dataclass(slots=True)
class CargoList:
    """Items held in a cargo hold.

    Also used as a plain tally when summing over several holds; the per-hold
    capacity is enforced by the owning Component.
    """

    ice: int = 0
    ore: int = 0
    materials: int = 0
    warheads: int = 0

    def __post_init__(self) -> None:
        if min(self.ice, self.ore, self.materials, self.warheads) < 0:
            raise ValueError("cargo amounts must be non-negative")

    def total(self) -> int:
        return self.ice + self.ore + self.materials + self.warheads

    def plus(self, other: CargoList) -> CargoList:
        return CargoList(
            ice=self.ice + other.ice,
            ore=self.ore + other.ore,
            materials=self.materials + other.materials,
            warheads=self.warheads + other.warheads,
        )


@dataclass(slots=True)
class ClampState:
    """Launch clamp state."""

    loaded: bool = False


@dataclass(slots=True)
class Crew:
    """Habitat state; the owner controls every stack holding one of their habitats."""

    owner: PlayerId


Payload: TypeAlias = FuelLoad | CargoList | ClampState | Crew | None

_PAYLOAD_TYPES: dict[ComponentKind, type | None] = {
    ComponentKind.FUEL_TANK: FuelLoad,
    ComponentKind.CARGO_HOLD: CargoList,
    ComponentKind.ENGINE: None,
    ComponentKind.GUN: None,
    ComponentKind.LAUNCH_CLAMP: ClampState,
    ComponentKind.HABITAT: Crew,
    ComponentKind.MINER: None,
    ComponentKind.FACTORY: None,
    ComponentKind.ARMOUR_PLATE: None,
}


@dataclass(slots=True)
class Component:
    """A single stack component.

    Attributes:
        id: Entity id of this component.
        kind: Which of the closed component kinds this is.
        damaged: Whether the component is currently damaged.
        payload: Kind-specific state; None for kinds without any.
    """

    id: EntityId
    kind: ComponentKind
    damaged: bool = False
    payload: Payload = None

    def __post_init__(self) -> None:
        expected = _PAYLOAD_TYPES[self.kind]
        if expected is None:
            if self.payload is not None:
                raise ValueError(f"{self.kind.name} carries no payload")
        elif not isinstance(self.payload, expected):
            raise ValueError(
                f"{self.kind.name} requires a {expected.__name__} payload, "
                f"got {type(self.payload).__name__}"
            )
        if isinstance(self.payload, CargoList) and self.payload.total() > CARGO_HOLD_CAPACITY:
            raise ValueError(
                f"cargo total {self.payload.total()} exceeds hold capacity {CARGO_HOLD_CAPACITY}"
            )

    @property
    def mass(self) -> int:
        return COMPONENT_MASS[self.kind]
