"""Core functionalities: stateless value types and pure operations.

Architecture Note:
    core/ contains immutable handles, lattice math and component records.
    For stateful services, see storage/ (id allocation) and generation/
    (the seeded world generator).
"""

from solardawn.core.identity import MAX_ENTITY_ID, EntityId, PlayerId
from solardawn.core.hex import (
    Displacement,
    Position,
    cube_round,
    distance,
    hex_to_rect,
    norm,
    polar_to_hex,
    rect_to_hex,
)
from solardawn.core.component import (
    CARGO_HOLD_CAPACITY,
    COMPONENT_MASS,
    FUEL_TANK_CAPACITY,
    CargoList,
    ClampState,
    Component,
    ComponentKind,
    Crew,
    FuelLoad,
    cargo_hold,
    factory,
    fuel_tank,
    habitat,
    new_component,
)

__all__ = [
    # Identity
    "EntityId",
    "PlayerId",
    "MAX_ENTITY_ID",
    # Hex
    "Position",
    "Displacement",
    "hex_to_rect",
    "rect_to_hex",
    "cube_round",
    "polar_to_hex",
    "norm",
    "distance",
    # Component
    "Component",
    "ComponentKind",
    "COMPONENT_MASS",
    "FUEL_TANK_CAPACITY",
    "CARGO_HOLD_CAPACITY",
    "FuelLoad",
    "CargoList",
    "ClampState",
    "Crew",
    "new_component",
    "fuel_tank",
    "cargo_hold",
    "habitat",
    "factory",
]
