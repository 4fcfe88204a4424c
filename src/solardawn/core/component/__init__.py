"""Component functionality: kinds, payloads, mass table and constructors."""

from solardawn.core.component.core import (
    cargo_hold,
    factory,
    fuel_tank,
    habitat,
    new_component,
)
from solardawn.core.component.models import (
    CARGO_HOLD_CAPACITY,
    COMPONENT_MASS,
    FUEL_TANK_CAPACITY,
    CargoList,
    ClampState,
    Component,
    ComponentKind,
    Crew,
    FuelLoad,
    Payload,
)

__all__ = [
    # Models
    "Component",
    "ComponentKind",
    "COMPONENT_MASS",
    "FUEL_TANK_CAPACITY",
    "CARGO_HOLD_CAPACITY",
    "Payload",
    "FuelLoad",
    "CargoList",
    "ClampState",
    "Crew",
    # Core
    "new_component",
    "fuel_tank",
    "cargo_hold",
    "habitat",
    "factory",
]
