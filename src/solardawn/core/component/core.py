"""Component construction.

Every constructor mints the component's id from the caller's generator, so ids
stay unique across a whole generation run.

Usage:
    tank = fuel_tank(id_generator, fuel=20)
    hold = cargo_hold(id_generator, CargoList(materials=20))
    engine = new_component(ComponentKind.ENGINE, id_generator)
"""

from __future__ import annotations

from solardawn.core.component.models import (
    CargoList,
    ClampState,
    Component,
    ComponentKind,
    Crew,
    FuelLoad,
    Payload,
)
from solardawn.core.identity import PlayerId
from solardawn.storage.allocator import EntityIdGenerator


def _default_payload(kind: ComponentKind) -> Payload:
    match kind:
        case ComponentKind.FUEL_TANK:
            return FuelLoad()
        case ComponentKind.CARGO_HOLD:
            return CargoList()
        case ComponentKind.LAUNCH_CLAMP:
            return ClampState()
        case ComponentKind.HABITAT:
            raise ValueError("a habitat needs an owner; use habitat()")
        case _:
            return None


def new_component(
    kind: ComponentKind,
    id_generator: EntityIdGenerator,
    payload: Payload = None,
) -> Component:
    """Create an undamaged component of the given kind.

    Args:
        kind: Component kind.
        id_generator: Allocator the component's id is drawn from.
        payload: Kind-specific state; a default empty payload is used when omitted.

    Returns:
        The new component.

    Raises:
        ValueError: If the payload does not fit the kind.
        EntityIdExhaustedError: If the id space is used up.
    """
    if payload is None:
        payload = _default_payload(kind)
    return Component(id=id_generator.allocate(), kind=kind, payload=payload)


def fuel_tank(id_generator: EntityIdGenerator, fuel: int = 0) -> Component:
    return new_component(ComponentKind.FUEL_TANK, id_generator, FuelLoad(fuel))


def cargo_hold(id_generator: EntityIdGenerator, inventory: CargoList | None = None) -> Component:
    return new_component(ComponentKind.CARGO_HOLD, id_generator, inventory or CargoList())


def habitat(id_generator: EntityIdGenerator, owner: PlayerId) -> Component:
    return new_component(ComponentKind.HABITAT, id_generator, Crew(owner))


def factory(id_generator: EntityIdGenerator) -> Component:
    return new_component(ComponentKind.FACTORY, id_generator)
