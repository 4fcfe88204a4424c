"""Tests for starting station generation."""

import pytest

from solardawn.core.hex import Displacement, Position, norm
from solardawn.core.identity import PlayerId
from solardawn.generation.stations import (
    STARTING_ORBITS,
    STARTING_STATION_NAMES,
    InvalidPlayerCountError,
    generate_starting_stacks,
)

HOME = Position(9, 0)

# documented sums of (offset, velocity) across all players, per player count
ORBIT_SUMS = {
    2: (Displacement(0, 0), Displacement(0, 0)),
    3: (Displacement(0, 0), Displacement(0, 0)),
    4: (Displacement(0, 0), Displacement(0, 0)),
    5: (Displacement(1, 1), Displacement(-1, 0)),
    6: (Displacement(0, 0), Displacement(0, 0)),
}


@pytest.mark.parametrize("num_players", [0, 1, 7, 255, -1])
def test_invalid_player_count(num_players, id_generator):
    """Invalid counts fail before any id is drawn."""
    with pytest.raises(InvalidPlayerCountError):
        generate_starting_stacks(num_players, id_generator, HOME)
    assert id_generator.cursor == 1


def test_invalid_player_count_is_value_error(id_generator):
    with pytest.raises(ValueError, match="expected 2-6 players, got 7"):
        generate_starting_stacks(7, id_generator, HOME)


@pytest.mark.parametrize("num_players", [2, 3, 4, 5, 6])
def test_orbit_table_sums(num_players):
    offsets = Displacement(0, 0)
    velocities = Displacement(0, 0)
    for offset, velocity in STARTING_ORBITS[num_players]:
        offsets = offsets.add(offset)
        velocities = velocities.add(velocity)

    assert (offsets, velocities) == ORBIT_SUMS[num_players]


@pytest.mark.parametrize("num_players", [2, 3, 4, 5, 6])
def test_stations_orbit_home(num_players, id_generator):
    stacks = list(generate_starting_stacks(num_players, id_generator, HOME).values())

    assert len(stacks) == num_players
    assert [s.owner for s in stacks] == [PlayerId(i) for i in range(num_players)]
    assert [s.name for s in stacks] == list(STARTING_STATION_NAMES[:num_players])
    for stack, (offset, velocity) in zip(stacks, STARTING_ORBITS[num_players], strict=True):
        assert stack.position == HOME.add_displacement(offset)
        assert stack.velocity == velocity
        assert norm(offset) in (1, 2)
    assert len({s.position for s in stacks}) == num_players


@pytest.mark.parametrize("num_players", [2, 3, 4, 5, 6])
def test_station_equipment(num_players, id_generator):
    for stack in generate_starting_stacks(num_players, id_generator, HOME).values():
        assert len(stack.factories) == 1
        assert len(stack.habitats) == 1
        assert len(stack.fuel_tanks) == 2
        assert len(stack.cargo_holds) == 3
        assert not (stack.engines or stack.guns or stack.launch_clamps)
        assert not (stack.miners or stack.armour_plates)

        (hab,) = stack.habitats.values()
        assert hab.payload.owner == stack.owner
        assert all(tank.payload.fuel == 20 for tank in stack.fuel_tanks.values())
        assert all(hold.payload.materials == 20 for hold in stack.cargo_holds.values())
        assert all(hold.payload.total() == 20 for hold in stack.cargo_holds.values())
        assert stack.dry_mass() == 50 + 10 + 2 + 3


def test_station_id_order(id_generator):
    """Stack id first, then factory, habitat, fuel tanks, cargo holds."""
    first, second = generate_starting_stacks(2, id_generator, HOME).values()

    assert first.id.value == 1
    assert [c.id.value for c in first.factories.values()] == [2]
    assert [c.id.value for c in first.habitats.values()] == [3]
    assert [c.id.value for c in first.fuel_tanks.values()] == [4, 5]
    assert [c.id.value for c in first.cargo_holds.values()] == [6, 7, 8]
    assert second.id.value == 9
    assert id_generator.cursor == 17
