"""Starting stations for 2-6 players.

Stations orbit the home world at hand-authored (offset, velocity) pairs that are
rotationally symmetric for each player count.
"""

from __future__ import annotations

from solardawn.core.component import CargoList, cargo_hold, factory, fuel_tank, habitat
from solardawn.core.hex import Displacement, Position
from solardawn.core.identity import EntityId, PlayerId
from solardawn.storage.allocator import EntityIdGenerator
from solardawn.world.stack import Stack

MIN_PLAYERS = 2
MAX_PLAYERS = 6

STARTING_STATION_NAMES = (
    "Space Station Freedom",
    "Mir",
    "Tiangong",
    "Bharatiya Antariksha Station",
    "Tokyo Gateway",
    "Berlin Highport",
)

STARTING_FUEL_TANKS = 2
STARTING_FUEL = 20
STARTING_CARGO_HOLDS = 3
STARTING_MATERIALS = 20


def _orbit(offset: tuple[int, int], velocity: tuple[int, int]) -> tuple[Displacement, Displacement]:
    return Displacement(*offset), Displacement(*velocity)


STARTING_ORBITS: dict[int, tuple[tuple[Displacement, Displacement], ...]] = {
    2: (
        _orbit((0, -1), (1, 1)),
        _orbit((0, 1), (-1, -1)),
    ),
    3: (
        _orbit((0, -1), (1, 1)),
        _orbit((1, 1), (-1, 0)),
        _orbit((-1, 0), (0, -1)),
    ),
    4: (
        _orbit((0, -1), (1, 1)),
        _orbit((1, 0), (0, 1)),
        _orbit((0, 1), (-1, -1)),
        _orbit((-1, 0), (0, -1)),
    ),
    5: (
        _orbit((0, -1), (1, 1)),
        _orbit((1, 0), (0, 1)),
        _orbit((1, 1), (-1, 0)),
        _orbit((0, 1), (-1, -1)),
        _orbit((-1, 0), (0, -1)),
    ),
    6: (
        _orbit((0, -1), (1, 1)),
        _orbit((1, 0), (0, 1)),
        _orbit((1, 1), (-1, 0)),
        _orbit((0, 1), (-1, -1)),
        _orbit((-1, 0), (0, -1)),
        _orbit((-1, -1), (1, 0)),
    ),
}


class InvalidPlayerCountError(ValueError):
    """Raised when a game is requested for fewer than 2 or more than 6 players."""


def check_player_count(num_players: int) -> None:
    """Raise InvalidPlayerCountError unless 2 <= num_players <= 6."""
    if num_players not in STARTING_ORBITS:
        raise InvalidPlayerCountError(
            f"expected {MIN_PLAYERS}-{MAX_PLAYERS} players, got {num_players}"
        )


def build_starting_station(
    player: PlayerId,
    id_generator: EntityIdGenerator,
    position: Position,
    velocity: Displacement,
) -> Stack:
    """Build one player's station with its starting equipment.

    Id order: the stack, the factory, the habitat, then fuel tanks and cargo holds.
    """
    station = Stack.new(
        STARTING_STATION_NAMES[player.value], id_generator, position, velocity, player
    )
    station.add_component(factory(id_generator))
    station.add_component(habitat(id_generator, player))
    for _ in range(STARTING_FUEL_TANKS):
        station.add_component(fuel_tank(id_generator, fuel=STARTING_FUEL))
    for _ in range(STARTING_CARGO_HOLDS):
        station.add_component(cargo_hold(id_generator, CargoList(materials=STARTING_MATERIALS)))
    return station


def generate_starting_stacks(
    num_players: int,
    id_generator: EntityIdGenerator,
    home_position: Position,
) -> dict[EntityId, Stack]:
    """Create one starting station per player around the home world.

    Args:
        num_players: Number of players, 2-6.
        id_generator: Allocator for stack and component ids.
        home_position: Home world cell the stations orbit.

    Returns:
        Stations keyed by stack id, in player order.

    Raises:
        InvalidPlayerCountError: If num_players is outside 2-6. Raised before
            any id is drawn.
    """
    check_player_count(num_players)
    stacks: dict[EntityId, Stack] = {}
    for index, (offset, velocity) in enumerate(STARTING_ORBITS[num_players]):
        station = build_starting_station(
            PlayerId(index),
            id_generator,
            home_position.add_displacement(offset),
            velocity,
        )
        stacks[station.id] = station
    return stacks
