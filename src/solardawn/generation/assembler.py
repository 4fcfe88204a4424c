"""World assembly: the single entry point that turns a seed into a game.

Usage:
    id_generator = EntityIdGenerator()
    state = generate_game(bytes(32), num_players=2, id_generator=id_generator)
    # persist id_generator.cursor alongside the state
"""

from __future__ import annotations

from loguru import logger

from solardawn.generation.asteroids import generate_minor_bodies
from solardawn.generation.bodies import place_major_bodies
from solardawn.generation.stations import check_player_count, generate_starting_stacks
from solardawn.generation.stream import RandomStream
from solardawn.storage.allocator import EntityIdGenerator
from solardawn.world.state import GameState, Phase


def generate_game(
    seed: bytes,
    num_players: int,
    id_generator: EntityIdGenerator,
) -> GameState:
    """Generate a new game with a random solar system configuration.

    The result is a pure function of the seed, the player count and the
    generator's starting cursor. The generator is left at its next unused
    cursor; the host must keep using it for every entity created in play.

    Args:
        seed: 32 opaque bytes.
        num_players: Number of players, 2-6.
        id_generator: Caller-owned id allocator.

    Returns:
        Snapshot with every body and starting station, no warheads, in the
        economic phase.

    Raises:
        InvalidPlayerCountError: If num_players is outside 2-6.
        ValueError: If the seed is not 32 bytes.
        EntityIdExhaustedError: If the allocator runs out of ids.
    """
    # both checks run before the allocator is touched
    check_player_count(num_players)
    stream = RandomStream(seed)
    first_id = id_generator.cursor

    layout = place_major_bodies(stream, id_generator)
    minor_bodies = generate_minor_bodies(
        stream, id_generator, layout.mars_position, layout.jupiter_angle
    )
    stacks = generate_starting_stacks(num_players, id_generator, layout.home_position)

    logger.info(
        "Generated {}-player game: {} major bodies, {} minor bodies, {} stacks (ids {}..{})",
        num_players,
        len(layout.bodies),
        len(minor_bodies),
        len(stacks),
        first_id,
        id_generator.cursor - 1,
    )

    return GameState(
        major_bodies=layout.bodies,
        minor_bodies=minor_bodies,
        stacks=stacks,
        warheads={},
        phase=Phase.ECONOMIC,
    )
