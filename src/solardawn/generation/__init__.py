"""Seeded solar-system generation.

Architecture Note:
    generation/ threads one RandomStream and one caller-owned
    EntityIdGenerator through body placement, the minor body field and the
    starting stations. Call order is part of the output contract.
"""

from solardawn.generation.assembler import generate_game
from solardawn.generation.asteroids import (
    CO_ORBITAL_CLUSTERS,
    GREEKS,
    HILDAS,
    TROJANS,
    CoOrbitalCluster,
    MinorBodyField,
    generate_minor_bodies,
)
from solardawn.generation.bodies import MajorBodyLayout, place_major_bodies
from solardawn.generation.stations import (
    STARTING_ORBITS,
    STARTING_STATION_NAMES,
    InvalidPlayerCountError,
    generate_starting_stacks,
)
from solardawn.generation.stream import SEED_SIZE, AsteroidNameSequence, RandomStream

__all__ = [
    "generate_game",
    # Stream
    "RandomStream",
    "AsteroidNameSequence",
    "SEED_SIZE",
    # Bodies
    "place_major_bodies",
    "MajorBodyLayout",
    # Asteroids
    "generate_minor_bodies",
    "MinorBodyField",
    "CoOrbitalCluster",
    "CO_ORBITAL_CLUSTERS",
    "TROJANS",
    "GREEKS",
    "HILDAS",
    # Stations
    "generate_starting_stacks",
    "InvalidPlayerCountError",
    "STARTING_ORBITS",
    "STARTING_STATION_NAMES",
]
