"""Minor body field: Martian moons, the main belt and Jupiter's co-orbital clusters.

Generation order (fixed, part of the reproducibility contract):

1. Phobos and Deimos at fixed offsets from Mars. No draws.
2. Main belt: every lattice cell at hex distance 29-36 from Sol draws an ice
   and an ore abundance; cells where both are zero stay empty.
3. Trojans, Greeks and Hildas: for each orbital distance and each whole-degree
   step in [-15, 15], draw ice and ore, then project the point at
   ``jupiter_angle + step + offset`` onto the lattice. Candidates with nothing
   to mine, or landing on a cell that already holds a minor body, are dropped.

Dropped candidates are never re-rolled.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from loguru import logger

from solardawn.core.hex import Displacement, Position, norm, polar_to_hex
from solardawn.core.identity import EntityId
from solardawn.generation.stream import AsteroidNameSequence, RandomStream
from solardawn.storage.allocator import EntityIdGenerator
from solardawn.world.bodies import MinorBody

ASTEROID_RADIUS = 0.2
MOONLET_RADIUS = 0.2

BELT_OUTER_RADIUS = 36
BELT_INNER_RADIUS = 29

CLUSTER_STEP_DEGREES = 15


@dataclass(frozen=True, slots=True)
class CoOrbitalCluster:
    """An angular band of asteroids aligned to Jupiter.

    Attributes:
        name: Cluster name, for logging.
        distances: Orbital distances in hexes, inclusive range.
        offset: Angle relative to Jupiter, in radians.
    """

    name: str
    distances: range
    offset: float


TROJANS = CoOrbitalCluster("trojans", range(38, 43), math.pi / 3.0)
GREEKS = CoOrbitalCluster("greeks", range(38, 43), -math.pi / 3.0)
HILDAS = CoOrbitalCluster("hildas", range(32, 38), math.pi)

CO_ORBITAL_CLUSTERS = (TROJANS, GREEKS, HILDAS)


class MinorBodyField:
    """Accumulates minor bodies and tracks which cells are taken.

    Args:
        id_generator: Allocator every emitted body draws its id from.
    """

    def __init__(self, id_generator: EntityIdGenerator):
        self._id_generator = id_generator
        self._names = AsteroidNameSequence()
        self.bodies: dict[EntityId, MinorBody] = {}
        self._occupied: set[Position] = set()

    def is_occupied(self, position: Position) -> bool:
        return position in self._occupied

    def add(
        self,
        name: str,
        position: Position,
        radius: float,
        ice_abundance: int,
        ore_abundance: int,
    ) -> MinorBody:
        body = MinorBody(
            name=name,
            id=self._id_generator.allocate(),
            position=position,
            radius=radius,
            ice_abundance=ice_abundance,
            ore_abundance=ore_abundance,
        )
        self.bodies[body.id] = body
        self._occupied.add(position)
        return body

    def add_asteroid(self, position: Position, ice_abundance: int, ore_abundance: int) -> MinorBody:
        """Add an asteroid named from the designation sequence."""
        return self.add(
            next(self._names), position, ASTEROID_RADIUS, ice_abundance, ore_abundance
        )


def belt_cells(radius: int = BELT_OUTER_RADIUS) -> list[Position]:
    """Every lattice cell within `radius` of the origin, q-major then r."""
    return [
        Position(q, r)
        for q in range(-radius, radius + 1)
        for r in range(max(-radius, -q - radius), min(radius, -q + radius) + 1)
    ]


def place_martian_moons(field: MinorBodyField, mars_position: Position) -> None:
    field.add("Phobos", mars_position.add_displacement(Displacement(0, -2)), MOONLET_RADIUS, 1, 0)
    field.add("Deimos", mars_position.add_displacement(Displacement(3, 0)), MOONLET_RADIUS, 1, 0)


def place_main_belt(field: MinorBodyField, stream: RandomStream) -> int:
    """Populate the annulus [29, 36] around Sol.

    Returns:
        Number of asteroids placed.
    """
    placed = 0
    for cell in belt_cells():
        if norm(cell) < BELT_INNER_RADIUS:
            continue
        ice_abundance = stream.sample_abundance()
        ore_abundance = stream.sample_abundance()
        if ice_abundance == 0 and ore_abundance == 0:
            continue
        field.add_asteroid(cell, ice_abundance, ore_abundance)
        placed += 1
    return placed


def place_co_orbital_cluster(
    field: MinorBodyField,
    stream: RandomStream,
    jupiter_angle: float,
    cluster: CoOrbitalCluster,
) -> int:
    """Populate one co-orbital cluster.

    Returns:
        Number of asteroids placed.
    """
    placed = 0
    collisions = 0
    for distance in cluster.distances:
        for step in range(-CLUSTER_STEP_DEGREES, CLUSTER_STEP_DEGREES + 1):
            ice_abundance = stream.sample_abundance()
            ore_abundance = stream.sample_abundance()
            if ice_abundance == 0 and ore_abundance == 0:
                continue

            angle_delta = step / 180.0 * math.pi
            angle = jupiter_angle + angle_delta + cluster.offset
            position = polar_to_hex(float(distance), angle)
            if field.is_occupied(position):
                collisions += 1
                continue

            field.add_asteroid(position, ice_abundance, ore_abundance)
            placed += 1

    logger.debug(
        "Placed {} {} ({} dropped on occupied cells)", placed, cluster.name, collisions
    )
    return placed


def generate_minor_bodies(
    stream: RandomStream,
    id_generator: EntityIdGenerator,
    mars_position: Position,
    jupiter_angle: float,
) -> dict[EntityId, MinorBody]:
    """Generate every minor body in the system, in the fixed draw order.

    Args:
        stream: Random stream, already advanced past the major body angles.
        id_generator: Allocator for body ids.
        mars_position: Anchor for Phobos and Deimos.
        jupiter_angle: Anchor angle for the co-orbital clusters.

    Returns:
        Minor bodies keyed by id, in placement order.
    """
    field = MinorBodyField(id_generator)
    place_martian_moons(field, mars_position)
    belt = place_main_belt(field, stream)
    logger.debug("Placed {} main belt asteroids", belt)
    for cluster in CO_ORBITAL_CLUSTERS:
        place_co_orbital_cluster(field, stream, jupiter_angle, cluster)
    return field.bodies
