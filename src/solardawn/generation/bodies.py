"""Major body placement: Sol, the inner planets, Terra and Luna, Mars, Jupiter.

1 hex = 1/16 AU. Orbital distances and body radii are fixed; only the angles
of Mercury, Venus, Mars and Jupiter are drawn from the stream. Terra sits at
3 o'clock in every game.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from solardawn.core.hex import Displacement, Position, polar_to_hex, rect_to_hex
from solardawn.core.identity import EntityId
from solardawn.generation.stream import RandomStream
from solardawn.storage.allocator import EntityIdGenerator
from solardawn.world.bodies import MajorBody

MERCURY_ORBIT = 6.0
VENUS_ORBIT = 12.0
TERRA_ORBIT = 16.0
MARS_ORBIT = 24.0
JUPITER_ORBIT = 40.0

LUNA_OFFSET = Displacement(3, 2)
JOVIAN_MOONS: tuple[tuple[str, Displacement, float, str], ...] = (
    ("Europa", Displacement(0, 3), 0.3, "#a0a0ff"),
    ("Callisto", Displacement(-4, 0), 0.3, "#404040"),
    ("Ganymede", Displacement(4, -2), 0.3, "#404040"),
)


@dataclass(slots=True)
class MajorBodyLayout:
    """Placed major bodies plus the anchors later generation steps need.

    Attributes:
        bodies: Bodies in placement order, keyed by id.
        home_position: Terra's cell; starting stations orbit it.
        mars_position: Mars's cell; Phobos and Deimos are offset from it.
        jupiter_angle: Jupiter's sampled angle; co-orbital clusters align to it.
    """

    home_position: Position
    mars_position: Position
    jupiter_angle: float
    bodies: dict[EntityId, MajorBody] = field(default_factory=dict)


def _body(
    name: str,
    id_generator: EntityIdGenerator,
    position: Position,
    radius: float,
    colour: str,
) -> MajorBody:
    return MajorBody(
        name=name,
        id=id_generator.allocate(),
        position=position,
        radius=radius,
        colour=colour,
    )


def place_major_bodies(stream: RandomStream, id_generator: EntityIdGenerator) -> MajorBodyLayout:
    """Place all major bodies in their fixed order.

    Args:
        stream: Random stream; exactly four angles are drawn.
        id_generator: Allocator; exactly ten ids are drawn.

    Returns:
        Layout holding the bodies and the anchor positions/angle.
    """
    bodies: list[MajorBody] = []

    bodies.append(_body("Sol", id_generator, Position(0, 0), 0.8, "#ffff00"))

    mercury_angle = stream.sample_angle()
    bodies.append(
        _body("Mercury", id_generator, polar_to_hex(MERCURY_ORBIT, mercury_angle), 0.3, "#404040")
    )

    venus_angle = stream.sample_angle()
    bodies.append(
        _body("Venus", id_generator, polar_to_hex(VENUS_ORBIT, venus_angle), 0.6, "#ffc000")
    )

    terra = _body("Terra", id_generator, rect_to_hex(TERRA_ORBIT, 0.0), 0.6, "#0000ff")
    luna = _body("Luna", id_generator, terra.position.add_displacement(LUNA_OFFSET), 0.4, "#808080")
    bodies.extend((terra, luna))

    mars_angle = stream.sample_angle()
    mars = _body("Mars", id_generator, polar_to_hex(MARS_ORBIT, mars_angle), 0.5, "#ff0000")
    bodies.append(mars)

    jupiter_angle = stream.sample_angle()
    jupiter = _body(
        "Jupiter", id_generator, polar_to_hex(JUPITER_ORBIT, jupiter_angle), 0.8, "#ffc000"
    )
    bodies.append(jupiter)
    for name, offset, radius, colour in JOVIAN_MOONS:
        bodies.append(
            _body(name, id_generator, jupiter.position.add_displacement(offset), radius, colour)
        )

    return MajorBodyLayout(
        home_position=terra.position,
        mars_position=mars.position,
        jupiter_angle=jupiter_angle,
        bodies={body.id: body for body in bodies},
    )
