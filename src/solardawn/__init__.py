"""Solar Dawn: world model and seeded solar-system generator.

Both the server and the client build the initial game state from the same seed,
so generation is fully deterministic.

Usage:
    from solardawn import EntityIdGenerator, generate_game

    id_generator = EntityIdGenerator()
    state = generate_game(seed, num_players=4, id_generator=id_generator)

    for stack in state.stacks.values():
        print(stack.name, stack.position, stack.fuel())
"""

__version__ = "0.1.0"

# Core primitives
from solardawn.core import (
    COMPONENT_MASS,
    CargoList,
    Component,
    ComponentKind,
    Displacement,
    EntityId,
    PlayerId,
    Position,
    distance,
    hex_to_rect,
    norm,
    rect_to_hex,
)

# Generation
from solardawn.generation import (
    InvalidPlayerCountError,
    RandomStream,
    generate_game,
)

# Storage
from solardawn.storage import (
    EntityIdExhaustedError,
    EntityIdGenerator,
)

# World records
from solardawn.world import (
    GameState,
    MajorBody,
    MinorBody,
    Phase,
    Stack,
    Warhead,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "PlayerId",
    "Position",
    "Displacement",
    "hex_to_rect",
    "rect_to_hex",
    "norm",
    "distance",
    "Component",
    "ComponentKind",
    "COMPONENT_MASS",
    "CargoList",
    # Storage
    "EntityIdGenerator",
    "EntityIdExhaustedError",
    # World
    "GameState",
    "Phase",
    "MajorBody",
    "MinorBody",
    "Stack",
    "Warhead",
    # Generation
    "generate_game",
    "RandomStream",
    "InvalidPlayerCountError",
]
