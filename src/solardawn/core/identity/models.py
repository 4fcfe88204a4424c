"""Entity and player identity models.

Usage:
    entity = EntityId(42)
    player = PlayerId(0)
"""

from dataclasses import dataclass

MAX_ENTITY_ID = 2**64 - 1
MAX_PLAYER_ID = 2**8 - 1


@dataclass(frozen=True, slots=True, order=True)
class EntityId:
    """Opaque handle for anything in the world: bodies, stacks, components, warheads.

    Ids are unique within the allocator that issued them and are never reused
    while that allocator lives. Zero is never a valid id.
    """

    value: int

    def __post_init__(self) -> None:
        if not 1 <= self.value <= MAX_ENTITY_ID:
            raise ValueError(f"EntityId must be in [1, {MAX_ENTITY_ID}], got {self.value}")

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True, order=True)
class PlayerId:
    """Player seat index, 0..num_players-1."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= MAX_PLAYER_ID:
            raise ValueError(f"PlayerId must be in [0, {MAX_PLAYER_ID}], got {self.value}")

    def __int__(self) -> int:
        return self.value
