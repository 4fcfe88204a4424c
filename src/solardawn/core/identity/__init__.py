"""Identity functionality: entity and player handles."""

from solardawn.core.identity.models import MAX_ENTITY_ID, EntityId, PlayerId

__all__ = [
    "EntityId",
    "PlayerId",
    "MAX_ENTITY_ID",
]
