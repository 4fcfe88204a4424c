"""Stateful id allocation."""

from solardawn.storage.allocator import EntityIdExhaustedError, EntityIdGenerator

__all__ = [
    "EntityIdGenerator",
    "EntityIdExhaustedError",
]
