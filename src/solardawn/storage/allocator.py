"""Entity id allocation service.

EntityIdGenerator is a stateful service owned by the host. It is passed
explicitly into every step that mints an id so that separate worlds in the
same process never share a counter.
"""

from __future__ import annotations

from collections.abc import Iterator

from solardawn.core.identity import MAX_ENTITY_ID, EntityId


class EntityIdExhaustedError(RuntimeError):
    """Raised when the allocator has wrapped past the maximum id."""


class EntityIdGenerator(Iterator[EntityId]):
    """Allocates monotonically increasing entity ids, starting at 1.

    The counter wraps at 2**64. Once it wraps to 0 the generator is terminal:
    iteration stops and allocate() raises instead of issuing a colliding id.

    Args:
        next_id: Cursor to resume from (default 1). Pass a cursor persisted
            from a previous run to continue its id space.
    """

    def __init__(self, next_id: int = 1):
        """Initialize the generator at a given cursor.

        Args:
            next_id: Next id to issue; 0 restores an exhausted generator.

        Raises:
            ValueError: If next_id is outside [0, 2**64 - 1].
        """
        if not 0 <= next_id <= MAX_ENTITY_ID:
            raise ValueError(f"next_id must be in [0, {MAX_ENTITY_ID}], got {next_id}")
        self._next_id = next_id

    @property
    def cursor(self) -> int:
        """Next value to be issued (0 once exhausted)."""
        return self._next_id

    @property
    def exhausted(self) -> bool:
        return self._next_id == 0

    def __iter__(self) -> EntityIdGenerator:
        return self

    def __next__(self) -> EntityId:
        if self._next_id == 0:
            raise StopIteration
        generated = EntityId(self._next_id)
        self._next_id = (self._next_id + 1) & MAX_ENTITY_ID
        return generated

    def allocate(self) -> EntityId:
        """Allocate a fresh entity id.

        Returns:
            Newly allocated EntityId.

        Raises:
            EntityIdExhaustedError: If the id space is used up.
        """
        try:
            return next(self)
        except StopIteration:
            raise EntityIdExhaustedError("entity id space exhausted") from None

    def __repr__(self) -> str:
        return f"EntityIdGenerator(next_id={self._next_id})"
