"""Configuration settings using Pydantic Settings.

Provides typed host-side defaults for world generation. The generator itself
never reads configuration; hosts resolve settings and pass explicit values.

Usage:
    from solardawn.config import GenerationSettings

    # Load from environment variables (SOLARDAWN_*)
    settings = GenerationSettings()

    # Or override with explicit values
    settings = GenerationSettings(num_players=4)
    state = generate_game(settings.seed_bytes(), settings.num_players, settings.id_generator())
"""

from __future__ import annotations

import secrets

try:
    from pydantic import Field, field_validator
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install solardawn[config]"
    ) from e

from solardawn.core.identity import MAX_ENTITY_ID
from solardawn.generation.stations import MAX_PLAYERS, MIN_PLAYERS
from solardawn.generation.stream import SEED_SIZE
from solardawn.storage.allocator import EntityIdGenerator


class GenerationSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for new-game generation.

    Attributes:
        seed: Hex-encoded 32-byte seed; a fresh random seed is drawn when unset.
        num_players: Number of players (2-6).
        first_entity_id: Cursor the id allocator starts from.

    Environment Variables:
        SOLARDAWN_SEED
        SOLARDAWN_NUM_PLAYERS
        SOLARDAWN_FIRST_ENTITY_ID
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLARDAWN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    seed: str | None = None
    num_players: int = Field(default=2, ge=MIN_PLAYERS, le=MAX_PLAYERS)
    first_entity_id: int = Field(default=1, ge=1, le=MAX_ENTITY_ID)

    @field_validator("seed")
    @classmethod
    def _check_seed(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            raw = bytes.fromhex(value)
        except ValueError as e:
            raise ValueError("seed must be hex-encoded") from e
        if len(raw) != SEED_SIZE:
            raise ValueError(f"seed must encode {SEED_SIZE} bytes, got {len(raw)}")
        return value.lower()

    def seed_bytes(self) -> bytes:
        """Configured seed, or 32 fresh random bytes when none is set."""
        if self.seed is None:
            return secrets.token_bytes(SEED_SIZE)
        return bytes.fromhex(self.seed)

    def id_generator(self) -> EntityIdGenerator:
        return EntityIdGenerator(self.first_entity_id)
