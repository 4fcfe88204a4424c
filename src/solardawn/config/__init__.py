"""Configuration module using Pydantic Settings.

Provides typed host-side defaults for world generation with environment
variable support.

Usage:
    from solardawn.config import GenerationSettings

    settings = GenerationSettings(num_players=3)
"""

from solardawn.config.settings import GenerationSettings

__all__ = [
    "GenerationSettings",
]
