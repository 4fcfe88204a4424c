"""Axial coordinate engine: lattice value types and hex math."""

from solardawn.core.hex.models import Displacement, Position
from solardawn.core.hex.operations import (
    cube_round,
    distance,
    hex_to_rect,
    norm,
    polar_to_hex,
    rect_to_hex,
)

__all__ = [
    # Models
    "Position",
    "Displacement",
    # Operations
    "hex_to_rect",
    "rect_to_hex",
    "cube_round",
    "polar_to_hex",
    "norm",
    "distance",
]
