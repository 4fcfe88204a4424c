"""Hex/Cartesian conversion and grid distance.

Pure functions over the axial lattice. Cartesian coordinates only exist as an
intermediate for angle-based placement; every result snaps back to a lattice
point through cube rounding.
"""

from __future__ import annotations

import math

from solardawn.core.hex.models import Displacement, Position

SQRT_3 = math.sqrt(3.0)


def _round_half_away(value: float) -> int:
    """Round to nearest integer, ties away from zero (not to even)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def hex_to_rect(q: int, r: int) -> tuple[float, float]:
    """Convert an axial coordinate to Cartesian (x, y)."""
    return SQRT_3 * q + SQRT_3 / 2.0 * r, 3.0 / 2.0 * r


def cube_round(frac_q: float, frac_r: float, frac_s: float) -> Position:
    """Snap fractional cube coordinates to the nearest lattice point.

    The axis with the largest rounding residual is recomputed from the other
    two so that q + r + s == 0 holds.
    """
    q = _round_half_away(frac_q)
    r = _round_half_away(frac_r)
    s = _round_half_away(frac_s)

    q_diff = abs(q - frac_q)
    r_diff = abs(r - frac_r)
    s_diff = abs(s - frac_s)

    if q_diff > r_diff and q_diff > s_diff:
        q = -r - s
    elif r_diff > s_diff:
        r = -q - s

    return Position(q, r)


def rect_to_hex(x: float, y: float) -> Position:
    """Convert a Cartesian point to the lattice cell containing it."""
    frac_q = SQRT_3 / 3.0 * x - y / 3.0
    frac_r = 2.0 * y / 3.0
    return cube_round(frac_q, frac_r, -frac_q - frac_r)


def polar_to_hex(radius: float, angle: float) -> Position:
    """Lattice cell at `radius` hexes from the origin along `angle` radians."""
    return rect_to_hex(radius * math.cos(angle), radius * math.sin(angle))


def norm(displacement: Displacement | Position) -> int:
    """Hex distance from the origin."""
    q, r = displacement.q, displacement.r
    return (abs(q) + abs(r) + abs(q + r)) // 2


def distance(a: Position, b: Position) -> int:
    """Hex distance between two lattice cells."""
    return norm(Displacement(a.q - b.q, a.r - b.r))
