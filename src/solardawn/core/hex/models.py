"""Axial hex-lattice value types.

Point-up hexes. Increasing q = up-right, increasing r = down.

Usage:
    home = Position(9, 0)
    station = home.add_displacement(Displacement(0, -1))
"""

from __future__ import annotations

from dataclasses import dataclass


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a valid lattice coordinate
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value < 0) == (divisor < 0) else -quotient


@dataclass(frozen=True, slots=True)
class Position:
    """Absolute lattice coordinate."""

    q: int
    r: int

    def __post_init__(self) -> None:
        _require_int("q", self.q)
        _require_int("r", self.r)

    @property
    def s(self) -> int:
        """Implicit third cube coordinate."""
        return -self.q - self.r

    def add_displacement(self, displacement: Displacement) -> Position:
        return Position(self.q + displacement.q, self.r + displacement.r)

    def subtract_displacement(self, displacement: Displacement) -> Position:
        return Position(self.q - displacement.q, self.r - displacement.r)


@dataclass(frozen=True, slots=True)
class Displacement:
    """Relative lattice offset, also used for stack velocities."""

    q: int
    r: int

    def __post_init__(self) -> None:
        _require_int("q", self.q)
        _require_int("r", self.r)

    def add(self, other: Displacement) -> Displacement:
        return Displacement(self.q + other.q, self.r + other.r)

    def subtract(self, other: Displacement) -> Displacement:
        return Displacement(self.q - other.q, self.r - other.r)

    def negate(self) -> Displacement:
        return Displacement(-self.q, -self.r)

    def scale(self, factor: int) -> Displacement:
        return Displacement(self.q * factor, self.r * factor)

    def divide(self, divisor: int) -> Displacement:
        """Divide both components, truncating toward zero.

        Raises:
            ZeroDivisionError: If divisor is zero.
        """
        if divisor == 0:
            raise ZeroDivisionError("cannot divide a displacement by zero")
        return Displacement(_truncating_div(self.q, divisor), _truncating_div(self.r, divisor))

    def add_to(self, position: Position) -> Position:
        return position.add_displacement(self)
