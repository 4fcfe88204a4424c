"""Tests for the axial coordinate engine.

Critical Invariants:
- hex -> rect -> hex is lossless for every lattice point
- Cube rounding preserves q + r + s == 0
- norm is symmetric, non-negative and zero only at the origin
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from solardawn.core.hex import (
    Displacement,
    Position,
    cube_round,
    distance,
    hex_to_rect,
    norm,
    polar_to_hex,
    rect_to_hex,
)
from solardawn.core.hex.operations import _round_half_away

coords = st.integers(min_value=-(10**6), max_value=10**6)


@given(q=coords, r=coords)
def test_round_trip_is_lossless(q, r):
    """PROPERTY: rect_to_hex(hex_to_rect(q, r)) == (q, r).

    Why: Server and client must agree on every placed body.
    """
    assert rect_to_hex(*hex_to_rect(q, r)) == Position(q, r)


@given(q=coords, r=coords)
def test_norm_symmetric_and_non_negative(q, r):
    d = Displacement(q, r)
    assert norm(d) == norm(d.negate())
    assert norm(d) >= 0


@given(q=coords, r=coords)
def test_norm_is_max_cube_component(q, r):
    """PROPERTY: (|q| + |r| + |s|) / 2 equals max(|q|, |r|, |s|) on the lattice."""
    assert norm(Displacement(q, r)) == max(abs(q), abs(r), abs(q + r))


def test_norm_of_origin_is_zero():
    assert norm(Displacement(0, 0)) == 0


@pytest.mark.parametrize(
    "q, r, expected",
    [
        (1, 0, 1),
        (0, -1, 1),
        (1, -1, 1),
        (1, 1, 2),
        (3, -1, 3),
        (2, 2, 4),
        (-36, 0, 36),
        (29, -29, 29),
    ],
)
def test_norm_known_values(q, r, expected):
    assert norm(Displacement(q, r)) == expected


def test_distance_between_positions():
    assert distance(Position(9, 0), Position(9, -1)) == 1
    assert distance(Position(9, 0), Position(12, 2)) == 5
    assert distance(Position(-3, 4), Position(-3, 4)) == 0


def test_hex_to_rect_unit_vectors():
    x, y = hex_to_rect(1, 0)
    assert x == pytest.approx(math.sqrt(3))
    assert y == 0.0

    x, y = hex_to_rect(0, 1)
    assert x == pytest.approx(math.sqrt(3) / 2)
    assert y == pytest.approx(1.5)


def test_rect_to_hex_snaps_to_nearest_cell():
    x, y = hex_to_rect(1, 0)
    assert rect_to_hex(x * 0.9, 0.1) == Position(1, 0)
    assert rect_to_hex(0.1, -0.1) == Position(0, 0)


def test_cube_round_recomputes_axis_with_largest_residual():
    """Independent rounding of (0.4, 0.4, -0.8) gives (0, 0, -1), which is off the lattice."""
    assert cube_round(0.4, 0.4, -0.8) == Position(0, 1)
    assert cube_round(0.87, 0.07, -0.94) == Position(1, 0)


def test_cube_round_keeps_rounded_pair_when_s_residual_largest():
    assert cube_round(0.6, -0.1, -0.5) == Position(1, 0)


def test_round_half_away_from_zero():
    assert _round_half_away(0.5) == 1
    assert _round_half_away(2.5) == 3
    assert _round_half_away(-2.5) == -3
    assert _round_half_away(-0.4) == 0


def test_round_half_away_just_below_half():
    """Values a hair under .5 round down; adding 0.5 first would round them up."""
    assert _round_half_away(0.49999999999999994) == 0
    assert _round_half_away(-0.49999999999999994) == 0
    assert _round_half_away(2.4999999999999996) == 2


def test_fixed_placements():
    assert rect_to_hex(16.0, 0.0) == Position(9, 0)
    assert polar_to_hex(6.0, 0.0) == Position(3, 0)
    assert polar_to_hex(6.0, math.pi) == Position(-3, 0)


def test_position_displacement_arithmetic():
    pos = Position(5, 6)
    d = Displacement(1, 3)

    assert pos.add_displacement(d) == Position(6, 9)
    assert pos.subtract_displacement(d) == Position(4, 3)
    assert d.add_to(pos) == Position(6, 9)
    assert pos.s == -11


def test_displacement_arithmetic():
    a = Displacement(2, 3)
    b = Displacement(4, 6)

    assert a.negate() == Displacement(-2, -3)
    assert a.add(b) == Displacement(6, 9)
    assert a.subtract(b) == Displacement(-2, -3)
    assert a.scale(2) == Displacement(4, 6)
    assert Displacement(2, 5).divide(2) == Displacement(1, 2)


def test_displacement_divide_truncates_toward_zero():
    assert Displacement(-5, 5).divide(2) == Displacement(-2, 2)
    assert Displacement(7, -7).divide(-2) == Displacement(-3, 3)

    with pytest.raises(ZeroDivisionError):
        Displacement(1, 1).divide(0)


def test_positions_and_displacements_are_distinct_types():
    assert Position(1, 2) != Displacement(1, 2)
    assert not hasattr(Position(1, 2), "subtract")


@pytest.mark.parametrize("q, r", [(1.5, 0), (0, 2.0), (True, 0)])
def test_fractional_coordinates_rejected(q, r):
    with pytest.raises(TypeError, match="must be an integer"):
        Position(q, r)
    with pytest.raises(TypeError, match="must be an integer"):
        Displacement(q, r)
