"""Tests for the axis and direction vocabulary."""
from __future__ import annotations

import math

import pytest

from blockaway.axis import ALL_DIRECTIONS, Axis, Direction, XN, XP, YP, ZN, rotation_between


# //1.- The right-handed successor cycles through all three axes.
def test_next_rh_cycles():
    assert Axis.X.next_rh() is Axis.Y
    assert Axis.Y.next_rh() is Axis.Z
    assert Axis.Z.next_rh() is Axis.X


# //2.- Cross products are antisymmetric and vanish on equal axes.
def test_cross_signs():
    assert Axis.X.cross(Axis.Y) == 1
    assert Axis.Y.cross(Axis.Z) == 1
    assert Axis.Z.cross(Axis.X) == 1
    assert Axis.Y.cross(Axis.X) == -1
    assert Axis.X.cross(Axis.Z) == -1
    for axis in Axis:
        assert axis.cross(axis) == 0


def test_remaining_axes():
    assert Axis.X.remaining(Axis.Y) is Axis.Z
    assert Axis.Z.remaining(Axis.Y) is Axis.X
    assert Axis.X.remaining(Axis.Z) is Axis.Y
    assert Axis.Y.remaining(Axis.Y) is None
    assert Axis.X.remaining_two() == (Axis.Y, Axis.Z)
    assert Axis.Y.remaining_two() == (Axis.Z, Axis.X)
    assert Axis.Z.remaining_two() == (Axis.X, Axis.Y)


def test_components_and_unit_vectors():
    assert Axis.Y.unit_vector() == (0.0, 1.0, 0.0)
    assert Axis.Z.component((4, 5, 6)) == 6
    assert Axis.X.with_component((4, 5, 6), 9) == (9, 5, 6)


# //3.- Directions expose their sign and signed unit vector.
def test_direction_sign_and_unit_vector():
    assert XP.sign == 1
    assert XN.sign == -1
    assert ZN.unit_vector() == (0.0, 0.0, -1.0)
    assert len(set(ALL_DIRECTIONS)) == 6


def test_direction_dict_round_trip():
    assert Direction.from_dict(YP.to_dict()) == YP
    assert Direction.from_dict({"axis": "z", "positive": False}) == ZN
    with pytest.raises(ValueError):
        Direction.from_dict({"axis": "W", "positive": True})
    with pytest.raises(ValueError):
        Direction.from_dict({"axis": "X", "positive": "yes"})


# //4.- Rotations turn around the third axis by a signed quarter turn.
def test_rotation_between_axes():
    pivot, angle = rotation_between(Axis.Y, Axis.X)
    assert pivot is Axis.Z
    assert angle == pytest.approx(-math.pi / 2)
    pivot, angle = rotation_between(Axis.X, Axis.Y)
    assert pivot is Axis.Z
    assert angle == pytest.approx(math.pi / 2)
    assert rotation_between(Axis.Z, Axis.Z) == (None, 0.0)
