"""Geometry, collision and movement tests for sliding blocks."""
from __future__ import annotations

import pytest

from blockaway.axis import Axis, XN, XP, YN, YP, ZP
from blockaway.block import Block, overlap_in_direction


def _unit(direction, x, y=0, z=0) -> Block:
    return Block(direction, (x, y, z), (x + 1, y + 1, z + 1))


# //1.- Blocks must be unit cubes or dominoes with min below max.
def test_block_rejects_malformed_extents():
    with pytest.raises(ValueError):
        Block(XP, (1, 0, 0), (0, 1, 1))
    with pytest.raises(ValueError):
        Block(XP, (0, 0, 0), (2, 2, 1))
    with pytest.raises(ValueError):
        Block(XP, (0, 0, 0), (3, 1, 1))


def test_derived_geometry():
    small = _unit(XP, 2)
    long_block = Block(YN, (0, 0, 0), (1, 1, 2))
    assert small.isize == (1, 1, 1)
    assert small.size == (1.0, 1.0, 1.0)
    assert small.center == (2.5, 0.5, 0.5)
    assert small.elongation is None
    assert long_block.elongation is Axis.Z
    assert long_block.center == (0.5, 0.5, 1.0)


# //2.- Corner pairs and dictionaries reconstruct identical blocks.
def test_round_trips():
    block = Block(ZP, (3, 1, 0), (4, 3, 1))
    assert Block.from_corners(block.direction, block.corners()) == block
    assert Block.from_dict(block.to_dict()) == block
    assert block.to_dict() == {"direction": {"axis": "Z", "positive": True}, "min": [3, 1, 0], "max": [4, 3, 1]}
    with pytest.raises(ValueError):
        Block.from_dict({"direction": {"axis": "X", "positive": True}, "min": [0, 0, 0]})


def test_from_center_size():
    block = Block.from_center_size(XN, (1.0, 0.5, 0.5), (2.0, 1.0, 1.0))
    assert block == Block(XN, (0, 0, 0), (2, 1, 1))


# //3.- Lanes overlap only with positive area in the orthogonal plane.
def test_overlap_in_direction():
    first = _unit(XP, 0)
    assert overlap_in_direction(first, _unit(YP, 5), Axis.X)
    assert not overlap_in_direction(first, _unit(YP, 5, y=1), Axis.X)
    assert overlap_in_direction(first, Block(YP, (5, 0, 0), (6, 2, 1)), Axis.X)
    assert not overlap_in_direction(first, _unit(YP, 5), Axis.Y)


def test_possible_collision_is_irreflexive():
    block = _unit(XP, 0)
    assert not block.possible_collision(block)
    assert not block.possible_collision(Block(XP, (0, 0, 0), (1, 1, 1)))


# //4.- Only blocks at least one unit ahead and inside the lane can collide.
def test_possible_collision_requires_ahead_and_in_lane():
    mover = _unit(XP, 0)
    assert mover.possible_collision(_unit(XN, 3))
    assert not mover.possible_collision(_unit(XN, 3, y=1))
    assert not mover.possible_collision(_unit(XN, -2))
    assert mover.possible_collision(Block(YP, (2, 0, 0), (3, 2, 1)))
    long_mover = Block(XP, (0, 0, 0), (2, 1, 1))
    assert long_mover.possible_collision(_unit(YP, 2))
    assert not Block(YN, (0, 0, 0), (1, 1, 1)).possible_collision(_unit(XP, 3))


def test_blocks_in_front():
    mover = _unit(XP, 0)
    ahead = [_unit(YP, 2), _unit(ZP, 5)]
    others = [_unit(YP, 2, y=1), _unit(ZP, -3), mover]
    assert mover.blocks_in_front(others + ahead) == ahead


# //5.- The nearest block minimizes the truncated forward distance.
def test_nearest_block_in_front():
    mover = _unit(XP, 0)
    near = _unit(YP, 2)
    far = _unit(YN, 6)
    assert mover.nearest_block_in_front([far, near]) == near
    assert mover.nearest_block_in_front([_unit(YP, -4)]) is None
    assert mover.nearest_block_in_front([]) is None


def test_nearest_block_ties_resolve_to_input_order():
    mover = _unit(XP, 0)
    unit = _unit(ZP, 2)
    long_y = Block(ZP, (2, 0, 0), (3, 2, 1))
    long_x = Block(ZP, (2, 0, 0), (4, 1, 1))
    assert mover.nearest_block_in_front([unit, long_y]) == unit
    assert mover.nearest_block_in_front([long_y, unit]) == long_y
    # Truncation puts a 2.5 distance on par with 2.0.
    assert mover.nearest_block_in_front([long_x, unit]) == long_x


# //6.- Moving stops with the leading face against the obstacle.
def test_move_block_positive_direction():
    mover = _unit(XP, 4)
    obstacle = _unit(YN, 10)
    moved = mover.move_block(obstacle)
    assert moved == Block(XP, (9, 0, 0), (10, 1, 1))
    assert mover == _unit(XP, 4)


def test_move_block_negative_direction():
    mover = _unit(XN, 8)
    obstacle = _unit(XP, 2)
    assert mover.move_block(obstacle) == Block(XN, (3, 0, 0), (4, 1, 1))
    down = Block(YN, (0, 5, 0), (1, 7, 1))
    assert down.move_block(_unit(XP, 0, y=1)) == Block(YN, (0, 2, 0), (1, 4, 1))


def test_move_block_keeps_doubled_footprint_along_travel():
    mover = Block(XP, (0, 0, 0), (2, 1, 1))
    assert mover.move_block(_unit(ZP, 5)) == Block(XP, (3, 0, 0), (5, 1, 1))


def test_move_block_sideways_long_block():
    mover = Block(XP, (0, 0, 0), (1, 2, 1))
    obstacle = _unit(ZP, 4, y=1)
    assert mover.move_block(obstacle) == Block(XP, (3, 0, 0), (4, 2, 1))


# //7.- Moves against blocks outside the lane or behind the mover are refused.
def test_move_block_requires_lane_overlap():
    mover = _unit(XP, 0)
    assert not overlap_in_direction(mover, _unit(XN, 5, y=1), Axis.X)
    assert mover.move_block(_unit(XN, 5, y=1)) is None


def test_move_block_rejects_obstacle_behind():
    assert _unit(XP, 4).move_block(_unit(XP, 1)) is None
    assert _unit(XN, 1).move_block(_unit(XN, 4)) is None


def test_move_block_backwards_refuses_obstacle_on_the_far_side():
    mover = Block(XN, (5, 0, 0), (6, 1, 1))
    assert mover.move_block(Block(XP, (6, 0, 0), (7, 1, 1))) is None
    assert mover.move_block(Block(XP, (3, 0, 0), (4, 1, 1))) == Block(XN, (4, 0, 0), (5, 1, 1))


def test_possible_collision_needs_one_full_unit_ahead():
    mover = _unit(XP, 0)
    assert mover.possible_collision(_unit(YP, 1))
    assert not mover.possible_collision(Block(YP, (0, 0, 0), (2, 1, 1)))
