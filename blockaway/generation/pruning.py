"""Detection and removal of blocks that can never leave the volume.

Two blocks on the same line that face each other (a ``+axis`` block below a
``-axis`` block) can never both clear the line, and neither can anything
queued behind them. The scan below finds such lines along every axis and
drops the affected blocks before a level is handed to the player.
"""
from __future__ import annotations

import logging
import math
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Set, Tuple

import numpy as np

from ..axis import ALL_AXES, Axis, Direction
from ..block import Block

LOGGER = logging.getLogger(__name__)

CELL_TOLERANCE = 0.5


def locked_blocks_to_remove(line: Sequence[Block], axis: Axis) -> List[Block]:
    """Return the locked blocks of ``line``, whose blocks ascend along ``axis``.

    ``+axis`` blocks count as forward until the first ``-axis`` block shows up;
    ``-axis`` blocks count as backward once a ``+axis`` block has been seen.
    Blocks sliding along other axes never lock this line.
    """

    positive = Direction(axis, True)
    negative = Direction(axis, False)
    forward: List[Block] = []
    backward: List[Block] = []
    seen_positive = False
    seen_negative = False
    for block in line:
        if block.direction == positive:
            if not seen_negative:
                forward.append(block)
            seen_positive = True
        elif block.direction == negative:
            if seen_positive:
                backward.append(block)
            seen_negative = True
    if forward and backward:
        return forward + backward
    return []


def bounding_box(blocks: Iterable[Block]) -> Tuple[np.ndarray, np.ndarray]:
    blocks = list(blocks)
    if not blocks:
        raise ValueError("Cannot compute the bounding box of an empty block set")
    lower = np.array([block.min for block in blocks], dtype=int).min(axis=0)
    upper = np.array([block.max for block in blocks], dtype=int).max(axis=0)
    return lower, upper


# //1.- Cells (u, v) whose center lies within the Manhattan tolerance of each block center.
def _bucket_by_cell(blocks: Sequence[Block], axis: Axis) -> Dict[Tuple[int, int], List[int]]:
    u, v = axis.remaining_two()
    lower = np.array([block.min for block in blocks], dtype=float)
    centers = (lower + np.array([block.max for block in blocks], dtype=float)) / 2.0
    buckets: Dict[Tuple[int, int], List[int]] = defaultdict(list)
    for index, (center_u, center_v) in enumerate(centers[:, [u.index, v.index]]):
        for cell_u in range(math.ceil(center_u - 1.0), math.floor(center_u) + 1):
            for cell_v in range(math.ceil(center_v - 1.0), math.floor(center_v) + 1):
                if abs(center_u - cell_u - 0.5) + abs(center_v - cell_v - 0.5) <= CELL_TOLERANCE:
                    buckets[(cell_u, cell_v)].append(index)
    return buckets


def remove_locked(blocks: Iterable[Block]) -> List[Block]:
    """Drop locked blocks with one scan per axis, in the order X, Y, Z.

    Removals take effect immediately, so later lines and axes see the pruned
    set; earlier axes are not rescanned.
    """

    working = list(blocks)
    if not working:
        return working
    lower, upper = bounding_box(working)
    for axis in ALL_AXES:
        u, v = axis.remaining_two()
        buckets = _bucket_by_cell(working, axis)
        removed: Set[int] = set()
        for cell_u in range(int(lower[u.index]), int(upper[u.index])):
            for cell_v in range(int(lower[v.index]), int(upper[v.index])):
                members = [index for index in buckets.get((cell_u, cell_v), ()) if index not in removed]
                # //2.- Stable sort keeps the working order for blocks sharing a center.
                members.sort(key=lambda index: axis.component(working[index].center))
                locked = locked_blocks_to_remove([working[index] for index in members], axis)
                if not locked:
                    continue
                LOGGER.debug(
                    "Removing %d locked blocks on %s line through (%d, %d)",
                    len(locked),
                    axis.value,
                    cell_u,
                    cell_v,
                )
                removed.update(index for index in members if working[index] in locked)
        if removed:
            LOGGER.debug("Axis %s pass removed %d blocks", axis.value, len(removed))
            working = [block for index, block in enumerate(working) if index not in removed]
    return working
