"""
Magnetic snapping of a dragged output against its nearest neighbour.

This is a single-neighbour, single-axis nudge rather than a constraint
solver: the dragged rectangle is pushed along whichever axis needs the
smaller correction until it sits edge to edge with the closest output.
Diagonally separated rectangles are left where they are.
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .models import ActiveOutput

log = logging.getLogger(__name__)


def _center(origin: NDArray[np.int64], size: NDArray[np.int64]) -> NDArray[np.float64]:
    return origin + size / 2


def nearest_output(
    origin: Tuple[int, int], size: Tuple[int, int], outputs: Sequence[ActiveOutput], exclude_id: Optional[int] = None
) -> Optional[ActiveOutput]:
    """
    Output whose center is closest to the center of the given rectangle.

    Equal distances go to the later output in iteration order.
    """
    center = _center(np.array(origin), np.array(size))
    best: Optional[ActiveOutput] = None
    best_dist = float("inf")
    for output in outputs:
        if output.id == exclude_id:
            continue
        other = _center(np.array(output.rect.origin), np.array(output.rect.size))
        dist = float(np.sum((center - other) ** 2))
        if dist <= best_dist:
            best_dist = dist
            best = output
    return best


def overlap_extents(
    origin: Tuple[int, int], size: Tuple[int, int], neighbor_origin: Tuple[int, int], neighbor_size: Tuple[int, int]
) -> NDArray[np.int64]:
    """
    Signed overlap per axis: positive is how far the rectangles overlap,
    negative is the gap between them.
    """
    a0, a_size = np.array(origin), np.array(size)
    b0, b_size = np.array(neighbor_origin), np.array(neighbor_size)
    span = np.maximum(a0 + a_size, b0 + b_size) - np.minimum(a0, b0)
    return a_size + b_size - span


def resolve_overlap(
    origin: Tuple[int, int], size: Tuple[int, int], outputs: Sequence[ActiveOutput], dragged_id: Optional[int] = None
) -> Tuple[int, int]:
    """
    Snap a candidate origin for the dragged output against its nearest neighbour.

    :param origin: candidate top-left corner of the dragged output
    :param size: (width, height) of the dragged output
    :param outputs: active outputs, the dragged one is skipped by id
    :param dragged_id: id of the dragged output
    :return: the adjusted origin
    """
    neighbor = nearest_output(origin, size, outputs, exclude_id=dragged_id)
    if neighbor is None:
        return origin

    overlap = overlap_extents(origin, size, neighbor.rect.origin, neighbor.rect.size)
    if np.all(overlap < 0):
        return origin

    axis = int(np.argmin(overlap))
    position = np.array(origin)
    center = _center(position, np.array(size))
    neighbor_center = _center(np.array(neighbor.rect.origin), np.array(neighbor.rect.size))
    if center[axis] < neighbor_center[axis]:
        position[axis] -= overlap[axis]
    else:
        position[axis] += overlap[axis]

    log.debug("snapped %s against %s on %s by %d", origin, neighbor.name, "xy"[axis], overlap[axis])
    return int(position[0]), int(position[1])
