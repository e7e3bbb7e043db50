import logging
from typing import List, Sequence, Tuple

import numpy as np

from .models import ActiveOutput, DragState
from .registry import OutputRegistry

log = logging.getLogger(__name__)


def apply_drag(outputs: Sequence[ActiveOutput], moved: DragState) -> List[ActiveOutput]:
    """Copies of the outputs with the dragged one moved to the drag's final origin."""
    x, y = moved.origin()
    placed = []
    for output in outputs:
        rect = output.rect.moved_to(x, y) if output.id == moved.id else output.rect
        placed.append(ActiveOutput(output.id, output.name, rect))
    return placed


def normalize(outputs: Sequence[ActiveOutput]) -> List[ActiveOutput]:
    """Translate every output uniformly so the smallest x and the smallest y are both 0."""
    if not outputs:
        return []
    positions = np.array([output.rect.origin for output in outputs])
    col_min = np.min(positions, axis=0)
    shifted = positions - col_min
    return [
        ActiveOutput(output.id, output.name, output.rect.moved_to(int(x), int(y)))
        for output, (x, y) in zip(outputs, shifted)
    ]


def layout_positions(outputs: Sequence[ActiveOutput]) -> List[Tuple[str, int, int]]:
    return [(output.name, output.rect.x, output.rect.y) for output in outputs]


def commit(registry: OutputRegistry, moved: DragState) -> List[ActiveOutput]:
    """
    Apply a finished drag, normalize the layout and send it to the compositor.

    The registry is reloaded afterwards whether or not the compositor accepted
    the positions, since it may clamp or reject what was asked for. Returns the
    layout that was requested.
    """
    if registry.get(moved.id) is None:
        log.warning("dragged output %d disappeared before release, reloading", moved.id)
        registry.reload()
        return []

    requested = normalize(apply_drag(registry.active, moved))
    log.info("committing layout %s", layout_positions(requested))
    try:
        registry.source.set_positions(layout_positions(requested))
    finally:
        registry.reload()
    return requested
