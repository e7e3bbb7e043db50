from typing import Sequence, Tuple

from . import config
from .models import ActiveOutput, Bounds


def layout_extent(outputs: Sequence[ActiveOutput]) -> Tuple[int, int, int, int]:
    """(min_x, min_y, max_x, max_y) of the outputs, folded from the origin like the surface is."""
    min_x, min_y, max_x, max_y = 0, 0, 0, 0
    for output in outputs:
        min_x = min(min_x, output.rect.x)
        min_y = min(min_y, output.rect.y)
        max_x = max(max_x, output.rect.right)
        max_y = max(max_y, output.rect.bottom)
    return min_x, min_y, max_x, max_y


class Viewport:
    """
    Maps surface pixels to layout coordinates and back.

    The layout is scaled down by `scale` and centered on the surface; the
    centering offset follows the outputs and is recomputed every frame.
    """

    def __init__(self, width: int = config.WINDOW_WIDTH, height: int = config.WINDOW_HEIGHT, scale: int = config.SCALE):
        self.width = width
        self.height = height
        self.scale = scale
        self.center: Tuple[int, int] = (0, 0)

    def resize(self, width: int, height: int) -> None:
        self.width = max(1, width)
        self.height = max(1, height)

    def recenter(self, outputs: Sequence[ActiveOutput]) -> Tuple[int, int]:
        min_x, min_y, max_x, max_y = layout_extent(outputs)
        self.center = (
            self.width * self.scale // 2 - (min_x + max_x) // 2,
            self.height * self.scale // 2 - (min_y + max_y) // 2,
        )
        return self.center

    def to_logical(self, x: int, y: int) -> Tuple[int, int]:
        return (int(x * self.scale) - self.center[0], int(y * self.scale) - self.center[1])

    def to_surface(self, bounds: Bounds) -> Tuple[float, float, float, float]:
        return (
            (bounds.x + self.center[0]) / self.scale,
            (bounds.y + self.center[1]) / self.scale,
            bounds.width / self.scale,
            bounds.height / self.scale,
        )
