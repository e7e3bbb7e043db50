import math
from typing import List, Sequence

from .draw import DrawCommand

ACTIVE_GLYPHS = "#%@&$"
GHOST_GLYPH = "."
INACTIVE_GLYPH = "-"


def _glyph(command: DrawCommand, active_index: int) -> str:
    if command.kind == "ghost":
        return GHOST_GLYPH
    if command.kind == "inactive":
        return INACTIVE_GLYPH
    return ACTIVE_GLYPHS[active_index % len(ACTIVE_GLYPHS)]


def render_text(commands: Sequence[DrawCommand], width: int, height: int, cols_px: int = 8, rows_px: int = 16) -> str:
    """
    Rasterise draw commands onto a character grid.

    Every character covers cols_px x rows_px surface pixels. Later commands
    paint over earlier ones; labels go in the top-left corner of their fill.
    """
    cols = max(1, math.ceil(width / cols_px))
    rows = max(1, math.ceil(height / rows_px))
    grid: List[List[str]] = [[" "] * cols for _ in range(rows)]

    active_index = 0
    for command in commands:
        x, y, w, h = command.bounds
        end_c = math.ceil((x + w) / cols_px)
        end_r = math.ceil((y + h) / rows_px)
        c0 = max(0, math.floor(x / cols_px))
        r0 = max(0, math.floor(y / rows_px))
        # Entirely off the grid on any side
        if end_c <= 0 or end_r <= 0 or c0 >= cols or r0 >= rows:
            continue
        c1 = min(cols, max(c0 + 1, end_c))
        r1 = min(rows, max(r0 + 1, end_r))

        glyph = _glyph(command, active_index)
        if command.kind == "active":
            active_index += 1
        for r in range(r0, r1):
            for c in range(c0, c1):
                grid[r][c] = glyph
        if command.label:
            for i, ch in enumerate(command.label[: c1 - c0]):
                grid[r0][c0 + i] = ch

    return "\n".join("".join(row).rstrip() for row in grid)
