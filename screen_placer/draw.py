from dataclasses import dataclass
from typing import List, Optional, Tuple

from . import config
from .editor import Editor
from .hit_test import inactive_cell

Color = Tuple[int, int, int]


@dataclass
class DrawCommand:
    kind: str  # "ghost", "active" or "inactive"
    bounds: Tuple[float, float, float, float]  # surface pixels: x, y, width, height
    color: Color
    label: Optional[str] = None


def output_color(index: int) -> Color:
    return config.OUTPUT_COLORS[index % len(config.OUTPUT_COLORS)]


def hex_color(color: Color) -> str:
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"


def build_frame(editor: Editor) -> List[DrawCommand]:
    """Rectangles to paint this frame, back to front."""
    viewport = editor.viewport
    commands: List[DrawCommand] = []

    drag = editor.drag
    if drag is not None:
        commands.append(DrawCommand("ghost", viewport.to_surface(drag.bounds()), config.MOVED_COLOR))

    for i, output in enumerate(editor.registry.active):
        selected = drag is not None and drag.id == output.id
        color = config.SELECTED_COLOR if selected else output_color(i)
        commands.append(DrawCommand("active", viewport.to_surface(output.rect), color, output.name))

    for i, output in enumerate(editor.registry.inactive):
        cell = inactive_cell(i, editor.cell_size)
        commands.append(
            DrawCommand("inactive", (cell.x, cell.y, cell.width, cell.height), config.INACTIVE_COLOR, output.name)
        )
    return commands
