import logging
from typing import Callable, Optional

from . import config
from .errors import ExternalMutationError, InvariantViolation
from .events import ESCAPE, Event, KeyDown, KeyUp, PointerDown, PointerMove, PointerUp, Quit, Resize
from .hit_test import first_hit, first_inactive_hit
from .layout import commit
from .models import DragState
from .notify import notify_send
from .overlap import resolve_overlap
from .registry import OutputRegistry
from .view import Viewport

log = logging.getLogger(__name__)


class Editor:
    """
    Turns pointer and keyboard events into drags, toggles and commits.

    A pointer press either toggles an output (toggle modifier held) or grabs
    one for dragging, never both. While an output is grabbed only pointer
    moves and the release are acted on.
    """

    def __init__(
        self,
        registry: OutputRegistry,
        viewport: Optional[Viewport] = None,
        toggle_modifier: str = config.TOGGLE_MODIFIER,
        cell_size: int = config.CELL_SIZE,
        notify: Callable[..., None] = notify_send,
    ):
        self.registry = registry
        self.viewport = viewport or Viewport()
        self.toggle_modifier = toggle_modifier
        self.cell_size = cell_size
        self.notify = notify
        self.modifier_held = False
        self.drag: Optional[DragState] = None

    @property
    def dragging(self) -> bool:
        return self.drag is not None

    def begin_frame(self) -> None:
        self.viewport.recenter(self.registry.active)

    def handle(self, event: Event) -> bool:
        """Process one event. Returns False once the editor should close."""
        if isinstance(event, Quit):
            return False
        if isinstance(event, KeyDown):
            if event.key == ESCAPE:
                return False
            if event.key == self.toggle_modifier:
                self.modifier_held = True
        elif isinstance(event, KeyUp):
            if event.key == self.toggle_modifier:
                self.modifier_held = False
        elif isinstance(event, PointerDown):
            self.pointer_down(event.x, event.y)
        elif isinstance(event, PointerMove):
            self.pointer_move(event.x, event.y)
        elif isinstance(event, PointerUp):
            self.pointer_up()
        elif isinstance(event, Resize):
            self.viewport.resize(event.width, event.height)
            self.viewport.recenter(self.registry.active)
        return True

    # --- pointer ---

    def pointer_down(self, x: int, y: int) -> None:
        if self.drag is not None:
            return
        if self.modifier_held:
            self._toggle(x, y)
            return

        point = self.viewport.to_logical(x, y)
        hit = first_hit(point, self.registry.active)
        if hit is None:
            return
        self.drag = DragState(
            id=hit.id,
            pos=point,
            offset=(hit.rect.x - point[0], hit.rect.y - point[1]),
            size=hit.rect.size,
        )
        log.debug("grabbed %s at %s", hit.name, point)

    def pointer_move(self, x: int, y: int) -> None:
        if self.drag is None:
            return
        drag = self.drag
        drag.pos = self.viewport.to_logical(x, y)
        origin = resolve_overlap(drag.origin(), drag.size, self.registry.active, dragged_id=drag.id)
        drag.pos = (origin[0] - drag.offset[0], origin[1] - drag.offset[1])

    def pointer_up(self) -> None:
        if self.drag is None:
            return
        moved, self.drag = self.drag, None
        try:
            commit(self.registry, moved)
        except ExternalMutationError as exc:
            self._report(exc)

    # --- enable / disable ---

    def _toggle(self, x: int, y: int) -> None:
        # Inactive cells live in surface pixels, active outputs in layout space
        inactive = first_inactive_hit((x, y), self.registry.inactive, self.cell_size)
        try:
            if inactive is not None:
                log.info("enabling %s", inactive.name)
                self.registry.enable(inactive.name)
                return
            hit = first_hit(self.viewport.to_logical(x, y), self.registry.active)
            if hit is not None:
                log.info("disabling %s", hit.name)
                self.registry.disable(hit.name)
        except InvariantViolation as exc:
            log.warning("%s", exc)
        except ExternalMutationError as exc:
            self._report(exc)

    def _report(self, exc: ExternalMutationError) -> None:
        log.error("%s", exc)
        self.notify("Output layout", str(exc), urgency="critical")
