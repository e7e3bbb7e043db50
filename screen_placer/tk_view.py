import logging
import tkinter as tk
from collections import deque
from typing import Deque, List

from . import config
from .draw import DrawCommand, build_frame, hex_color
from .editor import Editor
from .events import CTRL, ESCAPE, Event, KeyDown, KeyUp, PointerDown, PointerMove, PointerUp, Quit, Resize

log = logging.getLogger(__name__)


def draw_instructions(canvas: tk.Canvas, x: int, y: int = 10) -> None:
    for i, line in enumerate(config.INSTRUCTIONS):
        # north-east anchor, so x,y is top-right of text
        canvas.create_text(x, y + i * 20, text=line, fill="white", anchor="ne", font=("Arial", 10, "bold"))


class TkView:
    """
    Tk window the editor draws into.

    Tk callbacks only queue events; a fixed-rate tick hands the queue to the
    editor and then repaints the whole canvas.
    """

    def __init__(self, editor: Editor, fps: int = config.FPS):
        self.editor = editor
        self.interval = max(1, 1000 // fps)
        self.events: Deque[Event] = deque()

        self.root = tk.Tk()
        self.root.title("Monitor Layout")
        self.root.geometry(f"{editor.viewport.width}x{editor.viewport.height}")
        self.canvas = tk.Canvas(self.root, bg=hex_color(config.BACKGROUND_COLOR), highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)
        self._bind()

    def _bind(self) -> None:
        push = self.events.append
        self.canvas.bind("<ButtonPress-1>", lambda e: push(PointerDown(e.x, e.y)))
        self.canvas.bind("<ButtonRelease-1>", lambda e: push(PointerUp()))
        self.canvas.bind("<Motion>", lambda e: push(PointerMove(e.x, e.y)))
        self.canvas.bind("<Configure>", lambda e: push(Resize(e.width, e.height)))
        for key in ("Control_L", "Control_R"):
            self.root.bind(f"<KeyPress-{key}>", lambda e: push(KeyDown(CTRL)))
            self.root.bind(f"<KeyRelease-{key}>", lambda e: push(KeyUp(CTRL)))
        self.root.bind("<Escape>", lambda e: push(KeyDown(ESCAPE)))
        self.root.protocol("WM_DELETE_WINDOW", lambda: push(Quit()))

    def tick(self) -> None:
        self.editor.begin_frame()
        while self.events:
            if not self.editor.handle(self.events.popleft()):
                log.info("quitting")
                self.root.destroy()
                return
        self.paint(build_frame(self.editor))
        self.root.after(self.interval, self.tick)

    def paint(self, commands: List[DrawCommand]) -> None:
        self.canvas.delete("all")
        for command in commands:
            x, y, w, h = command.bounds
            self.canvas.create_rectangle(x, y, x + w, y + h, fill=hex_color(command.color), outline="")
            if command.label:
                self.canvas.create_text(
                    x + w / 2,
                    y + h / 2,
                    text=command.label,
                    fill=hex_color(config.LABEL_COLOR),
                    font=("Arial", 9 if command.kind == "inactive" else 12, "bold"),
                )
        draw_instructions(self.canvas, self.editor.viewport.width - 10)

    def run(self) -> None:
        self.root.after(self.interval, self.tick)
        self.root.mainloop()
