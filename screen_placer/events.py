from dataclasses import dataclass
from typing import Union

CTRL = "ctrl"
ESCAPE = "escape"


@dataclass(frozen=True)
class PointerDown:
    x: int
    y: int


@dataclass(frozen=True)
class PointerUp:
    pass


@dataclass(frozen=True)
class PointerMove:
    x: int
    y: int


@dataclass(frozen=True)
class KeyDown:
    key: str


@dataclass(frozen=True)
class KeyUp:
    key: str


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Quit:
    pass


Event = Union[PointerDown, PointerUp, PointerMove, KeyDown, KeyUp, Resize, Quit]
