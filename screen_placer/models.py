from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .errors import ExternalQueryError


@dataclass
class Bounds:
    x: int
    y: int
    width: int
    height: int

    @property
    def origin(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def moved_to(self, x: int, y: int) -> "Bounds":
        return Bounds(x, y, self.width, self.height)


@dataclass
class ActiveOutput:
    id: int
    name: str
    rect: Bounds


@dataclass
class InactiveOutput:
    name: str


@dataclass
class DragState:
    """
    The output currently grabbed by the pointer.

    :param id: id of the grabbed active output (resolved through the registry on every use)
    :param pos: live pointer position in layout coordinates, already overlap-adjusted
    :param offset: output origin minus pointer position at grab time
    :param size: (width, height) of the grabbed output
    """

    id: int
    pos: Tuple[int, int]
    offset: Tuple[int, int]
    size: Tuple[int, int]

    def origin(self) -> Tuple[int, int]:
        return (self.pos[0] + self.offset[0], self.pos[1] + self.offset[1])

    def bounds(self) -> Bounds:
        x, y = self.origin()
        return Bounds(x, y, self.size[0], self.size[1])


def _parse_rect(record: Dict[str, Any]) -> Bounds:
    rect = record.get("rect")
    try:
        bounds = Bounds(int(rect["x"]), int(rect["y"]), int(rect["width"]), int(rect["height"]))
    except (TypeError, KeyError, ValueError) as exc:
        raise ExternalQueryError(f"output {record.get('name')!r} has no usable rect: {rect!r}") from exc
    if bounds.width <= 0 or bounds.height <= 0:
        raise ExternalQueryError(f"output {record.get('name')!r} has an empty rect: {rect!r}")
    return bounds


def parse_outputs(records: Iterable[Dict[str, Any]]) -> Tuple[List[ActiveOutput], List[InactiveOutput]]:
    """Split raw output records into active and inactive outputs, keeping their order."""
    active: List[ActiveOutput] = []
    inactive: List[InactiveOutput] = []
    for record in records:
        if not isinstance(record, dict) or not isinstance(record.get("name"), str):
            raise ExternalQueryError(f"malformed output record: {record!r}")
        output_id: Optional[int] = record.get("id")
        if output_id is None:
            inactive.append(InactiveOutput(record["name"]))
            continue
        try:
            output_id = int(output_id)
        except (TypeError, ValueError) as exc:
            raise ExternalQueryError(f"output {record['name']!r} has a bad id: {output_id!r}") from exc
        active.append(ActiveOutput(output_id, record["name"], _parse_rect(record)))
    return active, inactive
