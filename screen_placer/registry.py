import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import ExternalQueryError, InvariantViolation
from .models import ActiveOutput, InactiveOutput, parse_outputs
from .sway import SwayMsg

log = logging.getLogger(__name__)


class OutputRegistry:
    """
    Local copy of the compositor's outputs.

    Active outputs are indexed by id and kept in the order the compositor
    reported them. The whole registry is replaced after every change made to
    the compositor.
    """

    def __init__(self, source: SwayMsg):
        self.source = source
        self._active: Dict[int, ActiveOutput] = {}
        self._inactive: List[InactiveOutput] = []

    @property
    def active(self) -> List[ActiveOutput]:
        return list(self._active.values())

    @property
    def inactive(self) -> List[InactiveOutput]:
        return list(self._inactive)

    def __iter__(self) -> Iterator[ActiveOutput]:
        return iter(self._active.values())

    def __len__(self) -> int:
        return len(self._active)

    def get(self, output_id: int) -> Optional[ActiveOutput]:
        return self._active.get(output_id)

    def by_name(self, name: str) -> Optional[ActiveOutput]:
        for output in self._active.values():
            if output.name == name:
                return output
        return None

    def load(self) -> Tuple[List[ActiveOutput], List[InactiveOutput]]:
        """Replace the registry with the compositor's current outputs."""
        active, inactive = parse_outputs(self.source.get_outputs())
        self._active = {output.id: output for output in active}
        self._inactive = inactive
        log.debug("loaded %d active, %d inactive outputs", len(active), len(inactive))
        return active, inactive

    def reload(self) -> bool:
        """Like load(), but keeps the last good state when the query fails."""
        try:
            self.load()
        except ExternalQueryError as exc:
            log.error("keeping previous outputs, reload failed: %s", exc)
            return False
        return True

    def enable(self, name: str) -> None:
        try:
            self.source.enable(name)
        finally:
            self.reload()

    def disable(self, name: str) -> None:
        if len(self._active) <= 1:
            raise InvariantViolation(f"refusing to disable {name}, it is the last active output")
        try:
            self.source.disable(name)
        finally:
            self.reload()
