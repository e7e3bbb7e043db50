"""Wrapper around the swaymsg command line client."""

import json
import logging
import subprocess
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from . import config
from .errors import ExternalMutationError, ExternalQueryError

log = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


class SwayMsg:
    def __init__(self, binary: str = config.SWAYMSG, env: Optional[Dict[str, str]] = None, runner: Runner = subprocess.run):
        """
        :param binary: swaymsg executable name or path
        :param env: environment for the child process (see sway_socket.sway_env)
        :param runner: subprocess.run compatible callable, replaced in tests
        """
        self.binary = binary
        self.env = env
        self._run = runner

    def _call(self, args: Sequence[str]) -> subprocess.CompletedProcess:
        command = [self.binary, *args]
        log.info("%s", " ".join(command))
        return self._run(command, capture_output=True, text=True, env=self.env)

    def get_outputs(self) -> List[Dict[str, Any]]:
        """Run `swaymsg -t get_outputs -r` and return the decoded records."""
        try:
            result = self._call(["-t", "get_outputs", "-r"])
        except OSError as exc:
            raise ExternalQueryError(f"could not run {self.binary}: {exc}") from exc
        if result.returncode != 0:
            log.error("%s get_outputs exit %d stderr: %s", self.binary, result.returncode, result.stderr)
            raise ExternalQueryError(f"{self.binary} get_outputs returned {result.returncode}: {result.stderr.strip()}")
        try:
            records = json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            raise ExternalQueryError(f"could not parse {self.binary} output: {exc}") from exc
        if not isinstance(records, list):
            raise ExternalQueryError(f"expected a list of outputs, got {type(records).__name__}")
        return records

    def _mutate(self, args: List[str]) -> None:
        try:
            result = self._call(args)
        except OSError as exc:
            raise ExternalMutationError([self.binary, *args], str(exc)) from exc
        if result.returncode != 0:
            log.error("%s exit %d stderr: %s", self.binary, result.returncode, result.stderr)
            raise ExternalMutationError([self.binary, *args], result.stderr)

    def enable(self, name: str) -> None:
        self._mutate(["output", name, "enable"])

    def disable(self, name: str) -> None:
        self._mutate(["output", name, "disable"])

    def set_positions(self, positions: Iterable[Tuple[str, int, int]]) -> None:
        """Move every named output in a single swaymsg call."""
        directives = position_directives(positions)
        if not directives:
            return
        self._mutate([directives])


def position_directives(positions: Iterable[Tuple[str, int, int]]) -> str:
    return "; ".join(f"output {name} pos {x} {y}" for name, x, y in positions)
