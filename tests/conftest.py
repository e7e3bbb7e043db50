import copy
import json
import subprocess

import pytest

from screen_placer.registry import OutputRegistry
from screen_placer.sway import SwayMsg


def output_record(name, output_id=None, x=0, y=0, width=100, height=50):
    record = {"name": name, "rect": {"x": x, "y": y, "width": width, "height": height}}
    if output_id is not None:
        record["id"] = output_id
    return record


class FakeSwaymsg:
    """Stands in for subprocess.run and keeps a tiny compositor state."""

    def __init__(self, records):
        self.records = copy.deepcopy(records)
        self.calls = []
        self.fail = set()
        self.next_id = max((r.get("id") or 0 for r in self.records), default=0) + 1

    def _record(self, name):
        for record in self.records:
            if record["name"] == name:
                return record
        raise KeyError(name)

    def __call__(self, command, capture_output=True, text=True, env=None):
        args = list(command[1:])
        self.calls.append(args)
        if args[:2] == ["-t", "get_outputs"]:
            if "query" in self.fail:
                return subprocess.CompletedProcess(command, 1, "", "connection refused")
            return subprocess.CompletedProcess(command, 0, json.dumps(self.records), "")

        if len(args) == 3 and args[0] == "output":
            name, action = args[1], args[2]
            if action in self.fail:
                return subprocess.CompletedProcess(command, 1, "", f"cannot {action} {name}")
            record = self._record(name)
            if action == "enable":
                record["id"] = self.next_id
                self.next_id += 1
            else:
                record.pop("id", None)
            return subprocess.CompletedProcess(command, 0, "", "")

        if "pos" in self.fail:
            return subprocess.CompletedProcess(command, 1, "", "invalid position")
        for directive in args[0].split("; "):
            _, name, _, x, y = directive.split()
            record = self._record(name)
            record["rect"]["x"], record["rect"]["y"] = int(x), int(y)
        return subprocess.CompletedProcess(command, 0, "", "")

    @property
    def mutations(self):
        return [args for args in self.calls if args[:2] != ["-t", "get_outputs"]]


@pytest.fixture
def two_outputs():
    return [output_record("A", 1, 0, 0), output_record("B", 2, 120, 0)]


@pytest.fixture
def make_registry():
    def _make(records):
        fake = FakeSwaymsg(records)
        registry = OutputRegistry(SwayMsg(runner=fake))
        registry.load()
        return registry, fake

    return _make
