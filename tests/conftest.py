import sys
import threading
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

import pytest

# Ensure the project root is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from vpets.errors import InputClosed  # noqa: E402


class ScriptedRandom:
    """randrange() returns scripted values (checked against the range), then the low bound."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.values: List[int] = list(values)
        self.calls: List[tuple] = []

    def randrange(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        if not self.values:
            return low
        value = self.values.pop(0)
        assert low <= value < high, f"scripted {value} outside [{low}, {high})"
        return value

    def choice(self, seq):
        return seq[0]


class FakeClock:
    def __init__(self, t: float = 1000.0) -> None:
        self.t = t

    def __call__(self) -> float:
        return self.t


class FakeConsole:
    """Scripted input lines, recorded output; hooks run just before a given read returns."""

    def __init__(self, lines: Iterable[str], hooks: Optional[Dict[int, Callable[[], None]]] = None) -> None:
        self.lines = list(lines)
        self.hooks = hooks or {}
        self.reads = 0
        self.clears = 0
        self.writes: List[str] = []
        self.lock = threading.RLock()

    def clear(self) -> None:
        with self.lock:
            self.clears += 1
            self.writes.append("<clear>")

    def write(self, text: str) -> None:
        with self.lock:
            self.writes.append(text)

    def read_line(self) -> str:
        hook = self.hooks.get(self.reads)
        if hook is not None:
            hook()
        self.reads += 1
        if not self.lines:
            raise InputClosed("script exhausted")
        return self.lines.pop(0)

    @property
    def output(self) -> str:
        return "".join(self.writes)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
