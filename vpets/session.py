"""
VirtualPets - Session

One game's worth of shared state: the pets, which one is active, and the
game-over latch. The controller owns it; the scheduler and the lifecycle
helpers get a reference to it. Nothing here is process-wide.
"""

from __future__ import annotations

import threading
from typing import Sequence

from .errors import InvariantViolation
from .pet import Pet


class Session:
    """The pets of one game plus the active index and game-over flag."""

    def __init__(self, pets: Sequence[Pet], active: int = 0) -> None:
        if not pets:
            raise InvariantViolation("a session needs at least one pet")
        self.pets: tuple[Pet, ...] = tuple(pets)
        self._check_index(active)
        self._active = active
        self._lock = threading.Lock()
        self.game_over = threading.Event()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.pets):
            raise InvariantViolation(f"pet index {index} out of range 0..{len(self.pets) - 1}")

    @property
    def active_index(self) -> int:
        with self._lock:
            return self._active

    @property
    def active_pet(self) -> Pet:
        with self._lock:
            return self.pets[self._active]

    def switch_to(self, index: int) -> Pet:
        """Make another pet the target of menu actions."""
        self._check_index(index)
        with self._lock:
            self._active = index
            return self.pets[index]

    def latch_game_over(self) -> None:
        self.game_over.set()

    @property
    def is_over(self) -> bool:
        return self.game_over.is_set()

    def snapshot(self) -> tuple[tuple[Pet, ...], int, bool]:
        """Pets, active index and game-over flag read together."""
        with self._lock:
            return self.pets, self._active, self.game_over.is_set()
