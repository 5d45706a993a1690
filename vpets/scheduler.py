"""
VirtualPets - Decay Scheduler

A background thread that makes every pet in a session hungrier and more bored
on a fixed wall-clock period, whatever the player is doing.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Callable, Optional

from .pet import Pet
from .session import Session
from .utils import TICK_INTERVAL_S

logger = logging.getLogger(__name__)


class DecayScheduler:
    """Background worker thread that ticks the pets of one session."""

    def __init__(
        self,
        session: Session,
        interval: float = TICK_INTERVAL_S,
        rng=random,
        on_tick: Optional[Callable[[], None]] = None,
    ) -> None:
        """
        Initialize the scheduler; the thread is not started yet.

        Args:
            session: Session whose pets are ticked and whose game-over flag is latched
            interval: Seconds between firings
            rng: Source of decay draws
            on_tick: Called after every firing (e.g. to redraw the status screen)
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.session = session
        self.interval = interval
        self.rng = rng
        self.on_tick = on_tick
        self.ticks = 0
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "DecayScheduler":
        if self._thread is not None:
            raise RuntimeError("scheduler already started")
        self._thread = threading.Thread(target=self._run, name="decay-scheduler", daemon=True)
        self._thread.start()
        logger.debug("Decay scheduler started (every %.2fs)", self.interval)
        return self

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop firing; safe to call more than once and from any thread."""
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        logger.debug("Decay scheduler stopped after %d ticks", self.ticks)

    def _run(self) -> None:
        """Worker thread main loop."""
        while not self._stop.wait(self.interval):
            self.tick_once()
            if self.session.is_over:
                logger.debug("Decay scheduler idle: game over")
                break

    def tick_once(self) -> list[Pet]:
        """
        Fire once: tick every live pet and latch game-over on the first death.

        Once the game is over nothing ticks any more, so the survivors keep
        the needs they had when the first pet died.

        Returns:
            The pets that died on this firing
        """
        if self.session.is_over:
            return []
        died = []
        for pet in self.session.pets:
            if pet.tick(self.rng):
                died.append(pet)
        self.ticks += 1
        logger.debug(
            "Tick %d: %s",
            self.ticks,
            ", ".join(f"{p.display_name} h={p.hunger} b={p.boredom}" for p in self.session.pets),
        )
        if died and not self.session.is_over:
            logger.info("Game over: %s", ", ".join(p.display_name for p in died))
            self.session.latch_game_over()
        if self.on_tick is not None and not self._stop.is_set():
            try:
                self.on_tick()
            except Exception:
                logger.exception("Tick callback failed")
        return died
