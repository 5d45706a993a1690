"""
VirtualPets - Game Loop

This module contains the session controller: the state machine that sets up
two pets, runs the menu loop against them while the decay scheduler works in
the background, and hands over to the lifecycle helpers when a pet dies.
"""

from __future__ import annotations

import logging
import random
import sys
import threading
import time
from enum import Enum, auto
from typing import Callable, Optional

from . import ui
from .errors import InputClosed, InvalidSelection
from .lifecycle import detect_deceased, lifespan, prompt_restart, shutdown
from .pet import RANDOM, Pet, PetKind
from .scheduler import DecayScheduler
from .session import Session
from .ui import Console
from .utils import EXIT_COUNTDOWN_S, PET_COUNT, REMINDER_MOOD, TICK_INTERVAL_S, now

logger = logging.getLogger(__name__)


class Phase(Enum):
    SETUP = auto()
    PLAYING = auto()
    GAME_OVER = auto()
    EXIT = auto()


class MenuAction(Enum):
    """Main menu entries, in the order they are listed."""

    FEED = 0
    PLAY = 1
    TALK = 2
    SWITCH_PET = 3
    EXIT = 4


def parse_choice(raw: str, low: int, high: int) -> int:
    """
    Parse a 1-based menu number.

    Raises:
        InvalidSelection: not an integer, or outside low..high inclusive
    """
    try:
        value = int(raw.strip())
    except ValueError:
        raise InvalidSelection(raw, low, high) from None
    if not low <= value <= high:
        raise InvalidSelection(raw, low, high)
    return value


def collect_menu_answer(
    console: Console,
    prompt: str,
    low: int,
    high: int,
    on_invalid: Optional[Callable[[], None]] = None,
    abort: Optional[threading.Event] = None,
) -> Optional[int]:
    """
    Ask until the player types a number in low..high.

    Args:
        console: Where to prompt and read
        prompt: Text written before every read
        low: Smallest valid answer (1-based)
        high: Largest valid answer (1-based)
        on_invalid: Called before re-prompting, typically to clear the screen
        abort: If set once a line has been read, give up and return None

    Returns:
        The zero-based index of the choice, or None if aborted
    """
    while True:
        console.write(prompt)
        raw = console.read_line()
        if abort is not None and abort.is_set():
            return None
        try:
            return parse_choice(raw, low, high) - 1
        except InvalidSelection as e:
            logger.debug("Invalid selection: %s", e)
            if on_invalid is not None:
                on_invalid()


class SessionController:
    """Drives one player through as many games as they want to play."""

    def __init__(
        self,
        console: Console,
        rng=random,
        clock: Callable[[], float] = now,
        interval: float = TICK_INTERVAL_S,
        countdown: int = EXIT_COUNTDOWN_S,
        sleep: Callable[[float], None] = time.sleep,
        exit: Callable[[int], None] = sys.exit,
    ) -> None:
        """
        Initialize the controller.

        Args:
            console: Renderer and input source
            rng: Source of randomness for pets and the scheduler
            clock: Time source for birth/death stamps
            interval: Seconds between decay ticks
            countdown: Seconds counted down before exiting
            sleep: Sleep used by the exit countdown
            exit: Process exit used after the countdown
        """
        self.console = console
        self.rng = rng
        self.clock = clock
        self.interval = interval
        self.countdown = countdown
        self.sleep = sleep
        self.exit = exit

        self.phase = Phase.SETUP
        self.session: Optional[Session] = None
        self.scheduler: Optional[DecayScheduler] = None
        self.games = 0
        self._in_menu = threading.Event()
        self._announced = False

    # --- state machine -------------------------------------------------------

    def run(self) -> int:
        """
        Play until the player quits.

        Returns:
            Exit code (0 for normal exit)
        """
        try:
            while self.phase is not Phase.EXIT:
                if self.phase is Phase.SETUP:
                    self.setup()
                elif self.phase is Phase.PLAYING:
                    self.play_turn()
                elif self.phase is Phase.GAME_OVER:
                    self.game_over()
        except InputClosed:
            logger.info("Input closed, leaving")
            return 0
        finally:
            self.stop_scheduler()
        shutdown(self.console, self.countdown, sleep=self.sleep, exit=self.exit)
        return 0

    def setup(self) -> None:
        """Collect two pets, pick the active one and start the decay scheduler."""
        kinds = [k.value for k in PetKind]
        pets: list[Pet] = []
        self.console.clear()
        for i in range(PET_COUNT):
            choice = collect_menu_answer(self.console, ui.kind_menu(i, kinds), 1, len(kinds), self.console.clear)
            kind = PetKind.from_index(choice)
            self.console.write(ui.name_prompt(i, kind.value))
            name = self.console.read_line().strip() or kind.value
            pets.append(Pet(name, kind, clock=self.clock))
            self.console.clear()

        active = collect_menu_answer(self.console, ui.first_pet_menu(pets), 1, len(pets), self.console.clear)
        self.session = Session(pets, active)
        self._announced = False
        self.games += 1
        logger.info(
            "Game %d started with %s",
            self.games,
            ", ".join(f"{p.display_name} the {p.kind.value}" for p in pets),
        )

        self.scheduler = DecayScheduler(self.session, self.interval, self.rng, on_tick=self.refresh).start()
        self.console.write(ui.selected_message(self.session.active_pet))
        self.wait_for_return("To get started, press [ RETURN ]")
        self.phase = Phase.PLAYING

    def play_turn(self) -> None:
        """Show the active pet, take one menu choice and apply it."""
        session = self.session
        if session.is_over:
            self.phase = Phase.GAME_OVER
            return

        self.draw_status()
        self._in_menu.set()
        try:
            choice = collect_menu_answer(
                self.console, ui.MAIN_MENU, 1, len(MenuAction), self.draw_status, abort=session.game_over
            )
        finally:
            self._in_menu.clear()
        if choice is None or session.is_over:
            self.phase = Phase.GAME_OVER
            return

        action = MenuAction(choice)
        pet = session.active_pet
        if action is MenuAction.FEED:
            change = pet.feed(RANDOM, self.rng)
            self.console.write(ui.fed_message(pet, change.amount))
            self.wait_for_return()
        elif action is MenuAction.PLAY:
            change = pet.play(RANDOM, self.rng)
            self.console.write(ui.played_message(pet, change.amount))
            self.wait_for_return()
        elif action is MenuAction.TALK:
            self.console.write(ui.speech(pet, pet.speak(self.rng)))
            self.wait_for_return()
        elif action is MenuAction.SWITCH_PET:
            index = collect_menu_answer(
                self.console, ui.switch_pet_menu(session.pets), 1, len(session.pets), self.console.clear
            )
            pet = session.switch_to(index)
            self.console.write(ui.selected_message(pet))
            self.wait_for_return()
        elif action is MenuAction.EXIT:
            logger.info("Player left game %d", self.games)
            self.stop_scheduler()
            self.phase = Phase.EXIT

    def game_over(self) -> None:
        """Stop the clock, show who died and how long they lived, offer a restart."""
        self.stop_scheduler()
        pet = detect_deceased(self.session.pets)
        lived = lifespan(pet.born_at, pet.died_at)
        logger.info("Game %d over: %s lived for %s", self.games, pet.display_name, lived)

        self.console.clear()
        self.console.write(ui.obituary(pet, lived))
        if prompt_restart(self.console):
            self.session = None
            self.phase = Phase.SETUP
        else:
            self.phase = Phase.EXIT

    # --- helpers -------------------------------------------------------------

    def stop_scheduler(self) -> None:
        if self.scheduler is not None:
            self.scheduler.stop()
            self.scheduler = None

    def wait_for_return(self, text: str = ui.CONTINUE) -> None:
        self.console.write(text)
        self.console.read_line()

    def draw_status(self) -> None:
        """Clear and show the active pet, plus a reminder about the other one."""
        pets, active, _ = self.session.snapshot()
        with self.console.lock:
            self.console.clear()
            self.console.write(ui.status_screen(pets[active]))
            for other in pets:
                if other is not pets[active] and other.mood() > REMINDER_MOOD:
                    self.console.write(ui.reminder(other))

    def refresh(self) -> None:
        """
        Scheduler callback: redraw the menu screen with fresh numbers.

        Only while the player sits at the main menu. Once game-over is latched
        the player is told to press RETURN instead, once.
        """
        if not self._in_menu.is_set():
            return
        with self.console.lock:
            if not self._in_menu.is_set():
                return
            if self.session.is_over:
                if not self._announced:
                    self._announced = True
                    self.console.write(ui.passed_out_message(detect_deceased(self.session.pets)))
                return
            self.draw_status()
            self.console.write(ui.MAIN_MENU)
