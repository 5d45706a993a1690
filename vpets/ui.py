"""
VirtualPets - User Interface

This module holds the two consoles the game can talk through (a curses screen
and plain text streams) and the text of every screen and menu.
"""

from __future__ import annotations

import curses
import sys
import threading
import time
from typing import TYPE_CHECKING, Optional, Protocol, Sequence, TextIO

from .art import RIP
from .errors import InputClosed

if TYPE_CHECKING:
    from .pet import Pet

ENTER_KEYS = (10, 13, curses.KEY_ENTER)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)
CTRL_D = 4
MAX_LINE = 40

# Seconds between polls of a non-blocking curses window
POLL_S = 0.02


class Console(Protocol):
    """Renderer plus input source, as the game core sees them."""

    lock: "threading.RLock"

    def clear(self) -> None: ...

    def write(self, text: str) -> None: ...

    def read_line(self) -> str: ...


class StreamConsole:
    """Console over text streams (stdin/stdout by default)."""

    def __init__(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None, ansi: Optional[bool] = None
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.ansi = self.stdout.isatty() if ansi is None else ansi
        self.lock = threading.RLock()

    def clear(self) -> None:
        with self.lock:
            if self.ansi:
                self.stdout.write("\033[2J\033[H")
            else:
                self.stdout.write("\n")
            self.stdout.flush()

    def write(self, text: str) -> None:
        with self.lock:
            self.stdout.write(text)
            self.stdout.flush()

    def read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise InputClosed("end of input")
        return line.rstrip("\r\n")


class CursesConsole:
    """
    Full-screen curses console.

    Everything written since the last clear() is kept and the whole screen is
    redrawn on every change, so a redraw from another thread never loses the
    line the player is typing.
    """

    def __init__(self, stdscr: "curses._CursesWindow") -> None:
        self.stdscr = stdscr
        self.lock = threading.RLock()
        self._text = ""
        self._buf: list[str] = []

    def init_curses(self) -> None:
        """Initialize curses settings."""
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)

    def clear(self) -> None:
        with self.lock:
            self._text = ""
            self.render()

    def write(self, text: str) -> None:
        with self.lock:
            self._text += text
            self.render()

    def render(self) -> None:
        """Redraw the tail of the text that fits, then the pending input."""
        self.stdscr.erase()
        h, w = self.stdscr.getmaxyx()
        lines = (self._text + "".join(self._buf)).split("\n")[-h:]
        lines = [line.rsplit("\r", 1)[-1] for line in lines]
        for y, line in enumerate(lines):
            try:
                self.stdscr.addstr(y, 0, line[: max(0, w - 1)])
            except curses.error:
                pass
        try:
            self.stdscr.move(len(lines) - 1, min(len(lines[-1]), max(0, w - 1)))
        except curses.error:
            pass
        self.stdscr.refresh()

    def read_line(self) -> str:
        """
        Read one line, polling the non-blocking window.

        Raises:
            InputClosed: Ctrl-D on an empty line
        """
        while True:
            with self.lock:
                ch = self.stdscr.getch()
                if ch in ENTER_KEYS:
                    line = "".join(self._buf)
                    self._buf.clear()
                    self._text += line + "\n"
                    self.render()
                    return line
                if ch == CTRL_D and not self._buf:
                    raise InputClosed("ctrl-d")
                if ch in BACKSPACE_KEYS:
                    if self._buf:
                        self._buf.pop()
                        self.render()
                elif ch == curses.KEY_RESIZE:
                    self.render()
                elif 32 <= ch <= 126:
                    if len(self._buf) < MAX_LINE:
                        self._buf.append(chr(ch))
                        self.render()
            if ch == -1:
                time.sleep(POLL_S)


# --- Screens -----------------------------------------------------------------

WELCOME = "Welcome to VirtualPets, the best pet-keeping simulator in your terminal!\n"

PROMPT = "\n\n > "

MAIN_MENU = (
    "\nWhat are you going to do next? Choose from the following:\n\n"
    "  1. Feed\n"
    "  2. Play\n"
    "  3. Speak with pet\n"
    "  4. Choose pet\n"
    "  5. Exit" + PROMPT
)

CONTINUE = "\nTo continue, press [ RETURN ]"


def ordinal(index: int) -> str:
    return ("first", "second")[index] if index < 2 else f"#{index + 1}"


def numbered(items: Sequence[str]) -> str:
    """'  1. Cat\\n  2. Dog' style list."""
    return "\n".join(f"  {i + 1}. {item}" for i, item in enumerate(items))


def kind_menu(index: int, kinds: Sequence[str]) -> str:
    return (
        WELCOME
        + f"\nWhat is your {ordinal(index)} pet going to be? Choose from the following:\n\n"
        + numbered(kinds)
        + PROMPT
    )


def name_prompt(index: int, kind: str) -> str:
    return f"\nYou chose a {kind} to be your {ordinal(index)} pet. What are you going to name it?\n > "


def first_pet_menu(pets: Sequence["Pet"]) -> str:
    names = [p.display_name for p in pets]
    return (
        f"\nYou now have two pets; {names[0]} and {names[1]}. Select one to act on.\n\n"
        + numbered(names)
        + PROMPT
    )


def switch_pet_menu(pets: Sequence["Pet"]) -> str:
    return "\nSelect a pet to pet:\n\n" + numbered([p.display_name for p in pets]) + PROMPT


def status_screen(pet: "Pet") -> str:
    return "\n".join(pet.art) + "\n\n" + pet.status_window() + "\n"


def reminder(pet: "Pet") -> str:
    return f"\n > Don't forget to look after {pet.display_name} as well!\n"


def fed_message(pet: "Pet", amount: int) -> str:
    if amount > 0:
        return f"\nYou fed {pet.display_name} {amount} unit{'s' if amount != 1 else ''} of food.\n"
    return f"\n{pet.display_name} isn't hungry right now. Try again when its hunger goes up!\n"


def played_message(pet: "Pet", amount: int) -> str:
    if amount > 0:
        return f"\nYou played with {pet.display_name} for {amount} minute{'s' if amount != 1 else ''}.\n"
    return f"\n{pet.display_name} doesn't need any attention right now. Try again when its boredom goes up!\n"


def speech(pet: "Pet", line: str) -> str:
    return f"\n{pet.display_name} says:\n{line}\n"


def selected_message(pet: "Pet") -> str:
    return f"\nYou have selected {pet.display_name} the {pet.kind.value}.\n"


def obituary(pet: "Pet", lifespan: str) -> str:
    return (
        "\n".join(RIP)
        + f"\n\nOh no! {pet.display_name} the {pet.kind.value} has passed out for good.\n"
        + f"{pet.display_name} lived for {lifespan}.\n"
        + "\nDo you want to start over? (y/n)\n > "
    )


def passed_out_message(pet: "Pet") -> str:
    return f"\n\nOh no, {pet.display_name} has passed out! Press [ RETURN ]"
