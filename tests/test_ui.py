import io

import pytest

from vpets import ui
from vpets.errors import InputClosed
from vpets.pet import Pet, PetKind


class FakeScreen:
    def __init__(self, keys, size=(24, 80)):
        self.keys = list(keys)
        self.size = size
        self.lines = {}
        self.refreshes = 0

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def getmaxyx(self):
        return self.size

    def erase(self):
        self.lines = {}

    def addstr(self, y, x, text):
        self.lines[y] = text

    def move(self, y, x):
        pass

    def refresh(self):
        self.refreshes += 1

    def nodelay(self, flag):
        pass

    def keypad(self, flag):
        pass


def test_stream_console_reads_lines_and_reports_end_of_input():
    out = io.StringIO()
    console = ui.StreamConsole(io.StringIO("2\r\n hello \n"), out)
    assert console.read_line() == "2"
    assert console.read_line() == " hello "
    with pytest.raises(InputClosed):
        console.read_line()


def test_stream_console_clear():
    out = io.StringIO()
    ui.StreamConsole(io.StringIO(), out, ansi=True).clear()
    assert out.getvalue() == "\033[2J\033[H"
    out = io.StringIO()
    console = ui.StreamConsole(io.StringIO(), out)
    console.clear()
    console.write("hi")
    assert out.getvalue() == "\nhi"


def test_curses_console_line_editing():
    screen = FakeScreen([ord("1"), -1, ord("x"), 127, ord("2"), 10])
    console = ui.CursesConsole(screen)
    console.write("Pick > ")
    assert console.read_line() == "12"
    assert screen.lines[0] == "Pick > 12"


def test_curses_console_ctrl_d_on_empty_line_closes_input():
    console = ui.CursesConsole(FakeScreen([ui.CTRL_D]))
    with pytest.raises(InputClosed):
        console.read_line()


def test_curses_console_redraw_keeps_typed_text():
    screen = FakeScreen([])
    console = ui.CursesConsole(screen)
    console.write("menu > ")
    # "4" typed but not entered, then the screen is redrawn from another caller
    console._buf.append("4")
    with console.lock:
        console.clear()
        console.write("fresh menu > ")
    assert screen.lines[0] == "fresh menu > 4"


def test_curses_console_carriage_return_overwrites_line():
    screen = FakeScreen([])
    console = ui.CursesConsole(screen)
    console.write("\rExiting in 3")
    console.write("\rExiting in 2")
    assert screen.lines[0] == "Exiting in 2"


def test_care_messages_pluralize():
    pet = Pet("rex", PetKind.DOG)
    assert "You fed Rex 1 unit of food." in ui.fed_message(pet, 1)
    assert "You fed Rex 4 units of food." in ui.fed_message(pet, 4)
    assert "isn't hungry" in ui.fed_message(pet, 0)
    assert "for 1 minute." in ui.played_message(pet, 1)
    assert "doesn't need any attention" in ui.played_message(pet, 0)


def test_menus_are_numbered_from_one():
    text = ui.kind_menu(1, [k.value for k in PetKind])
    assert "second pet" in text
    assert "  1. Cat" in text
    assert "  6. Horse" in text
    assert "  5. Exit" in ui.MAIN_MENU
