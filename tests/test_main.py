import io
import sys

from vpets.__main__ import main


def test_plain_console_exits_cleanly_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["vpets", "--plain", "--interval", "5", "--seed", "1"])
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\ntom\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "What is your first pet going to be?" in out
    assert "You chose a Cat to be your first pet." in out
    assert "What is your second pet going to be?" in out


class TtyInput(io.StringIO):
    def isatty(self):
        return True


def test_locale_is_set_only_on_the_curses_path(monkeypatch):
    import vpets.__main__ as entry

    calls = []
    monkeypatch.setattr(entry.locale, "setlocale", lambda *args: calls.append(args))
    monkeypatch.setattr(entry.curses, "wrapper", lambda fn: 7)

    monkeypatch.setattr(sys, "argv", ["vpets"])
    monkeypatch.setattr(sys, "stdin", TtyInput(""))
    assert main() == 7
    assert calls == [(entry.locale.LC_ALL, "")]

    calls.clear()
    monkeypatch.setattr(sys, "argv", ["vpets", "--plain"])
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main() == 0
    assert calls == []


def test_unsupported_locale_does_not_stop_the_game(monkeypatch):
    import vpets.__main__ as entry

    def refuse(*args):
        raise entry.locale.Error("unsupported locale setting")

    monkeypatch.setattr(entry.locale, "setlocale", refuse)
    monkeypatch.setattr(entry.curses, "wrapper", lambda fn: 0)
    monkeypatch.setattr(sys, "argv", ["vpets"])
    monkeypatch.setattr(sys, "stdin", TtyInput(""))
    assert main() == 0
