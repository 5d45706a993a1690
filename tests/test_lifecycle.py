import pytest

from conftest import FakeConsole, ScriptedRandom
from vpets.errors import InvariantViolation
from vpets.lifecycle import detect_deceased, lifespan, prompt_restart, shutdown
from vpets.pet import Pet, PetKind
from vpets.utils import fmt_lifespan


def test_detect_deceased_picks_first_pet_past_death_mood():
    pets = [Pet("ace", PetKind.DOG, 20), Pet("bea", PetKind.CAT, 100), Pet("cy", PetKind.HORSE, 120)]
    assert detect_deceased(pets).name == "bea"


def test_detect_deceased_prefers_the_earliest_death(clock):
    tom = Pet("tom", PetKind.CAT, 99, clock=clock)
    rex = Pet("rex", PetKind.DOG, 99, clock=clock)
    clock.t += 30
    rex.tick(ScriptedRandom([2, 2]))
    clock.t += 30
    tom.tick(ScriptedRandom([2, 2]))
    assert not tom.alive and not rex.alive
    assert detect_deceased([tom, rex]) is rex


def test_detect_deceased_without_a_death_is_a_contract_violation():
    with pytest.raises(InvariantViolation):
        detect_deceased([Pet("ace", PetKind.DOG, 99)])


@pytest.mark.parametrize(
    "seconds, text",
    [
        (0, "0 Seconds"),
        (1, "1 Second"),
        (59.9, "59 Seconds"),
        (90, "1 Minute and 30 Seconds"),
        (120, "2 Minutes and 0 Seconds"),
        (61 * 60, "1 Hour, 1 Minute and 0 Seconds"),
        (2 * 3600 + 5, "2 Hours, 0 Minutes and 5 Seconds"),
        (86400 + 3661, "1 Day, 1 Hour, 1 Minute and 1 Second"),
        (-5, "0 Seconds"),
    ],
)
def test_fmt_lifespan(seconds, text):
    assert fmt_lifespan(seconds) == text


def test_lifespan_between_timestamps():
    assert lifespan(1000.0, 1090.0) == "1 Minute and 30 Seconds"


@pytest.mark.parametrize(
    "answer, expected",
    [("y", True), ("Yes please", True), ("  YEP", True), ("n", False), ("", False), ("maybe", False)],
)
def test_prompt_restart(answer, expected):
    assert prompt_restart(FakeConsole([answer])) is expected


def test_shutdown_counts_down_then_exits():
    console = FakeConsole([])
    sleeps = []
    codes = []
    shutdown(console, 3, sleep=sleeps.append, exit=codes.append)
    assert "Thanks for playing!" in console.output
    for n in (3, 2, 1, 0):
        assert f"\rExiting in {n}" in console.output
    assert sleeps == [1.0, 1.0, 1.0]
    assert codes == [0]


def test_shutdown_exits_via_system_exit_by_default():
    with pytest.raises(SystemExit) as excinfo:
        shutdown(FakeConsole([]), 0)
    assert excinfo.value.code == 0
