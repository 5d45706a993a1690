import pytest

from vpets.errors import InvariantViolation
from vpets.pet import Pet, PetKind
from vpets.session import Session


@pytest.fixture
def session():
    return Session([Pet("ace", PetKind.DOG), Pet("bea", PetKind.CAT)], active=1)


def test_active_pet(session):
    assert session.active_index == 1
    assert session.active_pet.name == "bea"


def test_switch_to(session):
    pet = session.switch_to(0)
    assert pet.name == "ace"
    assert session.active_pet is pet
    assert session.snapshot()[1] == 0


@pytest.mark.parametrize("index", [-1, 2])
def test_switch_out_of_range_is_a_contract_violation(session, index):
    with pytest.raises(InvariantViolation):
        session.switch_to(index)
    assert session.active_index == 1


def test_game_over_latch(session):
    pets, active, over = session.snapshot()
    assert (active, over) == (1, False)
    assert len(pets) == 2
    session.latch_game_over()
    session.latch_game_over()
    assert session.is_over
    assert session.snapshot()[2] is True


def test_session_needs_pets():
    with pytest.raises(InvariantViolation):
        Session([])
