import pytest

from immolate.consumables import (
    BLACK_HOLE,
    PLANET_CARDS,
    SOUL,
    SPECTRAL_CARDS,
    TAROT_CARDS,
    Planet,
    Spectral,
    Tarot,
)
from immolate.rng import RandomState


def test_from_number_picks_table_entries():
    assert Tarot.from_number(0).name == "FOOL"
    assert Planet.from_number(len(PLANET_CARDS) - 1).name == "ERIS"
    assert Spectral.from_number(0).name == "FAMILIAR"


def test_soul_and_black_hole_are_last_spectrals():
    assert Spectral.from_number(16).name == SOUL == "SOUL"
    assert Spectral.from_number(17).name == BLACK_HOLE == "BLACK_HOLE"


@pytest.mark.parametrize(
    "kind, table",
    [(Tarot, TAROT_CARDS), (Planet, PLANET_CARDS), (Spectral, SPECTRAL_CARDS)],
)
def test_from_number_out_of_range(kind, table):
    assert kind.from_number(len(table) - 1).name == table[-1]
    with pytest.raises(IndexError):
        kind.from_number(len(table))
    with pytest.raises(IndexError):
        kind.from_number(-1)


def test_tarot_random_is_in_table_or_soul():
    state = RandomState("ABC")
    names = [Tarot.get_random(state).name for _ in range(10)]
    assert all(name in TAROT_CARDS or name == SOUL for name in names)


def test_planet_random_is_in_table_or_special():
    state = RandomState("ABC")
    names = [Planet.get_random(state).name for _ in range(10)]
    assert all(name in PLANET_CARDS or name in (SOUL, BLACK_HOLE) for name in names)


def test_spectral_random_is_spectral():
    state = RandomState("ABC")
    card = Spectral.get_random(state)
    assert card.name in SPECTRAL_CARDS
    assert isinstance(card, Spectral)


@pytest.mark.parametrize("kind", [Tarot, Planet, Spectral])
def test_random_draws_are_deterministic(kind):
    first = RandomState("SEED1")
    second = RandomState("SEED1")
    assert [kind.get_random(first) for _ in range(5)] == [kind.get_random(second) for _ in range(5)]


def test_repeated_draws_advance():
    state = RandomState("ABC")
    names = {Tarot.get_random(state).name for _ in range(20)}
    assert len(names) > 1


def test_kinds_compare_by_type():
    assert Tarot("SOUL") != Spectral("SOUL")
    assert Planet("SOUL") == Planet("SOUL")