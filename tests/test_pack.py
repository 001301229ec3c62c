import pytest

from immolate.card import CARD_CARDS, Card
from immolate.consumables import Planet, Spectral, Tarot
from immolate.deck import Decks
from immolate.joker import Joker, Rarity
from immolate.pack import (
    BUFFOON_PACK_INDEX,
    TOTAL_WEIGHT,
    WEIGHTED_PACKS,
    Pack,
    PackCardType,
)
from immolate.rng import RandomState
from immolate.state import State

CLASSES = {
    PackCardType.TAROT: Tarot,
    PackCardType.PLANET: Planet,
    PackCardType.SPECTRAL: Spectral,
    PackCardType.JOKER: Joker,
    PackCardType.CARD: Card,
}


@pytest.mark.parametrize("seed", ["ABC", "XYZ", "SEED1", "SEED2", "TUTORIAL"])
def test_weights_add_up_to_total(seed):
    state = State(seed, Decks.RED)
    Pack.get_random_pack(state)
    pack = Pack.get_random_pack(state)
    assert pack in WEIGHTED_PACKS
    assert pack.weight > 0.0
    assert sum(p.weight for p in WEIGHTED_PACKS) == pytest.approx(TOTAL_WEIGHT)


def test_first_pack_is_buffoon():
    state = State("ABC", Decks.RED)
    pack = Pack.get_random_pack(state)
    assert pack.name == "BUFFOON_PACK"
    assert pack is WEIGHTED_PACKS[BUFFOON_PACK_INDEX]


def test_later_packs_come_from_table():
    state = State("ABC", Decks.RED)
    Pack.get_random_pack(state)
    assert Pack.get_random_pack(state) in WEIGHTED_PACKS


def test_first_pack_flag_toggles():
    state = State("ABC", Decks.RED)
    Pack.get_random_pack(state)
    Pack.get_random_pack(state)
    assert Pack.get_random_pack(state).name == "BUFFOON_PACK"


def test_random_pack_is_deterministic():
    picks = []
    for _ in range(2):
        state = State("SEED42", Decks.RED)
        picks.append([Pack.get_random_pack(state).name for _ in range(2)])
    assert picks[0] == picks[1]


@pytest.mark.parametrize("pack", WEIGHTED_PACKS, ids=lambda p: p.name)
def test_open_gives_size_cards_of_kind(pack):
    cards = pack.open(RandomState("XYZ"))
    assert len(cards) == pack.size
    assert all(isinstance(card, CLASSES[pack.card_type]) for card in cards)


def test_open_is_deterministic():
    pack = WEIGHTED_PACKS[6]
    witness = RandomState("ABC")
    expected = [Card.get_random(witness, "sta") for _ in range(pack.size)]
    cards = pack.open(RandomState("ABC"))
    assert len(cards) == 3
    assert all(card.name in CARD_CARDS for card in cards)
    assert cards == expected


def test_get_card_from_tables():
    assert WEIGHTED_PACKS[6].get_card(0, Rarity.COMMON) == Card("C_2")
    assert WEIGHTED_PACKS[0].get_card(0, Rarity.COMMON) == Tarot("FOOL")
    assert WEIGHTED_PACKS[3].get_card(0, Rarity.COMMON) == Planet("MERCURY")
    assert WEIGHTED_PACKS[12].get_card(9, Rarity.COMMON) == Spectral("IMMOLATE")
    assert WEIGHTED_PACKS[9].get_card(0, Rarity.LEGENDARY) == Joker("CAINO", Rarity.LEGENDARY)


def test_get_card_out_of_range():
    with pytest.raises(IndexError):
        WEIGHTED_PACKS[0].get_card(22, Rarity.COMMON)


def test_joker_pack_rarity_is_rolled():
    card = WEIGHTED_PACKS[9].get_random_card(RandomState("ABC"), Rarity.COMMON)
    assert card.rarity in (Rarity.COMMON, Rarity.UNCOMMON, Rarity.RARE)
    assert card.name in card.rarity.pool