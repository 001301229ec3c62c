import pytest

from immolate.consumables import Planet, Tarot
from immolate.deck import Decks
from immolate.pack import WEIGHTED_PACKS
from immolate.shop import BASE_RATE_TOTAL, BASE_RATES, Shop, main
from immolate.state import State


def test_default_shop():
    shop = Shop()
    assert shop.shop_size == 2
    assert shop.voucher.name == "OVERSTOCK_NORM"
    assert shop.packs == [WEIGHTED_PACKS[0], WEIGHTED_PACKS[0]]
    assert shop.cards == []
    assert shop.total_rate == BASE_RATE_TOTAL


def test_base_rates_sum_to_total():
    shop = Shop()
    assert [rate.rate for rate in shop.rates] == [20.0, 4.0, 4.0, 0.0, 0.0]
    assert sum(rate.rate for rate in shop.rates) == shop.total_rate


def test_random_fills_shop():
    state = State("ABC", Decks.RED)
    shop = Shop()
    shop.random(state)
    assert len(shop.cards) == shop.shop_size
    assert shop.packs[0].name == "BUFFOON_PACK"
    assert shop.packs[1] in WEIGHTED_PACKS
    owned = [state.vouchers[i] for i in range(len(state.vouchers)) if state.vouchers[i].owned]
    assert [v.name for v in owned] == [shop.voucher.name]


def test_random_is_deterministic():
    results = []
    for _ in range(2):
        shop = Shop()
        shop.random(State("SEED1", Decks.RED))
        results.append((shop.packs, shop.voucher, shop.cards))
    assert results[0] == results[1]


def test_shop_size_zero_gives_no_cards():
    shop = Shop()
    shop.shop_size = 0
    shop.random(State("ABC", Decks.RED))
    assert shop.cards == []


def test_only_planets_when_other_rates_zero():
    shop = Shop()
    shop.rates[0].rate = 0.0
    shop.rates[1].rate = 0.0
    shop.total_rate = 4.0
    shop.shop_size = 5
    shop.random(State("ABC", Decks.RED))
    assert len(shop.cards) == 5
    assert all(isinstance(card, Planet) for card in shop.cards)


def test_only_tarots_when_other_rates_zero():
    shop = Shop()
    shop.rates[0].rate = 0.0
    shop.rates[2].rate = 0.0
    shop.total_rate = 4.0
    shop.shop_size = 3
    shop.random(State("XYZ", Decks.BLUE))
    assert len(shop.cards) == 3
    assert all(isinstance(card, Tarot) for card in shop.cards)


def test_set_spectral_rate():
    shop = Shop()
    shop.set_spectral_rate(2.0)
    assert shop.rates[4].rate == 2.0
    assert shop.total_rate == pytest.approx(BASE_RATE_TOTAL + 2.0)


def test_set_card_rate_does_not_touch_base():
    shop = Shop()
    shop.set_card_rate(4.0)
    assert shop.rates[3].rate == 4.0
    assert BASE_RATES[3].rate == 0.0
    assert shop.total_rate == pytest.approx(BASE_RATE_TOTAL + 4.0)


def test_main_prints_shop(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("shop: Shop(")
    assert "BUFFOON_PACK" in out


def test_main_rejects_unknown_deck():
    with pytest.raises(SystemExit):
        main(["ABC", "--deck", "NOPE"])