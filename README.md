# immolate

Reproduces the seeded random number generator of a poker roguelike and uses
it to predict what a run will offer: shop cards, booster packs, vouchers and
the starting deck, all from a seed string.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
immolate
```

This rolls the first shop for the seed `ABC` on the red deck and prints its
packs, voucher and cards.

A different seed and starting deck can be given:

```
immolate XYZ --deck yellow
```

`--deck` takes one of `RED`, `BLUE`, `YELLOW`, `BLACK`, `ABANDONED`,
`CHECKERED` or `PAINTED` (in any letter case); the default is `RED`.

## Library use

```python
from immolate.state import State
from immolate.deck import Decks
from immolate.shop import Shop

game_state = State("ABC", Decks.RED)
shop = Shop()
shop.random(game_state)
print(shop)
```

The pieces it is built from:

- `immolate.lua_random`: `fract`, `round_double`, `seed_from_string`, and
  `LuaRandom`, a four-word xorshift generator seeded from a float, with
  `random_double` and `random_int`.
- `immolate.rng`: `RandomState`, which gives each named node (a string such as
  `"shop_pack1ABC"`) its own evolving seed, with `get_node`, `random_double`,
  `random_int`, `random_index` and `roll_for_soul`; `NodeMap` holds the node
  values.
- `immolate.state.State`: a run with its `random_state`, `deck`, `vouchers`,
  `gold` and `joker_amount`; `next_ante()` moves to the next ante.
- `immolate.deck`: `Decks`, whose `setup(game_state)` builds a `Deck` and
  applies the deck's effect (extra discard, extra hand, gold, joker slots,
  removed or doubled cards); `Deck` has `filter_deck` and `double_deck`.
  `Hands` lists the poker hands.
- `immolate.pack`: `Pack.get_random_pack(game_state)` picks a weighted booster
  pack (the first one of a run is always a buffoon pack); `open(random_state)`
  rolls its cards, `get_random_card` rolls one, and `get_card` looks one up by
  index. `PackCardType` names the card kinds.
- `immolate.shop`: `Shop` with `random(game_state)`, `set_spectral_rate` and
  `set_card_rate`; `Rate` is the weight of one card kind.
- `immolate.voucher`: `Voucher` and `VoucherArray`, whose
  `random(random_state, from_tag)` draws an available voucher, marks it owned
  and unlocks its upgrade; it raises `LookupError` when none is available.
- `immolate.joker`: `Joker.get_random`, `Joker.from_number`, `Rarity` and
  `get_pool`, which rolls the rarity to draw from.
- `immolate.card.Card` and, in `immolate.consumables`, `Tarot`, `Planet` and
  `Spectral`, each with `get_random` and `from_number`. Tarots may be replaced
  by the soul, planets and spectrals by the soul or a black hole.

Every call advances the state it is given, so results depend on the order of
calls, just as in the game.

## What it does not do

The package predicts rolls only; it does not play a run. There is no scoring,
no hand evaluation, no blinds or tags, and the command shows only the first
shop of ante 1. Only seven starting decks are known, and the hand held in a
`Deck` is never dealt.