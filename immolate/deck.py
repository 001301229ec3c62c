"""Decks of playing cards and the starting deck choices."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Iterable

from immolate.card import CARD_CARDS

if TYPE_CHECKING:
    from immolate.state import State


class Hands(Enum):
    """Poker hands, strongest first."""

    FLUSH_FIVE = auto()
    FLUSH_HOUSE = auto()
    FIVE_OF_A_KIND = auto()
    STRAIGHT_FLUSH = auto()
    FOUR_OF_A_KIND = auto()
    FULL_HOUSE = auto()
    FLUSH = auto()
    STRAIGHT = auto()
    THREE_OF_A_KIND = auto()
    TWO_PAIR = auto()
    PAIR = auto()
    HIGH_CARD = auto()


class Deck:
    """The cards of a run together with hand and discard limits."""

    def __init__(self) -> None:
        self.cards: list[str] = list(CARD_CARDS)
        self.hand_size = 8
        self.discard_amount = 4
        self.hand_amount = 4
        self.hand: list[str] = []

    def __repr__(self) -> str:
        return (
            f"Deck(cards={self.cards!r}, hand_size={self.hand_size}, "
            f"discard_amount={self.discard_amount}, hand_amount={self.hand_amount}, "
            f"hand={self.hand!r})"
        )

    def filter_deck(self, match_strings: Iterable[str]) -> None:
        """Remove every card whose name contains any of ``match_strings`` (case-insensitive)."""
        needles = [text.upper() for text in match_strings]
        self.cards = [card for card in self.cards if not any(n in card for n in needles)]

    def double_deck(self) -> None:
        """Append a copy of the current cards to the deck."""
        self.cards.extend(list(self.cards))


class Decks(Enum):
    """Starting deck choices."""

    RED = auto()
    BLUE = auto()
    YELLOW = auto()
    BLACK = auto()
    ABANDONED = auto()
    CHECKERED = auto()
    PAINTED = auto()

    def setup(self, game_state: State) -> Deck:
        """Build the deck for this choice and apply its effects to ``game_state``."""
        deck = Deck()
        if self is Decks.RED:
            deck.discard_amount += 1
        elif self is Decks.BLUE:
            deck.hand_amount += 1
        elif self is Decks.YELLOW:
            game_state.gold += 10
        elif self is Decks.BLACK:
            deck.hand_amount -= 1
            game_state.joker_amount += 1
        elif self is Decks.ABANDONED:
            deck.filter_deck(["J", "Q", "K"])
        elif self is Decks.CHECKERED:
            deck.filter_deck(["D", "C"])
            deck.double_deck()
        elif self is Decks.PAINTED:
            deck.hand_size += 2
            game_state.joker_amount -= 1
        return deck