from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence

from .errors import InvalidCard

ACE = 1
ACE_HIGH = 14
VALUES = range(1, 14)

# Compact labels use a single character per rank ("T" for ten).
RANK_CHARS = "A23456789TJQK"
DISPLAY_VALUES = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]


class Suit(Enum):
    SPADES = "s"
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}


def comparison_value(value: int) -> int:
    """Ranking value of a raw card value: the Ace counts 14, the rest as is."""
    if value == ACE:
        return ACE_HIGH
    return value


@dataclass(frozen=True)
class Card:
    suit: Suit
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            raise InvalidCard(f"Invalid suit: {self.suit!r}")
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value not in VALUES:
            raise InvalidCard(f"Invalid value: {self.value!r}")

    @property
    def rank_value(self) -> int:
        return comparison_value(self.value)

    @property
    def label(self) -> str:
        return f"{RANK_CHARS[self.value - 1]}{self.suit.value}"

    def __str__(self) -> str:
        return f"{DISPLAY_VALUES[self.value - 1]}{self.suit.symbol}"


def validate_card(card: object) -> Card:
    if not isinstance(card, Card):
        raise InvalidCard(f"Not a card: {card!r}")
    return card


def value_name(rank_value: int) -> str:
    """Short name of a comparison value, e.g. 14 -> "A", 10 -> "10"."""
    if rank_value == ACE_HIGH:
        rank_value = ACE
    return DISPLAY_VALUES[rank_value - 1]


def parse_label(label: str) -> Card:
    if not isinstance(label, str) or len(label) not in (2, 3):
        raise InvalidCard(f"Invalid card label: {label!r}")
    rank, suit_code = label[:-1], label[-1]
    if rank == "10":
        rank = "T"
    if len(rank) != 1 or rank.upper() not in RANK_CHARS:
        raise InvalidCard(f"Invalid rank: {label!r}")
    try:
        suit = Suit(suit_code.lower())
    except ValueError:
        raise InvalidCard(f"Invalid suit: {label!r}") from None
    return Card(suit, RANK_CHARS.index(rank.upper()) + 1)


def parse_cards(labels: Iterable[str]) -> List[Card]:
    return [parse_label(label) for label in labels]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(str(card) for card in cards)
