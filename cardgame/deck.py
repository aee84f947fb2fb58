from __future__ import annotations

import random
from typing import Iterator, List, Optional, Tuple, Union

from .cards import VALUES, Card, Suit, validate_card
from .errors import EmptyDeck

RandomSource = Union[random.Random, int, None]


def _as_rng(rng: RandomSource) -> random.Random:
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)


def standard_cards() -> List[Card]:
    """All 52 cards, suit by suit in declaration order, Ace through King."""
    return [Card(suit, value) for suit in Suit for value in VALUES]


class Deck:
    """Ordered pile of cards; the top of the deck is index 0.

    The random source is owned by the deck. Pass a ``random.Random`` to share a
    generator, an int to seed a private one, or nothing for an OS-seeded one.
    """

    def __init__(self, rng: RandomSource = None) -> None:
        self.rng = _as_rng(rng)
        self._cards: List[Card] = standard_cards()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        (rng or self.rng).shuffle(self._cards)

    def draw(self) -> Card:
        if not self._cards:
            raise EmptyDeck("No cards left in the deck")
        return self._cards.pop(0)

    def deal(self, count: int) -> List[Card]:
        if count < 0:
            raise ValueError("Cannot deal a negative number of cards")
        if len(self._cards) < count:
            raise EmptyDeck("Not enough cards left in deck")
        cards = self._cards[:count]
        del self._cards[:count]
        return cards

    def add_card(self, card: Card) -> None:
        self._cards.append(validate_card(card))

    def remove_card(self, card: Card) -> bool:
        try:
            self._cards.remove(card)
        except ValueError:
            return False
        return True


def build_deck(seed: RandomSource = None) -> Deck:
    deck = Deck(seed)
    deck.shuffle()
    return deck
