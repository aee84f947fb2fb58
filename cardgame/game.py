from __future__ import annotations

from collections import Counter
from typing import List, Tuple

from .cards import Card
from .deck import Deck, RandomSource


class Game:
    """A shuffled deck plus the cards dealt to each hand.

    ``reference_deck`` is an unshuffled copy of the full deck taken before any
    card is dealt; ``verify_hands`` checks every dealt card against it.
    """

    def __init__(self, num_hands: int, rng: RandomSource = None) -> None:
        if num_hands < 1:
            raise ValueError("At least one hand required")
        self.deck = Deck(rng)
        self.reference_deck: Tuple[Card, ...] = self.deck.cards
        self.hands: List[List[Card]] = [[] for _ in range(num_hands)]
        self.deck.shuffle()

    def deal(self, hand_index: int) -> Card:
        if not 0 <= hand_index < len(self.hands):
            raise IndexError(f"No hand at index {hand_index}")
        card = self.deck.draw()
        self.hands[hand_index].append(card)
        return card

    def verify_hands(self) -> Tuple[bool, List[int]]:
        available = Counter(self.reference_deck)
        invalid: List[int] = []
        for idx, hand in enumerate(self.hands):
            for card in hand:
                if available[card] <= 0:
                    invalid.append(idx)
                    break
                available[card] -= 1
        return not invalid, invalid
