from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .cards import Card
from .evaluator import ClassifiedHand

DECK_SIZE = 52


class TiePolicy(str, Enum):
    # SPLIT reports every tied player; HOLE_CARDS picks one by comparing hole cards.
    SPLIT = "split"
    HOLE_CARDS = "hole_cards"


@dataclass
class HoldemConfig:
    players: int = 2
    hole_cards: int = 2
    community_cards: int = 5
    seed: Optional[int] = None
    tie_policy: TiePolicy = TiePolicy.SPLIT

    def __post_init__(self) -> None:
        self.tie_policy = TiePolicy(self.tie_policy)
        if self.players < 1:
            raise ValueError("At least one player required")
        if self.hole_cards < 0 or self.community_cards < 0:
            raise ValueError("Card counts cannot be negative")
        if self.hole_cards + self.community_cards < 5:
            raise ValueError("Each player needs at least 5 cards to make a hand")
        if self.players * self.hole_cards + self.community_cards > DECK_SIZE:
            raise ValueError("Not enough cards in the deck for this table")


@dataclass
class PlayerHand:
    player: int
    hole_cards: List[Card]
    result: ClassifiedHand
