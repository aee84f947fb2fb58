from __future__ import annotations

import itertools
import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .cards import ACE_HIGH, Card, validate_card, value_name
from .errors import InsufficientCards, InvalidHandSize

LOGGER = logging.getLogger("cardgame.evaluator")

HAND_SIZE = 5
WHEEL = (ACE_HIGH, 5, 4, 3, 2)
WHEEL_HIGH = 5


class HandRank(Enum):
    # Declaration order is the ranking order, weakest first.
    HIGH_CARD = "high_card"
    PAIR = "pair"
    TWO_PAIR = "two_pair"
    THREE_OF_A_KIND = "three_of_a_kind"
    STRAIGHT = "straight"
    FLUSH = "flush"
    FULL_HOUSE = "full_house"
    FOUR_OF_A_KIND = "four_of_a_kind"
    STRAIGHT_FLUSH = "straight_flush"
    ROYAL_FLUSH = "royal_flush"

    @property
    def ordinal(self) -> int:
        return _RANK_ORDINALS[self]

    @property
    def title(self) -> str:
        return _RANK_TITLES[self]


_RANK_ORDINALS = {rank: idx for idx, rank in enumerate(HandRank)}
_RANK_TITLES = {
    HandRank.HIGH_CARD: "High Card",
    HandRank.PAIR: "Pair",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.STRAIGHT: "Straight",
    HandRank.FLUSH: "Flush",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.ROYAL_FLUSH: "Royal Flush",
}


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class ClassifiedHand:
    rank: HandRank
    cards: Tuple[Card, ...]
    tie_break: Tuple[int, ...]

    @property
    def name(self) -> str:
        if self.rank is HandRank.HIGH_CARD:
            return f"{self.rank.title} {value_name(self.tie_break[0])}"
        return self.rank.title

    @property
    def labels(self) -> List[str]:
        return [card.label for card in self.cards]


def combinations(cards: Iterable[Card], k: int = HAND_SIZE) -> Iterator[Tuple[Card, ...]]:
    """Lazily yield every k-card subset in lexicographic index order.

    Each subset keeps the relative order of the input. Calling again restarts
    the enumeration from the first subset.
    """
    return itertools.combinations(tuple(cards), k)


def classify(cards: Iterable[Card]) -> ClassifiedHand:
    """Classify exactly five cards into a rank plus its tie-break key."""
    hand = tuple(cards)
    if len(hand) != HAND_SIZE:
        raise InvalidHandSize(f"A hand needs exactly {HAND_SIZE} cards, got {len(hand)}")
    for card in hand:
        validate_card(card)

    # sorted() stays stable with reverse=True, so equal values keep input order.
    ordered = tuple(sorted(hand, key=lambda card: card.rank_value, reverse=True))
    values = [card.rank_value for card in ordered]

    is_flush = len({card.suit for card in ordered}) == 1
    straight_high = _straight_high(values)

    counts = Counter(values)
    groups = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    shape = [count for _, count in groups]
    grouped_values = tuple(value for value, _ in groups)

    if is_flush and straight_high:
        if straight_high == ACE_HIGH:
            return ClassifiedHand(HandRank.ROYAL_FLUSH, ordered, ())
        return ClassifiedHand(HandRank.STRAIGHT_FLUSH, ordered, (straight_high,))
    if shape[0] == 4:
        return ClassifiedHand(HandRank.FOUR_OF_A_KIND, ordered, grouped_values)
    if shape == [3, 2]:
        return ClassifiedHand(HandRank.FULL_HOUSE, ordered, grouped_values)
    if is_flush:
        return ClassifiedHand(HandRank.FLUSH, ordered, tuple(values))
    if straight_high:
        return ClassifiedHand(HandRank.STRAIGHT, ordered, (straight_high,))
    if shape[0] == 3:
        return ClassifiedHand(HandRank.THREE_OF_A_KIND, ordered, grouped_values)
    if shape[:2] == [2, 2]:
        return ClassifiedHand(HandRank.TWO_PAIR, ordered, grouped_values)
    if shape[0] == 2:
        return ClassifiedHand(HandRank.PAIR, ordered, grouped_values)
    return ClassifiedHand(HandRank.HIGH_CARD, ordered, tuple(values))


def _straight_high(values: Sequence[int]) -> Optional[int]:
    # values are sorted descending
    if all(values[idx] - 1 == values[idx + 1] for idx in range(len(values) - 1)):
        return values[0]
    if tuple(values) == WHEEL:
        return WHEEL_HIGH
    return None


def hand_key(hand: ClassifiedHand) -> Tuple[int, Tuple[int, ...]]:
    """Sort key that orders hands the same way ``compare`` does."""
    return (hand.rank.ordinal, hand.tie_break)


def compare(a: ClassifiedHand, b: ClassifiedHand) -> Ordering:
    if a.rank is not b.rank:
        return Ordering.GREATER if a.rank.ordinal > b.rank.ordinal else Ordering.LESS
    for left, right in zip(a.tie_break, b.tie_break):
        if left != right:
            return Ordering.GREATER if left > right else Ordering.LESS
    return Ordering.EQUAL


def evaluate_best(cards: Iterable[Card]) -> ClassifiedHand:
    """Best five-card hand out of five or more cards (hole plus community)."""
    pool = tuple(cards)
    if len(pool) < HAND_SIZE:
        raise InsufficientCards(f"Not enough cards to evaluate hand: {len(pool)} < {HAND_SIZE}")
    for card in pool:
        validate_card(card)

    best: Optional[ClassifiedHand] = None
    for combo in combinations(pool, HAND_SIZE):
        result = classify(combo)
        if best is None or compare(result, best) is Ordering.GREATER:
            best = result
    assert best is not None

    LOGGER.debug("Best hand: %s %s", best.name, best.labels)
    return best
