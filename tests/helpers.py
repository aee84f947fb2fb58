from __future__ import annotations

from typing import List, Sequence

from cardgame.cards import Card, parse_cards
from cardgame.evaluator import ClassifiedHand, evaluate_best
from cardgame.models import PlayerHand


def cards(labels: str) -> List[Card]:
    """Parse space separated labels, e.g. cards("As Kd 10h")."""
    return parse_cards(labels.split())


def player_hand(player: int, hole: str, board: str) -> PlayerHand:
    """Evaluate hole plus board the way a showdown would."""
    hole_cards = cards(hole)
    return PlayerHand(player=player, hole_cards=hole_cards, result=evaluate_best(hole_cards + cards(board)))


def best(labels: str) -> ClassifiedHand:
    return evaluate_best(cards(labels))


def values(hand: Sequence[Card]) -> List[int]:
    return [card.rank_value for card in hand]
