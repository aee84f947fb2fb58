"""Card model, deck, poker hand evaluation and the Hold'em round driver."""

from .cards import Card, Suit, comparison_value, parse_cards, parse_label
from .deck import Deck, build_deck
from .errors import CardGameError, EmptyDeck, HoldemError, InsufficientCards, InvalidCard, InvalidHandSize
from .evaluator import ClassifiedHand, HandRank, Ordering, classify, combinations, compare, evaluate_best, hand_key
from .game import Game
from .holdem import HoldemGame, hole_card_tiebreak, play_holdem, resolve_winners
from .models import HoldemConfig, PlayerHand, TiePolicy

__all__ = [
    "Card",
    "Suit",
    "comparison_value",
    "parse_cards",
    "parse_label",
    "Deck",
    "build_deck",
    "CardGameError",
    "EmptyDeck",
    "HoldemError",
    "InsufficientCards",
    "InvalidCard",
    "InvalidHandSize",
    "ClassifiedHand",
    "HandRank",
    "Ordering",
    "classify",
    "combinations",
    "compare",
    "evaluate_best",
    "hand_key",
    "Game",
    "HoldemGame",
    "hole_card_tiebreak",
    "play_holdem",
    "resolve_winners",
    "HoldemConfig",
    "PlayerHand",
    "TiePolicy",
]
