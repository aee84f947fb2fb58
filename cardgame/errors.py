from __future__ import annotations


class CardGameError(Exception):
    """Base error for card, deck and hand evaluation failures."""

    code = "CARD_GAME_ERROR"

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class InvalidCard(CardGameError, ValueError):
    code = "INVALID_CARD"


class InvalidHandSize(CardGameError, ValueError):
    code = "INVALID_HAND_SIZE"


class InsufficientCards(CardGameError, ValueError):
    code = "INSUFFICIENT_CARDS"


class EmptyDeck(CardGameError, LookupError):
    code = "EMPTY_DECK"


class HoldemError(CardGameError):
    code = "HOLDEM_ERROR"
