import dataclasses

import pytest

from cardgame.cards import Card, Suit, comparison_value, parse_cards, parse_label
from cardgame.errors import CardGameError, InvalidCard


def test_comparison_value_treats_ace_as_high():
    assert comparison_value(1) == 14
    assert comparison_value(13) == 13
    assert comparison_value(2) == 2
    assert Card(Suit.SPADES, 1).rank_value == 14
    assert Card(Suit.SPADES, 1).value == 1


def test_card_labels_and_display():
    assert Card(Suit.SPADES, 1).label == "As"
    assert Card(Suit.HEARTS, 10).label == "Th"
    assert Card(Suit.CLUBS, 13).label == "Kc"
    assert str(Card(Suit.SPADES, 1)) == "A♠"
    assert str(Card(Suit.HEARTS, 10)) == "10♥"
    assert str(Card(Suit.DIAMONDS, 12)) == "Q♦"


def test_parse_label_accepts_ten_alias():
    assert parse_label("10h") == parse_label("Th") == Card(Suit.HEARTS, 10)
    assert parse_cards(["As", "2c"]) == [Card(Suit.SPADES, 1), Card(Suit.CLUBS, 2)]


@pytest.mark.parametrize("label", ["", "A", "1h", "Ax", "Ahh", "11s", 42])
def test_parse_label_rejects_garbage(label):
    with pytest.raises(InvalidCard):
        parse_label(label)


def test_cards_are_structural_values():
    assert Card(Suit.HEARTS, 5) == Card(Suit.HEARTS, 5)
    assert Card(Suit.HEARTS, 5) != Card(Suit.DIAMONDS, 5)
    assert len({Card(Suit.HEARTS, 5), Card(Suit.HEARTS, 5)}) == 1
    card = Card(Suit.HEARTS, 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        card.value = 6  # type: ignore[misc]


@pytest.mark.parametrize("suit, value", [(Suit.SPADES, 0), (Suit.SPADES, 14), (Suit.SPADES, True), ("s", 1), (None, 5)])
def test_card_validation_rejects_out_of_range(suit, value):
    with pytest.raises(InvalidCard) as exc_info:
        Card(suit, value)
    assert isinstance(exc_info.value, ValueError)
    assert isinstance(exc_info.value, CardGameError)
    assert exc_info.value.code == "INVALID_CARD"
