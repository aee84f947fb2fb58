import logging

import pytest

from cardgame.errors import HoldemError, InsufficientCards
from cardgame.evaluator import HandRank
from cardgame.holdem import HoldemGame, describe_winners, hole_card_tiebreak, play_holdem, resolve_winners
from cardgame.models import HoldemConfig, TiePolicy

from .helpers import best, player_hand

BOARD_FLUSH = "2h 5h 9h Jh Kh"


def seat_hands(game: HoldemGame, *hands) -> None:
    game.player_hands = list(hands)


def test_play_round_deals_and_evaluates_every_player():
    game = HoldemGame(HoldemConfig(players=4, seed=5))
    winners = game.play_round()
    assert len(game.community) == 5
    assert all(len(hole) == 2 for hole in game.game.hands)
    dealt = [card for hole in game.game.hands for card in hole] + game.community
    assert len(set(dealt)) == 13
    assert len(game.game.deck) == 52 - 13
    assert [hand.player for hand in game.player_hands] == [1, 2, 3, 4]
    assert winners
    assert game.verify() == (True, [])


def test_same_seed_replays_same_round():
    first = HoldemGame(HoldemConfig(players=3, seed=1234))
    second = HoldemGame(HoldemConfig(players=3, seed=1234))
    first.play_round()
    second.play_round()
    assert first.showdown_payload() == second.showdown_payload()


def test_hole_cards_dealt_round_robin():
    game = HoldemGame(HoldemConfig(players=2, seed=9))
    order = list(game.game.deck.cards[:4])
    game.deal_hole_cards()
    assert game.game.hands == [[order[0], order[2]], [order[1], order[3]]]


def test_shared_flush_is_a_split_pot_by_default():
    game = HoldemGame(HoldemConfig(players=3))
    seat_hands(
        game,
        player_hand(1, "3c 4d", BOARD_FLUSH),
        player_hand(2, "7s 8c", BOARD_FLUSH),
        player_hand(3, "Qs Qd", BOARD_FLUSH),
    )
    winners = game.determine_winners()
    assert [hand.player for hand in winners] == [1, 2, 3]
    assert winners[0].result.rank is HandRank.FLUSH
    assert game.showdown_payload()["split"] is True
    assert "Split pot: Players 1, 2, 3 with Flush" in game.render()


def test_hole_card_policy_is_opt_in():
    game = HoldemGame(HoldemConfig(players=2, tie_policy="hole_cards"))
    assert game.config.tie_policy is TiePolicy.HOLE_CARDS
    seat_hands(game, player_hand(1, "3c 4d", BOARD_FLUSH), player_hand(2, "7s 8c", BOARD_FLUSH))
    assert [hand.player for hand in game.determine_winners()] == [2]


def test_clear_winner_ignores_tie_policy():
    for policy in TiePolicy:
        game = HoldemGame(HoldemConfig(players=2, tie_policy=policy))
        seat_hands(game, player_hand(1, "Ah Qh", BOARD_FLUSH), player_hand(2, "As Ad", BOARD_FLUSH))
        winners = game.determine_winners()
        assert [hand.player for hand in winners] == [1]
        assert describe_winners(winners) == "Winner: Player 1 with Flush"


def test_hole_card_tiebreak_keeps_earlier_player_on_equal_holes():
    first = player_hand(1, "7s 8c", BOARD_FLUSH)
    second = player_hand(2, "7d 8s", BOARD_FLUSH)
    assert hole_card_tiebreak([first, second]) is first
    with pytest.raises(ValueError):
        hole_card_tiebreak([])


def test_resolve_winners_accepts_any_player_keys():
    hands = {
        "alice": best("As Ah Kd Qc Jh 3s 2c"),
        "bob": best("Ks Kh Kc Qc Jh 3s 2c"),
        "carol": best("Ad Ac Kd Qc Jh 3s 2c"),
    }
    assert resolve_winners(hands) == ["bob"]
    del hands["bob"]
    assert resolve_winners(hands) == ["alice", "carol"]
    assert resolve_winners({}) == []


def test_determine_winners_requires_evaluation():
    game = HoldemGame(HoldemConfig(players=2, seed=1))
    with pytest.raises(RuntimeError, match="not been evaluated"):
        game.determine_winners()


def test_evaluate_before_dealing_reports_player():
    game = HoldemGame(HoldemConfig(players=2, seed=1))
    with pytest.raises(HoldemError, match="player 1") as exc_info:
        game.evaluate_hands()
    assert isinstance(exc_info.value.__cause__, InsufficientCards)


def test_render_lists_table_state():
    game = HoldemGame(HoldemConfig(players=2, seed=77))
    game.play_round()
    text = game.render()
    assert text.startswith("Community cards:")
    assert "Player 1:" in text and "Player 2:" in text
    assert "Best hand: " in text
    assert "Winner: Player" in text or "Split pot" in text


@pytest.mark.parametrize(
    "kwargs",
    [
        {"players": 0},
        {"players": 24},
        {"hole_cards": 1, "community_cards": 3},
        {"hole_cards": -1},
        {"tie_policy": "coin_flip"},
    ],
)
def test_config_rejects_impossible_tables(kwargs):
    with pytest.raises(ValueError):
        HoldemConfig(**kwargs)


def test_play_holdem_logs_and_verifies(caplog):
    with caplog.at_level(logging.INFO, logger="cardgame.holdem"):
        game = play_holdem(3, seed=42)
    assert len(game.player_hands) == 3
    assert "Community cards:" in caplog.text
    assert "All hands are valid" in caplog.text
