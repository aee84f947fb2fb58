from __future__ import annotations

import logging
from typing import Dict, Hashable, List, Mapping, Optional, Sequence, Tuple, TypeVar

from .cards import Card, cards_to_labels, format_cards
from .errors import CardGameError, HoldemError
from .evaluator import ClassifiedHand, Ordering, compare, evaluate_best
from .game import Game
from .models import HoldemConfig, PlayerHand, TiePolicy

LOGGER = logging.getLogger("cardgame.holdem")

PlayerId = TypeVar("PlayerId", bound=Hashable)

# HoldemGame plays a single showdown-only round: no blinds, no betting.
# Dealing goes through Game so every card can be verified afterwards.


def resolve_winners(hands: Mapping[PlayerId, ClassifiedHand]) -> List[PlayerId]:
    """Every player whose hand is maximal; more than one means a split pot."""
    winners: List[PlayerId] = []
    best: Optional[ClassifiedHand] = None
    for player, hand in hands.items():
        if best is None:
            order = Ordering.GREATER
        else:
            order = compare(hand, best)
        if order is Ordering.GREATER:
            best = hand
            winners = [player]
        elif order is Ordering.EQUAL:
            winners.append(player)
    return winners


def hole_card_tiebreak(players: Sequence[PlayerHand]) -> PlayerHand:
    """Pick one player out of a tie by comparing hole cards position by position.

    This is not a poker rule; callers opt into it through TiePolicy.HOLE_CARDS.
    Fully equal hole cards keep the earlier player.
    """
    if not players:
        raise ValueError("No players to break a tie between")
    winner = players[0]
    for challenger in players[1:]:
        for held, challenging in zip(winner.hole_cards, challenger.hole_cards):
            if challenging.rank_value > held.rank_value:
                winner = challenger
                break
            if challenging.rank_value < held.rank_value:
                break
    return winner


class HoldemGame:
    def __init__(self, config: HoldemConfig) -> None:
        self.config = config
        self.game = Game(config.players, rng=config.seed)
        self.community: List[Card] = []
        self.player_hands: List[PlayerHand] = []

    # Dealing ---------------------------------------------------------

    def deal_hole_cards(self) -> None:
        for _ in range(self.config.hole_cards):
            for hand_index in range(self.config.players):
                try:
                    self.game.deal(hand_index)
                except CardGameError as exc:
                    raise HoldemError(f"Error dealing to hand {hand_index}: {exc}") from exc

    def deal_community_cards(self) -> None:
        for _ in range(self.config.community_cards):
            try:
                card = self.game.deck.draw()
            except CardGameError as exc:
                raise HoldemError(f"Error dealing community card: {exc}") from exc
            self.community.append(card)

    # Showdown --------------------------------------------------------

    def evaluate_hands(self) -> List[PlayerHand]:
        player_hands = []
        for idx, hole in enumerate(self.game.hands):
            try:
                result = evaluate_best(hole + self.community)
            except CardGameError as exc:
                raise HoldemError(f"Error evaluating hand for player {idx + 1}: {exc}") from exc
            player_hands.append(PlayerHand(player=idx + 1, hole_cards=list(hole), result=result))
        self.player_hands = player_hands
        return player_hands

    def determine_winners(self) -> List[PlayerHand]:
        if not self.player_hands:
            raise RuntimeError("Hands have not been evaluated")
        by_player: Dict[int, PlayerHand] = {hand.player: hand for hand in self.player_hands}
        tied = [by_player[player] for player in resolve_winners({p: h.result for p, h in by_player.items()})]
        if len(tied) > 1 and self.config.tie_policy is TiePolicy.HOLE_CARDS:
            return [hole_card_tiebreak(tied)]
        return tied

    def verify(self) -> Tuple[bool, List[int]]:
        return self.game.verify_hands()

    def play_round(self) -> List[PlayerHand]:
        self.deal_hole_cards()
        self.deal_community_cards()
        self.evaluate_hands()
        return self.determine_winners()

    # Presentation ----------------------------------------------------

    def render(self) -> str:
        lines = ["Community cards:", format_cards(self.community)]
        for hand in self.player_hands:
            lines.append("")
            lines.append(f"Player {hand.player}:")
            lines.append(f"Hole cards: {', '.join(str(card) for card in hand.hole_cards)}")
            lines.append(f"Best hand: {hand.result.name}")
            lines.append(format_cards(hand.result.cards))
        if self.player_hands:
            lines.append("")
            lines.append(describe_winners(self.determine_winners()))
        return "\n".join(lines)

    def showdown_payload(self) -> Dict[str, object]:
        winners = self.determine_winners() if self.player_hands else []
        return {
            "community": cards_to_labels(self.community),
            "players": [
                {
                    "player": hand.player,
                    "hole": cards_to_labels(hand.hole_cards),
                    "rank": hand.result.rank.value,
                    "name": hand.result.name,
                    "best": hand.result.labels,
                    "tie_break": list(hand.result.tie_break),
                }
                for hand in self.player_hands
            ],
            "winners": [hand.player for hand in winners],
            "split": len(winners) > 1,
            "tie_policy": self.config.tie_policy.value,
        }


def describe_winners(winners: Sequence[PlayerHand]) -> str:
    if not winners:
        return "No winner"
    name = winners[0].result.name
    if len(winners) == 1:
        return f"Winner: Player {winners[0].player} with {name}"
    players = ", ".join(str(hand.player) for hand in winners)
    return f"Split pot: Players {players} with {name}"


def play_holdem(
    num_players: int,
    seed: Optional[int] = None,
    tie_policy: TiePolicy = TiePolicy.SPLIT,
) -> HoldemGame:
    """Deal and resolve one round for ``num_players`` and log the table."""
    game = HoldemGame(HoldemConfig(players=num_players, seed=seed, tie_policy=tie_policy))
    winners = game.play_round()
    LOGGER.info("%s", game.render())
    LOGGER.debug("Winners: %s", [hand.player for hand in winners])

    valid, invalid_hands = game.verify()
    if valid:
        LOGGER.info("All hands are valid")
    else:
        LOGGER.warning("Invalid hands found: %s", invalid_hands)
    return game
