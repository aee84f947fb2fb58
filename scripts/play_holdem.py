#!/usr/bin/env python3
"""Play Hold'em showdown rounds in the console.

With ``--rounds 1`` (the default) the full table is printed: community cards,
each player's hole cards and best hand, and the winner or split pot. With more
rounds only a summary of hand categories and split pots is logged.

Example:
    python scripts/play_holdem.py --players 4 --rounds 500 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
from collections import Counter

from cardgame.evaluator import HandRank
from cardgame.holdem import HoldemGame, play_holdem
from cardgame.models import HoldemConfig, TiePolicy

LOGGER = logging.getLogger("play_holdem")


def run_rounds(players: int, rounds: int, seed: int, tie_policy: TiePolicy) -> Counter:
    rng = random.Random(seed)
    tally: Counter = Counter()
    for _ in range(rounds):
        game = HoldemGame(HoldemConfig(players=players, seed=rng.getrandbits(32), tie_policy=tie_policy))
        winners = game.play_round()
        valid, invalid_hands = game.verify()
        if not valid:
            LOGGER.warning("Invalid hands found: %s", invalid_hands)
        for hand in game.player_hands:
            tally[hand.result.rank] += 1
        if len(winners) > 1:
            tally["split"] += 1
    return tally


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Texas Hold'em showdown rounds")
    parser.add_argument("--players", type=int, default=2)
    parser.add_argument("--rounds", type=int, default=1)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--tie-policy", choices=[policy.value for policy in TiePolicy], default=TiePolicy.SPLIT.value)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    tie_policy = TiePolicy(args.tie_policy)

    if args.rounds <= 1:
        play_holdem(args.players, seed=args.seed, tie_policy=tie_policy)
        return

    seed = args.seed if args.seed is not None else random.SystemRandom().getrandbits(32)
    tally = run_rounds(args.players, args.rounds, seed, tie_policy)
    hands = args.players * args.rounds
    for rank in reversed(list(HandRank)):
        LOGGER.info("%-16s %6d  %6.2f%%", rank.title, tally[rank], 100.0 * tally[rank] / hands)
    LOGGER.info("Split pots: %d of %d rounds (seed=%s)", tally["split"], args.rounds, seed)


if __name__ == "__main__":
    main()
