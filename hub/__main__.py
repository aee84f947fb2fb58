import argparse
import asyncio
import logging
import sys

from cardgame.errors import CardGameError
from cardgame.holdem import play_holdem
from cardgame.models import HoldemConfig, TiePolicy
from .server import HubServer

LOGGER = logging.getLogger("holdem_hub")


def main() -> int:
    parser = argparse.ArgumentParser(description="Texas Hold'em showdown hub")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--players", type=int, default=2)
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible deals")
    parser.add_argument(
        "--tie-policy",
        choices=[policy.value for policy in TiePolicy],
        default=TiePolicy.SPLIT.value,
        help="How to report equal best hands: split the pot or compare hole cards",
    )
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Play a single round in the console instead of serving clients",
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(message)s")

    try:
        config = HoldemConfig(players=args.players, seed=args.seed, tie_policy=TiePolicy(args.tie_policy))
    except ValueError as exc:
        parser.error(str(exc))

    if args.simulate:
        try:
            play_holdem(config.players, seed=config.seed, tie_policy=config.tie_policy)
        except CardGameError as exc:
            LOGGER.error("Round failed: %s", exc)
            return 1
        return 0

    server = HubServer(config)
    asyncio.run(server.start(host=args.host, port=args.port))
    return 0


if __name__ == "__main__":
    sys.exit(main())
