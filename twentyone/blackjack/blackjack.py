"""
This module is used to execute a game of Blackjack.

A game seats one to five players and a dealer around a single shoe and plays one
round: the opening deal, every player's hands, the dealer's hand, and the
comparison of each hand against the dealer.

The game is normally played at the console:

    python -m twentyone.blackjack.blackjack
    python -m twentyone.blackjack.blackjack --players 3 --seed 42

`--players` skips the opening prompt, `--seed` makes the shuffle reproducible and
`--log-level` turns on engine logging (written to stderr).
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from twentyone.blackjack.actor import Dealer, Player
from twentyone.blackjack.results import DealerView, EndReason, HandView, RoundResult
from twentyone.blackjack.rules import Rules
from twentyone.blackjack.state import DealingState, EndRoundState, GameState
from twentyone.common.actor import TooManyHandsError
from twentyone.common.io_interface import ConsoleIOInterface, IOInterface
from twentyone.common.shoe import Shoe, ShoeEmptyError

logger = logging.getLogger("twentyone.blackjack")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class BlackjackGame:
    """
    A class to represent a game of Blackjack.

    Attributes
    ----------
    rules : Rules
        Object defining game rules.
    io_interface : IOInterface
        Interface for input and output operations.
    shoe : Shoe
        Shoe of cards shared by every hand at the table.
    dealer : Dealer
        Dealer for the game.
    players : list
        List of Player objects participating in the game.
    current_state : GameState
        Current state of the round, None outside a round.
    reason : EndReason
        Why the last round ended.
    result : RoundResult
        Outcome of the last round.
    """

    def __init__(
        self,
        rules: Optional[Rules] = None,
        io_interface: Optional[IOInterface] = None,
        shoe: Optional[Shoe] = None,
    ):
        self.rules = rules if rules is not None else Rules()
        self.io_interface = io_interface if io_interface is not None else ConsoleIOInterface()
        self.shoe = shoe if shoe is not None else Shoe().fill()
        self.dealer = Dealer(bust_score=self.rules.blackjack_score)
        self.players: List[Player] = []
        self.current_state: Optional[GameState] = None
        self.reason: Optional[EndReason] = None
        self.result: Optional[RoundResult] = None

    def set_state(self, state: GameState):
        """Change the current state of the game."""
        logger.debug("Changing state to %s", state)
        self.current_state = state

    def add_player(self, player: Player):
        """Add a player to the game."""
        if len(self.players) >= self.rules.max_players:
            raise ValueError(f"A table seats at most {self.rules.max_players} players")
        self.players.append(player)

    def add_players(self, count: int):
        """Seat ``count`` players named "Player 1" to "Player N"."""
        if not self.rules.is_valid_player_count(count):
            raise ValueError(
                f"Number of players must be between {self.rules.min_players} "
                f"and {self.rules.max_players}, got {count}"
            )
        for name in generate_player_names(count):
            self.add_player(
                Player(
                    name,
                    max_hands=self.rules.max_hands,
                    bust_score=self.rules.blackjack_score,
                )
            )

    def dealer_view(self, reveal: bool) -> DealerView:
        """Snapshot of the dealer's hand, with all but the first card hidden unless revealed."""
        return DealerView.of(self.dealer.name, self.dealer.hand, reveal)

    def hand_views(self) -> List[HandView]:
        """Snapshots of every player hand in seating order."""
        return [
            HandView.of(player.name, hand)
            for player in self.players
            for hand in player.hands
        ]

    def play_round(self) -> RoundResult:
        """
        Play a round of the game until it reaches the end state.

        Raises ShoeEmptyError or TooManyHandsError if the round cannot be completed.
        """
        if not self.players:
            raise ValueError("Cannot play a round without players")
        self.reset()
        self.set_state(DealingState())
        while not isinstance(self.current_state, EndRoundState):
            self.current_state.handle(self)
        self.current_state.handle(self)
        return self.result

    def reset(self):
        """Clear every hand and the last result before a new round."""
        for player in self.players:
            player.reset()
        self.dealer.reset()
        self.current_state = None
        self.reason = None
        self.result = None


def generate_player_names(num_players: int) -> List[str]:
    """Generate display names for the seated players."""
    return [f"Player {i}" for i in range(1, num_players + 1)]


def parse_player_count(response: str, rules: Rules) -> int:
    """
    Parse the number of players typed at startup.

    Raises ValueError if the response is not an integer within the rules' limits.
    """
    count = int(response.strip())
    if not rules.is_valid_player_count(count):
        raise ValueError(f"{count} is outside {rules.min_players}-{rules.max_players}")
    return count


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a round of Blackjack.")
    parser.add_argument(
        "--players",
        type=str,
        default=None,
        help="Number of players (1-5); prompts when omitted",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the shoe shuffle",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Engine logging level",
    )
    return parser


def main(argv: Optional[List[str]] = None, io_interface: Optional[IOInterface] = None) -> int:
    """
    Entry point: read the number of players, then play one round.

    Returns the process exit status: 0 after a round, 1 for an invalid number of
    players, 2 if the round had to be aborted.
    """
    args = create_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    io_interface = io_interface if io_interface is not None else ConsoleIOInterface()
    rules = Rules()

    io_interface.output("Welcome to Blackjack!")
    response = args.players
    if response is None:
        response = io_interface.input(
            f"Enter the number of players ({rules.min_players}-{rules.max_players}): "
        )
    try:
        count = parse_player_count(response, rules)
    except ValueError:
        logger.warning("Rejected number of players %r", response)
        io_interface.output("Invalid number of players!")
        return 1

    shoe = Shoe(rng=random.Random(args.seed)).fill()
    game = BlackjackGame(rules, io_interface, shoe)
    game.add_players(count)

    try:
        game.play_round()
    except (ShoeEmptyError, TooManyHandsError) as exc:
        logger.error("Round aborted: %s", exc)
        io_interface.output(f"Round aborted: {exc}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
