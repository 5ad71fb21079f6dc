"""Defines the Action enum for the possible actions a player can take on a hand."""
from enum import Enum
from typing import Optional


class Action(Enum):
    """Enum for the possible actions a player can take in a game of blackjack.

    Values are the menu choices typed at the console.
    """

    HIT = "1"
    STAND = "2"
    SPLIT = "3"

    @property
    def label(self) -> str:
        return self.name.lower()


def parse_action(choice: Optional[str]) -> Optional[Action]:
    """Map a menu choice to an action, or None if it is not one of the choices."""
    if choice is None:
        return None
    try:
        return Action(choice.strip())
    except ValueError:
        return None
