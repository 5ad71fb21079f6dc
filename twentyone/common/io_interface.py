"""
This module contains the IOInterface abstract base class and its implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Union

from twentyone.blackjack.action import Action, parse_action

if TYPE_CHECKING:
    from twentyone.blackjack.results import HandView
    from twentyone.common.actor import Actor


ACTION_MENU = "Choose: " + ", ".join(
    f"{action.value} - {action.label}" for action in Action
)


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the game.
    The engine only ever passes it strings and read-only snapshots.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass

    @abstractmethod
    def get_player_action(self, player: Actor, hand: HandView) -> Optional[Action]:
        """Retrieve an action for ``hand``, or None if the choice was not recognized."""
        pass


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.

    Every hand stands on its first decision.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return ""

    def get_player_action(self, player: Actor, hand: HandView) -> Optional[Action]:
        return Action.STAND


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and replays
    scripted choices.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return the next scripted input response.

    def add_player_action(self, action):
        Add a player choice to the queue. Raw strings are parsed like console input.

    def get_player_action(self, player, hand):
        Pop the next choice from the queue.
    """

    __test__ = False

    def __init__(self):
        self.sent_messages = []
        self.player_actions = []
        self.input_responses = []
        self.prompted_hands = []

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        if self.input_responses:
            return self.input_responses.pop(0)
        return "test_input"

    def add_player_action(self, action: Union[Action, str]):
        """Add a player action to the queue."""
        self.player_actions.append(action)

    def get_player_action(self, player: Actor, hand: HandView) -> Optional[Action]:
        self.prompted_hands.append(hand)
        if not self.player_actions:
            raise ValueError("No more actions left in TestIOInterface queue.")
        action = self.player_actions.pop(0)
        if isinstance(action, Action):
            return action
        return parse_action(action)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.

    Methods
    -------
    def output(self, message: str):
        Output a message to the console.

    def input(self, prompt: str):
        Get input from the console.

    def get_player_action(self, player, hand):
        Show the hand and the action menu, then read one choice.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)

    def get_player_action(self, player: Actor, hand: HandView) -> Optional[Action]:
        self.output(f"\n{player.name}, hand {hand.number}: {hand}")
        self.output(ACTION_MENU)
        return parse_action(self.input("> "))
