"""
This module contains the Actor abstract base class.

Actor serves as a blueprint for any participant holding cards in a game: it owns
an ordered, bounded list of hands. Hands are appended at deal time or when a
hand is split, and each one is numbered by its position, starting at 1.

The Actor class is meant to be extended by concrete classes that decide which
kind of hand they hold and how their state is reset between rounds.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

from twentyone.common.hand import AbstractHand


class TooManyHandsError(Exception):
    """Raised when a hand is added to an actor that already holds the maximum."""

    pass


class Actor(ABC):
    """
    Abstract base class representing a holder of hands in a card game.

    :param name: Name of the actor
    :param max_hands: Most hands the actor may hold at once
    """

    def __init__(self, name: str, max_hands: int = 3):
        self.name = name
        self.max_hands = max_hands
        self.hands: List[AbstractHand] = []

    @abstractmethod
    def _create_hand(self, cards: List[int], number: int) -> AbstractHand:
        """
        Build a hand object for this actor.

        :param cards: The ranks the hand starts with
        :param number: The 1-based position of the hand
        """

    @abstractmethod
    def reset(self):
        """
        Reset the actor's hands for a new round.

        :return: None
        """

    def add_hand(self, cards: Iterable[int]) -> AbstractHand:
        """
        Append a new hand built from a copy of ``cards``.

        :param cards: The ranks the new hand starts with
        :return: The new hand
        :raises TooManyHandsError: If the actor already holds ``max_hands`` hands
        """
        if len(self.hands) >= self.max_hands:
            raise TooManyHandsError(
                f"{self.name} cannot hold more than {self.max_hands} hands"
            )
        hand = self._create_hand(list(cards), len(self.hands) + 1)
        self.hands.append(hand)
        return hand

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, hands={self.hands!r})"
