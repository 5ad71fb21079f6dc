"""
This module contains classes to represent a hand of cards in a card game.

It includes an abstract base class `AbstractHand`, and a concrete implementation `Hand`.
Cards are plain integer ranks; a hand keeps them in the order they were drawn.

Classes:

AbstractHand: An abstract base class for a hand of cards.
Hand: A concrete implementation of a hand of cards.
"""
from abc import ABC
from typing import Iterable, List, Optional


class AbstractHand(ABC):
    """
    An abstract base class for a hand of cards.

    This class provides a basic structure for a hand of cards, including a method to add cards.
    Subclasses should override the __repr__ and __str__ methods to provide a string representation of the hand.
    """

    def __init__(self, cards: Optional[Iterable[int]] = None):
        self._cards: List[int] = list(cards) if cards is not None else []

    @property
    def cards(self) -> List[int]:
        """Returns the cards in the hand."""
        return self._cards

    def add_card(self, card: int) -> None:
        """
        Adds a card to the hand.

        Args:
            card: The rank to add.
        """
        self._cards.append(card)


class Hand(AbstractHand):
    """
    A concrete implementation of a hand of cards.

    This class provides a string representation of a hand of cards for both debugging and display purposes.
    """

    def __repr__(self) -> str:
        return f"Hand({self.cards!r})"

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self.cards)
