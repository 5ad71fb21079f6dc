import logging
import random
from typing import List, Optional

logger = logging.getLogger("twentyone.shoe")

TEN_VALUE_RANK = 10
OTHER_RANKS = range(1, 10)


class ShoeEmptyError(Exception):
    """Raised when a card is drawn from a shoe that has no cards left."""

    pass


class Shoe:
    def __init__(
        self,
        other_card_count: int = 25,
        ten_value_count: int = 96,
        rng: Optional[random.Random] = None,
        cards: Optional[List[int]] = None,
    ):
        """
        Initialize a Shoe instance.

        :param other_card_count: Copies of each rank from 1 (Ace) to 9 (default is 25)
        :param ten_value_count: Copies of the ten-value rank (default is 96)
        :param rng: Random generator used for shuffling; a fresh one if omitted
        :param cards: Optional stacked contents. The last card is the top of the
                      shoe and is drawn first. When given, the shoe is not shuffled.
        """
        if other_card_count < 0:
            raise ValueError("Number of other cards must be non-negative")
        if ten_value_count < 0:
            raise ValueError("Number of ten-value cards must be non-negative")

        self.other_card_count = other_card_count
        self.ten_value_count = ten_value_count
        self.rng = rng if rng is not None else random.Random()
        self.cards: List[int] = []
        self.total_cards = 0

        if cards is not None:
            self.cards = list(cards)
            self.total_cards = len(self.cards)

    @classmethod
    def stacked(cls, *draws: int) -> "Shoe":
        """Build a shoe that deals ``draws`` in the given order."""
        return cls(cards=list(reversed(draws)))

    def fill(self) -> "Shoe":
        """Reset the shoe to its canonical composition and shuffle it."""
        self.cards = []
        for rank in OTHER_RANKS:
            self.cards.extend([rank] * self.other_card_count)
        self.cards.extend([TEN_VALUE_RANK] * self.ten_value_count)
        self.total_cards = len(self.cards)
        self.shuffle()
        logger.debug("Filled shoe with %d cards", self.total_cards)
        return self

    def shuffle(self) -> None:
        """Randomize the order of the cards left in the shoe."""
        self.rng.shuffle(self.cards)

    def draw_card(self) -> int:
        """
        Remove and return the top card of the shoe.

        :raises ShoeEmptyError: If no cards remain
        """
        if not self.cards:
            raise ShoeEmptyError(
                f"Shoe is empty after drawing all {self.total_cards} cards"
            )
        card = self.cards.pop()
        logger.debug("Drew %d, %d cards remaining", card, len(self.cards))
        return card

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining in the shoe."""
        return len(self.cards)

    @property
    def cards_drawn(self) -> int:
        """Return the number of cards drawn since the last fill."""
        return self.total_cards - len(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def __str__(self) -> str:
        return f"Shoe with {self.cards_remaining} cards remaining"

    def __repr__(self) -> str:
        return f"Shoe(other_card_count={self.other_card_count}, ten_value_count={self.ten_value_count})"
