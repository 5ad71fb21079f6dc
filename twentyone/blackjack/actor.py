"""
This module provides the `Player` and `Dealer` classes for a game of Blackjack.

Both extend `BlackjackActor`, which holds `BlackjackHand` objects and knows how
to reset them between rounds. The `Player` class adds splitting: a two-card
pair is replaced by two hands, each completed with a card from the shoe. The
`Dealer` class holds exactly one hand and plays it by a fixed policy.

Exceptions:
    - `InvalidSplitError`: Raised when a split is requested on a hand that cannot be split.
"""

import logging
from typing import List, Tuple

from twentyone.blackjack.constants import BLACKJACK_SCORE, MAX_HANDS
from twentyone.blackjack.hand import BlackjackHand
from twentyone.blackjack.rules import Rules
from twentyone.common.actor import Actor
from twentyone.common.shoe import Shoe

logger = logging.getLogger("twentyone.blackjack")


class InvalidSplitError(Exception):
    """Raised when a player attempts to split a hand that cannot be split."""

    pass


class BlackjackActor(Actor):
    """An actor holding blackjack hands that bust above ``bust_score``."""

    hands: List[BlackjackHand]

    def __init__(
        self, name: str, max_hands: int = MAX_HANDS, bust_score: int = BLACKJACK_SCORE
    ):
        super().__init__(name, max_hands)
        self.bust_score = bust_score

    def _create_hand(self, cards: List[int], number: int) -> BlackjackHand:
        return BlackjackHand(cards, number=number, bust_score=self.bust_score)

    def reset(self):
        """Drop all hands before a new round."""
        self.hands = []


class Player(BlackjackActor):
    """A player in a game of Blackjack."""

    def __init__(
        self,
        name: str = "Player",
        max_hands: int = MAX_HANDS,
        bust_score: int = BLACKJACK_SCORE,
    ):
        super().__init__(name, max_hands, bust_score)

    def can_split(self, hand: BlackjackHand) -> bool:
        """Check whether ``hand`` is a pair and the player has room for another hand."""
        return hand.can_split() and len(self.hands) < self.max_hands

    def split_hand(
        self, hand: BlackjackHand, shoe: Shoe
    ) -> Tuple[BlackjackHand, BlackjackHand]:
        """
        Split ``hand`` into two hands, each completed with a card from ``shoe``.

        The original hand is removed, the two new hands are appended, and all of
        the player's hands are renumbered from 1 in list order.
        """
        if not self.can_split(hand):
            raise InvalidSplitError(f"{self.name} cannot split hand {hand.number}.")

        first = [hand.cards[0], shoe.draw_card()]
        second = [hand.cards[1], shoe.draw_card()]

        self.hands.remove(hand)
        new_hands = (self.add_hand(first), self.add_hand(second))

        for number, player_hand in enumerate(self.hands, start=1):
            player_hand.number = number

        logger.debug(
            "%s split into %s and %s", self.name, new_hands[0].cards, new_hands[1].cards
        )
        return new_hands


class Dealer(BlackjackActor):
    """A dealer in a game of Blackjack."""

    def __init__(self, name: str = "Dealer", bust_score: int = BLACKJACK_SCORE):
        super().__init__(name, max_hands=1, bust_score=bust_score)

    @property
    def hand(self) -> BlackjackHand:
        """Returns the dealer's only hand."""
        return self.hands[0]

    def has_blackjack(self) -> bool:
        return bool(self.hands) and self.hand.is_blackjack()

    def should_hit(self, rules: Rules) -> bool:
        """Determine if dealer should hit."""
        return rules.should_dealer_hit(self.hand)
