"""
BlackjackHand implementation with per-hand turn status.
"""

from enum import Enum
from typing import Iterable, Optional

from twentyone.blackjack.constants import (
    ACE,
    ACE_HIGH_VALUE,
    ACE_LOW_VALUE,
    BLACKJACK_SCORE,
    rank_name,
)
from twentyone.common.hand import Hand


class HandStatus(Enum):
    """Turn status of a single hand. BUSTED and STANDING are terminal."""

    IN_PLAY = "in_play"
    BUSTED = "busted"
    STANDING = "standing"


class BlackjackHand(Hand):
    """A hand in the game of Blackjack."""

    def __init__(
        self,
        cards: Optional[Iterable[int]] = None,
        number: int = 1,
        bust_score: int = BLACKJACK_SCORE,
    ):
        super().__init__(cards)
        self.number = number
        self.bust_score = bust_score
        self.status = HandStatus.IN_PLAY

    def calculate_score(self) -> int:
        """Calculate the value of the hand.

        Non-ace ranks are summed first. Each ace is then valued in turn: 11 if
        that keeps the running total at or under ``bust_score``, otherwise 1.
        """
        score = 0
        aces = 0
        for card in self._cards:
            if card == ACE:
                aces += 1
            else:
                score += card

        for _ in range(aces):
            if score + ACE_HIGH_VALUE <= self.bust_score:
                score += ACE_HIGH_VALUE
            else:
                score += ACE_LOW_VALUE
        return score

    def is_busted(self) -> bool:
        return self.calculate_score() > self.bust_score

    def can_split(self) -> bool:
        """Check if the hand can be split."""
        return len(self._cards) == 2 and self._cards[0] == self._cards[1]

    def is_blackjack(self) -> bool:
        """Two cards worth exactly ``bust_score``."""
        return len(self._cards) == 2 and self.calculate_score() == self.bust_score

    @property
    def is_in_play(self) -> bool:
        return self.status is HandStatus.IN_PLAY

    def hit(self, card: int) -> None:
        """Add a drawn card and mark the hand busted if it went over ``bust_score``."""
        self.add_card(card)
        if self.is_busted():
            self.status = HandStatus.BUSTED

    def stand(self) -> None:
        self.status = HandStatus.STANDING

    def __repr__(self) -> str:
        return f"BlackjackHand({self.cards!r}, number={self.number}, status={self.status.name})"

    def __str__(self) -> str:
        return ", ".join(rank_name(card) for card in self.cards)
