"""
Read-only snapshots of hands and round results.

The engine never hands its mutable hands to the presentation layer. Instead it
builds these frozen dataclasses, which an IO interface can format however it
likes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from twentyone.blackjack.constants import rank_name
from twentyone.blackjack.hand import BlackjackHand, HandStatus


class EndReason(Enum):
    """Why a round ended."""

    DEALER_BLACKJACK = "dealer_blackjack"
    DEALER_BUSTED = "dealer_busted"
    NORMAL_END = "normal_end"


class Outcome(Enum):
    """Result of one player hand. FINISHED covers ties and lower scores."""

    WON = "won"
    LOST = "lost"
    FINISHED = "finished"


def format_cards(cards) -> str:
    return ", ".join(rank_name(card) for card in cards)


@dataclass(frozen=True)
class HandView:
    """
    Immutable view of one hand.

    Attributes:
        holder: Name of the player holding the hand
        number: 1-based position of the hand among the holder's hands
        cards: Ranks in draw order
        score: Value of the hand when the view was taken
        status: Turn status of the hand
    """

    holder: str
    number: int
    cards: Tuple[int, ...]
    score: int
    status: HandStatus

    @classmethod
    def of(cls, holder: str, hand: BlackjackHand) -> "HandView":
        return cls(
            holder=holder,
            number=hand.number,
            cards=tuple(hand.cards),
            score=hand.calculate_score(),
            status=hand.status,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holder": self.holder,
            "number": self.number,
            "cards": list(self.cards),
            "score": self.score,
            "status": self.status.value,
        }

    def __str__(self) -> str:
        return f"[{format_cards(self.cards)}] Score: {self.score}"


@dataclass(frozen=True)
class DealerView:
    """
    Immutable view of the dealer's hand.

    When ``revealed`` is False only the first card is visible; ``hidden`` counts
    the cards kept face down and ``score`` is None.
    """

    holder: str
    cards: Tuple[int, ...]
    revealed: bool
    hidden: int = 0
    score: Optional[int] = None

    @classmethod
    def of(cls, holder: str, hand: BlackjackHand, reveal: bool) -> "DealerView":
        if reveal:
            return cls(
                holder=holder,
                cards=tuple(hand.cards),
                revealed=True,
                score=hand.calculate_score(),
            )
        return cls(
            holder=holder,
            cards=tuple(hand.cards[:1]),
            revealed=False,
            hidden=max(len(hand.cards) - 1, 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holder": self.holder,
            "cards": list(self.cards),
            "revealed": self.revealed,
            "hidden": self.hidden,
            "score": self.score,
        }

    def __str__(self) -> str:
        if self.revealed:
            return f"[{format_cards(self.cards)}] Score: {self.score}"
        shown = [rank_name(card) for card in self.cards] + ["**"] * self.hidden
        return f"[{', '.join(shown)}]"


@dataclass(frozen=True)
class HandResult:
    """Outcome of one player hand at the end of a round."""

    holder: str
    number: int
    score: int
    outcome: Outcome

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holder": self.holder,
            "number": self.number,
            "score": self.score,
            "outcome": self.outcome.value,
        }


@dataclass(frozen=True)
class RoundResult:
    """
    Immutable summary of a finished round.

    Attributes:
        reason: Why the round ended
        dealer: Fully revealed dealer hand
        hands: Outcome of every player hand, in seating and hand order
        dealer_wins: Table summary, computed apart from the per-hand outcomes
    """

    reason: EndReason
    dealer: DealerView
    hands: Tuple[HandResult, ...] = field(default_factory=tuple)
    dealer_wins: bool = False

    @property
    def dealer_score(self) -> int:
        return self.dealer.score

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reason": self.reason.value,
            "dealer": self.dealer.to_dict(),
            "hands": [result.to_dict() for result in self.hands],
            "dealer_wins": self.dealer_wins,
        }
