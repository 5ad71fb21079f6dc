from twentyone.blackjack.constants import (
    BLACKJACK_SCORE,
    DEALER_STAND_SCORE,
    MAX_HANDS,
    MAX_PLAYERS,
    MIN_PLAYERS,
)
from twentyone.blackjack.hand import BlackjackHand


class Rules:
    def __init__(
        self,
        max_hands: int = MAX_HANDS,
        dealer_stand_score: int = DEALER_STAND_SCORE,
        blackjack_score: int = BLACKJACK_SCORE,
        min_players: int = MIN_PLAYERS,
        max_players: int = MAX_PLAYERS,
    ):
        if max_hands < 1:
            raise ValueError("max_hands must be at least 1")
        if not 1 <= min_players <= max_players:
            raise ValueError("Player limits must satisfy 1 <= min_players <= max_players")

        self.max_hands = max_hands
        self.dealer_stand_score = dealer_stand_score
        self.blackjack_score = blackjack_score
        self.min_players = min_players
        self.max_players = max_players

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "max_hands": self.max_hands,
            "dealer_stand_score": self.dealer_stand_score,
            "blackjack_score": self.blackjack_score,
            "min_players": self.min_players,
            "max_players": self.max_players,
        }

    def should_dealer_hit(self, hand: BlackjackHand) -> bool:
        """The dealer draws while the hand is under the stand score."""
        return hand.calculate_score() < self.dealer_stand_score

    def is_bust(self, hand: BlackjackHand) -> bool:
        return hand.calculate_score() > self.blackjack_score

    def is_valid_player_count(self, count: int) -> bool:
        return self.min_players <= count <= self.max_players
