"""Blackjack-specific constants and value mappings."""

ACE = 1

ACE_HIGH_VALUE = 11
ACE_LOW_VALUE = 1

BLACKJACK_SCORE = 21
DEALER_STAND_SCORE = 17
MAX_HANDS = 3

MIN_PLAYERS = 1
MAX_PLAYERS = 5

# Display names for card ranks (kept for rendering only)
RANK_NAMES = {
    1: "A",
    2: "2",
    3: "3",
    4: "4",
    5: "5",
    6: "6",
    7: "7",
    8: "8",
    9: "9",
    10: "10",
}


def rank_name(rank: int) -> str:
    """Get the display name for a rank."""
    return RANK_NAMES.get(rank, str(rank))
