import pytest

from twentyone.blackjack.hand import BlackjackHand
from twentyone.blackjack.rules import Rules


def test_defaults():
    assert Rules().to_dict() == {
        "max_hands": 3,
        "dealer_stand_score": 17,
        "blackjack_score": 21,
        "min_players": 1,
        "max_players": 5,
    }


@pytest.mark.parametrize(
    "cards, expected",
    [([10, 6], True), ([10, 7], False), ([1, 6], False), ([2, 3], True)],
)
def test_should_dealer_hit(cards, expected):
    assert Rules().should_dealer_hit(BlackjackHand(cards)) is expected


def test_is_bust():
    rules = Rules()
    assert rules.is_bust(BlackjackHand([10, 10, 2]))
    assert not rules.is_bust(BlackjackHand([10, 10, 1]))


@pytest.mark.parametrize("count, expected", [(0, False), (1, True), (5, True), (6, False)])
def test_is_valid_player_count(count, expected):
    assert Rules().is_valid_player_count(count) is expected


def test_invalid_configuration():
    with pytest.raises(ValueError):
        Rules(max_hands=0)
    with pytest.raises(ValueError):
        Rules(min_players=3, max_players=2)


def test_is_bust_follows_blackjack_score():
    rules = Rules(blackjack_score=22)
    assert not rules.is_bust(BlackjackHand([10, 10, 2], bust_score=22))
    assert rules.is_bust(BlackjackHand([10, 10, 3], bust_score=22))
