import pytest

from twentyone.blackjack.hand import BlackjackHand, HandStatus


@pytest.mark.parametrize(
    "cards, score",
    [
        ([1, 1, 9], 21),
        ([1, 1, 1], 13),
        ([1, 10], 21),
        ([10, 10, 1], 21),
        ([9, 9, 9, 1], 28),
        ([1, 1], 12),
        ([1, 5, 1], 17),
        ([10, 2], 12),
        ([], 0),
    ],
)
def test_calculate_score(cards, score):
    assert BlackjackHand(cards).calculate_score() == score


@pytest.mark.parametrize(
    "first, second",
    [
        ([1, 1, 9], [9, 1, 1]),
        ([1, 10], [10, 1]),
        ([1, 5, 1, 3], [5, 3, 1, 1]),
        ([1, 9, 9, 9], [9, 9, 9, 1]),
    ],
)
def test_score_ignores_ace_position(first, second):
    assert (
        BlackjackHand(first).calculate_score()
        == BlackjackHand(second).calculate_score()
    )


def test_score_is_recomputed_after_each_card():
    hand = BlackjackHand([1, 5])
    assert hand.calculate_score() == 16
    hand.add_card(10)
    assert hand.calculate_score() == 16
    hand.add_card(6)
    assert hand.calculate_score() == 22


def test_is_busted():
    assert BlackjackHand([10, 10, 2]).is_busted()
    assert not BlackjackHand([10, 10, 1]).is_busted()


def test_bust_score_moves_every_threshold():
    hand = BlackjackHand([10, 10, 2], bust_score=22)
    assert hand.calculate_score() == 22
    assert not hand.is_busted()
    assert BlackjackHand([10, 1, 1], bust_score=22).calculate_score() == 22
    assert BlackjackHand([1, 10], bust_score=22).is_blackjack() is False
    assert BlackjackHand([1, 1], bust_score=22).is_blackjack()


@pytest.mark.parametrize(
    "cards, expected",
    [
        ([5, 5], True),
        ([5, 6], False),
        ([5, 5, 5], False),
        ([1, 1], True),
        ([10, 10], True),
        ([5], False),
    ],
)
def test_can_split(cards, expected):
    assert BlackjackHand(cards).can_split() is expected


def test_is_blackjack():
    assert BlackjackHand([1, 10]).is_blackjack()
    assert not BlackjackHand([1, 5, 5]).is_blackjack()
    assert not BlackjackHand([10, 9]).is_blackjack()


def test_new_hand_is_in_play():
    hand = BlackjackHand([2, 3], number=2)
    assert hand.number == 2
    assert hand.status is HandStatus.IN_PLAY
    assert hand.is_in_play


def test_hit_below_21_stays_in_play():
    hand = BlackjackHand([10, 5])
    hand.hit(6)
    assert hand.cards == [10, 5, 6]
    assert hand.status is HandStatus.IN_PLAY


def test_hit_over_21_busts():
    hand = BlackjackHand([10, 5])
    hand.hit(10)
    assert hand.status is HandStatus.BUSTED
    assert not hand.is_in_play


def test_stand():
    hand = BlackjackHand([10, 7])
    hand.stand()
    assert hand.status is HandStatus.STANDING


def test_str_shows_aces():
    assert str(BlackjackHand([1, 10])) == "A, 10"
