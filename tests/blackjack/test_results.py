from twentyone.blackjack.hand import BlackjackHand, HandStatus
from twentyone.blackjack.results import (
    DealerView,
    EndReason,
    HandResult,
    HandView,
    Outcome,
    RoundResult,
)


def test_hand_view_is_a_snapshot():
    hand = BlackjackHand([1, 10], number=2)
    view = HandView.of("Alice", hand)
    hand.add_card(5)
    assert view.cards == (1, 10)
    assert view.score == 21
    assert view.number == 2
    assert view.status is HandStatus.IN_PLAY
    assert str(view) == "[A, 10] Score: 21"


def test_hand_view_to_dict():
    view = HandView.of("Alice", BlackjackHand([8, 3]))
    assert view.to_dict() == {
        "holder": "Alice",
        "number": 1,
        "cards": [8, 3],
        "score": 11,
        "status": "in_play",
    }


def test_dealer_view_hidden():
    view = DealerView.of("Dealer", BlackjackHand([6, 10, 2]), reveal=False)
    assert view.cards == (6,)
    assert view.hidden == 2
    assert view.score is None
    assert str(view) == "[6, **, **]"


def test_dealer_view_revealed():
    view = DealerView.of("Dealer", BlackjackHand([6, 10]), reveal=True)
    assert view.cards == (6, 10)
    assert view.hidden == 0
    assert view.score == 16
    assert str(view) == "[6, 10] Score: 16"


def test_round_result_to_dict():
    dealer = DealerView.of("Dealer", BlackjackHand([6, 6, 10]), reveal=True)
    result = RoundResult(
        reason=EndReason.DEALER_BUSTED,
        dealer=dealer,
        hands=(HandResult("Alice", 1, 18, Outcome.WON),),
        dealer_wins=False,
    )
    assert result.dealer_score == 22
    assert result.to_dict() == {
        "reason": "dealer_busted",
        "dealer": {
            "holder": "Dealer",
            "cards": [6, 6, 10],
            "revealed": True,
            "hidden": 0,
            "score": 22,
        },
        "hands": [{"holder": "Alice", "number": 1, "score": 18, "outcome": "won"}],
        "dealer_wins": False,
    }
