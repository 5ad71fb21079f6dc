import pytest

from twentyone.blackjack.action import Action, parse_action


@pytest.mark.parametrize(
    "choice, expected",
    [
        ("1", Action.HIT),
        ("2", Action.STAND),
        ("3", Action.SPLIT),
        (" 2\n", Action.STAND),
        ("4", None),
        ("hit", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_action(choice, expected):
    assert parse_action(choice) is expected


def test_labels():
    assert [action.label for action in Action] == ["hit", "stand", "split"]
