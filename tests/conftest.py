"""
Pytest configuration shared by the test suites.

Fixtures here build games around stacked shoes so every deal is known in advance.
"""

import pytest

from twentyone.blackjack.blackjack import BlackjackGame
from twentyone.blackjack.rules import Rules
from twentyone.common.io_interface import TestIOInterface
from twentyone.common.shoe import Shoe


@pytest.fixture
def io_interface():
    return TestIOInterface()


@pytest.fixture
def rules():
    return Rules()


@pytest.fixture
def make_game(io_interface, rules):
    """
    Build a game whose shoe deals ``draws`` in order.

    Opening deal order is two cards per player in seating order, then two for
    the dealer; later draws follow in the order the round asks for them.
    """

    def _make_game(*draws, players=1):
        game = BlackjackGame(rules, io_interface, Shoe.stacked(*draws))
        game.add_players(players)
        return game

    return _make_game
