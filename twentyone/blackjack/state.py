"""
This module provides the round state machine for a Blackjack game. It uses the
state design pattern to manage the stages of a round and the transitions
between them. A round progresses through DealingState, PlayersTurnState,
DealersTurnState and EndRoundState; a dealer blackjack jumps from DealingState
straight to EndRoundState.

Classes:

GameState: An abstract base class for game states.
DealingState: The dealer deals two cards to every player and to itself.
PlayersTurnState: Each player plays their hands until every hand stands or busts.
DealersTurnState: The dealer draws until reaching the stand score.
EndRoundState: Every player hand is compared against the dealer.

The handle method in each game state class performs the work of that state,
notifies the interface, and transitions to the next state. Each game state
class also overrides the str method to return the state name.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque

from twentyone.blackjack.action import Action
from twentyone.blackjack.actor import InvalidSplitError
from twentyone.blackjack.hand import HandStatus
from twentyone.blackjack.results import (
    EndReason,
    HandResult,
    HandView,
    Outcome,
    RoundResult,
)

logger = logging.getLogger("twentyone.blackjack")


class GameState(ABC):
    """
    Abstract base class for game states.
    """

    @abstractmethod
    def handle(self, game) -> None:
        """The method that handles the game state."""

    def __str__(self) -> str:
        return self.__class__.__name__


class DealingState(GameState):
    """
    The game state where the dealer is dealing the cards.
    """

    def handle(self, game):
        """
        Deals the opening hands, then ends the round at once on a dealer
        blackjack or hands over to the players.
        """
        self.deal(game)
        if game.dealer.has_blackjack():
            game.reason = EndReason.DEALER_BLACKJACK
            game.io_interface.output(
                f"\n{game.dealer.name}: {game.dealer_view(reveal=True)}"
            )
            game.set_state(EndRoundState())
            return

        game.io_interface.output(f"\n{game.dealer.name}: {game.dealer_view(reveal=False)}")
        game.set_state(PlayersTurnState())

    def deal(self, game):
        """
        Deals two cards to each player's fresh hand, then two to the dealer.
        """
        for player in game.players:
            player.add_hand([game.shoe.draw_card(), game.shoe.draw_card()])
            logger.debug("Dealt %s to %s", player.hands[0].cards, player.name)
        game.dealer.add_hand([game.shoe.draw_card(), game.shoe.draw_card()])
        logger.debug("Dealt %s to %s", game.dealer.hand.cards, game.dealer.name)


class PlayersTurnState(GameState):
    """The game state where it's the players' turn to play."""

    def handle(self, game):
        """Plays every player's hands and changes the game state to DealersTurnState."""
        for player in game.players:
            self.play_player(game, player)
        game.set_state(DealersTurnState())

    def play_player(self, game, player):
        """
        Plays each of the player's hands that is still in play.

        Hands created by a split join the queue, so they are played in the same pass.
        """
        pending = deque(hand for hand in player.hands if hand.is_in_play)
        while pending:
            hand = pending.popleft()
            while hand.is_in_play:
                view = HandView.of(player.name, hand)
                action = game.io_interface.get_player_action(player, view)
                if action is Action.SPLIT:
                    new_hands = self.split(game, player, hand)
                    if new_hands:
                        pending.extend(new_hands)
                        break
                elif action is not None:
                    self.player_action(game, player, hand, action)
                else:
                    game.io_interface.output("Invalid input")

    def player_action(self, game, player, hand, action):
        """Applies a hit or a stand to ``hand``."""
        if action is Action.HIT:
            card = game.shoe.draw_card()
            hand.hit(card)
            logger.debug("%s hand %d hits %d", player.name, hand.number, card)
            if hand.status is HandStatus.BUSTED:
                game.io_interface.output(
                    f"{player.name}, hand {hand.number}: {HandView.of(player.name, hand)} Bust!"
                )
        elif action is Action.STAND:
            hand.stand()
            logger.debug("%s hand %d stands", player.name, hand.number)

    def split(self, game, player, hand):
        """
        Splits ``hand`` and returns the two new hands, or None if the hand cannot
        be split.
        """
        try:
            new_hands = player.split_hand(hand, game.shoe)
        except InvalidSplitError as exc:
            logger.debug("Split rejected: %s", exc)
            game.io_interface.output("Cannot split this hand")
            return None
        game.io_interface.output(f"{player.name} splits.")
        return new_hands


class DealersTurnState(GameState):
    """
    The game state where it's the dealer's turn to play.
    """

    def handle(self, game):
        """Draws for the dealer while below the stand score and records why the round ended."""
        while game.dealer.should_hit(game.rules):
            self.dealer_action(game)

        if game.rules.is_bust(game.dealer.hand):
            game.reason = EndReason.DEALER_BUSTED
        else:
            game.reason = EndReason.NORMAL_END
        game.set_state(EndRoundState())

    def dealer_action(self, game):
        """
        Handles a dealer draw and notifies the interface.
        """
        card = game.shoe.draw_card()
        game.dealer.hand.add_card(card)
        logger.debug("%s hits %d", game.dealer.name, card)
        game.io_interface.output(f"\n{game.dealer.name}: {game.dealer_view(reveal=True)}")


class EndRoundState(GameState):
    """
    The game state where the round is ending.
    """

    REASON_MESSAGES = {
        EndReason.DEALER_BLACKJACK: "Dealer blackjack!",
        EndReason.DEALER_BUSTED: "Dealer busted!",
        EndReason.NORMAL_END: "Round complete.",
    }

    OUTCOME_VERBS = {
        Outcome.WON: "won",
        Outcome.LOST: "lost",
        Outcome.FINISHED: "finished",
    }

    def handle(self, game):
        """
        Resolves every hand against the dealer and reports the results.
        """
        game.result = self.calculate_winner(game)
        logger.info(
            "Round ended (%s): dealer %d, %s",
            game.result.reason.value,
            game.result.dealer_score,
            "dealer wins" if game.result.dealer_wins else "dealer loses",
        )
        self.output_results(game, game.result)

    def calculate_winner(self, game) -> RoundResult:
        """Calculates the outcome of every player hand and the table summary."""
        dealer_score = game.dealer.hand.calculate_score()
        dealer_busted = game.reason is EndReason.DEALER_BUSTED
        results = []
        for player in game.players:
            for hand in player.hands:
                score = hand.calculate_score()
                if hand.status is HandStatus.BUSTED:
                    outcome = Outcome.LOST
                elif dealer_busted or score > dealer_score:
                    outcome = Outcome.WON
                else:
                    outcome = Outcome.FINISHED
                results.append(HandResult(player.name, hand.number, score, outcome))

        dealer_wins = dealer_score <= game.rules.blackjack_score and all(
            hand.calculate_score() <= dealer_score
            for player in game.players
            for hand in player.hands
        )
        return RoundResult(
            reason=game.reason,
            dealer=game.dealer_view(reveal=True),
            hands=tuple(results),
            dealer_wins=dealer_wins,
        )

    def output_results(self, game, result: RoundResult):
        """Outputs the results of the round."""
        game.io_interface.output("\n--- GAME OVER ---")
        game.io_interface.output(self.REASON_MESSAGES[result.reason])
        game.io_interface.output(f"\n{result.dealer.holder}: {result.dealer}")
        for hand_result in result.hands:
            verb = self.OUTCOME_VERBS[hand_result.outcome]
            game.io_interface.output(
                f"{hand_result.holder} {verb} hand {hand_result.number} with {hand_result.score}"
            )
        game.io_interface.output("Dealer wins" if result.dealer_wins else "Dealer loses")
