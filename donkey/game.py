from typing import Optional, List, Iterable
import time

from .action import Action, Listener, Start, Win
from .common import Card, Deck
from .dealer import Dealer
from .hand import Hand
from .player import Player


class Engine:
    """Runs a single game to completion.

    Players take turns in ascending pid order.  Each player's hand is checked for
    a win before and after their own turn; the first winning hand ends the game.
    Without ``max_turns`` a game in which nobody can win runs forever.
    """

    class Error(Exception):
        pass

    class TurnLimitExceeded(Error):
        pass

    RUNNING = "RUNNING"
    FINISHED = "FINISHED"

    def __init__(
        self,
        decks: Iterable[Deck],
        players: Iterable[Player],
        listeners: Optional[Iterable[Listener]] = None,
        max_turns: Optional[int] = None,
    ) -> None:
        self.__decks = sorted(decks, key=lambda deck: deck.number)
        self.__players = sorted(players, key=lambda player: player.pid)
        self.__listeners = [listener for listener in listeners] if listeners else []
        self.__max_turns = max_turns
        self.__state = self.RUNNING
        self.__winner: Optional[Player] = None
        self.__turns = 0
        self.__card_count = self.card_count

    @property
    def state(self) -> str:
        return self.__state

    @property
    def winner(self) -> Optional[Player]:
        return self.__winner

    @property
    def turns(self) -> int:
        return self.__turns

    @property
    def card_count(self) -> int:
        return sum(len(deck) for deck in self.__decks) + sum(
            player.hand_size for player in self.__players
        )

    def process_action(self, action: Action) -> None:
        for listener in self.__listeners:
            listener.publish_action(action)

    def _check_winner(self, player: Player) -> bool:
        if not player.has_winning_hand():
            return False
        self.__winner = player
        self.__state = self.FINISHED
        self.process_action(Action(player.pid, win=Win(Hand(player.hand), self.__turns)))
        return True

    def play(self) -> Player:
        if self.__state == self.FINISHED:
            return self.__winner
        self.process_action(
            Action(
                Game.GAME_PID,
                init=Start(
                    len(self.__players), {deck.number: len(deck) for deck in self.__decks}
                ),
            )
        )
        while True:
            for player in self.__players:
                if self._check_winner(player):
                    return player
                if self.__max_turns is not None and self.__turns >= self.__max_turns:
                    raise self.TurnLimitExceeded("No winner after %d turns." % self.__turns)
                action = player.take_turn()
                self.__turns += 1
                assert self.card_count == self.__card_count, "Cards were lost or duplicated."
                self.process_action(action)
                if self._check_winner(player):
                    return player


class Game:
    """Deals a pack and plays it out, possibly several times over."""

    GAME_PID = 0

    def __init__(
        self,
        players: int,
        pack: List[Card],
        dealer: Optional[Dealer] = None,
        listeners: Optional[Iterable[Listener]] = None,
        max_turns: Optional[int] = None,
    ) -> None:
        self.players = players
        self.pack = list(pack)
        self.dealer = dealer or Dealer()
        self.__listeners = [listener for listener in listeners] if listeners else []
        self.__max_turns = max_turns
        self.elapsed = 0.0

    def run(self) -> Player:
        now = time.time()
        table = self.dealer.deal(self.players, self.pack)
        engine = Engine(table.decks, table.players, self.__listeners, self.__max_turns)
        try:
            return engine.play()
        finally:
            self.elapsed = time.time() - now
