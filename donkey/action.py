from abc import abstractmethod, ABCMeta
from dataclasses import dataclass
from typing import Optional, Dict

from .common import Card
from .hand import Hand


@dataclass
class Start:
    players: int
    deck_sizes: Dict[int, int]


@dataclass
class Turn:
    draw_deck: int
    discard_deck: int
    drawn: Optional[Card] = None
    discarded: Optional[Card] = None

    @property
    def empty(self) -> bool:
        return self.drawn is None


@dataclass
class Win:
    hand: Hand
    turns: int


@dataclass
class Action:
    player_id: int
    init: Optional[Start] = None
    turn: Optional[Turn] = None
    win: Optional[Win] = None

    def __str__(self):
        if self.init is not None:
            return "Starting game with %d players" % self.init.players
        if self.turn is not None:
            if self.turn.empty:
                return "Player %d's draw deck is empty!" % self.player_id
            return "Player %d draws a %s from Deck %d and discards %s to Deck %d" % (
                self.player_id,
                self.turn.drawn,
                self.turn.draw_deck,
                self.turn.discarded,
                self.turn.discard_deck,
            )
        if self.win is not None:
            return "Player %d has won with hand %s after %d turns" % (
                self.player_id,
                self.win.hand,
                self.win.turns,
            )
        return "Unknown action"


class Listener(metaclass=ABCMeta):
    @abstractmethod
    def publish_action(self, action: Action) -> None:
        pass
