from dataclasses import dataclass
from typing import List, Optional, Sequence
import random

from .common import Card, Deck
from .hand import Hand
from .player import Player


@dataclass
class Table:
    """The decks of the ring and the players seated around it.

    The table owns the decks; players only hold references into them.
    """

    decks: List[Deck]
    players: List[Player]

    @property
    def card_count(self) -> int:
        return sum(len(deck) for deck in self.decks) + sum(
            player.hand_size for player in self.players
        )

    def deck(self, number: int) -> Deck:
        return self.decks[number - 1]

    def player(self, pid: int) -> Player:
        return self.players[pid - 1]


class Dealer:
    """Splits a pack into the ring of decks and the players' hands.

    The second half of the pack goes to the decks: card ``p`` is put on the front
    of deck ``p % n + 1``.  The first half goes to the hands, walking backwards:
    card ``p`` is appended to the hand of player ``p % n + 1``.

    Player ``i`` draws from deck ``i`` and discards to the deck ``discard_offset``
    places further round the ring.
    """

    class Error(Exception):
        pass

    class InvalidPlayerCount(Error):
        pass

    class InvalidPackSize(Error):
        pass

    class InvalidOffset(Error):
        pass

    HAND_SIZE = 4
    DECK_SIZE = 4

    def __init__(self, discard_offset: int = 1, rng: Optional[random.Random] = None) -> None:
        self.discard_offset = discard_offset
        self._random = rng

    def discard_deck_number(self, pid: int, players: int) -> int:
        return (pid - 1 + self.discard_offset) % players + 1

    def validate(self, players: int, pack: Sequence[Card]) -> None:
        if players < 1:
            raise self.InvalidPlayerCount("Expected at least one player, got %d" % players)
        expected = (self.HAND_SIZE + self.DECK_SIZE) * players
        if len(pack) != expected:
            raise self.InvalidPackSize(
                "Expected a pack of %d cards for %d players, got %d"
                % (expected, players, len(pack))
            )
        if players > 1 and self.discard_offset % players == 0:
            raise self.InvalidOffset(
                "Discard offset %d would make players discard to their own deck"
                % self.discard_offset
            )

    def deal(self, players: int, pack: Sequence[Card]) -> Table:
        self.validate(players, pack)
        dealt = self.HAND_SIZE * players

        decks = [Deck(number) for number in range(1, players + 1)]
        for position in range(dealt, len(pack)):
            decks[position % players].put(pack[position])

        hands = [Hand() for _ in range(players)]
        for position in reversed(range(dealt)):
            hands[position % players].put_card(pack[position])

        seats = [
            Player(
                pid,
                decks[pid - 1],
                decks[self.discard_deck_number(pid, players) - 1],
                hand=hands[pid - 1],
                rng=self._random,
            )
            for pid in range(1, players + 1)
        ]
        return Table(decks, seats)
