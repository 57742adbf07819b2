from typing import List, Optional
import random

from .action import Action, Turn
from .common import Card, Deck
from .hand import Hand


class Player:
    """A seat at the table.

    The player draws from one deck of the ring and discards to another.  Neither
    deck is owned by the player; both are shared with a neighbour.
    """

    _RANDOM = random.Random()

    @classmethod
    def seed(cls, x=None):
        cls._RANDOM.seed(x)

    def __init__(
        self,
        pid: int,
        draw_deck: Deck,
        discard_deck: Deck,
        hand: Optional[Hand] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.pid = pid
        self.draw_deck = draw_deck
        self.discard_deck = discard_deck
        self.hand = hand or Hand()
        self._random = rng or self._RANDOM

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    def has_winning_hand(self) -> bool:
        return self.hand.uniform

    def discard_candidates(self) -> List[Card]:
        return [card for card in self.hand if card.rank != self.pid]

    def select_discard_card(self) -> Optional[Card]:
        """Pick a card of the hand to give up, or None to pass the drawn card on."""
        candidates = self.discard_candidates()
        if not candidates:
            return None
        return self._random.choice(candidates)

    def take_turn(self) -> Action:
        hand_size = self.hand_size
        with Deck.locked(self.draw_deck, self.discard_deck):
            try:
                drawn = self.draw_deck.draw()
            except Deck.EmptyDeck:
                return Action(
                    self.pid, turn=Turn(self.draw_deck.number, self.discard_deck.number)
                )
            discard = self.select_discard_card()
            if discard is None:
                discard = drawn
            else:
                self.hand.take_card(discard)
                self.hand.put_card(drawn)
            self.discard_deck.discard(discard)
        assert self.hand_size == hand_size, "Hand size changed during turn."
        return Action(
            self.pid,
            turn=Turn(self.draw_deck.number, self.discard_deck.number, drawn, discard),
        )

    def __repr__(self) -> str:
        return "Player(%d, draw=%d, discard=%d, %s)" % (
            self.pid,
            self.draw_deck.number,
            self.discard_deck.number,
            self.hand,
        )
