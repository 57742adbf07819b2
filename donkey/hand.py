from typing import List, Iterable, Iterator, Optional

from .common import Card


class Hand:
    """An ordered hand of cards.

    Cards are put on the end of the hand and taken by value, e.g.
    h.take_card(Card(3)) removes the first card of rank 3.
    """

    class Error(Exception):
        pass

    class InvalidTake(Error):
        pass

    __slots__ = ("cards",)

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self.cards: List[Card] = []
        for card in cards or []:
            self.put_card(card)

    @property
    def empty(self) -> bool:
        return len(self.cards) == 0

    @property
    def uniform(self) -> bool:
        """True if every adjacent pair of cards has the same rank."""
        return all(left == right for left, right in zip(self.cards, self.cards[1:]))

    @property
    def ranks(self) -> List[int]:
        return [card.rank for card in self.cards]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Hand):
            return False
        return self.cards == other.cards

    def take_card(self, card: Card) -> Card:
        if not isinstance(card, Card):
            raise TypeError("Expected card to be Card, got %s" % type(card))
        try:
            index = self.cards.index(card)
        except ValueError:
            raise self.InvalidTake("You do not have a %s!" % card)
        return self.cards.pop(index)

    def put_card(self, card: Card) -> None:
        if not isinstance(card, Card):
            raise TypeError("Expected card to be Card, got %s" % type(card))
        self.cards.append(card)

    def __str__(self):
        return "Hand(%s)" % " ".join("%s" % card for card in self)

    def __repr__(self):
        return "Hand(%r)" % self.cards
