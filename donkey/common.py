from collections import deque
from contextlib import contextmanager, ExitStack
import threading

from typing import Iterable, Iterator, List, Optional, Tuple


class Serializable:
    def serialize(self) -> str:
        raise NotImplementedError

    @classmethod
    def deserialize(cls, s: str):
        raise NotImplementedError


class Card(Serializable):
    """A card in the game of Donkey.

    Cards carry nothing but a rank.  Two cards of the same rank are
    interchangeable, so equality, hashing and ordering all go by rank.
    """

    class Error(Exception):
        pass

    class InvalidCard(Error):
        pass

    __slots__ = ("_rank",)

    @classmethod
    def deserialize(cls, s: str) -> "Card":
        """Parse a card from a single line of a pack file, e.g. "12\\n"."""
        line = s.rstrip("\r\n")
        if not (line.isascii() and line.isdigit()):
            raise cls.InvalidCard("Could not parse %r as a non-negative integer!" % line)
        return cls(int(line))

    def __init__(self, rank: int):
        if not isinstance(rank, int) or isinstance(rank, bool):
            raise TypeError("Card rank must be an integer, got %s" % type(rank))
        if rank < 0:
            raise self.InvalidCard("Card rank must be non-negative, got %d" % rank)
        object.__setattr__(self, "_rank", rank)

    def __setattr__(self, name, value):
        raise AttributeError("Cards are immutable.")

    @property
    def rank(self) -> int:
        return self._rank

    def serialize(self) -> str:
        return str(self._rank)

    def __hash__(self):
        return hash(self._rank)

    def __lt__(self, other):
        if not isinstance(other, Card):
            raise TypeError
        return self._rank < other._rank

    def __eq__(self, other):
        if not isinstance(other, Card):
            return False
        return self._rank == other._rank

    def __str__(self):
        return str(self._rank)

    def __repr__(self):
        return "%s(%d)" % (self.__class__.__name__, self._rank)


class Deck:
    """A numbered pile of cards in the ring.

    Each deck is the draw pile of one player and the discard pile of another, so
    every mutation happens under the deck's own lock.  Cards are drawn from the
    front and discarded to the back.  Use ``with deck:`` to hold the lock across
    several operations, or ``Deck.locked(a, b)`` to hold several decks at once.
    """

    class Error(Exception):
        pass

    class EmptyDeck(Error):
        pass

    @classmethod
    @contextmanager
    def locked(cls, *decks: "Deck") -> Iterator[Tuple["Deck", ...]]:
        """Hold the locks of all given decks, acquired in ascending deck number."""
        unique = {id(deck): deck for deck in decks}
        ordered = tuple(sorted(unique.values(), key=lambda deck: deck.number))
        with ExitStack() as stack:
            for deck in ordered:
                stack.enter_context(deck)
            yield ordered

    def __init__(self, number: int, cards: Optional[Iterable[Card]] = None):
        if number < 1:
            raise ValueError("Deck numbers start at 1, got %d" % number)
        self.number = number
        self.__cards = deque(cards or [])
        self.__lock = threading.RLock()
        if not all(isinstance(card, Card) for card in self.__cards):
            raise TypeError("Expected cards to be an iterable of Card, got %s" % type(cards))

    def __len__(self):
        with self:
            return len(self.__cards)

    @property
    def cards(self) -> List[Card]:
        """A front-to-back snapshot of the deck."""
        with self:
            return list(self.__cards)

    def draw(self) -> Card:
        with self:
            try:
                return self.__cards.popleft()
            except IndexError:
                raise self.EmptyDeck("Deck %d is empty." % self.number)

    def discard(self, card: Card) -> None:
        if not isinstance(card, Card):
            raise TypeError("Expected card to be Card, got %s" % type(card))
        with self:
            self.__cards.append(card)

    def put(self, card: Card) -> None:
        if not isinstance(card, Card):
            raise TypeError("Expected card to be Card, got %s" % type(card))
        with self:
            self.__cards.appendleft(card)

    def __enter__(self):
        self.__lock.acquire()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.__lock.release()

    def __str__(self):
        return "Deck %d(%s)" % (self.number, " ".join("%s" % card for card in self.cards))

    def __repr__(self):
        return "Deck(%d, %r)" % (self.number, self.cards)
