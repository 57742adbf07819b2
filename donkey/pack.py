import random

from typing import Iterable, List, Optional

from .common import Card


class PlayerCount:
    """Number of players at the table."""

    class Error(Exception):
        pass

    class InvalidPlayerCount(Error):
        pass

    @classmethod
    def validate(cls, players: int) -> int:
        if players < 1:
            raise cls.InvalidPlayerCount(
                "The game must have a non-zero number of players, but was %d!" % players
            )
        return players

    @classmethod
    def parse(cls, s: str) -> int:
        s = s.strip()
        if not (s.isascii() and s.isdigit()):
            raise cls.InvalidPlayerCount(
                "The number of players must be a positive integer, got %r!" % s
            )
        return cls.validate(int(s))


class PackLoader:
    """Reads, validates, writes and generates packs.

    A pack file holds one card rank per line and exactly 8 cards per player.
    """

    class Error(Exception):
        pass

    class ReadError(Error):
        pass

    class ParseError(Error):
        pass

    class SizeMismatch(Error):
        pass

    CARDS_PER_PLAYER = 8
    COPIES_PER_RANK = 4

    @classmethod
    def expected_size(cls, players: int) -> int:
        return cls.CARDS_PER_PLAYER * PlayerCount.validate(players)

    @classmethod
    def parse(cls, lines: Iterable[str], players: int) -> List[Card]:
        expected = cls.expected_size(players)
        pack = []
        for number, line in enumerate(lines, start=1):
            try:
                pack.append(Card.deserialize(line))
            except Card.Error:
                raise cls.ParseError(
                    "Could not parse %r on line %d as a non-negative integer!"
                    % (line.rstrip("\r\n"), number)
                )
        if len(pack) != expected:
            raise cls.SizeMismatch(
                "A pack must have 8n (%d) cards, but the supplied pack had %d."
                % (expected, len(pack))
            )
        return pack

    @classmethod
    def load(cls, path: str, players: int) -> List[Card]:
        try:
            with open(path) as fp:
                return cls.parse(fp, players)
        except (OSError, UnicodeDecodeError) as e:
            raise cls.ReadError("Could not read pack %s! Because %s." % (path, e)) from e

    @classmethod
    def dump(cls, pack: Iterable[Card], path: str) -> None:
        with open(path, "w") as fp:
            for card in pack:
                fp.write("%s\n" % card.serialize())

    @classmethod
    def generate(cls, players: int, rng: Optional[random.Random] = None) -> List[Card]:
        """A shuffled pack holding four copies of each rank 1..2n."""
        rng = rng or random.Random()
        ranks = cls.expected_size(players) // cls.COPIES_PER_RANK
        pack = [Card(rank) for rank in range(1, ranks + 1) for _ in range(cls.COPIES_PER_RANK)]
        rng.shuffle(pack)
        return pack
