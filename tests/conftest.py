import pytest

from donkey.common import Card


class FirstChoice:
    """Stands in for random.Random, always choosing the first candidate."""

    def choice(self, seq):
        return seq[0]


class LastChoice:
    def choice(self, seq):
        return seq[-1]


def make_pack(*ranks):
    return [Card(rank) for rank in ranks]


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def last_choice():
    return LastChoice()


@pytest.fixture
def sequential_pack():
    """Two players, ranks 1..16 in order."""
    return make_pack(*range(1, 17))


@pytest.fixture
def quick_win_pack():
    """Two players; player 1 wins on their first draw whatever the discard choice."""
    return make_pack(1, 2, 1, 3, 1, 4, 5, 6, 7, 8, 7, 8, 7, 8, 1, 8)


@pytest.fixture
def dealt_win_pack():
    """Two players both holding four of a kind straight from the deal."""
    return make_pack(1, 2, 1, 2, 1, 2, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10)


@pytest.fixture
def hopeless_pack():
    """One player and eight distinct ranks, so nobody can ever win."""
    return make_pack(*range(1, 9))
