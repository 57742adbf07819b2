from collections import Counter, defaultdict
from typing import Dict, Optional

from ..action import Listener, Action


class DeckView(Listener):
    """Tracks the size of every deck in the ring from the published actions alone."""

    def __init__(self) -> None:
        self.deck_sizes: Dict[int, int] = {}

    def publish_action(self, action: Action) -> None:
        if action.init is not None:
            self.deck_sizes = dict(action.init.deck_sizes)
        elif action.turn is not None and not action.turn.empty:
            self.deck_sizes[action.turn.draw_deck] -= 1
            self.deck_sizes[action.turn.discard_deck] += 1

    @property
    def card_count(self) -> int:
        return sum(self.deck_sizes.values())


class StatsListener(Listener):
    """Accumulates per-player statistics over any number of games."""

    def __init__(self) -> None:
        self.games = 0
        self.wins: Counter = Counter()
        self.turns: Counter = Counter()
        self.empty_draws: Counter = Counter()
        self.discards: Dict[int, Counter] = defaultdict(Counter)
        self.last_winner: Optional[int] = None
        self.last_turns = 0

    def publish_action(self, action: Action) -> None:
        if action.init is not None:
            self.games += 1
            self.last_winner = None
            self.last_turns = 0
        elif action.turn is not None:
            self.turns[action.player_id] += 1
            self.last_turns += 1
            if action.turn.empty:
                self.empty_draws[action.player_id] += 1
            else:
                self.discards[action.player_id][action.turn.discarded.rank] += 1
        elif action.win is not None:
            self.wins[action.player_id] += 1
            self.last_winner = action.player_id

    def summary(self) -> str:
        return " ".join(
            "%d=%d" % (pid, wins) for pid, wins in sorted(self.wins.items())
        )
