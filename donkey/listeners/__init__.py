from .listeners import DeckView, StatsListener

__all__ = ("DeckView", "StatsListener")
