"""Move selection for the Advance agent."""

from .search import LookaheadSearch, SearchResult, get_best_move, search_best_move

__all__ = [
    'LookaheadSearch',
    'SearchResult',
    'get_best_move',
    'search_best_move',
]
