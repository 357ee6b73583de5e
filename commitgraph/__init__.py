"""commitgraph: lay out commit history as columns (threads) for drawing a branch/merge graph."""

from .errors import CommitGraphError, InvalidHistoryWindowError
from .layout import GraphLayoutEngine, layout
from .objects import Commit, GraphLayout, LayoutRow

__all__ = [
    "Commit",
    "CommitGraphError",
    "GraphLayout",
    "GraphLayoutEngine",
    "InvalidHistoryWindowError",
    "LayoutRow",
    "layout",
]
