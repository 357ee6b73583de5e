"""Commit graph layout: assign each commit of a history window to a column (thread).

Rows are built top to bottom. Each column remembers the commit it expects to
see next (its "awaited" commit); a commit lands in the lowest column awaiting
it, and that column then awaits the commit's first parent. The result is a
string per row like the ones below, which a renderer turns into lines:

    ^
    |^
    o|
    |o
    o
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .constants import MARKER_NODE, MARKER_PASSTHROUGH, MARKER_TERMINAL, MARKER_VACANT
from .history import validate_window
from .objects import Commit, GraphLayout, LayoutRow

logger = logging.getLogger(__name__)


class ThreadState:
    """Column arena: slot n holds the identifier column n awaits, or None when vacant.
    Slots are never removed, so the number of slots is the graph width so far."""

    def __init__(self) -> None:
        self._slots: List[Optional[str]] = []

    @property
    def width(self) -> int:
        return len(self._slots)

    def awaited(self, column: int) -> Optional[str]:
        return self._slots[column]

    def is_vacant(self, column: int) -> bool:
        return column >= len(self._slots) or not self._slots[column]

    def find(self, identifier: str) -> Optional[int]:
        """Lowest column awaiting identifier, or None."""
        for n, awaited in enumerate(self._slots):
            if awaited == identifier:
                return n
        return None

    def first_vacant(self) -> int:
        """Lowest vacant column; the next new column when none is vacant."""
        for n in range(len(self._slots)):
            if self.is_vacant(n):
                return n
        return len(self._slots)

    def await_commit(self, column: int, identifier: Optional[str]) -> None:
        """Make column await identifier (None vacates it). column may be the next new column."""
        if column == len(self._slots):
            self._slots.append(identifier)
        elif column < len(self._slots):
            self._slots[column] = identifier
        else:
            raise IndexError(f"column {column} skips past width {len(self._slots)}")

    def allocate(self, identifier: str) -> int:
        """First-fit: give the lowest vacant column (or a new one) to identifier."""
        column = self.first_vacant()
        self.await_commit(column, identifier)
        return column

    def vacate(self, column: int) -> None:
        self._slots[column] = None


class _PendingRow:
    """Row still owned by the layout pass; its line may grow until the pass ends."""

    __slots__ = ("commit", "cells", "own_column", "joins", "splits")

    def __init__(self, commit: Commit) -> None:
        self.commit = commit
        self.cells: List[str] = []
        self.own_column = -1
        self.joins: List[int] = []
        self.splits: List[int] = []

    def freeze(self) -> LayoutRow:
        return LayoutRow(
            commit=self.commit,
            line="".join(self.cells),
            own_column=self.own_column,
            joins=tuple(self.joins),
            splits=tuple(self.splits),
        )


class GraphLayoutEngine:
    """Lays out one history window. Each call to layout() starts from an empty ThreadState.

    is_head: True when the first row of the window is the true head of history,
    so a commit no column is waiting for has nothing above it (drawn as a
    terminal node). False for a page further down the history, where such a
    commit's children lie above the window and its thread is drawn up to the top.
    """

    def __init__(self, is_head: bool = True) -> None:
        self.is_head = is_head

    def layout(self, commits: Iterable[Commit]) -> GraphLayout:
        window = list(commits)
        validate_window(window)
        logger.debug("laying out %d commits (head=%s)", len(window), self.is_head)

        state = ThreadState()
        pending: List[_PendingRow] = []
        for commit in window:
            pending.append(self._place(state, pending, commit))

        rows = tuple(row.freeze() for row in pending)
        logger.debug("layout done: %d rows, width %d", len(rows), state.width)
        return GraphLayout(rows=rows, width=state.width)

    def _place(self, state: ThreadState, above: List[_PendingRow], commit: Commit) -> _PendingRow:
        row = _PendingRow(commit)
        found = False
        for n in range(state.width):
            awaited = state.awaited(n)
            if not awaited:
                row.cells.append(MARKER_VACANT)
            elif awaited == commit.identifier:
                if found:
                    # Another thread converging on the same commit
                    row.cells.append(MARKER_VACANT)
                    row.joins.append(n)
                    state.vacate(n)
                else:
                    row.cells.append(MARKER_NODE)
                    row.own_column = n
                    found = True
            else:
                row.cells.append(MARKER_PASSTHROUGH)

        if not found:
            row.own_column = self._start_thread(state, above, row)

        state.await_commit(row.own_column, commit.first_parent)

        for parent in commit.other_parents:
            column = state.find(parent)
            if column is None:
                column = state.allocate(parent)
            if column not in row.splits:
                row.splits.append(column)
        return row

    def _start_thread(self, state: ThreadState, above: List[_PendingRow], row: _PendingRow) -> int:
        """Pick a column for a commit nothing was waiting for and mark it in row."""
        if self.is_head:
            column = state.first_vacant()
            if column < len(row.cells):
                row.cells[column] = MARKER_TERMINAL
            else:
                row.cells.append(MARKER_TERMINAL)
            logger.debug("new tip %s in column %d", row.commit.identifier, column)
            return column

        # The thread reaches past the top of the window: it needs a column no
        # earlier row uses, and every earlier row draws it passing through.
        column = state.width
        row.cells.append(MARKER_NODE)
        for earlier in above:
            earlier.cells.extend(MARKER_VACANT * (column - len(earlier.cells)))
            earlier.cells.append(MARKER_PASSTHROUGH)
        logger.debug(
            "new tip %s in column %d, backfilled %d rows", row.commit.identifier, column, len(above)
        )
        return column


def layout(commits: Iterable[Commit], is_head: bool = True) -> GraphLayout:
    """Lay out commits (most recent first). Returns rows in input order and the column count.
    Raises InvalidHistoryWindowError if a commit repeats or is its own parent."""
    return GraphLayoutEngine(is_head=is_head).layout(commits)
