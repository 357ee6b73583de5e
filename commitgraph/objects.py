"""Graph objects: Commit (layout input), LayoutRow and GraphLayout (layout output)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .constants import MARKER_NAMES, MARKER_VACANT


@dataclass(frozen=True)
class Commit:
    """A commit as seen by the layout: identifier plus ordered parent identifiers.
    The first parent continues the commit's own thread; later parents split off."""
    identifier: str
    parents: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence of parents but store an immutable tuple
        object.__setattr__(self, "parents", tuple(self.parents))

    @property
    def first_parent(self) -> Optional[str]:
        return self.parents[0] if self.parents else None

    @property
    def other_parents(self) -> Tuple[str, ...]:
        return self.parents[1:]

    @property
    def is_root(self) -> bool:
        return not self.parents

    @property
    def is_merge(self) -> bool:
        return len(self.parents) >= 2


@dataclass(frozen=True)
class LayoutRow:
    """One row of the graph.

    line: marker string, one character per column (see constants.MARKER_*).
    own_column: column the commit is drawn in.
    joins: columns whose thread ends in this commit at this row.
    splits: columns this commit's non-first parents continue in, below this row.
    """
    commit: Commit
    line: str
    own_column: int
    joins: Tuple[int, ...] = ()
    splits: Tuple[int, ...] = ()

    @property
    def identifier(self) -> str:
        return self.commit.identifier

    @property
    def markers(self) -> List[str]:
        """Marker names per column: vacant, vertical-passthrough, node or terminal-node."""
        return [MARKER_NAMES[ch] for ch in self.line]

    def marker_at(self, column: int) -> str:
        """Marker name at column; columns past the end of the line are vacant."""
        if column < len(self.line):
            return MARKER_NAMES[self.line[column]]
        return MARKER_NAMES[MARKER_VACANT]


@dataclass(frozen=True)
class GraphLayout:
    """Complete layout of a history window: rows in input order plus column count."""
    rows: Tuple[LayoutRow, ...] = field(default_factory=tuple)
    width: int = 0

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[LayoutRow]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> LayoutRow:
        return self.rows[index]

    def row_for(self, identifier: str) -> Optional[LayoutRow]:
        """Return the row laid out for identifier, or None if it is not in the window."""
        for row in self.rows:
            if row.identifier == identifier:
                return row
        return None
