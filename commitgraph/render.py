"""Output encodings for a GraphLayout: per-row metadata (JSON) and plain text."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional

from .constants import DEFAULT_ABBREV, MARKER_PASSTHROUGH, MARKER_VACANT
from .objects import GraphLayout, LayoutRow


def row_meta(row: LayoutRow) -> Dict[str, Any]:
    """Metadata a graph drawing client needs for one row."""
    return {
        "commit": row.identifier,
        "line": row.line,
        "split": list(row.splits),
        "join": list(row.joins),
    }


def layout_meta(graph: GraphLayout) -> Dict[str, Any]:
    return {"count": graph.width, "rows": [row_meta(row) for row in graph]}


def to_json(graph: GraphLayout, indent: Optional[int] = None) -> str:
    return json.dumps(layout_meta(graph), indent=indent)


def _lean(column: int, own_column: int, toward_node: bool) -> str:
    # Joins come into the node from above, splits leave it downward
    right = column > own_column
    if toward_node:
        return "/" if right else "\\"
    return "\\" if right else "/"


def render_row(row: LayoutRow, width: int) -> str:
    """Graph cells of one row, width characters wide, joins drawn leaning into the node."""
    cells = list(row.line.ljust(width, MARKER_VACANT))
    for column in row.joins:
        cells[column] = _lean(column, row.own_column, toward_node=True)
    return "".join(cells)


def render_connector(row: LayoutRow, width: int) -> Optional[str]:
    """Line drawn under a row with splits; None when the row has none."""
    if not any(column != row.own_column for column in row.splits):
        return None
    cells: List[str] = []
    for column in range(width):
        if column in row.splits and column != row.own_column:
            cells.append(_lean(column, row.own_column, toward_node=False))
        elif column == row.own_column:
            cells.append(MARKER_PASSTHROUGH)
        elif column < len(row.line) and row.line[column] == MARKER_PASSTHROUGH:
            cells.append(MARKER_PASSTHROUGH)
        else:
            cells.append(MARKER_VACANT)
    return "".join(cells).rstrip()


def render_ascii(
    graph: GraphLayout,
    labels: Optional[Mapping[str, str]] = None,
    abbrev: int = DEFAULT_ABBREV,
) -> str:
    """Text graph: one line per row ('<cells> <label>'), plus a connector line under merges.
    labels maps identifiers to display text; default is the identifier shortened to abbrev."""
    lines: List[str] = []
    for row in graph:
        label = labels.get(row.identifier) if labels else None
        if label is None:
            label = row.identifier[:abbrev] if abbrev > 0 else row.identifier
        lines.append(f"{render_row(row, graph.width)} {label}")
        connector = render_connector(row, graph.width)
        if connector is not None:
            lines.append(connector)
    return "\n".join(lines)
