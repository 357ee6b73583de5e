"""History windows: build Commit lists from rev-list output or parent maps, paginate, validate."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Sequence, Tuple

from .constants import MIN_PREFIX_LEN, SHA256_HEX_LEN
from .errors import HistoryParseError, InvalidHistoryWindowError
from .objects import Commit

_OBJECT_NAME_RE = re.compile(r"^[0-9a-fA-F]{%d,%d}$" % (MIN_PREFIX_LEN, SHA256_HEX_LEN))


@dataclass(frozen=True)
class HistoryWindow:
    """A page of history. is_head is True only when the page starts at the newest commit."""
    commits: Tuple[Commit, ...]
    is_head: bool
    offset: int = 0


def parse_rev_list(text: str) -> List[Commit]:
    """Parse 'hash parent1 parent2 ...' lines (git rev-list --parents, git log --format='%H %P').
    Blank lines are skipped. Raises HistoryParseError on a token that is not a hex object name."""
    commits: List[Commit] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        tokens = raw.split()
        if not tokens:
            continue
        for token in tokens:
            if not _OBJECT_NAME_RE.match(token):
                raise HistoryParseError(f"line {lineno}: invalid object name {token!r}")
        commits.append(Commit(tokens[0].lower(), tuple(t.lower() for t in tokens[1:])))
    return commits


def commits_from_parent_map(
    identifiers: Iterable[str], parents: Mapping[str, Sequence[str]]
) -> List[Commit]:
    """Build commits from an ordered list of identifiers and a map identifier -> parent list."""
    commits: List[Commit] = []
    for identifier in identifiers:
        if identifier not in parents:
            raise HistoryParseError(f"no parent list for commit {identifier}")
        commits.append(Commit(identifier, tuple(parents[identifier])))
    return commits


def paginate(commits: Sequence[Commit], offset: int = 0, limit: int = 0) -> HistoryWindow:
    """Return the window commits[offset:offset + limit] (limit 0: to the end)."""
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    end = offset + limit if limit else len(commits)
    return HistoryWindow(commits=tuple(commits[offset:end]), is_head=offset == 0, offset=offset)


def validate_window(commits: Sequence[Commit]) -> None:
    """Reject windows the layout cannot draw: empty or repeated identifiers, self parents."""
    seen: set[str] = set()
    for position, commit in enumerate(commits):
        if not commit.identifier:
            raise InvalidHistoryWindowError(f"invalid history window: empty identifier at row {position}")
        if commit.identifier in seen:
            raise InvalidHistoryWindowError(
                f"invalid history window: commit {commit.identifier} appears more than once"
            )
        if commit.identifier in commit.parents:
            raise InvalidHistoryWindowError(
                f"invalid history window: commit {commit.identifier} lists itself as parent"
            )
        if not all(commit.parents):
            raise InvalidHistoryWindowError(
                f"invalid history window: commit {commit.identifier} has an empty parent identifier"
            )
        seen.add(commit.identifier)
