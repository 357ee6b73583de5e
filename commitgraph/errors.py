"""Custom exceptions for commitgraph."""

from __future__ import annotations


class CommitGraphError(Exception):
    """Base exception for commitgraph."""

    pass


class InvalidHistoryWindowError(CommitGraphError):
    """Raised when a history window repeats a commit or a commit is its own parent."""

    pass


class HistoryParseError(CommitGraphError):
    """Raised when rev-list style history text cannot be parsed."""

    pass


class InvalidConfigKeyError(CommitGraphError):
    """Raised when a config key is invalid (e.g. not section.option)."""

    pass


class InvalidConfigValueError(CommitGraphError):
    """Raised when a config value cannot be converted to the expected type."""

    pass
